"""Local availability of lower-tier archive files."""

from __future__ import annotations

from pathlib import Path

from core.errors import CollaboratorCommandError, MissingRemoteAsset
from publish.protocols import ReleaseHost


def ensure_local_asset(file_path: Path, tag: str, release_host: ReleaseHost) -> bool:
    """Make sure an archive file exists locally, fetching it if needed.

    Args:
        file_path: Expected local file.
        tag: Release carrying the file as an asset.
        release_host: Release storage.

    Returns:
        True when the file was downloaded, False when already present.

    Raises:
        MissingRemoteAsset: If the file is absent and cannot be fetched.
    """
    if file_path.exists():
        return False
    try:
        release_host.download_asset(tag, file_path.name, file_path.parent)
    except CollaboratorCommandError as error:
        raise MissingRemoteAsset(
            f"Could not retrieve {file_path.name} from release '{tag}': {error}"
        ) from error
    if not file_path.exists():
        raise MissingRemoteAsset(
            f"Could not retrieve {file_path.name} from release '{tag}': asset missing after download."
        )
    return True
