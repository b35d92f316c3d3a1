"""GitHub release host backed by the ``gh`` CLI."""

from __future__ import annotations

from pathlib import Path

from core.errors import CollaboratorCommandError
from core.logging_config import get_logger
from publish.command_runner import run_command

_LOGGER = get_logger(__name__)


class GitHubReleaseHost:
    """Short-term release storage on GitHub Releases."""

    def __init__(self, work_dir: Path) -> None:
        self._work_dir = work_dir

    def release_exists(self, tag: str) -> bool:
        """Return whether ``gh release view`` finds the tag."""
        return run_command(["gh", "release", "view", tag], self._work_dir, check=False).succeeded

    def create_release(self, tag: str, asset: Path, title: str, notes: str) -> None:
        """Create a release with one asset attached."""
        run_command(
            ["gh", "release", "create", tag, str(asset), "--title", title, "--notes", notes],
            self._work_dir,
        )
        _LOGGER.info("release_created", tag=tag, asset=asset.name)

    def download_asset(self, tag: str, file_name: str, destination_dir: Path) -> Path:
        """Download one asset matching ``file_name`` from a release.

        Raises:
            CollaboratorCommandError: If the download fails or produces no file.
        """
        run_command(
            ["gh", "release", "download", tag, "-p", file_name, "--dir", str(destination_dir)],
            self._work_dir,
        )
        asset_path = destination_dir / file_name
        if not asset_path.exists():
            raise CollaboratorCommandError(
                f"Release '{tag}' has no asset named {file_name}."
            )
        _LOGGER.info("release_asset_downloaded", tag=tag, asset=file_name)
        return asset_path

    def delete_release(self, tag: str) -> None:
        run_command(["gh", "release", "delete", tag, "-y"], self._work_dir)
