"""Best-effort removal of superseded releases.

Cleanup runs after the manifest has advanced past the deleted tier, so
failures are logged and reported rather than raised.
"""

from __future__ import annotations

from typing import Callable, Iterable

from core.errors import TieredArchiveError
from core.logging_config import get_logger
from publish.protocols import ReleaseHost, VersionControl

_LOGGER = get_logger(__name__)


def delete_superseded_releases(
    tags: Iterable[str],
    release_host: ReleaseHost,
    vcs: VersionControl,
) -> tuple[str, ...]:
    """Delete release, remote tag, and local tag for each tag.

    Every deletion is attempted whether or not the release was ever
    published.

    Args:
        tags: Release tags of consolidated items.
        release_host: Release storage.
        vcs: Repository holding the tags.

    Returns:
        Failed deletions as ``<operation>:<tag>`` entries.
    """
    operations: tuple[tuple[str, Callable[[str], None]], ...] = (
        ("release_delete", release_host.delete_release),
        ("remote_tag_delete", vcs.delete_remote_tag),
        ("local_tag_delete", vcs.delete_local_tag),
    )
    failures: list[str] = []
    for tag in tags:
        for operation_name, operation in operations:
            try:
                operation(tag)
            except TieredArchiveError as error:
                _LOGGER.warning(
                    "cleanup_skipped", tag=tag, operation=operation_name, error=str(error)
                )
                failures.append(f"{operation_name}:{tag}")
    return tuple(failures)
