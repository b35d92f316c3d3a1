"""Idempotent manifest commit and tag.

Commit and tag are checked independently, so a run that committed but
failed to push its tag completes the tag on retry without recommitting.
"""

from __future__ import annotations

from pathlib import Path

from core.logging_config import get_logger
from publish.protocols import VersionControl

_LOGGER = get_logger(__name__)


def commit_and_tag(vcs: VersionControl, manifest_path: Path, label: str) -> tuple[str, ...]:
    """Commit the manifest and create a tag, both named ``label``.

    Args:
        vcs: Repository holding the manifest.
        manifest_path: Manifest file to stage.
        label: Commit message and tag name.

    Returns:
        Actions performed; empty when both already existed.
    """
    actions: list[str] = []
    if not vcs.has_commit_with_subject(label):
        vcs.commit([manifest_path], label)
        vcs.push()
        actions.append(f"commit:{label}")
        _LOGGER.info("manifest_committed", label=label)
    if not vcs.has_tag(label):
        vcs.create_tag(label)
        vcs.push_tag(label)
        actions.append(f"tag:{label}")
        _LOGGER.info("tag_pushed", tag=label)
    return tuple(actions)
