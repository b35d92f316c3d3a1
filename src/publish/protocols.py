"""Collaborator interfaces consumed by the rollup stages.

Stages depend on these protocols only, so tests can substitute
in-memory fakes for the git, release host, and cold storage services.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, Sequence


class ReleaseHost(Protocol):
    """Short-term release storage keyed by tag."""

    def release_exists(self, tag: str) -> bool:
        """Return whether a release with this tag is published."""

    def create_release(self, tag: str, asset: Path, title: str, notes: str) -> None:
        """Publish a release carrying one asset."""

    def download_asset(self, tag: str, file_name: str, destination_dir: Path) -> Path:
        """Download a named release asset into destination_dir."""

    def delete_release(self, tag: str) -> None:
        """Delete a release."""


class VersionControl(Protocol):
    """Repository holding the manifest."""

    def has_commit_with_subject(self, subject: str) -> bool:
        """Return whether any commit in history has exactly this subject."""

    def commit(self, paths: Sequence[Path], message: str) -> None:
        """Stage paths and commit them."""

    def push(self) -> None:
        """Push the current branch."""

    def has_tag(self, tag: str) -> bool:
        """Return whether a local tag exists."""

    def create_tag(self, tag: str) -> None:
        """Create a lightweight tag at HEAD."""

    def push_tag(self, tag: str) -> None:
        """Push one tag to the remote."""

    def delete_remote_tag(self, tag: str) -> None:
        """Delete a tag from the remote."""

    def delete_local_tag(self, tag: str) -> None:
        """Delete a local tag."""


class ColdStorage(Protocol):
    """Permanent archive destination for yearly bundles."""

    def upload(self, identifier: str, file_path: Path, metadata: Mapping[str, str]) -> None:
        """Upload a file as a new cold storage item."""
