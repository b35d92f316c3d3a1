"""Runtime dependencies shared by rollup stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from core.config import ArchiveConfig
from publish.cold_storage import InternetArchiveStorage
from publish.git_repository import GitRepository
from publish.github_releases import GitHubReleaseHost
from publish.protocols import ColdStorage, ReleaseHost, VersionControl


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RollupContext:
    """Config and collaborators handed to every stage.

    Attributes:
        config: Validated runtime configuration.
        release_host: Short-term release storage.
        vcs: Repository holding the manifest.
        cold_storage: Permanent yearly bundle storage.
        clock: Time source for cold storage identifiers.
    """

    config: ArchiveConfig
    release_host: ReleaseHost
    vcs: VersionControl
    cold_storage: ColdStorage
    clock: Callable[[], datetime] = field(default=_utc_now)


def build_default_context(config: ArchiveConfig) -> RollupContext:
    """Wire the gh, git, and Internet Archive collaborators."""
    return RollupContext(
        config=config,
        release_host=GitHubReleaseHost(config.work_dir),
        vcs=GitRepository(config.work_dir),
        cold_storage=InternetArchiveStorage(config),
    )
