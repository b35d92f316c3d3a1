"""Startup checks run before any stage."""

from __future__ import annotations

import shutil
from typing import Sequence

from core.config import ArchiveConfig
from core.constants import REQUIRED_COMMANDS
from core.errors import ManifestMissing, MissingTool


def check_preconditions(
    config: ArchiveConfig,
    required_commands: Sequence[str] = REQUIRED_COMMANDS,
) -> None:
    """Verify external tools and the manifest are present.

    Args:
        config: Runtime config.
        required_commands: Executables that must be on PATH.

    Raises:
        MissingTool: If a required command is not installed.
        ManifestMissing: If the manifest file does not exist.
    """
    for command in required_commands:
        if shutil.which(command) is None:
            raise MissingTool(
                f"Required command '{command}' not found on PATH. "
                f"Install {command} and retry the pipeline."
            )
    if not config.manifest_path.is_file():
        raise ManifestMissing(
            f"Manifest not found at {config.manifest_path}. "
            "Run the scraper first or point TIERED_ARCHIVE_MANIFEST at the manifest."
        )
