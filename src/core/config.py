"""Runtime configuration model for the tiered archive.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_IA_COLLECTION,
    DEFAULT_IA_CREATOR,
    DEFAULT_IA_ENDPOINT,
    DEFAULT_IA_PREFIX,
    DEFAULT_MANIFEST_FILE_NAME,
    DEFAULT_MONTHLY_THRESHOLD,
    DEFAULT_YEARLY_THRESHOLD,
)
from core.errors import ArchiveConfigError


@dataclass(frozen=True)
class ArchiveConfig:
    """Validated runtime configuration.

    Attributes:
        work_dir: Directory holding the manifest and archive files.
        manifest_path: Manifest JSON path.
        monthly_threshold: Pending daily count above which dailies roll up.
        yearly_threshold: Pending monthly count above which monthlies roll up.
        ia_collection: Cold storage collection for yearly bundles.
        ia_prefix: Prefix of generated cold storage identifiers.
        ia_creator: Creator tag recorded on cold storage items.
        ia_endpoint: S3-compatible cold storage endpoint URL.
        ia_access_key: Optional cold storage access key.
        ia_secret_key: Optional cold storage secret key.
    """

    work_dir: Path
    manifest_path: Path
    monthly_threshold: int
    yearly_threshold: int
    ia_collection: str
    ia_prefix: str
    ia_creator: str
    ia_endpoint: str
    ia_access_key: str | None
    ia_secret_key: str | None

    @classmethod
    def from_env(cls, work_dir: Path | None = None) -> "ArchiveConfig":
        """Build config from process environment variables.

        Args:
            work_dir: Optional override for TIERED_ARCHIVE_WORK_DIR.

        Returns:
            A validated config object.

        Raises:
            ArchiveConfigError: If environment values are invalid.
        """
        if work_dir is None:
            work_dir = Path(os.getenv("TIERED_ARCHIVE_WORK_DIR", "."))
        work_dir = work_dir.expanduser().resolve()
        manifest_value = os.getenv("TIERED_ARCHIVE_MANIFEST", DEFAULT_MANIFEST_FILE_NAME)
        return cls(
            work_dir=work_dir,
            manifest_path=resolve_manifest_path(work_dir, manifest_value),
            monthly_threshold=_parse_threshold(
                "TIERED_ARCHIVE_MONTHLY_THRESHOLD", DEFAULT_MONTHLY_THRESHOLD
            ),
            yearly_threshold=_parse_threshold(
                "TIERED_ARCHIVE_YEARLY_THRESHOLD", DEFAULT_YEARLY_THRESHOLD
            ),
            ia_collection=os.getenv("TIERED_ARCHIVE_IA_COLLECTION", DEFAULT_IA_COLLECTION),
            ia_prefix=os.getenv("TIERED_ARCHIVE_IA_PREFIX", DEFAULT_IA_PREFIX),
            ia_creator=os.getenv("TIERED_ARCHIVE_IA_CREATOR", DEFAULT_IA_CREATOR),
            ia_endpoint=os.getenv("TIERED_ARCHIVE_IA_ENDPOINT", DEFAULT_IA_ENDPOINT),
            ia_access_key=os.getenv("IA_ACCESS_KEY"),
            ia_secret_key=os.getenv("IA_SECRET_KEY"),
        )


def resolve_manifest_path(work_dir: Path, manifest_value: str) -> Path:
    """Resolve manifest location, relative paths anchored at work dir."""
    manifest_path = Path(manifest_value).expanduser()
    if manifest_path.is_absolute():
        return manifest_path
    return work_dir / manifest_path


def _parse_threshold(variable_name: str, default_value: int) -> int:
    """Parse a non-negative integer threshold environment value.

    Args:
        variable_name: Environment variable name.
        default_value: Value used when the variable is unset.

    Returns:
        Parsed threshold.

    Raises:
        ArchiveConfigError: If value is not a non-negative integer.
    """
    raw_value = os.getenv(variable_name)
    if raw_value is None:
        return default_value
    try:
        threshold = int(raw_value)
    except ValueError as error:
        raise ArchiveConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error
    if threshold < 0:
        raise ArchiveConfigError(
            f"Invalid {variable_name} value: expected a non-negative integer, "
            f"got {threshold}."
        )
    return threshold
