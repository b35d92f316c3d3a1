"""Manifest persistence helpers.

This module isolates manifest JSON IO. Writes go to a temporary file
in the manifest directory and are renamed into place, so readers never
observe a partially written manifest.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile
from typing import Any

from core.errors import ManifestError, ManifestMissing
from core.logging_config import get_logger
from core.types import ArchiveManifest, YearlyRecord

_LOGGER = get_logger(__name__)
_MANIFEST_KEYS = ("daily", "monthly", "yearly")


def load_manifest(manifest_path: Path) -> ArchiveManifest:
    """Read and validate the manifest file.

    Args:
        manifest_path: Manifest JSON path.

    Returns:
        Parsed manifest.

    Raises:
        ManifestMissing: If the manifest file does not exist.
        ManifestError: If the manifest is not valid JSON of the expected shape.
    """
    if not manifest_path.exists():
        raise ManifestMissing(
            f"Manifest not found at {manifest_path}. "
            "Run the scraper first or point TIERED_ARCHIVE_MANIFEST at the manifest."
        )
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise ManifestError(
            f"Failed to parse manifest at {manifest_path}: {error}. "
            "Restore the manifest from version control."
        ) from error
    if not isinstance(payload, dict):
        raise ManifestError(
            f"Failed to parse manifest at {manifest_path}: "
            "expected JSON object at top level. Restore the manifest from version control."
        )
    return manifest_from_dict(payload, manifest_path)


def save_manifest(manifest_path: Path, manifest: ArchiveManifest) -> None:
    """Atomically replace the manifest file.

    Args:
        manifest_path: Manifest JSON path.
        manifest: Manifest to persist.
    """
    content = json.dumps(manifest_to_dict(manifest), indent=2) + "\n"
    file_descriptor, temp_name = tempfile.mkstemp(
        prefix=f".{manifest_path.name}.", suffix=".tmp", dir=manifest_path.parent
    )
    try:
        with os.fdopen(file_descriptor, "w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, manifest_path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
    _LOGGER.info(
        "manifest_saved",
        path=str(manifest_path),
        daily=manifest.daily_count,
        monthly=manifest.monthly_count,
        yearly=len(manifest.yearly),
    )


def manifest_to_dict(manifest: ArchiveManifest) -> dict[str, Any]:
    """Serialize manifest into JSON-safe payload."""
    payload: dict[str, Any] = dict(manifest.extra_fields)
    payload["daily"] = list(manifest.daily)
    payload["monthly"] = list(manifest.monthly)
    payload["yearly"] = [{"name": record.name, "url": record.url} for record in manifest.yearly]
    return payload


def manifest_from_dict(payload: dict[str, Any], manifest_path: Path) -> ArchiveManifest:
    """Deserialize manifest payload from dictionary.

    Args:
        payload: Manifest dictionary.
        manifest_path: Source path used in error messages.

    Returns:
        Typed manifest. Absent tier lists read as empty.

    Raises:
        ManifestError: If a tier list has the wrong shape.
    """
    daily = _read_string_list(payload, "daily", manifest_path)
    monthly = _read_string_list(payload, "monthly", manifest_path)
    yearly_payload = payload.get("yearly", [])
    if not isinstance(yearly_payload, list):
        _raise_shape_error(manifest_path, "yearly", "a list of {name, url} objects")
    yearly: list[YearlyRecord] = []
    for entry in yearly_payload:
        if (
            not isinstance(entry, dict)
            or not isinstance(entry.get("name"), str)
            or not isinstance(entry.get("url", ""), str)
        ):
            _raise_shape_error(manifest_path, "yearly", "a list of {name, url} objects")
        yearly.append(YearlyRecord(name=entry["name"], url=entry.get("url", "")))
    extra_fields = {key: value for key, value in payload.items() if key not in _MANIFEST_KEYS}
    return ArchiveManifest(
        daily=daily,
        monthly=monthly,
        yearly=tuple(yearly),
        extra_fields=extra_fields,
    )


def _read_string_list(payload: dict[str, Any], key: str, manifest_path: Path) -> tuple[str, ...]:
    values = payload.get(key, [])
    if not isinstance(values, list) or not all(isinstance(value, str) for value in values):
        _raise_shape_error(manifest_path, key, "a list of strings")
    return tuple(values)


def _raise_shape_error(manifest_path: Path, key: str, expected: str) -> None:
    raise ManifestError(
        f"Invalid manifest at {manifest_path}: field '{key}' must be {expected}. "
        "Restore the manifest from version control."
    )
