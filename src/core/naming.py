"""Archive naming conventions.

This module maps manifest entries to file names, release tags, and
cold storage identifiers. Range bounds come from numeric runs embedded
in the boundary entries: the first run of the first entry and the last
run of the last entry. Entries are trusted to be in chronological order.
"""

from __future__ import annotations

from datetime import datetime
import re
from typing import Sequence

from core.constants import (
    ARCHIVE_EXTENSION,
    COMPRESSED_EXTENSION,
    DAILY_PREFIX,
    IA_DOWNLOAD_BASE_URL,
    IDENTIFIER_TIMESTAMP_FORMAT,
    MONTHLY_PREFIX,
    YEARLY_PREFIX,
)
from core.errors import ManifestError

_NUMERIC_RUN = re.compile(r"[0-9]+")


def daily_tag(daily_id: str) -> str:
    return f"{DAILY_PREFIX}_{daily_id}"


def daily_file_name(daily_id: str) -> str:
    return archive_file_name(daily_tag(daily_id))


def monthly_name(start: str, end: str) -> str:
    return f"{MONTHLY_PREFIX}_{start}_{end}"


def yearly_name(start: str, end: str) -> str:
    return f"{YEARLY_PREFIX}_{start}_{end}"


def archive_file_name(name: str) -> str:
    return f"{name}{ARCHIVE_EXTENSION}"


def compressed_file_name(name: str) -> str:
    return f"{name}{COMPRESSED_EXTENSION}"


def derive_range(entries: Sequence[str]) -> tuple[str, str]:
    """Derive range bounds for a consolidated bundle name.

    A boundary entry without digits yields an empty bound, so a list
    like ``["latest", "20250102"]`` names the bundle ``monthly__20250102``.

    Args:
        entries: Manifest entries in chronological order.

    Returns:
        Pair of first numeric run of the first entry and last numeric
        run of the last entry.

    Raises:
        ManifestError: If entries are empty.
    """
    if not entries:
        raise ManifestError("Cannot derive an archive range from an empty manifest list.")
    start_runs = _NUMERIC_RUN.findall(entries[0])
    end_runs = _NUMERIC_RUN.findall(entries[-1])
    start = start_runs[0] if start_runs else ""
    end = end_runs[-1] if end_runs else ""
    return start, end


def cold_storage_identifier(prefix: str, start: str, end: str, now: datetime) -> str:
    """Build a unique cold storage item identifier."""
    return f"{prefix}_{start}_{end}_{now.strftime(IDENTIFIER_TIMESTAMP_FORMAT)}"


def cold_storage_url(identifier: str, file_name: str) -> str:
    return f"{IA_DOWNLOAD_BASE_URL}/{identifier}/{file_name}"
