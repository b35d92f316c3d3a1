"""Core constants used across tiered archive modules.

This module centralizes naming conventions and deploy-time defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_MANIFEST_FILE_NAME = "manifest.json"
DEFAULT_MONTHLY_THRESHOLD = 30
DEFAULT_YEARLY_THRESHOLD = 12
DEFAULT_IA_COLLECTION = "desuarchive_mlp_backup"
DEFAULT_IA_PREFIX = "mlp_yearly"
DEFAULT_IA_CREATOR = "desu-scraper-automation"
DEFAULT_IA_ENDPOINT = "https://s3.us.archive.org"
IA_DOWNLOAD_BASE_URL = "https://archive.org/download"
IA_MEDIATYPE = "data"
DAILY_PREFIX = "daily"
MONTHLY_PREFIX = "monthly"
YEARLY_PREFIX = "yearly"
ARCHIVE_EXTENSION = ".ndjson"
COMPRESSED_EXTENSION = ".ndjson.gz"
GZIP_COMPRESSION_LEVEL = 9
COPY_CHUNK_SIZE = 1024 * 1024
IDENTIFIER_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
REQUIRED_COMMANDS = ("git", "gh")
STAGE_DAILY = "daily"
STAGE_MONTHLY = "monthly"
STAGE_YEARLY = "yearly"
