"""Internet Archive cold storage uploads.

This module encapsulates boto3 client creation for the Internet Archive
S3-compatible endpoint. Each yearly bundle becomes a new item: the item
identifier is the bucket and item metadata travels as request headers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from core.config import ArchiveConfig
from core.errors import ArchiveDependencyError, ColdStorageError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_PUT_OBJECT_SIGN_EVENT = "before-sign.s3.PutObject"


def create_cold_storage_client(config: ArchiveConfig) -> Any:
    """Create boto3 S3 client for the cold storage endpoint.

    Requests are left unsigned; ``InternetArchiveStorage`` adds the
    archive's own LOW authorization header instead.

    Args:
        config: Runtime config with endpoint settings.

    Returns:
        Boto3 S3 client.

    Raises:
        ArchiveDependencyError: If boto3 is missing.
    """
    try:
        import boto3
        from botocore import UNSIGNED
        from botocore.config import Config
    except ImportError as error:
        raise ArchiveDependencyError(
            "Cold storage upload requires boto3, but it is not installed. "
            "Install boto3 to upload yearly archives."
        ) from error
    session = boto3.session.Session()
    return session.client(
        "s3",
        endpoint_url=config.ia_endpoint,
        region_name="us-east-1",
        config=Config(
            signature_version=UNSIGNED,
            s3={"addressing_style": "path"},
            request_checksum_calculation="when_required",
        ),
    )


def archive_request_headers(
    metadata: Mapping[str, str],
    access_key: str | None,
    secret_key: str | None,
) -> dict[str, str]:
    """Build item creation headers for one upload.

    Args:
        metadata: Item metadata such as collection, title, mediatype.
        access_key: Archive access key.
        secret_key: Archive secret key.

    Returns:
        Header mapping to attach to the upload request.
    """
    headers = {"x-archive-auto-make-bucket": "1"}
    for key, value in metadata.items():
        headers[f"x-archive-meta-{key}"] = value
    if access_key and secret_key:
        headers["authorization"] = f"LOW {access_key}:{secret_key}"
    return headers


class InternetArchiveStorage:
    """Cold storage backed by Internet Archive items."""

    def __init__(self, config: ArchiveConfig, client: Any | None = None) -> None:
        self._config = config
        self._client = client

    def upload(self, identifier: str, file_path: Path, metadata: Mapping[str, str]) -> None:
        """Upload a file as a new archive item.

        Args:
            identifier: Unique item identifier.
            file_path: Local file to upload.
            metadata: Item metadata.

        Raises:
            ColdStorageError: If the upload fails.
        """
        client = self._client or create_cold_storage_client(self._config)
        headers = archive_request_headers(
            metadata, self._config.ia_access_key, self._config.ia_secret_key
        )

        def add_archive_headers(request: Any, **_: Any) -> None:
            for name, value in headers.items():
                request.headers[name] = value

        client.meta.events.register(_PUT_OBJECT_SIGN_EVENT, add_archive_headers)
        try:
            with file_path.open("rb") as body:
                client.put_object(Bucket=identifier, Key=file_path.name, Body=body)
        except Exception as error:
            raise ColdStorageError(
                f"Failed to upload {file_path.name} to cold storage item {identifier}: {error}. "
                "Check IA_ACCESS_KEY/IA_SECRET_KEY and retry the pipeline."
            ) from error
        finally:
            client.meta.events.unregister(_PUT_OBJECT_SIGN_EVENT, add_archive_headers)
        _LOGGER.info("cold_storage_uploaded", identifier=identifier, file=file_path.name)
