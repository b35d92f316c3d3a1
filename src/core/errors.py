"""Tiered archive exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Fatal pipeline failures raise a specific subtype of TieredArchiveError.
"""

from __future__ import annotations


class TieredArchiveError(Exception):
    """Base exception for all tiered archive failures."""


class ArchiveConfigError(TieredArchiveError):
    """Raised for invalid runtime configuration."""


class PreconditionFailure(TieredArchiveError):
    """Raised when the pipeline cannot start."""


class ManifestMissing(PreconditionFailure):
    """Raised when the manifest file does not exist."""


class MissingTool(PreconditionFailure):
    """Raised when a required external command is not installed."""


class ManifestError(TieredArchiveError):
    """Raised for unreadable or malformed manifest content."""


class MissingLocalFile(TieredArchiveError):
    """Raised when an expected local archive file is absent."""


class MissingRemoteAsset(TieredArchiveError):
    """Raised when a release asset cannot be downloaded."""


class CollaboratorCommandError(TieredArchiveError):
    """Raised when an external command exits with a failure."""


class ColdStorageError(TieredArchiveError):
    """Raised when the cold storage upload fails."""


class ArchiveDependencyError(TieredArchiveError):
    """Raised when an optional runtime dependency is missing."""
