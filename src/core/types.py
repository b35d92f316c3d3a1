"""Shared typed models.

This module defines immutable data models passed between the manifest
store, the rollup stages, and the CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class YearlyRecord:
    """Finalized yearly bundle stored in cold storage.

    Attributes:
        name: Yearly bundle name, ``yearly_<start>_<end>``.
        url: Public cold storage download URL.
    """

    name: str
    url: str


@dataclass(frozen=True)
class ArchiveManifest:
    """Durable rollup state tracked in version control.

    Attributes:
        daily: Pending daily identifiers in chronological order.
        monthly: Pending monthly bundle names in chronological order.
        yearly: Finalized yearly bundle records.
        extra_fields: Unrecognized top-level keys preserved on write.
    """

    daily: tuple[str, ...] = ()
    monthly: tuple[str, ...] = ()
    yearly: tuple[YearlyRecord, ...] = ()
    extra_fields: Mapping[str, Any] = field(default_factory=dict)

    @property
    def daily_count(self) -> int:
        return len(self.daily)

    @property
    def monthly_count(self) -> int:
        return len(self.monthly)

    def with_monthly_rollup(self, monthly_name: str) -> "ArchiveManifest":
        """Return manifest with dailies cleared and a monthly name appended."""
        return replace(self, daily=(), monthly=(*self.monthly, monthly_name))

    def with_yearly_rollup(self, record: YearlyRecord) -> "ArchiveManifest":
        """Return manifest with monthlies cleared and a yearly record appended."""
        return replace(self, monthly=(), yearly=(*self.yearly, record))


@dataclass(frozen=True)
class StageOutcome:
    """Result of one rollup stage.

    Attributes:
        stage: Stage name (daily, monthly, yearly).
        manifest: Manifest state after the stage.
        actions: Ordered side effects the stage performed.
        cleanup_failures: Non-critical cleanup failures that were logged.
    """

    stage: str
    manifest: ArchiveManifest
    actions: tuple[str, ...] = ()
    cleanup_failures: tuple[str, ...] = ()


@dataclass(frozen=True)
class PipelineReport:
    """Summary of one pipeline invocation."""

    outcomes: tuple[StageOutcome, ...]
    manifest: ArchiveManifest

    @property
    def actions(self) -> tuple[str, ...]:
        return tuple(action for outcome in self.outcomes for action in outcome.actions)

    @property
    def stages_run(self) -> tuple[str, ...]:
        return tuple(outcome.stage for outcome in self.outcomes)
