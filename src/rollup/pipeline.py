"""Rollup pipeline orchestration.

This module runs the daily, monthly, and yearly transitions in fixed
order. The manifest is reloaded from disk before every threshold check,
so one invocation can cascade from daily through yearly.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import REQUIRED_COMMANDS
from core.logging_config import get_logger
from core.types import PipelineReport, StageOutcome
from rollup.context import RollupContext
from rollup.daily_stage import publish_daily
from rollup.monthly_stage import consolidate_monthly, should_consolidate_monthly
from rollup.preconditions import check_preconditions
from rollup.yearly_stage import consolidate_yearly, should_consolidate_yearly
from store.manifest_io import load_manifest

_LOGGER = get_logger(__name__)


def run_pipeline(
    context: RollupContext,
    required_commands: Sequence[str] = REQUIRED_COMMANDS,
) -> PipelineReport:
    """Run every applicable rollup stage once.

    Args:
        context: Config and collaborators.
        required_commands: Executables checked before any stage runs.

    Returns:
        Report of the stages run and the final manifest.

    Raises:
        PreconditionFailure: If tools or the manifest are missing.
        TieredArchiveError: If a stage fails; earlier stages stay applied.
    """
    config = context.config
    check_preconditions(config, required_commands)
    outcomes: list[StageOutcome] = []

    outcomes.append(publish_daily(load_manifest(config.manifest_path), context))

    manifest = load_manifest(config.manifest_path)
    if should_consolidate_monthly(manifest, config):
        outcomes.append(consolidate_monthly(manifest, context))

    manifest = load_manifest(config.manifest_path)
    if should_consolidate_yearly(manifest, config):
        outcomes.append(consolidate_yearly(manifest, context))

    final_manifest = load_manifest(config.manifest_path)
    _LOGGER.info(
        "pipeline_complete",
        stages=[outcome.stage for outcome in outcomes],
        daily=final_manifest.daily_count,
        monthly=final_manifest.monthly_count,
        yearly=len(final_manifest.yearly),
    )
    return PipelineReport(outcomes=tuple(outcomes), manifest=final_manifest)
