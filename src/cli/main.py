"""Tiered archive CLI entry points.
This module exposes the rollup run plus read-only inspection commands.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Sequence

from core.config import ArchiveConfig
from core.errors import TieredArchiveError
from core.types import PipelineReport
from rollup.context import build_default_context
from rollup.pipeline import run_pipeline
from rollup.preconditions import check_preconditions
from store.manifest_io import load_manifest


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="tiered-archive",
        description="Roll daily captures into monthly and yearly archives",
    )
    parser.add_argument("--work-dir", help="Override TIERED_ARCHIVE_WORK_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_run_command(subparsers)
    _add_status_command(subparsers)
    _add_check_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tiered archive CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.work_dir)
        if args.command == "run":
            return _run_pipeline_command(config)
        if args.command == "status":
            return _run_status_command(config)
        if args.command == "check":
            return _run_check_command(config)
    except TieredArchiveError as error:
        print(f"archive_error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(work_dir: str | None) -> ArchiveConfig:
    """Build config with optional work-dir override.

    Args:
        work_dir: Optional override path.

    Returns:
        Validated config; a relative manifest path follows the work dir.
    """
    if work_dir:
        return ArchiveConfig.from_env(work_dir=Path(work_dir))
    return ArchiveConfig.from_env()


def _run_pipeline_command(config: ArchiveConfig) -> int:
    """Handle run command."""
    report = run_pipeline(build_default_context(config))
    _print_report(report)
    return 0


def _run_status_command(config: ArchiveConfig) -> int:
    """Handle status command."""
    manifest = load_manifest(config.manifest_path)
    print(f"daily={manifest.daily_count}/{config.monthly_threshold}")
    print(f"monthly={manifest.monthly_count}/{config.yearly_threshold}")
    print(f"yearly={len(manifest.yearly)}")
    for record in manifest.yearly:
        print(f"{record.name}\t{record.url}")
    return 0


def _run_check_command(config: ArchiveConfig) -> int:
    """Handle check command."""
    check_preconditions(config)
    print("preconditions=ok")
    return 0


def _print_report(report: PipelineReport) -> None:
    print(f"stages={','.join(report.stages_run)}")
    for action in report.actions:
        print(action)
    for outcome in report.outcomes:
        for failure in outcome.cleanup_failures:
            print(f"cleanup_failed={failure}")
    print(f"daily={report.manifest.daily_count}")
    print(f"monthly={report.manifest.monthly_count}")
    print(f"yearly={len(report.manifest.yearly)}")


def _add_run_command(subparsers: Any) -> None:
    """Register run subcommand."""
    subparsers.add_parser("run", help="Publish, consolidate, and prune archive tiers")


def _add_status_command(subparsers: Any) -> None:
    """Register status subcommand."""
    subparsers.add_parser("status", help="Show pending counts against thresholds")


def _add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    subparsers.add_parser("check", help="Verify required tools and the manifest are present")
