"""Public SDK surface for the tiered archive.

This module provides a stable import path for scripted callers.
It re-exports the pipeline entry point and typed models.
"""

from __future__ import annotations

from core.config import ArchiveConfig
from core.types import ArchiveManifest, PipelineReport, StageOutcome, YearlyRecord
from rollup.context import RollupContext, build_default_context
from rollup.pipeline import run_pipeline
from store.manifest_io import load_manifest, save_manifest

__all__ = [
    "ArchiveConfig",
    "ArchiveManifest",
    "PipelineReport",
    "RollupContext",
    "StageOutcome",
    "YearlyRecord",
    "build_default_context",
    "load_manifest",
    "run_pipeline",
    "save_manifest",
]
