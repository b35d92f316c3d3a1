"""Three-tier rollup stages and pipeline sequencing."""

from rollup.context import RollupContext, build_default_context
from rollup.pipeline import run_pipeline

__all__ = ["RollupContext", "build_default_context", "run_pipeline"]
