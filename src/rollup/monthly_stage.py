"""Monthly consolidator: fold pending dailies into one gzip bundle."""

from __future__ import annotations

from core.config import ArchiveConfig
from core.constants import STAGE_MONTHLY
from core.logging_config import get_logger
from core.naming import (
    archive_file_name,
    compressed_file_name,
    daily_file_name,
    daily_tag,
    derive_range,
    monthly_name,
)
from core.types import ArchiveManifest, StageOutcome
from publish.cleanup import delete_superseded_releases
from publish.commit_tag import commit_and_tag
from rollup.assets import ensure_local_asset
from rollup.context import RollupContext
from store.archive_files import concatenate_files, gzip_file
from store.manifest_io import save_manifest

_LOGGER = get_logger(__name__)


def should_consolidate_monthly(manifest: ArchiveManifest, config: ArchiveConfig) -> bool:
    return manifest.daily_count > config.monthly_threshold


def consolidate_monthly(manifest: ArchiveManifest, context: RollupContext) -> StageOutcome:
    """Merge all pending dailies into a monthly bundle.

    The manifest is only written after the compressed bundle exists, so
    a failed fetch leaves it untouched and the stage can be retried.

    Args:
        manifest: Freshly loaded manifest with dailies over threshold.
        context: Stage config and collaborators.

    Returns:
        Stage outcome carrying the updated manifest.

    Raises:
        MissingRemoteAsset: If a daily file is absent and cannot be fetched.
    """
    config = context.config
    daily_ids = manifest.daily
    start, end = derive_range(daily_ids)
    name = monthly_name(start, end)
    _LOGGER.info("monthly_consolidation_started", name=name, inputs=len(daily_ids))

    actions: list[str] = []
    daily_paths = []
    for daily_id in daily_ids:
        daily_path = config.work_dir / daily_file_name(daily_id)
        if ensure_local_asset(daily_path, daily_tag(daily_id), context.release_host):
            actions.append(f"asset_downloaded:{daily_path.name}")
        daily_paths.append(daily_path)

    merged_path = concatenate_files(daily_paths, config.work_dir / archive_file_name(name))
    bundle_path = gzip_file(merged_path, config.work_dir / compressed_file_name(name))
    actions.append(f"bundle_written:{bundle_path.name}")

    updated = manifest.with_monthly_rollup(name)
    save_manifest(config.manifest_path, updated)
    actions.append("manifest_saved")

    if updated.monthly_count <= config.yearly_threshold:
        actions.extend(commit_and_tag(context.vcs, config.manifest_path, name))
        if context.release_host.release_exists(name):
            _LOGGER.info("monthly_release_exists", tag=name)
        else:
            context.release_host.create_release(
                name,
                bundle_path,
                title=f"Monthly Archive {start}-{end}",
                notes=f"Combined daily archives {start}-{end}",
            )
            actions.append(f"release_created:{name}")
    else:
        _LOGGER.info("monthly_publish_skipped", tag=name, reason="yearly_threshold_exceeded")

    consolidated_tags = [daily_tag(daily_id) for daily_id in daily_ids]
    failures = delete_superseded_releases(consolidated_tags, context.release_host, context.vcs)
    actions.extend(f"cleanup:{tag}" for tag in consolidated_tags)
    _LOGGER.info("monthly_consolidated", name=name, cleanup_failures=len(failures))
    return StageOutcome(
        stage=STAGE_MONTHLY,
        manifest=updated,
        actions=tuple(actions),
        cleanup_failures=failures,
    )
