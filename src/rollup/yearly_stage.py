"""Yearly consolidator: fold pending monthlies into cold storage.

Unlike the monthly tier, the manifest is committed only after the cold
storage upload succeeds. Cold storage items cannot be overwritten or
deleted, so the manifest must not record a bundle that never landed.
"""

from __future__ import annotations

from core.config import ArchiveConfig
from core.constants import IA_MEDIATYPE, STAGE_YEARLY
from core.logging_config import get_logger
from core.naming import (
    archive_file_name,
    cold_storage_identifier,
    cold_storage_url,
    compressed_file_name,
    derive_range,
    yearly_name,
)
from core.types import ArchiveManifest, StageOutcome, YearlyRecord
from publish.cleanup import delete_superseded_releases
from publish.commit_tag import commit_and_tag
from rollup.assets import ensure_local_asset
from rollup.context import RollupContext
from store.archive_files import decompress_concatenate, gzip_file
from store.manifest_io import save_manifest

_LOGGER = get_logger(__name__)


def should_consolidate_yearly(manifest: ArchiveManifest, config: ArchiveConfig) -> bool:
    return manifest.monthly_count > config.yearly_threshold


def consolidate_yearly(manifest: ArchiveManifest, context: RollupContext) -> StageOutcome:
    """Merge all pending monthly bundles and upload them to cold storage.

    Args:
        manifest: Freshly loaded manifest with monthlies over threshold.
        context: Stage config and collaborators.

    Returns:
        Stage outcome carrying the updated manifest.

    Raises:
        MissingRemoteAsset: If a monthly bundle is absent and cannot be fetched.
        ColdStorageError: If the upload fails.
    """
    config = context.config
    monthly_names = manifest.monthly
    start, end = derive_range(monthly_names)
    name = yearly_name(start, end)
    _LOGGER.info("yearly_consolidation_started", name=name, inputs=len(monthly_names))

    actions: list[str] = []
    bundle_paths = []
    for monthly in monthly_names:
        bundle_path = config.work_dir / compressed_file_name(monthly)
        if ensure_local_asset(bundle_path, monthly, context.release_host):
            actions.append(f"asset_downloaded:{bundle_path.name}")
        bundle_paths.append(bundle_path)

    merged_path = decompress_concatenate(bundle_paths, config.work_dir / archive_file_name(name))
    yearly_path = gzip_file(merged_path, config.work_dir / compressed_file_name(name))
    actions.append(f"bundle_written:{yearly_path.name}")

    identifier = cold_storage_identifier(config.ia_prefix, start, end, context.clock())
    context.cold_storage.upload(
        identifier,
        yearly_path,
        {
            "collection": config.ia_collection,
            "title": name,
            "mediatype": IA_MEDIATYPE,
            "creator": config.ia_creator,
        },
    )
    url = cold_storage_url(identifier, yearly_path.name)
    actions.append(f"cold_storage_upload:{identifier}")

    updated = manifest.with_yearly_rollup(YearlyRecord(name=name, url=url))
    save_manifest(config.manifest_path, updated)
    actions.append("manifest_saved")
    actions.extend(commit_and_tag(context.vcs, config.manifest_path, name))

    failures = delete_superseded_releases(monthly_names, context.release_host, context.vcs)
    actions.extend(f"cleanup:{monthly}" for monthly in monthly_names)
    _LOGGER.info("yearly_consolidated", name=name, url=url, cleanup_failures=len(failures))
    return StageOutcome(
        stage=STAGE_YEARLY,
        manifest=updated,
        actions=tuple(actions),
        cleanup_failures=failures,
    )
