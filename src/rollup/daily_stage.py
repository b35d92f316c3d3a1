"""Daily handler: publish the newest capture while under threshold."""

from __future__ import annotations

from core.constants import STAGE_DAILY
from core.errors import MissingLocalFile
from core.logging_config import get_logger
from core.naming import daily_file_name, daily_tag
from core.types import ArchiveManifest, StageOutcome
from publish.commit_tag import commit_and_tag
from rollup.context import RollupContext

_LOGGER = get_logger(__name__)


def publish_daily(manifest: ArchiveManifest, context: RollupContext) -> StageOutcome:
    """Publish the last pending daily capture as a short-term release.

    Publishing is skipped once the pending count exceeds the monthly
    threshold, since the capture is folded into a monthly bundle in the
    same run.

    Args:
        manifest: Freshly loaded manifest.
        context: Stage config and collaborators.

    Returns:
        Stage outcome; the manifest is not mutated here.

    Raises:
        MissingLocalFile: If the newest daily capture file is absent.
    """
    config = context.config
    _LOGGER.info("daily_pending", count=manifest.daily_count)
    if manifest.daily_count == 0:
        _LOGGER.info("daily_nothing_to_do")
        return StageOutcome(stage=STAGE_DAILY, manifest=manifest)

    current_id = manifest.daily[-1]
    daily_path = config.work_dir / daily_file_name(current_id)
    if not daily_path.is_file():
        raise MissingLocalFile(
            f"Missing daily capture {daily_path}. "
            "Re-run the scraper for this day before releasing."
        )
    tag = daily_tag(current_id)
    if manifest.daily_count > config.monthly_threshold:
        _LOGGER.info("daily_publish_skipped", tag=tag, reason="monthly_threshold_exceeded")
        return StageOutcome(stage=STAGE_DAILY, manifest=manifest)
    if context.release_host.release_exists(tag):
        _LOGGER.info("daily_release_exists", tag=tag)
        return StageOutcome(stage=STAGE_DAILY, manifest=manifest)

    actions = list(commit_and_tag(context.vcs, config.manifest_path, tag))
    context.release_host.create_release(
        tag,
        daily_path,
        title=f"Daily Archive {current_id}",
        notes=f"Automated upload of daily scrape {current_id}",
    )
    actions.append(f"release_created:{tag}")
    return StageOutcome(stage=STAGE_DAILY, manifest=manifest, actions=tuple(actions))
