"""Integration test for repeated daily runs across tier transitions."""

from __future__ import annotations

import gzip
import json

from core.types import ArchiveManifest
from rollup.pipeline import run_pipeline
from store.manifest_io import load_manifest, save_manifest
from tests.fakes import build_context, write_daily_files, write_manifest


def test_daily_runs_converge_and_preserve_every_capture(tmp_path) -> None:
    """Fourteen scheduled runs should archive every capture exactly once."""
    context = build_context(tmp_path, monthly_threshold=3, yearly_threshold=2)
    config = context.config
    write_manifest(config)
    captured: list[bytes] = []

    for day in range(1, 15):
        daily_id = f"202501{day:02d}"
        captured.append(write_daily_files(config, [daily_id])[daily_id])
        manifest = load_manifest(config.manifest_path)
        scraped = ArchiveManifest(
            daily=(*manifest.daily, daily_id),
            monthly=manifest.monthly,
            yearly=manifest.yearly,
        )
        save_manifest(config.manifest_path, scraped)
        run_pipeline(context, required_commands=())

    manifest = load_manifest(config.manifest_path)
    archived = b"".join(gzip.decompress(item) for item in context.cold_storage.items.values())
    for name in manifest.monthly:
        archived += gzip.decompress((config.work_dir / f"{name}.ndjson.gz").read_bytes())
    for daily_id in manifest.daily:
        archived += (config.work_dir / f"daily_{daily_id}.ndjson").read_bytes()

    assert archived == b"".join(captured)
    assert len(manifest.yearly) == len(context.cold_storage.items) == 1
    assert set(context.release_host.releases) == {
        *(f"daily_{daily_id}" for daily_id in manifest.daily),
        *manifest.monthly,
    }
    assert len(context.vcs.commits) == len(set(context.vcs.commits))
    assert json.loads(config.manifest_path.read_text(encoding="utf-8"))["yearly"][0]["name"] == (
        "yearly_20250101_20250112"
    )
