"""Unit tests for the yearly consolidator."""

from __future__ import annotations

import gzip

import pytest

from core.errors import ColdStorageError, MissingRemoteAsset
from rollup.yearly_stage import consolidate_yearly
from store.manifest_io import load_manifest
from tests.fakes import build_context, read_manifest_payload, write_manifest

MONTHLY_NAMES = [
    "monthly_20250101_20250131",
    "monthly_20250201_20250228",
    "monthly_20250301_20250331",
]
YEARLY_ID = "test_yearly_20250101_20250331_20250131123045"


def _write_monthly_bundles(work_dir, names) -> dict[str, bytes]:
    contents: dict[str, bytes] = {}
    for name in names:
        content = f'{{"bundle": "{name}"}}\n'.encode("utf-8")
        (work_dir / f"{name}.ndjson.gz").write_bytes(gzip.compress(content))
        contents[name] = content
    return contents


def test_consolidate_yearly_uploads_merged_bundle(tmp_path) -> None:
    """The uploaded bundle should hold every monthly bundle's content in order."""
    context = build_context(tmp_path, yearly_threshold=2)
    write_manifest(context.config, monthly=MONTHLY_NAMES)
    contents = _write_monthly_bundles(context.config.work_dir, MONTHLY_NAMES)

    consolidate_yearly(load_manifest(context.config.manifest_path), context)

    uploaded = context.cold_storage.items[YEARLY_ID]
    assert gzip.decompress(uploaded) == b"".join(contents[name] for name in MONTHLY_NAMES)
    assert context.cold_storage.metadata[YEARLY_ID] == {
        "collection": "test_collection",
        "title": "yearly_20250101_20250331",
        "mediatype": "data",
        "creator": "test-automation",
    }


def test_consolidate_yearly_records_url_and_commits(tmp_path) -> None:
    """The manifest should gain one yearly record and be committed after upload."""
    context = build_context(tmp_path, yearly_threshold=2)
    write_manifest(context.config, daily=["20250401"], monthly=MONTHLY_NAMES)
    _write_monthly_bundles(context.config.work_dir, MONTHLY_NAMES)

    outcome = consolidate_yearly(load_manifest(context.config.manifest_path), context)

    expected_record = {
        "name": "yearly_20250101_20250331",
        "url": f"https://archive.org/download/{YEARLY_ID}/yearly_20250101_20250331.ndjson.gz",
    }
    assert read_manifest_payload(context.config) == {
        "daily": ["20250401"],
        "monthly": [],
        "yearly": [expected_record],
    }
    assert context.vcs.commits == ["yearly_20250101_20250331"]
    assert outcome.actions.index(f"cold_storage_upload:{YEARLY_ID}") < outcome.actions.index(
        "manifest_saved"
    )
    assert context.release_host.deleted == MONTHLY_NAMES


def test_consolidate_yearly_fetches_missing_bundles(tmp_path) -> None:
    """Monthly bundles absent locally should be downloaded from their releases."""
    context = build_context(tmp_path, yearly_threshold=2)
    write_manifest(context.config, monthly=MONTHLY_NAMES)
    _write_monthly_bundles(context.config.work_dir, MONTHLY_NAMES)
    first_bundle = context.config.work_dir / f"{MONTHLY_NAMES[0]}.ndjson.gz"
    context.release_host.create_release(MONTHLY_NAMES[0], first_bundle, title="t", notes="n")
    first_bundle.unlink()

    outcome = consolidate_yearly(load_manifest(context.config.manifest_path), context)

    assert f"asset_downloaded:{first_bundle.name}" in outcome.actions
    assert outcome.cleanup_failures.count(f"release_delete:{MONTHLY_NAMES[0]}") == 0


def test_consolidate_yearly_unfetchable_bundle_aborts(tmp_path) -> None:
    """A missing remote bundle aborts before upload."""
    context = build_context(tmp_path, yearly_threshold=2)
    write_manifest(context.config, monthly=MONTHLY_NAMES)
    _write_monthly_bundles(context.config.work_dir, MONTHLY_NAMES[1:])

    with pytest.raises(MissingRemoteAsset):
        consolidate_yearly(load_manifest(context.config.manifest_path), context)

    assert context.cold_storage.items == {}


def test_consolidate_yearly_failed_upload_leaves_manifest(tmp_path) -> None:
    """The manifest must not record a bundle that never reached cold storage."""
    context = build_context(tmp_path, yearly_threshold=2)
    context.cold_storage.fail = True
    write_manifest(context.config, monthly=MONTHLY_NAMES)
    _write_monthly_bundles(context.config.work_dir, MONTHLY_NAMES)
    before = context.config.manifest_path.read_text(encoding="utf-8")

    with pytest.raises(ColdStorageError):
        consolidate_yearly(load_manifest(context.config.manifest_path), context)

    assert context.config.manifest_path.read_text(encoding="utf-8") == before
    assert context.vcs.commits == [] and context.release_host.deleted == []
