"""Unit tests for best-effort release cleanup."""

from __future__ import annotations

from publish.cleanup import delete_superseded_releases
from tests.fakes import FakeReleaseHost, FakeVersionControl


def test_cleanup_attempts_every_tag_and_reports_failures(tmp_path) -> None:
    """Missing releases and tags should be reported, never raised."""
    release_host = FakeReleaseHost(storage_dir=tmp_path / "releases")
    asset = tmp_path / "daily_2.ndjson"
    asset.write_text("x\n", encoding="utf-8")
    release_host.create_release("daily_2", asset, title="t", notes="n")
    vcs = FakeVersionControl(tags={"daily_2"}, pushed_tags=["daily_2"])

    failures = delete_superseded_releases(["daily_1", "daily_2"], release_host, vcs)

    assert release_host.deleted == ["daily_1", "daily_2"]
    assert not release_host.releases and not vcs.tags and not vcs.pushed_tags
    assert failures == (
        "release_delete:daily_1",
        "remote_tag_delete:daily_1",
        "local_tag_delete:daily_1",
    )
