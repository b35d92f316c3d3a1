"""Unit tests for git and gh command construction."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from core.errors import CollaboratorCommandError
from publish.command_runner import CommandResult
from publish.git_repository import GitRepository
from publish.github_releases import GitHubReleaseHost


class _RecordingRunner:
    def __init__(self, returncode: int = 0, stdout: str = "") -> None:
        self.calls: list[tuple[str, ...]] = []
        self._returncode = returncode
        self._stdout = stdout

    def __call__(self, args: Sequence[str], cwd: Path, check: bool = True) -> CommandResult:
        self.calls.append(tuple(args))
        return CommandResult(
            args=tuple(args), returncode=self._returncode, stdout=self._stdout, stderr=""
        )


def test_git_subject_lookup_matches_whole_lines(tmp_path, monkeypatch) -> None:
    """Commit subject lookup should require an exact line match."""
    runner = _RecordingRunner(stdout="daily_20250101_extra\nmonthly_1_4\n")
    monkeypatch.setattr("publish.git_repository.run_command", runner)
    repository = GitRepository(tmp_path)

    assert repository.has_commit_with_subject("monthly_1_4")
    assert not repository.has_commit_with_subject("daily_20250101")


def test_git_subject_lookup_in_empty_repository(tmp_path, monkeypatch) -> None:
    """A repository without commits has no matching subject."""
    monkeypatch.setattr("publish.git_repository.run_command", _RecordingRunner(returncode=128))

    assert not GitRepository(tmp_path).has_commit_with_subject("daily_1")


def test_git_tag_deletion_commands(tmp_path, monkeypatch) -> None:
    """Tag deletion should target the remote and the local repository."""
    runner = _RecordingRunner()
    monkeypatch.setattr("publish.git_repository.run_command", runner)
    repository = GitRepository(tmp_path)

    repository.delete_remote_tag("daily_1")
    repository.delete_local_tag("daily_1")

    assert runner.calls == [
        ("git", "push", "--delete", "origin", "daily_1"),
        ("git", "tag", "-d", "daily_1"),
    ]


def test_gh_release_exists_reflects_exit_code(tmp_path, monkeypatch) -> None:
    """Release lookups should map a failing view to absence."""
    monkeypatch.setattr("publish.github_releases.run_command", _RecordingRunner(returncode=1))

    assert not GitHubReleaseHost(tmp_path).release_exists("daily_1")


def test_gh_create_release_passes_title_and_notes(tmp_path, monkeypatch) -> None:
    """Release creation should attach the asset with title and notes."""
    runner = _RecordingRunner()
    monkeypatch.setattr("publish.github_releases.run_command", runner)
    asset = tmp_path / "daily_1.ndjson"

    GitHubReleaseHost(tmp_path).create_release("daily_1", asset, title="T", notes="N")

    assert runner.calls == [
        ("gh", "release", "create", "daily_1", str(asset), "--title", "T", "--notes", "N")
    ]


def test_gh_download_requires_asset_on_disk(tmp_path, monkeypatch) -> None:
    """A download that produces no file should raise."""
    monkeypatch.setattr("publish.github_releases.run_command", _RecordingRunner())

    with pytest.raises(CollaboratorCommandError):
        GitHubReleaseHost(tmp_path).download_asset("daily_1", "daily_1.ndjson", tmp_path)
