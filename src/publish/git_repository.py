"""Git repository operations for the manifest checkout."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from publish.command_runner import run_command


class GitRepository:
    """Version control wrapper around the ``git`` CLI."""

    def __init__(self, work_dir: Path, remote: str = "origin") -> None:
        self._work_dir = work_dir
        self._remote = remote

    def has_commit_with_subject(self, subject: str) -> bool:
        """Return whether any commit subject equals ``subject`` exactly.

        A repository without commits has no matching subject.
        """
        result = run_command(["git", "log", "--format=%s"], self._work_dir, check=False)
        if not result.succeeded:
            return False
        return subject in result.stdout.splitlines()

    def commit(self, paths: Sequence[Path], message: str) -> None:
        run_command(["git", "add", *(str(path) for path in paths)], self._work_dir)
        run_command(["git", "commit", "-m", message], self._work_dir)

    def push(self) -> None:
        run_command(["git", "push"], self._work_dir)

    def has_tag(self, tag: str) -> bool:
        result = run_command(
            ["git", "rev-parse", "--quiet", "--verify", f"refs/tags/{tag}"],
            self._work_dir,
            check=False,
        )
        return result.succeeded

    def create_tag(self, tag: str) -> None:
        run_command(["git", "tag", tag], self._work_dir)

    def push_tag(self, tag: str) -> None:
        run_command(["git", "push", self._remote, tag], self._work_dir)

    def delete_remote_tag(self, tag: str) -> None:
        run_command(["git", "push", "--delete", self._remote, tag], self._work_dir)

    def delete_local_tag(self, tag: str) -> None:
        run_command(["git", "tag", "-d", tag], self._work_dir)
