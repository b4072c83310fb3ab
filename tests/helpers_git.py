"""Helpers for synthetic git-repo integration tests."""

from __future__ import annotations

import subprocess
from pathlib import Path


def init_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "user.name", "Test")
    git(repo, "config", "commit.gpgsign", "false")
    return repo


def git(repo: Path, *args: str) -> str:
    completed = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return completed.stdout


def commit_message(repo: Path, message: str) -> None:
    """Record an empty commit with exactly this message."""
    git(repo, "commit", "-q", "--allow-empty", "--cleanup=verbatim", "-m", message)


def set_lint(repo: Path, name: str, value: str) -> None:
    git(repo, "config", f"mit.lint.{name}", value)
