"""Git subprocess helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from subprocess import CalledProcessError, run

logger = logging.getLogger(__name__)

CONFIG_KEY_PATTERN = r"^mit\.lint\."
TRUE_VALUES = frozenset({"true", "yes", "on", "1", ""})
FALSE_VALUES = frozenset({"false", "no", "off", "0"})


class GitError(RuntimeError):
    """Raised when git command execution fails."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


def get_commit_message(repo: Path, revision: str = "HEAD") -> str:
    """Return the raw message of a commit."""
    return _run_git(repo, ["log", "-1", "--format=%B", revision])


def get_lint_config(repo: Path) -> dict[str, bool]:
    """Return ``mit.lint.*`` entries from git config, keyed by lint name."""
    try:
        output = _run_git(repo, ["config", "--get-regexp", CONFIG_KEY_PATTERN])
    except GitError as exc:
        # git exits 1 when no key matches
        if exc.returncode == 1:
            return {}
        raise

    config: dict[str, bool] = {}
    for line in output.splitlines():
        key, _, raw_value = line.partition(" ")
        name = key.removeprefix("mit.lint.")
        value = raw_value.strip().lower()
        if value not in TRUE_VALUES | FALSE_VALUES:
            raise GitError(f"{key} must be a boolean, got {raw_value!r}")
        config[name] = value in TRUE_VALUES
    logger.debug("read git lint config keys=%s", sorted(config))
    return config


def _run_git(repo: Path, args: list[str]) -> str:
    try:
        completed = run(
            ["git", *args],
            cwd=repo,
            check=True,
            capture_output=True,
            text=True,
        )
    except CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        raise GitError(
            stderr or f"git {' '.join(args)} failed", returncode=exc.returncode
        ) from exc
    except FileNotFoundError as exc:
        raise GitError("git executable not found") from exc

    return completed.stdout
