"""Run a set of lints against one commit message."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging

from mit_lint.commit import CommitMessage, parse_commit_message
from mit_lint.lints import Lints
from mit_lint.problem import Problem

logger = logging.getLogger(__name__)


def lint(commit: CommitMessage | str, lints: Lints) -> list[Problem]:
    """Return the problems found, in canonical lint order."""
    message = _as_commit(commit)
    problems = [
        problem for problem in (item.lint(message) for item in lints) if problem is not None
    ]
    logger.debug("linted commit lints=%s problems=%s", len(lints), len(problems))
    return problems


def lint_concurrently(
    commit: CommitMessage | str,
    lints: Lints,
    *,
    max_workers: int | None = None,
) -> list[Problem]:
    """Evaluate each lint on a worker thread.

    Results keep canonical lint order whatever order the workers finish in.
    """
    if max_workers is not None and max_workers <= 0:
        raise ValueError("max_workers must be > 0")

    message = _as_commit(commit)
    ordered = list(lints)
    if not ordered:
        return []

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(lambda item: item.lint(message), ordered))

    problems = [problem for problem in results if problem is not None]
    logger.debug(
        "linted commit concurrently lints=%s problems=%s", len(ordered), len(problems)
    )
    return problems


async def async_lint(commit: CommitMessage | str, lints: Lints) -> list[Problem]:
    """Evaluate each lint as its own task and gather them in canonical order."""
    message = _as_commit(commit)
    results = await asyncio.gather(
        *(asyncio.to_thread(item.lint, message) for item in lints)
    )
    return [problem for problem in results if problem is not None]


def _as_commit(commit: CommitMessage | str) -> CommitMessage:
    if isinstance(commit, CommitMessage):
        return commit
    return parse_commit_message(commit)
