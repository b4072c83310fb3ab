"""Shared rule protocol and helpers."""

from __future__ import annotations

from re import Pattern
from typing import Protocol

from mit_lint.commit import CommitMessage
from mit_lint.offsets import byte_length
from mit_lint.problem import Code, Problem, ProblemBuilder

COMMIT_GUIDELINES_URL = (
    "https://git-scm.com/book/en/v2/Distributed-Git-Contributing-to-a-Project#_commit_guidelines"
)


class Rule(Protocol):
    """Protocol for a single commit message check."""

    def __call__(self, commit: CommitMessage) -> Problem | None:
        """Return a problem when the commit fails the check."""


def first_line_length(commit: CommitMessage) -> int:
    """Byte length of the first line, excluding its terminator."""
    return byte_length(commit.lines()[0])


def missing_pattern_problem(
    commit: CommitMessage,
    pattern: Pattern[str],
    *,
    error: str,
    tip: str,
    code: Code,
    label: str,
    url: str | None,
) -> Problem | None:
    """Build a problem labeled at the last line when no line matches pattern."""
    if pattern.search(commit.linted_text()):
        return None
    builder = ProblemBuilder(error, tip, code, commit).with_label_at_last_line(label)
    if url is not None:
        builder = builder.with_url(url)
    return builder.build()
