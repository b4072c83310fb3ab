"""Trailing period check."""

from __future__ import annotations

from mit_lint.commit import CommitMessage
from mit_lint.offsets import byte_length
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import COMMIT_GUIDELINES_URL

CONFIG = "subject-line-ends-with-period"
ERROR = "Your commit message ends with a period"
HELP_MESSAGE = (
    "It's important to keep your commits short, because we only have a limited number of "
    "characters to use (72) before the subject line is truncated. Full stops aren't normally in "
    "subject lines, and take up an extra character, so we shouldn't use them in commit message "
    "subjects.\n\n"
    "You can fix this by removing the period"
)


def lint(commit: CommitMessage) -> Problem | None:
    trimmed = commit.subject.rstrip()
    if not trimmed.endswith("."):
        return None

    without_periods = trimmed.rstrip(".")
    period_count = len(trimmed) - len(without_periods)
    return (
        ProblemBuilder(ERROR, HELP_MESSAGE, Code.SUBJECT_ENDS_WITH_PERIOD, commit)
        .with_label("Unneeded period", byte_length(without_periods), period_count)
        .with_url(COMMIT_GUIDELINES_URL)
        .build()
    )
