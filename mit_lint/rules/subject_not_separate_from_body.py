"""Blank line between subject and body check."""

from __future__ import annotations

from mit_lint.commit import CommitMessage
from mit_lint.offsets import byte_length, line_start
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import COMMIT_GUIDELINES_URL

CONFIG = "subject-not-separated-from-body"
ERROR = "Your commit message is missing a blank line between the subject and the body"
HELP_MESSAGE = (
    "Most tools that render and parse commit messages, expect commit messages to be in the "
    "form of subject and body. This includes git itself in tools like git-format-patch. If you "
    "don't include this you may see strange behaviour from git and any related tools.\n\n"
    "To fix this separate subject from body with a blank line"
)


def lint(commit: CommitMessage) -> Problem | None:
    lines = commit.lines()
    if not commit.subject or len(lines) < 2:
        return None

    second_line = lines[1]
    if not second_line.strip() or commit.is_excluded(1, second_line):
        return None

    return (
        ProblemBuilder(ERROR, HELP_MESSAGE, Code.SUBJECT_NOT_SEPARATE_FROM_BODY, commit)
        .with_label("Missing blank line", line_start(commit.text, 1), byte_length(second_line))
        .with_url(COMMIT_GUIDELINES_URL)
        .build()
    )
