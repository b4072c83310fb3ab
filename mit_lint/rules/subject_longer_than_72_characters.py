"""Subject length check."""

from __future__ import annotations

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import COMMIT_GUIDELINES_URL

CONFIG = "subject-longer-than-72-characters"
ERROR = "Your subject is longer than 72 characters"
HELP_MESSAGE = (
    "It's important to keep the subject of the commit less than 72 characters because when you "
    "look at the git log, that's where it truncates the message. This means that people won't "
    "get the entirety of the information in your commit.\n\n"
    "Please keep the subject line 72 characters or under"
)
LIMIT = 72


def lint(commit: CommitMessage, *, limit: int = LIMIT) -> Problem | None:
    """Flag subjects with more than ``limit`` characters.

    The subject is always line 0, so the label is the part of that line past
    the limit. ``limit`` is for library callers; ``Lint.lint`` and the CLI use
    the default of 72.
    """
    if len(commit.subject) <= limit:
        return None

    return (
        ProblemBuilder(ERROR, HELP_MESSAGE, Code.SUBJECT_LONGER_THAN_72_CHARACTERS, commit)
        .with_label_for_line(commit.text, 0, commit.subject, limit, "Too long")
        .with_url(COMMIT_GUIDELINES_URL)
        .build()
    )
