"""Subject capitalisation check."""

from __future__ import annotations

from mit_lint.commit import CommitMessage
from mit_lint.offsets import byte_length
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import COMMIT_GUIDELINES_URL

CONFIG = "subject-line-not-capitalized"
ERROR = "Your commit message is missing a capital letter"
HELP_MESSAGE = (
    "The subject line is a title, and as such should be capitalised.\n\n"
    "You can fix this by capitalising the first character in the subject"
)


def lint(commit: CommitMessage) -> Problem | None:
    subject = commit.subject
    stripped = subject.lstrip()
    if not stripped:
        return None

    first = stripped[0]
    if first == first.upper():
        return None

    position = byte_length(subject[: len(subject) - len(stripped)])
    return (
        ProblemBuilder(ERROR, HELP_MESSAGE, Code.SUBJECT_NOT_CAPITALIZED, commit)
        .with_label("Not capitalised", position, byte_length(first))
        .with_url(COMMIT_GUIDELINES_URL)
        .build()
    )
