"""Emoji-log subject check."""

from __future__ import annotations

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import first_line_length

CONFIG = "not-emoji-log"
ERROR = "Your commit message isn't in emoji log style"
URL = "https://github.com/ahmadawais/Emoji-Log"

PREFIXES = (
    "\U0001f4e6 NEW: ",
    "\U0001f44c IMPROVE: ",
    "\U0001f41b FIX: ",
    "\U0001f4d6 DOC: ",
    "\U0001f680 RELEASE: ",
    "\U0001f916 TEST: ",
    "\u203c\ufe0f BREAKING: ",
)

HELP_MESSAGE = (
    "It's important to follow the emoji log style when creating your commit message. By using "
    "this style we can automatically generate changelogs.\n\n"
    "You can fix it using one of the prefixes:\n\n"
    + "\n".join(prefix.rstrip() for prefix in PREFIXES)
    + f"\n\nYou can read more at {URL}"
)


def lint(commit: CommitMessage) -> Problem | None:
    if commit.subject.startswith(PREFIXES):
        return None

    return (
        ProblemBuilder(ERROR, HELP_MESSAGE, Code.NOT_EMOJI_LOG, commit)
        .with_label("Not emoji log", 0, first_line_length(commit))
        .with_url(URL)
        .build()
    )
