"""Body width check."""

from __future__ import annotations

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import COMMIT_GUIDELINES_URL

CONFIG = "body-wider-than-72-characters"
ERROR = "Your commit has a body wider than 72 characters"
HELP_MESSAGE = (
    "It's important to keep the body of the commit narrower than 72 characters because when "
    "you look at the git log, that's where it truncates the message. This means that people "
    "won't get the entirety of the information in your commit.\n\n"
    "You can fix this by making the lines in your body no more than 72 characters"
)
CHARACTER_LIMIT = 72


def lint(commit: CommitMessage, *, limit: int = CHARACTER_LIMIT) -> Problem | None:
    """Flag body lines wider than ``limit`` characters.

    Line 0 is the subject and has its own check. Comment lines and the
    scissors section are skipped, using the same line indices the labels are
    placed with. ``limit`` is for library callers; ``Lint.lint`` and the CLI
    use the default of 72.
    """
    wide_lines = [
        (index, line)
        for index, line in commit.linted_lines()
        if index >= 1 and len(line) > limit
    ]
    if not wide_lines:
        return None

    builder = ProblemBuilder(
        ERROR, HELP_MESSAGE, Code.BODY_WIDER_THAN_72_CHARACTERS, commit
    ).with_url(COMMIT_GUIDELINES_URL)
    for index, line in wide_lines:
        builder = builder.with_label_for_line(commit.text, index, line, limit, "Too long")
    return builder.build()
