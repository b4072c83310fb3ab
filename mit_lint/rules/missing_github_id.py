"""GitHub issue reference check."""

from __future__ import annotations

from re import MULTILINE, Pattern, compile

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem
from mit_lint.rules.base import missing_pattern_problem

CONFIG = "github-id-missing"
ERROR = "Your commit message is missing a GitHub ID"
URL = (
    "https://docs.github.com/en/github/writing-on-github/working-with-advanced-formatting/"
    "autolinked-references-and-urls#issues-and-pull-requests"
)
HELP_MESSAGE = """\
It's important to add the issue ID because it allows us to link code back to the motivations \
for doing it, and because we can help people exploring the repository link their issues to \
specific bits of code.

You can fix this by adding a ID like the following examples:

#642
GH-642
AnUser/git-mit#642
AnOrganisation/git-mit#642
fixes #642

Be careful just putting '#642' on a line by itself, as '#' is the default comment character"""

RE = compile(r"(^| )([a-zA-Z0-9_-]{3,39}/[a-zA-Z0-9-]+#|GH-|#)[0-9]+( |$)", MULTILINE)


def lint(commit: CommitMessage, *, pattern: Pattern[str] = RE) -> Problem | None:
    return missing_pattern_problem(
        commit,
        pattern,
        error=ERROR,
        tip=HELP_MESSAGE,
        code=Code.GITHUB_ID_MISSING,
        label="No GitHub ID",
        url=URL,
    )
