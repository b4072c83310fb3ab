"""JIRA issue key check."""

from __future__ import annotations

from re import MULTILINE, compile

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem
from mit_lint.rules.base import missing_pattern_problem

CONFIG = "jira-issue-key-missing"
ERROR = "Your commit message is missing a JIRA Issue Key"
URL: str | None = None
HELP_MESSAGE = """\
It's important to add the issue key because it allows us to link code back to the motivations \
for doing it, and in some cases provide an audit trail for compliance purposes.

You can fix this by adding a key like `JRA-123` to the commit message"""

RE = compile(r"(^| )[A-Z]{2,}-[0-9]+( |$)", MULTILINE)


def lint(commit: CommitMessage) -> Problem | None:
    return missing_pattern_problem(
        commit,
        RE,
        error=ERROR,
        tip=HELP_MESSAGE,
        code=Code.JIRA_ISSUE_KEY_MISSING,
        label="No JIRA Issue Key",
        url=URL,
    )
