"""Conventional commit subject check."""

from __future__ import annotations

from collections.abc import Collection
from re import compile

from mit_lint.commit import CommitMessage
from mit_lint.problem import Code, Problem, ProblemBuilder
from mit_lint.rules.base import first_line_length

CONFIG = "not-conventional-commit"
ERROR = "Your commit message isn't in conventional style"
URL = "https://www.conventionalcommits.org/"
HELP_MESSAGE = """\
It's important to follow the conventional commit style when creating your commit message. By \
using this style we can automatically calculate the version of software using deployment \
pipelines, and also generate changelogs and other useful information without human interaction.

You can fix it by following style

<type>[optional scope]: <description>

[optional body]

[optional footer(s)]"""

RE = compile(r"^(?P<type>[A-Za-z0-9]+)(\((?P<scope>\w+)\))?!?: ")


def lint(
    commit: CommitMessage,
    *,
    allowed_types: Collection[str] | None = None,
    allowed_scopes: Collection[str] | None = None,
) -> Problem | None:
    """Flag subjects that are not ``type(scope)!: description``.

    When allow-lists are given, a well-formed subject with a type or scope
    outside them is also flagged. Subjects without a scope pass the scope
    allow-list. The allow-lists are for library callers; dispatch through
    ``Lint.lint`` and the CLI always use the defaults.
    """
    if not _has_problem(commit.subject, allowed_types, allowed_scopes):
        return None

    return (
        ProblemBuilder(ERROR, HELP_MESSAGE, Code.NOT_CONVENTIONAL_COMMIT, commit)
        .with_label("Not conventional", 0, first_line_length(commit))
        .with_url(URL)
        .build()
    )


def _has_problem(
    subject: str,
    allowed_types: Collection[str] | None,
    allowed_scopes: Collection[str] | None,
) -> bool:
    match = RE.match(subject)
    if match is None:
        return True
    if allowed_types is not None and match.group("type") not in allowed_types:
        return True
    scope = match.group("scope")
    return allowed_scopes is not None and scope is not None and scope not in allowed_scopes
