"""Rules package."""

from __future__ import annotations

from enum import Enum

from mit_lint.commit import CommitMessage
from mit_lint.problem import Problem
from mit_lint.rules import (
    body_wider_than_72_characters,
    duplicated_trailers,
    missing_github_id,
    missing_jira_issue_key,
    missing_pivotal_tracker_id,
    not_conventional_commit,
    not_emoji_log,
    subject_line_ends_with_period,
    subject_longer_than_72_characters,
    subject_not_capitalized,
    subject_not_separate_from_body,
)
from mit_lint.rules.base import Rule

CONFIG_KEY_PREFIX = "mit.lint"


class LintNotFoundError(ValueError):
    """Raised when a name does not match any known lint."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Lint not found: {name}")
        self.name = name


class Lint(Enum):
    """Every lint this package knows about, valued by its canonical name."""

    DUPLICATED_TRAILERS = duplicated_trailers.CONFIG
    PIVOTAL_TRACKER_ID_MISSING = missing_pivotal_tracker_id.CONFIG
    JIRA_ISSUE_KEY_MISSING = missing_jira_issue_key.CONFIG
    GITHUB_ID_MISSING = missing_github_id.CONFIG
    SUBJECT_NOT_SEPARATE_FROM_BODY = subject_not_separate_from_body.CONFIG
    SUBJECT_LONGER_THAN_72_CHARACTERS = subject_longer_than_72_characters.CONFIG
    SUBJECT_NOT_CAPITALIZED = subject_not_capitalized.CONFIG
    SUBJECT_ENDS_WITH_PERIOD = subject_line_ends_with_period.CONFIG
    BODY_WIDER_THAN_72_CHARACTERS = body_wider_than_72_characters.CONFIG
    NOT_CONVENTIONAL_COMMIT = not_conventional_commit.CONFIG
    NOT_EMOJI_LOG = not_emoji_log.CONFIG

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Lint):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Lint:
        """Look a lint up by its canonical name."""
        try:
            return cls(name)
        except ValueError:
            raise LintNotFoundError(name) from None

    @property
    def enabled_by_default(self) -> bool:
        return self in DEFAULT_ENABLED_LINTS

    @property
    def config_key(self) -> str:
        return f"{CONFIG_KEY_PREFIX}.{self.value}"

    @property
    def description(self) -> str:
        return _ERRORS[self]

    def lint(self, commit: CommitMessage) -> Problem | None:
        """Run this lint with its default options against a parsed commit message."""
        return _CHECKS[self](commit)


_CHECKS: dict[Lint, Rule] = {
    Lint.DUPLICATED_TRAILERS: duplicated_trailers.lint,
    Lint.PIVOTAL_TRACKER_ID_MISSING: missing_pivotal_tracker_id.lint,
    Lint.JIRA_ISSUE_KEY_MISSING: missing_jira_issue_key.lint,
    Lint.GITHUB_ID_MISSING: missing_github_id.lint,
    Lint.SUBJECT_NOT_SEPARATE_FROM_BODY: subject_not_separate_from_body.lint,
    Lint.SUBJECT_LONGER_THAN_72_CHARACTERS: subject_longer_than_72_characters.lint,
    Lint.SUBJECT_NOT_CAPITALIZED: subject_not_capitalized.lint,
    Lint.SUBJECT_ENDS_WITH_PERIOD: subject_line_ends_with_period.lint,
    Lint.BODY_WIDER_THAN_72_CHARACTERS: body_wider_than_72_characters.lint,
    Lint.NOT_CONVENTIONAL_COMMIT: not_conventional_commit.lint,
    Lint.NOT_EMOJI_LOG: not_emoji_log.lint,
}

_ERRORS: dict[Lint, str] = {
    Lint.DUPLICATED_TRAILERS: duplicated_trailers.ERROR,
    Lint.PIVOTAL_TRACKER_ID_MISSING: missing_pivotal_tracker_id.ERROR,
    Lint.JIRA_ISSUE_KEY_MISSING: missing_jira_issue_key.ERROR,
    Lint.GITHUB_ID_MISSING: missing_github_id.ERROR,
    Lint.SUBJECT_NOT_SEPARATE_FROM_BODY: subject_not_separate_from_body.ERROR,
    Lint.SUBJECT_LONGER_THAN_72_CHARACTERS: subject_longer_than_72_characters.ERROR,
    Lint.SUBJECT_NOT_CAPITALIZED: subject_not_capitalized.ERROR,
    Lint.SUBJECT_ENDS_WITH_PERIOD: subject_line_ends_with_period.ERROR,
    Lint.BODY_WIDER_THAN_72_CHARACTERS: body_wider_than_72_characters.ERROR,
    Lint.NOT_CONVENTIONAL_COMMIT: not_conventional_commit.ERROR,
    Lint.NOT_EMOJI_LOG: not_emoji_log.ERROR,
}

ALL_LINTS: tuple[Lint, ...] = tuple(sorted(Lint))

DEFAULT_ENABLED_LINTS: frozenset[Lint] = frozenset(
    {
        Lint.DUPLICATED_TRAILERS,
        Lint.SUBJECT_NOT_SEPARATE_FROM_BODY,
        Lint.SUBJECT_LONGER_THAN_72_CHARACTERS,
        Lint.BODY_WIDER_THAN_72_CHARACTERS,
    }
)

