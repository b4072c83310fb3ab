"""Commit message lints."""

from __future__ import annotations

from mit_lint.commit import CommitMessage, Trailer, parse_commit_message
from mit_lint.lints import LintConfigError, Lints
from mit_lint.problem import Code, Label, Problem, ProblemBuilder
from mit_lint.rules import (
    ALL_LINTS,
    CONFIG_KEY_PREFIX,
    DEFAULT_ENABLED_LINTS,
    Lint,
    LintNotFoundError,
)
from mit_lint.runner import async_lint, lint, lint_concurrently

__version__ = "0.1.0"

__all__ = [
    "ALL_LINTS",
    "CONFIG_KEY_PREFIX",
    "DEFAULT_ENABLED_LINTS",
    "Code",
    "CommitMessage",
    "Label",
    "Lint",
    "LintConfigError",
    "LintNotFoundError",
    "Lints",
    "Problem",
    "ProblemBuilder",
    "Trailer",
    "__version__",
    "async_lint",
    "lint",
    "lint_concurrently",
    "parse_commit_message",
]
