"""Duplicated trailer check."""

from __future__ import annotations

from collections import Counter

from mit_lint.commit import CommitMessage, Trailer
from mit_lint.offsets import byte_length, line_start
from mit_lint.problem import Code, Problem, ProblemBuilder

CONFIG = "duplicated-trailers"
ERROR = "Your commit message has duplicated trailers"
URL = "https://git-scm.com/docs/githooks#_commit_msg"

TRAILERS_TO_CHECK_FOR_DUPLICATES = ("Signed-off-by", "Co-authored-by", "Relates-to")


def lint(commit: CommitMessage) -> Problem | None:
    """Flag checked trailers that appear more than once with the same value."""
    repeats = _repeated_trailers(commit.trailers)
    if not repeats:
        return None

    keys = sorted({trailer.key for trailer in repeats})
    builder = ProblemBuilder(ERROR, _tip(keys), Code.DUPLICATED_TRAILERS, commit).with_url(URL)
    lines = commit.lines()
    for key in keys:
        for trailer in repeats:
            if trailer.key != key:
                continue
            builder = builder.with_label(
                f"Duplicated `{key}`",
                line_start(commit.text, trailer.line_index),
                byte_length(lines[trailer.line_index]),
            )
    return builder.build()


def _repeated_trailers(trailers: tuple[Trailer, ...]) -> list[Trailer]:
    seen: Counter[tuple[str, str]] = Counter()
    repeats: list[Trailer] = []
    for trailer in trailers:
        if trailer.key not in TRAILERS_TO_CHECK_FOR_DUPLICATES:
            continue
        identity = (trailer.key, trailer.value)
        if seen[identity]:
            repeats.append(trailer)
        seen[identity] += 1
    return repeats


def _tip(keys: list[str]) -> str:
    fields = "fields" if len(keys) > 1 else "field"
    joined = '", "'.join(keys)
    return (
        "These are normally added accidentally when you're rebasing or amending to a commit, "
        "sometimes in the text editor, but often by git hooks.\n\n"
        f'You can fix this by deleting the duplicated "{joined}" {fields}'
    )
