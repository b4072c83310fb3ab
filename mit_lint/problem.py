"""Problem diagnostics and the builder rules use to create them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from mit_lint.commit import CommitMessage
from mit_lint.offsets import byte_length, byte_offset


class Code(IntEnum):
    """Stable error codes, one per lint.

    Values below ``DUPLICATED_TRAILERS`` are reserved for author checks that
    live outside this package.
    """

    INITIAL_NOT_MATCHED_TO_AUTHOR = 3
    UNPARSABLE_AUTHOR_FILE = 4
    STALE_AUTHOR = 5
    DUPLICATED_TRAILERS = 6
    PIVOTAL_TRACKER_ID_MISSING = 7
    JIRA_ISSUE_KEY_MISSING = 8
    GITHUB_ID_MISSING = 9
    SUBJECT_NOT_SEPARATE_FROM_BODY = 10
    SUBJECT_LONGER_THAN_72_CHARACTERS = 11
    SUBJECT_NOT_CAPITALIZED = 12
    SUBJECT_ENDS_WITH_PERIOD = 13
    BODY_WIDER_THAN_72_CHARACTERS = 14
    NOT_CONVENTIONAL_COMMIT = 15
    NOT_EMOJI_LOG = 16


@dataclass(frozen=True, slots=True)
class Label:
    """A labeled byte span inside the commit text."""

    text: str
    offset: int
    length: int


@dataclass(frozen=True, slots=True)
class Problem:
    """A single lint failure."""

    error: str
    tip: str
    code: Code
    commit_text: str
    labels: tuple[Label, ...] | None = None
    url: str | None = None

    @property
    def source_code(self) -> str | None:
        """The commit text, or None when no text was supplied."""
        return self.commit_text or None

    @property
    def spans(self) -> tuple[Label, ...] | None:
        """Labels a renderer can place on the source."""
        if self.source_code is None:
            return None
        return self.labels


class ProblemBuilder:
    """Incrementally assemble a Problem."""

    def __init__(self, error: str, tip: str, code: Code, commit: CommitMessage | str) -> None:
        self._error = error
        self._tip = tip
        self._code = code
        self._commit_text = commit.text if isinstance(commit, CommitMessage) else commit
        self._labels: list[Label] = []
        self._url: str | None = None

    def with_url(self, url: str) -> ProblemBuilder:
        self._url = url
        return self

    def with_label(self, text: str, offset: int, length: int) -> ProblemBuilder:
        self._labels.append(Label(text=text, offset=offset, length=length))
        return self

    def with_label_for_line(
        self,
        commit_text: str,
        line_index: int,
        line: str,
        limit: int,
        label_text: str,
    ) -> ProblemBuilder:
        """Label the part of a line beyond ``limit`` characters.

        Lines within the limit are left alone. The offset points at the first
        character past the limit and the length covers the bytes of every
        character past it.
        """
        if len(line) <= limit:
            return self

        position = byte_offset(commit_text, line_index + 1, limit + 1)
        length = byte_length(line[limit:])
        return self.with_label(label_text, position, length)

    def with_label_at_last_line(self, label_text: str) -> ProblemBuilder:
        """Label the last non-blank line of the commit text."""
        trimmed = self._commit_text.rstrip()
        last_line_start = trimmed.rfind("\n") + 1
        start = byte_length(trimmed[:last_line_start])
        return self.with_label(label_text, start, byte_length(trimmed) - start)

    def build(self) -> Problem:
        source_length = byte_length(self._commit_text)
        labels = tuple(_clamp(label, source_length) for label in self._labels)
        return Problem(
            error=self._error,
            tip=self._tip,
            code=self._code,
            commit_text=self._commit_text,
            labels=labels if labels and self._commit_text else None,
            url=self._url,
        )


def _clamp(label: Label, source_length: int) -> Label:
    offset = min(max(label.offset, 0), source_length)
    length = min(max(label.length, 0), source_length - offset)
    if (offset, length) == (label.offset, label.length):
        return label
    return Label(text=label.text, offset=offset, length=length)
