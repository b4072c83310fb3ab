"""Commit message parser primitives."""

from __future__ import annotations

from dataclasses import dataclass
from re import compile

LEGAL_COMMENT_CHARS = "#;@!$%^&|:"

SCISSORS_RE = compile(r"^(?P<char>[#;@!$%^&|:]) -{24} >8 -{24}$")
TRAILER_RE = compile(r"^(?P<key>[A-Za-z0-9][A-Za-z0-9-]*): (?P<value>.+)$")


@dataclass(frozen=True, slots=True)
class Trailer:
    """A `Key: value` trailer and the 0-based line it was found on."""

    key: str
    value: str
    line_index: int


@dataclass(frozen=True, slots=True)
class CommitMessage:
    """An immutable parsed commit message."""

    text: str
    subject: str
    body: str | None
    trailers: tuple[Trailer, ...]
    comment_char: str | None
    scissors_line_index: int | None

    @classmethod
    def from_text(cls, text: str) -> CommitMessage:
        return parse_commit_message(text)

    def lines(self) -> list[str]:
        """Split the text on ``\\n``; a trailing ``\\r`` is not part of a line."""
        return _split_lines(self.text)

    def is_comment(self, line: str) -> bool:
        return self.comment_char is not None and line.startswith(self.comment_char)

    def is_excluded(self, line_index: int, line: str) -> bool:
        """True for comment lines and for the scissors line and everything below it."""
        if self.scissors_line_index is not None and line_index >= self.scissors_line_index:
            return True
        return self.is_comment(line)

    def linted_lines(self) -> list[tuple[int, str]]:
        """Return (line_index, line) pairs that checks should look at."""
        return [
            (index, line)
            for index, line in enumerate(self.lines())
            if not self.is_excluded(index, line)
        ]

    def linted_text(self) -> str:
        """Return the text with comment lines and the scissors section removed."""
        return "\n".join(line for _, line in self.linted_lines())


def parse_commit_message(text: str) -> CommitMessage:
    """Parse raw commit text into subject, body and trailers. Never raises."""
    lines = _split_lines(text)
    comment_char, scissors_line_index = _guess_comment_char(lines)

    def excluded(index: int, line: str) -> bool:
        if scissors_line_index is not None and index >= scissors_line_index:
            return True
        return comment_char is not None and line.startswith(comment_char)

    subject = ""
    if text and not excluded(0, lines[0]):
        subject = lines[0]

    remaining = [
        (index, line)
        for index, line in enumerate(lines)
        if index >= 1 and not excluded(index, line)
    ]
    body_text = "\n".join(line for _, line in remaining).strip("\n").rstrip()

    return CommitMessage(
        text=text,
        subject=subject,
        body=body_text or None,
        trailers=_parse_trailers(remaining),
        comment_char=comment_char,
        scissors_line_index=scissors_line_index,
    )


def _split_lines(text: str) -> list[str]:
    return [line.removesuffix("\r") for line in text.split("\n")]


def _guess_comment_char(lines: list[str]) -> tuple[str | None, int | None]:
    for index, line in enumerate(lines):
        match = SCISSORS_RE.match(line)
        if match is not None:
            return (match.group("char"), index)

    for char in LEGAL_COMMENT_CHARS:
        for line in lines:
            if line == char or line.startswith(f"{char} "):
                return (char, None)
    return (None, None)


def _parse_trailers(lines: list[tuple[int, str]]) -> tuple[Trailer, ...]:
    last_paragraph: list[tuple[int, str]] = []
    for index, line in reversed(lines):
        if not line.strip():
            if last_paragraph:
                break
            continue
        last_paragraph.append((index, line))

    trailers: list[Trailer] = []
    for index, line in reversed(last_paragraph):
        match = TRAILER_RE.match(line)
        if match is not None:
            trailers.append(
                Trailer(key=match.group("key"), value=match.group("value"), line_index=index)
            )
    return tuple(trailers)
