"""Line/column to byte offset conversion for UTF-8 commit text."""

from __future__ import annotations


def byte_length(text: str) -> int:
    """Return the UTF-8 encoded length of text."""
    return len(text.encode("utf-8"))


def byte_offset(text: str, line: int, column: int) -> int:
    """Return the 0-based byte offset of a 1-based (line, column) position.

    Columns count Unicode scalar values, not bytes, and ``\\n`` terminates a
    line. A line past the end of the text maps to the end of the text; a
    column past the end of its line clamps to the end of that line.
    """
    line = max(line, 1)
    column = max(column, 1)

    offset = 0
    for index, content in enumerate(text.split("\n"), start=1):
        if index == line:
            return offset + byte_length(content[: column - 1])
        offset += byte_length(content) + 1
    return byte_length(text)


def location(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a byte offset.

    An offset that falls inside a multi-byte character resolves to that
    character. Offsets past the end resolve to the position just after the
    last character.
    """
    line = 1
    column = 1
    consumed = 0
    for char in text:
        width = byte_length(char)
        if consumed + width > offset:
            break
        consumed += width
        if char == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return (line, column)


def line_start(text: str, line_index: int) -> int:
    """Return the byte offset of the first byte of a 0-based line index."""
    return byte_offset(text, line_index + 1, 1)
