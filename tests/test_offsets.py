"""Tests for line/column and byte offset conversion."""

from __future__ import annotations

from mit_lint.offsets import byte_length, byte_offset, line_start, location


def test_byte_length_counts_utf8_bytes() -> None:
    assert byte_length("abc") == 3
    assert byte_length("é") == 2
    assert byte_length("\U0001f600") == 4


def test_byte_offset_on_later_line() -> None:
    assert byte_offset("abc\ndef", 2, 1) == 4
    assert byte_offset("abc\ndef", 2, 3) == 6


def test_byte_offset_counts_columns_as_characters() -> None:
    assert byte_offset("é\nx", 1, 2) == 2
    assert byte_offset("\U0001f600\U0001f600", 1, 2) == 4


def test_byte_offset_past_end_clamps() -> None:
    assert byte_offset("abc", 5, 1) == 3
    assert byte_offset("abc\nde", 1, 10) == 3


def test_location_inverts_byte_offset() -> None:
    text = "abc\ndéf"
    assert location(text, 0) == (1, 1)
    assert location(text, 4) == (2, 1)
    assert location(text, byte_offset(text, 2, 3)) == (2, 3)


def test_location_inside_multibyte_character_resolves_to_it() -> None:
    assert location("é", 1) == (1, 1)


def test_line_start_is_zero_based() -> None:
    assert line_start("ab\ncd", 0) == 0
    assert line_start("ab\ncd", 1) == 3
