"""Tests for Problem construction."""

from __future__ import annotations

from mit_lint.problem import Code, Label, ProblemBuilder


def _builder(text: str) -> ProblemBuilder:
    return ProblemBuilder("error", "tip", Code.NOT_EMOJI_LOG, text)


def test_build_without_labels() -> None:
    problem = _builder("Subject").with_url("https://example.com").build()

    assert problem.labels is None
    assert problem.url == "https://example.com"
    assert problem.source_code == "Subject"
    assert problem.code == Code.NOT_EMOJI_LOG


def test_empty_text_drops_labels_and_source() -> None:
    problem = _builder("").with_label("x", 0, 1).build()

    assert problem.labels is None
    assert problem.source_code is None
    assert problem.spans is None


def test_labels_are_clamped_to_the_text() -> None:
    problem = _builder("abc").with_label("x", 2, 10).with_label("y", 9, 1).build()
    assert problem.labels == (Label("x", 2, 1), Label("y", 3, 0))


def test_label_for_line_covers_characters_past_limit() -> None:
    problem = _builder("ab\ncdef").with_label_for_line("ab\ncdef", 1, "cdef", 2, "Too long").build()
    assert problem.labels == (Label("Too long", 5, 2),)


def test_label_for_line_within_limit_adds_nothing() -> None:
    problem = _builder("ab\ncd").with_label_for_line("ab\ncd", 1, "cd", 2, "Too long").build()
    assert problem.labels is None


def test_label_at_last_line_ignores_trailing_whitespace() -> None:
    problem = _builder("Subject\n\nBody\n\n").with_label_at_last_line("Here").build()
    assert problem.labels == (Label("Here", 9, 4),)
    assert problem.spans == problem.labels


def test_code_values_are_stable() -> None:
    assert Code.DUPLICATED_TRAILERS == 6
    assert Code.NOT_EMOJI_LOG == 16
