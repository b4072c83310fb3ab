"""Tests for commit message parsing."""

from __future__ import annotations

from mit_lint.commit import CommitMessage, Trailer, parse_commit_message

SCISSORS = f"# {'-' * 24} >8 {'-' * 24}"


def test_parse_subject_body_and_trailers() -> None:
    commit = parse_commit_message(
        "Subject\n\nBody line\n\nSigned-off-by: A <a@example.com>\n"
    )

    assert commit.subject == "Subject"
    assert commit.body == "Body line\n\nSigned-off-by: A <a@example.com>"
    assert commit.trailers == (
        Trailer(key="Signed-off-by", value="A <a@example.com>", line_index=4),
    )


def test_trailers_only_come_from_last_paragraph() -> None:
    commit = parse_commit_message("Subject\n\nRelates-to: #1\n\nplain text\n")
    assert commit.trailers == ()


def test_empty_text_parses_to_empty_commit() -> None:
    commit = CommitMessage.from_text("")

    assert commit.subject == ""
    assert commit.body is None
    assert commit.trailers == ()
    assert commit.comment_char is None


def test_carriage_returns_are_not_part_of_lines() -> None:
    commit = parse_commit_message("Subject\r\n\r\nBody")
    assert commit.lines() == ["Subject", "", "Body"]
    assert commit.subject == "Subject"


def test_comment_char_guessed_from_comment_lines() -> None:
    commit = parse_commit_message("Subject\n\nBody\n# Please enter the commit message\n")

    assert commit.comment_char == "#"
    assert "Please enter" not in commit.linted_text()
    assert commit.body == "Body"


def test_comment_char_falls_through_legal_characters() -> None:
    commit = parse_commit_message("Subject\n\n; a comment\n")
    assert commit.comment_char == ";"


def test_scissors_line_excludes_everything_below() -> None:
    text = f"Subject\n\nBody\n{SCISSORS}\ndiff --git a/x b/x\n"
    commit = parse_commit_message(text)

    assert commit.comment_char == "#"
    assert commit.scissors_line_index == 3
    assert [index for index, _ in commit.linted_lines()] == [0, 1, 2]
    assert "diff --git" not in commit.linted_text()


def test_scissors_character_wins_over_comment_lines() -> None:
    text = f"Subject\n\n# not a comment\n{SCISSORS.replace('#', ';', 1)}\n"
    commit = parse_commit_message(text)

    assert commit.comment_char == ";"
    assert commit.is_excluded(3, ";")
    assert not commit.is_comment("# not a comment")
