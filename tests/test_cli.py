"""CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from mit_lint import __version__
from mit_lint.cli import app
from tests.helpers_git import commit_message, init_repo

runner = CliRunner()

CLEAN_MESSAGE = "Add a thing\n\nBecause it was missing\n"


def _repo(tmp_path: Path) -> Path:
    return init_repo(tmp_path)


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_lint_stdin_clean_message(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(app, ["lint", "--stdin", "--repo", str(repo)], input=CLEAN_MESSAGE)

    assert result.exit_code == 0
    assert "No problems found." in result.stdout


def test_lint_stdin_json_reports_problem_and_fails(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(
        app,
        ["lint", "--stdin", "--repo", str(repo), "--format", "json"],
        input="x" * 73,
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert [problem["code_name"] for problem in payload["problems"]] == [
        "subject_longer_than_72_characters"
    ]
    assert payload["problems"][0]["labels"] == [{"label": "Too long", "offset": 72, "length": 1}]


def test_lint_file_with_enable_and_disable(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    message_file = tmp_path / "COMMIT_EDITMSG"
    message_file.write_text("add a thing\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "lint",
            "--file",
            str(message_file),
            "--repo",
            str(repo),
            "--format",
            "json",
            "--enable",
            "subject-line-not-capitalized",
            "--enable",
            "not-emoji-log",
            "--disable",
            "not-emoji-log",
        ],
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert [problem["code_name"] for problem in payload["problems"]] == ["subject_not_capitalized"]


def test_lint_concurrent_matches_sequential(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    args = ["lint", "--stdin", "--repo", str(repo), "--format", "json", "--enable", "not-emoji-log"]

    sequential = runner.invoke(app, args, input="add a thing.\nBody\n")
    concurrent = runner.invoke(app, [*args, "--concurrent"], input="add a thing.\nBody\n")

    assert sequential.exit_code == 1
    assert concurrent.exit_code == 1
    assert json.loads(sequential.stdout) == json.loads(concurrent.stdout)


def test_lint_revision_reads_git_history(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    commit_message(repo, "x" * 80)
    commit_message(repo, CLEAN_MESSAGE)

    head = runner.invoke(app, ["lint", "--repo", str(repo)])
    previous = runner.invoke(app, ["lint", "--repo", str(repo), "--revision", "HEAD~1"])

    assert head.exit_code == 0
    assert previous.exit_code == 1
    assert "mit_lint::subject_longer_than_72_characters" in previous.stdout


def test_lint_uses_repository_config(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    (repo / ".mit-lint.toml").write_text(
        'format = "json"\n\n[mit.lint]\nnot-emoji-log = true\n', encoding="utf-8"
    )

    result = runner.invoke(app, ["lint", "--stdin", "--repo", str(repo)], input=CLEAN_MESSAGE)

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert [problem["code_name"] for problem in payload["problems"]] == ["not_emoji_log"]


def test_lint_rejects_unknown_lint(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(
        app,
        ["lint", "--stdin", "--repo", str(repo), "--enable", "not-a-lint"],
        input=CLEAN_MESSAGE,
    )

    assert result.exit_code == 2
    assert "not-a-lint" in result.output


def test_lint_rejects_multiple_inputs(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(
        app,
        ["lint", "--stdin", "--revision", "HEAD", "--repo", str(repo)],
        input=CLEAN_MESSAGE,
    )
    assert result.exit_code == 2


def test_lint_bad_revision_is_a_parameter_error(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    commit_message(repo, CLEAN_MESSAGE)

    result = runner.invoke(app, ["lint", "--repo", str(repo), "--revision", "nope"])
    assert result.exit_code == 2


def test_lints_command_json(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(app, ["lints", "--repo", str(repo), "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    by_name = {item["name"]: item for item in payload["lints"]}
    assert len(by_name) == 11
    assert by_name["duplicated-trailers"]["enabled"] is True
    assert by_name["duplicated-trailers"]["config_key"] == "mit.lint.duplicated-trailers"
    assert by_name["not-emoji-log"]["enabled"] is False
    assert payload["meta"]["config_source"] is None


def test_lints_command_human(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(app, ["lints", "--repo", str(repo)])

    assert result.exit_code == 0
    assert "- duplicated-trailers [enabled] - " in result.stdout
    assert "- not-emoji-log [disabled] - " in result.stdout


def test_config_command_prints_toml(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    result = runner.invoke(
        app,
        [
            "config",
            "--repo",
            str(repo),
            "--enable",
            "not-emoji-log",
            "--disable",
            "duplicated-trailers",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.startswith("[mit.lint]\n")
    assert "not-emoji-log = true\n" in result.stdout
    assert "duplicated-trailers = false\n" in result.stdout


def test_config_validate_reports_enabled_lints(tmp_path: Path) -> None:
    config_path = tmp_path / "lint.toml"
    config_path.write_text("[mit.lint]\ngithub-id-missing = true\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "config-validate",
            "--repo",
            str(tmp_path),
            "--config",
            str(config_path),
            "--format",
            "json",
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {
        "ok": True,
        "source": str(config_path),
        "enabled_lints": ["github-id-missing"],
    }


def test_config_validate_rejects_bad_values(tmp_path: Path) -> None:
    config_path = tmp_path / "lint.toml"
    config_path.write_text('[mit.lint]\ngithub-id-missing = "on"\n', encoding="utf-8")

    result = runner.invoke(
        app, ["config-validate", "--repo", str(tmp_path), "--config", str(config_path)]
    )
    assert result.exit_code == 2


def test_lint_reports_corrupt_git_config(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    with (repo / ".git" / "config").open("a", encoding="utf-8") as file_obj:
        file_obj.write("[broken\n")

    result = runner.invoke(app, ["lint", "--stdin", "--repo", str(repo)], input=CLEAN_MESSAGE)
    assert result.exit_code == 2
