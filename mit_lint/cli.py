"""CLI entrypoint for mit-lint."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from mit_lint import __version__
from mit_lint.config import OUTPUT_FORMATS, AppConfig, load_app_config
from mit_lint.git import GitError, get_commit_message
from mit_lint.lints import Lints
from mit_lint.output import render_human, render_json
from mit_lint.rules import ALL_LINTS, LintNotFoundError
from mit_lint.runner import lint, lint_concurrently

app = typer.Typer(
    name="mit-lint",
    no_args_is_help=True,
    help="Check commit messages against configurable lints.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def configure_logging(level: int = logging.DEBUG) -> None:
    """Send log records to stderr through a Rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
) -> None:
    """Root command callback."""
    _ = version


@app.command("lint")
def lint_command(
    file: Annotated[Path | None, typer.Option(help="Path to a commit message file.")] = None,
    stdin: Annotated[bool, typer.Option(help="Read the commit message from stdin.")] = False,
    revision: Annotated[
        str | None, typer.Option(help="Lint the message of this git revision.")
    ] = None,
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
    enable: Annotated[list[str] | None, typer.Option(help="Enable a lint by name.")] = None,
    disable: Annotated[list[str] | None, typer.Option(help="Disable a lint by name.")] = None,
    format: Annotated[
        str | None, typer.Option(help="Output format: human|json.", show_default="human")
    ] = None,
    concurrent: Annotated[
        bool, typer.Option("--concurrent", help="Run each lint on its own worker thread.")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log debug details.")] = False,
) -> None:
    """Lint a commit message and report problems."""
    if verbose:
        configure_logging()

    app_config = _load_config_or_raise(repo, config_file)
    output_format = _resolve_format(format, app_config)

    if sum((file is not None, stdin, revision is not None)) > 1:
        raise typer.BadParameter("Use only one of --file, --stdin or --revision.")

    try:
        text = _resolve_commit_input(file=file, stdin=stdin, revision=revision, repo=repo)
    except GitError as exc:
        raise typer.BadParameter(str(exc)) from exc

    lints = _apply_overrides(app_config.lints, enable=enable, disable=disable)
    problems = lint_concurrently(text, lints) if concurrent else lint(text, lints)

    if output_format == "json":
        typer.echo(render_json(problems))
    else:
        typer.echo(render_human(problems))

    if problems:
        raise typer.Exit(code=1)


@app.command("lints")
def lints_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """List every known lint and whether it is enabled."""
    output_format = format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(repo, config_file)

    if output_format == "json":
        payload = {
            "lints": [
                {
                    "name": item.value,
                    "config_key": item.config_key,
                    "description": item.description,
                    "default_enabled": item.enabled_by_default,
                    "enabled": item in app_config.lints,
                }
                for item in ALL_LINTS
            ],
            "meta": {"config_source": app_config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available lints:"]
    for item in ALL_LINTS:
        status = "enabled" if item in app_config.lints else "disabled"
        lines.append(f"- {item.value} [{status}] - {item.description}")
    typer.echo("\n".join(lines))


@app.command("config")
def config_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
    enable: Annotated[list[str] | None, typer.Option(help="Enable a lint by name.")] = None,
    disable: Annotated[list[str] | None, typer.Option(help="Disable a lint by name.")] = None,
) -> None:
    """Print the resolved lint configuration as TOML."""
    app_config = _load_config_or_raise(repo, config_file)
    lints = _apply_overrides(app_config.lints, enable=enable, disable=disable)
    typer.echo(lints.to_toml(), nl=False)


@app.command("config-validate")
def config_validate_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    config_file: Annotated[
        Path,
        typer.Option("--config", help="Path to config TOML file to validate."),
    ] = Path(".mit-lint.toml"),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """Validate a config file and report enabled lints."""
    output_format = format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(repo, config_file)
    payload = {
        "ok": True,
        "source": app_config.source,
        "enabled_lints": app_config.lints.names(),
    }
    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return
    typer.echo(
        "\n".join(
            [
                "Config is valid.",
                f"- source: {payload['source']}",
                f"- enabled_lints: {payload['enabled_lints']}",
            ]
        )
    )


def main() -> None:
    """Console script entrypoint."""
    app()


def _resolve_commit_input(
    *,
    file: Path | None,
    stdin: bool,
    revision: str | None,
    repo: Path,
) -> str:
    if file is not None:
        if not file.exists():
            raise typer.BadParameter(f"Commit message file does not exist: {file}")
        return file.read_text(encoding="utf-8")

    if stdin:
        return sys.stdin.read()

    return get_commit_message(repo, revision or "HEAD")


def _resolve_format(value: str | None, app_config: AppConfig) -> str:
    resolved = (value or app_config.format).lower()
    if resolved not in OUTPUT_FORMATS:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")
    return resolved


def _apply_overrides(
    lints: Lints,
    *,
    enable: list[str] | None,
    disable: list[str] | None,
) -> Lints:
    try:
        return (lints | Lints.from_names(enable or [])) - Lints.from_names(disable or [])
    except LintNotFoundError as exc:
        raise typer.BadParameter(str(exc), param_hint="--enable/--disable") from exc


def _load_config_or_raise(repo: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(repo, config_path=config_file)
    except (ValueError, GitError) as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc
