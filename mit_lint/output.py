"""Output rendering."""

from __future__ import annotations

import json
from typing import Any

import click

from mit_lint import __version__
from mit_lint.offsets import location
from mit_lint.problem import Label, Problem


def render_human(problems: list[Problem]) -> str:
    """Render problems with the commit lines their labels point at."""
    if not problems:
        return click.style("No problems found.", fg="green", bold=True)

    blocks = [_render_problem(problem) for problem in problems]
    return "\n\n".join(blocks)


def render_json(problems: list[Problem]) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(build_json_payload(problems), sort_keys=True)


def build_json_payload(problems: list[Problem]) -> dict[str, Any]:
    """Build stable JSON payload for CI and automation."""
    return {
        "problems": [_serialize_problem(problem) for problem in problems],
        "meta": {"version": __version__},
    }


def _serialize_problem(problem: Problem) -> dict[str, Any]:
    return {
        "code": int(problem.code),
        "code_name": problem.code.name.lower(),
        "error": problem.error,
        "tip": problem.tip,
        "url": problem.url,
        "labels": [_serialize_label(label) for label in problem.spans or ()],
    }


def _serialize_label(label: Label) -> dict[str, Any]:
    return {"label": label.text, "offset": label.offset, "length": label.length}


def _render_problem(problem: Problem) -> str:
    lines: list[str] = [
        click.style(f"mit_lint::{problem.code.name.lower()}", fg="red", bold=True),
        "",
        f"  x {problem.error}",
    ]

    source = problem.source_code
    spans = problem.spans
    if source is not None and spans:
        source_lines = source.split("\n")
        gutter = len(str(len(source_lines)))
        for label in spans:
            line_number, column = location(source, label.offset)
            content = source_lines[line_number - 1].removesuffix("\r")
            width = _label_width(source, label)
            lines.append(f"   {line_number:>{gutter}} | {content}")
            marker = " " * (column - 1) + "^" * max(width, 1)
            lines.append(
                f"   {'':>{gutter}} | " + click.style(f"{marker} {label.text}", fg="magenta")
            )

    lines.append("")
    lines.append(f"  help: {problem.tip}")
    if problem.url is not None:
        lines.append(f"  url: {problem.url}")
    return "\n".join(lines)


def _label_width(source: str, label: Label) -> int:
    """Number of characters a label spans on its first line."""
    encoded = source.encode("utf-8")
    covered = encoded[label.offset : label.offset + label.length].decode("utf-8", errors="ignore")
    first_line = covered.split("\n", 1)[0]
    return len(first_line)
