"""Configuration loading for mit-lint."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mit_lint.git import get_lint_config
from mit_lint.lints import Lints
from mit_lint.rules import Lint

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".mit-lint.toml", "mit-lint.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEYS = ("mit-lint", "mit_lint")
OUTPUT_FORMATS = ("human", "json")


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration values resolved from project files or git config."""

    lints: Lints = field(default_factory=Lints.default)
    format: str = "human"
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "lints": self.lints.names(),
            "source": self.source,
        }


def load_app_config(repo: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from an explicit path, repository files, git config or defaults."""
    repo = repo.resolve()
    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else (repo / config_path)
        if not resolved.exists():
            raise ValueError(f"Config file does not exist: {resolved}")
        return _from_file(resolved)

    for filename in CONFIG_FILENAMES:
        resolved = repo / filename
        if resolved.exists():
            return _from_file(resolved)

    pyproject_path = repo / PYPROJECT_FILENAME
    if pyproject_path.exists():
        section = _find_pyproject_tool_section(_load_toml(pyproject_path))
        if section is not None:
            logger.debug("using config from %s", pyproject_path)
            return _from_mapping(
                {"format": section.get("format", "human"), "mit": {"lint": section.get("lint")}},
                source=str(pyproject_path),
            )

    git_values = get_lint_config(repo)
    if git_values:
        logger.debug("using lint config from git config in %s", repo)
        return AppConfig(lints=_overlay_defaults(git_values), source="git-config")

    logger.debug("no config found in %s, using defaults", repo)
    return AppConfig()


def _from_file(path: Path) -> AppConfig:
    logger.debug("using config from %s", path)
    loaded = _load_toml(path)
    section = _find_pyproject_tool_section(loaded)
    if section is not None:
        loaded = {"format": section.get("format", "human"), "mit": {"lint": section.get("lint")}}
    return _from_mapping(loaded, source=str(path))


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            loaded = tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        return {}
    return loaded


def _find_pyproject_tool_section(loaded: dict[str, Any]) -> dict[str, Any] | None:
    tool = loaded.get("tool")
    if not isinstance(tool, dict):
        return None
    for key in PYPROJECT_TOOL_KEYS:
        section = tool.get(key)
        if isinstance(section, dict):
            return section
    return None


def _from_mapping(mapping: dict[str, Any], *, source: str) -> AppConfig:
    mit = _as_table(mapping.get("mit"), "mit")
    lint_table = mit.get("lint")
    if lint_table is None:
        lints = Lints.default()
    else:
        lints = Lints.from_mapping({"mit": {"lint": _as_table(lint_table, "mit.lint")}})

    return AppConfig(
        lints=lints,
        format=_as_choice(mapping.get("format", "human"), OUTPUT_FORMATS, "format"),
        source=source,
    )


def _overlay_defaults(values: dict[str, bool]) -> Lints:
    enabled = set(Lints.default())
    for name, state in values.items():
        lint = Lint.from_name(name)
        if state:
            enabled.add(lint)
        else:
            enabled.discard(lint)
    return Lints(enabled)


def _as_table(value: Any, field_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table/object")
    return value


def _as_choice(raw: Any, allowed: tuple[str, ...], field_name: str) -> str:
    value = str(raw).lower()
    if value not in allowed:
        raise ValueError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value
