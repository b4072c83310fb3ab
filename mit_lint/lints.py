"""The set of enabled lints and its TOML representation."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from mit_lint.rules import ALL_LINTS, DEFAULT_ENABLED_LINTS, Lint


class LintConfigError(ValueError):
    """Raised when lint configuration cannot be read."""


class Lints:
    """An immutable set of lints, iterated in canonical name order."""

    __slots__ = ("_lints",)

    def __init__(self, lints: Iterable[Lint] = ()) -> None:
        items = frozenset(lints)
        for item in items:
            if not isinstance(item, Lint):
                raise TypeError(f"Expected Lint members, got {item!r}; use Lints.from_names")
        self._lints: frozenset[Lint] = items

    @classmethod
    def available(cls) -> Lints:
        """Every known lint."""
        return _AVAILABLE

    @classmethod
    def default(cls) -> Lints:
        """The lints that are on unless configured otherwise."""
        return _DEFAULT

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Lints:
        """Build from canonical names, failing on the first unknown one."""
        return cls(Lint.from_name(name) for name in names)

    @classmethod
    def from_toml(cls, text: str) -> Lints:
        """Parse a ``[mit.lint]`` table; missing lints are treated as disabled."""
        try:
            loaded = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise LintConfigError(f"Failed to parse lint config: {exc}") from exc
        return cls.from_mapping(loaded)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Lints:
        """Read enabled lints out of an already parsed ``{"mit": {"lint": ...}}`` document."""
        mit = mapping.get("mit", {})
        if not isinstance(mit, Mapping):
            raise LintConfigError("mit must be a table")
        table = mit.get("lint", {})
        if not isinstance(table, Mapping):
            raise LintConfigError("mit.lint must be a table")

        enabled: list[Lint] = []
        for name, state in table.items():
            lint = Lint.from_name(name)
            if not isinstance(state, bool):
                raise LintConfigError(f"{lint.config_key} must be a boolean")
            if state:
                enabled.append(lint)
        return cls(enabled)

    def names(self) -> list[str]:
        return [lint.value for lint in self]

    def config_keys(self) -> list[str]:
        return [lint.config_key for lint in self]

    def merge(self, other: Lints) -> Lints:
        return Lints(self._lints | other._lints)

    def subtract(self, other: Lints) -> Lints:
        return Lints(self._lints - other._lints)

    def to_toml(self) -> str:
        """Serialize every known lint under ``[mit.lint]`` with its enabled state."""
        lines = ["[mit.lint]"]
        for lint in ALL_LINTS:
            state = "true" if lint in self._lints else "false"
            lines.append(f"{lint.value} = {state}")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict[str, dict[str, dict[str, bool]]]:
        return {"mit": {"lint": {lint.value: lint in self._lints for lint in ALL_LINTS}}}

    def __or__(self, other: Lints) -> Lints:
        return self.merge(other)

    def __sub__(self, other: Lints) -> Lints:
        return self.subtract(other)

    def __iter__(self) -> Iterator[Lint]:
        return iter(sorted(self._lints))

    def __len__(self) -> int:
        return len(self._lints)

    def __contains__(self, item: object) -> bool:
        return item in self._lints

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lints):
            return NotImplemented
        return self._lints == other._lints

    def __hash__(self) -> int:
        return hash(self._lints)

    def __repr__(self) -> str:
        return f"Lints({self.names()!r})"


_AVAILABLE = Lints(ALL_LINTS)
_DEFAULT = Lints(DEFAULT_ENABLED_LINTS)
