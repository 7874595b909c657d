"""Symbols shown for each git status of a file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from lstheme.color import ThemeError

__all__ = ["GitThemeSymbols"]


@dataclass
class GitThemeSymbols:
    """Text markers for git states; unset entries keep their defaults."""

    default: str = "-"
    unmodified: str = "."
    new_in_index: str = "N"
    new_in_workdir: str = "?"
    deleted: str = "D"
    modified: str = "M"
    renamed: str = "R"
    ignored: str = "I"
    typechange: str = "T"
    conflicted: str = "C"

    @classmethod
    def from_mapping(cls, data: Any) -> GitThemeSymbols:
        """Build symbols from parsed data with kebab-case keys."""
        if not isinstance(data, Mapping):
            raise ThemeError(f"expected a mapping, got {type(data).__name__}")
        known = {f.name.replace("_", "-"): f.name for f in fields(cls)}
        values = {}
        for key, raw in data.items():
            name = known.get(key) if isinstance(key, str) else None
            if name is None:
                expected = ", ".join(f"`{k}`" for k in known)
                raise ThemeError(f"unknown field `{key}`, expected one of {expected}")
            if raw is None:
                raw = ""
            if not isinstance(raw, str):
                raise ThemeError(f"{key}: expected a string, got {type(raw).__name__}")
            values[name] = raw
        return cls(**values)

    @classmethod
    def from_yaml(cls, text: str) -> GitThemeSymbols:
        """Build symbols from a YAML document; scalars are taken as text."""
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise ThemeError(f"invalid YAML: {exc}") from exc
        if data is None:
            return cls()
        return cls.from_mapping(data)

    @classmethod
    def from_path(cls, path: str | Path) -> GitThemeSymbols:
        """Read symbols from a YAML file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ThemeError(f"cannot read theme file {path}: {exc}") from exc
        return cls.from_yaml(text)