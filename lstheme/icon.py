"""Icon theme: icons chosen by file name, by extension and by file type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from lstheme.color import ThemeError
from lstheme.icon_data import default_icons_by_extension, default_icons_by_name

__all__ = ["ByType", "IconTheme"]


def _as_text(raw: Any, location: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ThemeError(f"{location}: expected a string, got {type(raw).__name__}")
    return raw


def _check_mapping(data: Any, location: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ThemeError(
            f"{location or 'theme'}: expected a mapping, got {type(data).__name__}"
        )
    return data


def _icon_table(data: Any, location: str, defaults: dict[str, str]) -> dict[str, str]:
    """Overlay user entries on the built-in table."""
    entries = _check_mapping(data, location)
    table = dict(defaults)
    for key, raw in entries.items():
        if not isinstance(key, str):
            raise ThemeError(f"{location}: keys must be strings, got {key!r}")
        table[key] = _as_text(raw, f"{location}.{key}")
    return table


@dataclass
class ByType:
    """Icons for each kind of file system entry."""

    dir: str = "\uf115"
    file: str = "\uf016"
    pipe: str = "\U000f0232"
    socket: str = "\U000f01a8"
    executable: str = "\uf489"
    device_char: str = "\ue601"
    device_block: str = "\U000f072b"
    special: str = "\uf2dc"
    symlink_dir: str = "\uf482"
    symlink_file: str = "\uf481"

    @classmethod
    def unicode(cls) -> ByType:
        """Return icons drawn from standard Unicode emoji."""
        return cls(
            dir="\U0001f4c2",
            file="\U0001f4c4",
            pipe="\U0001f4e9",
            socket="\U0001f4ec",
            executable="\U0001f3d7",
            symlink_dir="\U0001f5c2",
            symlink_file="\U0001f516",
            device_char="\U0001f5a8",
            device_block="\U0001f4bd",
            special="\U0001f4df",
        )

    @classmethod
    def _build(cls, data: Any, where: str) -> ByType:
        entries = _check_mapping(data, where)
        known = {f.name.replace("_", "-"): f.name for f in fields(cls)}
        values = {}
        for key, raw in entries.items():
            location = f"{where}.{key}"
            name = known.get(key) if isinstance(key, str) else None
            if name is None:
                expected = ", ".join(f"`{k}`" for k in known)
                raise ThemeError(f"unknown field `{location}`, expected one of {expected}")
            values[name] = _as_text(raw, location)
        return cls(**values)


@dataclass
class IconTheme:
    """Icon lookup tables; user entries are added to the built-in ones."""

    name: dict[str, str] = field(default_factory=default_icons_by_name)
    extension: dict[str, str] = field(default_factory=default_icons_by_extension)
    filetype: ByType = field(default_factory=ByType)

    @classmethod
    def unicode(cls) -> IconTheme:
        """Return a theme with emoji type icons and no name or extension icons."""
        return cls(name={}, extension={}, filetype=ByType.unicode())

    @classmethod
    def from_mapping(cls, data: Any) -> IconTheme:
        """Build a theme from parsed data with kebab-case keys."""
        entries = _check_mapping(data, "")
        theme = cls()
        for key, raw in entries.items():
            if key == "name":
                theme.name = _icon_table(raw, "name", default_icons_by_name())
            elif key == "extension":
                theme.extension = _icon_table(
                    raw, "extension", default_icons_by_extension()
                )
            elif key == "filetype":
                theme.filetype = ByType._build(raw, "filetype")
            else:
                raise ThemeError(
                    f"unknown field `{key}`, expected one of `name`, `extension`, `filetype`"
                )
        return theme

    @classmethod
    def from_yaml(cls, text: str) -> IconTheme:
        """Build a theme from a YAML document; an empty document gives the defaults."""
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise ThemeError(f"invalid YAML: {exc}") from exc
        if data is None:
            return cls()
        return cls.from_mapping(data)

    @classmethod
    def from_path(cls, path: str | Path) -> IconTheme:
        """Read a theme from a YAML file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ThemeError(f"cannot read theme file {path}: {exc}") from exc
        return cls.from_yaml(text)