"""Colour theme for listing output, loadable from YAML."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields
from pathlib import Path
from typing import Any, Union

import yaml

__all__ = [
    "ThemeError",
    "NamedColor",
    "AnsiColor",
    "RgbColor",
    "Color",
    "parse_color",
    "Permission",
    "Attributes",
    "File",
    "Dir",
    "Symlink",
    "FileType",
    "Date",
    "Size",
    "INode",
    "Links",
    "GitStatus",
    "ColorTheme",
]


class ThemeError(ValueError):
    """Raised when a theme cannot be read or holds an invalid value."""


class NamedColor(enum.Enum):
    """One of the sixteen standard terminal colours."""

    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


def _check_byte(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ThemeError(f"{what} must be an integer from 0 to 255, got {value!r}")
    return value


@dataclass(frozen=True)
class AnsiColor:
    """A colour from the 256-colour palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte(self.value, "ANSI colour value")


@dataclass(frozen=True)
class RgbColor:
    """A true colour given by its red, green and blue parts."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for part in (self.r, self.g, self.b):
            _check_byte(part, "RGB component")


Color = Union[NamedColor, AnsiColor, RgbColor]

_EXPECTING = (
    "`black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, "
    "`grey`, `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`, "
    "`yellow`, `dark_yellow`, `u8`, or `3 u8 array`"
)

_ANSI_RE = re.compile(r"ansi_\((\d{1,3})\)")
_RGB_RE = re.compile(r"rgb_\((\d{1,3}),(\d{1,3}),(\d{1,3})\)")
_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def _parse_color_string(text: str) -> Color:
    try:
        return NamedColor(text.lower())
    except ValueError:
        pass
    try:
        if match := _ANSI_RE.fullmatch(text):
            return AnsiColor(int(match.group(1)))
        if match := _RGB_RE.fullmatch(text):
            return RgbColor(*(int(part) for part in match.groups()))
    except ThemeError:
        pass
    if match := _HEX_RE.fullmatch(text):
        return RgbColor(*(int(part, 16) for part in match.groups()))
    raise ThemeError(f"invalid value {text!r}, expected {_EXPECTING}")


def parse_color(value: Any) -> Color:
    """Turn a theme value (name, palette index or RGB triple) into a colour."""
    if isinstance(value, (NamedColor, AnsiColor, RgbColor)):
        return value
    if isinstance(value, bool):
        raise ThemeError(f"invalid type {value!r}, expected {_EXPECTING}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ThemeError(f"invalid value {value}, expected {_EXPECTING}")
        return AnsiColor(value)
    if isinstance(value, str):
        return _parse_color_string(value)
    if isinstance(value, (list, tuple)):
        if len(value) != 3:
            raise ThemeError(
                f"invalid length {len(value)}, expected a list of size 3(RGB)"
            )
        return RgbColor(*(_check_byte(part, "RGB component") for part in value))
    raise ThemeError(f"invalid type {type(value).__name__}, expected {_EXPECTING}")


def _section_type(spec: Any) -> type | None:
    """Return the nested section class of a field, or None for a colour field."""
    factory = spec.default_factory
    if factory is not MISSING and isinstance(factory, type) and issubclass(factory, _Section):
        return factory
    return None


class _Section:
    """Shared loading logic for the theme's dataclass sections."""

    @classmethod
    def _build(cls, data: Any, where: str):
        if not isinstance(data, Mapping):
            raise ThemeError(
                f"{where or 'theme'}: expected a mapping, got {type(data).__name__}"
            )
        known = {
            f.name.replace("_", "-"): f for f in fields(cls) if not f.metadata.get("skip")
        }
        values = {}
        for key, raw in data.items():
            location = f"{where}.{key}" if where else str(key)
            spec = known.get(key) if isinstance(key, str) else None
            if spec is None:
                expected = ", ".join(f"`{name}`" for name in known)
                raise ThemeError(f"unknown field `{location}`, expected one of {expected}")
            section = _section_type(spec)
            if section is not None:
                values[spec.name] = section._build(raw, location)
            else:
                try:
                    values[spec.name] = parse_color(raw)
                except ThemeError as exc:
                    raise ThemeError(f"{location}: {exc}") from None
        return cls(**values)


@dataclass
class Permission(_Section):
    read: Color = NamedColor.DARK_GREEN
    write: Color = NamedColor.DARK_YELLOW
    exec: Color = NamedColor.DARK_RED
    exec_sticky: Color = AnsiColor(5)
    no_access: Color = AnsiColor(245)
    octal: Color = AnsiColor(6)
    acl: Color = NamedColor.DARK_CYAN
    context: Color = NamedColor.CYAN


@dataclass
class Attributes(_Section):
    archive: Color = NamedColor.DARK_GREEN
    read: Color = NamedColor.DARK_YELLOW
    hidden: Color = AnsiColor(13)
    system: Color = AnsiColor(13)


@dataclass
class File(_Section):
    exec_uid: Color = AnsiColor(40)
    uid_no_exec: Color = AnsiColor(184)
    exec_no_uid: Color = AnsiColor(40)
    no_exec_no_uid: Color = AnsiColor(184)


@dataclass
class Dir(_Section):
    uid: Color = AnsiColor(33)
    no_uid: Color = AnsiColor(33)


@dataclass
class Symlink(_Section):
    default: Color = AnsiColor(44)
    broken: Color = AnsiColor(124)
    missing_target: Color = AnsiColor(124)


@dataclass
class FileType(_Section):
    file: File = field(default_factory=File)
    dir: Dir = field(default_factory=Dir)
    pipe: Color = AnsiColor(44)
    symlink: Symlink = field(default_factory=Symlink)
    block_device: Color = AnsiColor(44)
    char_device: Color = AnsiColor(172)
    socket: Color = AnsiColor(44)
    special: Color = AnsiColor(44)


@dataclass
class Date(_Section):
    hour_old: Color = AnsiColor(40)
    day_old: Color = AnsiColor(42)
    older: Color = AnsiColor(36)


@dataclass
class Size(_Section):
    none: Color = AnsiColor(245)
    small: Color = AnsiColor(229)
    medium: Color = AnsiColor(216)
    large: Color = AnsiColor(172)


@dataclass
class INode(_Section):
    valid: Color = AnsiColor(13)
    invalid: Color = AnsiColor(245)


@dataclass
class Links(_Section):
    valid: Color = AnsiColor(13)
    invalid: Color = AnsiColor(245)


@dataclass
class GitStatus(_Section):
    default: Color = AnsiColor(245)
    unmodified: Color = AnsiColor(245)
    ignored: Color = AnsiColor(245)
    new_in_index: Color = NamedColor.DARK_GREEN
    new_in_workdir: Color = NamedColor.DARK_GREEN
    typechange: Color = NamedColor.DARK_YELLOW
    deleted: Color = NamedColor.DARK_RED
    renamed: Color = NamedColor.DARK_GREEN
    modified: Color = NamedColor.DARK_YELLOW
    conflicted: Color = NamedColor.DARK_RED


@dataclass
class ColorTheme(_Section):
    """The full colour configuration; unset entries keep the dark defaults."""

    user: Color = AnsiColor(230)
    group: Color = AnsiColor(187)
    permission: Permission = field(default_factory=Permission)
    attributes: Attributes = field(default_factory=Attributes)
    date: Date = field(default_factory=Date)
    size: Size = field(default_factory=Size)
    inode: INode = field(default_factory=INode)
    tree_edge: Color = AnsiColor(245)
    links: Links = field(default_factory=Links)
    git_status: GitStatus = field(default_factory=GitStatus)
    file_type: FileType = field(default_factory=FileType, metadata={"skip": True})

    @classmethod
    def default_dark(cls) -> ColorTheme:
        """Return the theme meant for dark terminal backgrounds."""
        return cls()

    @classmethod
    def from_mapping(cls, data: Any) -> ColorTheme:
        """Build a theme from parsed data with kebab-case keys."""
        return cls._build(data, "")

    @classmethod
    def from_yaml(cls, text: str) -> ColorTheme:
        """Build a theme from a YAML document; an empty document gives the defaults."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ThemeError(f"invalid YAML: {exc}") from exc
        if data is None:
            return cls()
        return cls.from_mapping(data)

    @classmethod
    def from_path(cls, path: str | Path) -> ColorTheme:
        """Read a theme from a YAML file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ThemeError(f"cannot read theme file {path}: {exc}") from exc
        return cls.from_yaml(text)