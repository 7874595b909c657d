import pytest

from lstheme.color import (
    AnsiColor,
    ColorTheme,
    NamedColor,
    RgbColor,
    ThemeError,
    parse_color,
)

DEFAULT_YAML = """---
user: 230
group: 187
permission:
  read: dark_green
  write: dark_yellow
  exec: dark_red
  exec-sticky: 5
  no-access: 245
date:
  hour-old: 40
  day-old: 42
  older: 36
size:
  none: 245
  small: 229
  medium: 216
  large: 172
inode:
  valid: 13
  invalid: 245
links:
  valid: 13
  invalid: 245
tree-edge: 245
"""


def test_default_theme():
    assert ColorTheme.from_yaml(DEFAULT_YAML) == ColorTheme.default_dark()


def test_default_theme_file(tmp_path):
    theme = tmp_path / "theme.yaml"
    theme.write_text(DEFAULT_YAML + "\n", encoding="utf-8")
    assert ColorTheme.from_path(str(theme)) == ColorTheme.default_dark()


def test_empty_theme_return_default():
    assert ColorTheme.from_yaml("user: 230") == ColorTheme.default_dark()


def test_blank_document_returns_default():
    assert ColorTheme.from_yaml("") == ColorTheme.default_dark()


def test_first_level_theme_return_default_but_changed():
    theme = ColorTheme.default_dark()
    theme.user = AnsiColor(130)
    assert ColorTheme.from_yaml("user: 130") == theme


def test_hexadecimal_colors():
    theme = ColorTheme.from_yaml('user: "#ff007f"')
    assert theme.user == RgbColor(255, 0, 127)


def test_second_level_theme_return_default_but_changed():
    loaded = ColorTheme.from_yaml("---\npermission:\n  read: 130")
    theme = ColorTheme.default_dark()
    theme.permission.read = AnsiColor(130)
    assert loaded == theme


def test_default_values_from_source():
    theme = ColorTheme.default_dark()
    assert theme.user == AnsiColor(230)
    assert theme.permission.exec == NamedColor.DARK_RED
    assert theme.file_type.char_device == AnsiColor(172)
    assert theme.git_status.conflicted == NamedColor.DARK_RED


def test_rgb_list():
    theme = ColorTheme.from_yaml("group: [255, 0, 127]")
    assert theme.group == RgbColor(255, 0, 127)


def test_named_color_case_insensitive():
    assert parse_color("Dark_Cyan") is NamedColor.DARK_CYAN


def test_ansi_and_rgb_strings():
    assert parse_color("ansi_(130)") == AnsiColor(130)
    assert parse_color("rgb_(255,0,127)") == RgbColor(255, 0, 127)


@pytest.mark.parametrize(
    "value",
    [256, -1, True, 1.5, None, [1, 2], [1, 2, 3, 4], [1, 2, 300], "purple", "#ff00"],
)
def test_invalid_colors(value):
    with pytest.raises(ThemeError):
        parse_color(value)


def test_unknown_field_rejected():
    with pytest.raises(ThemeError, match="unknown field"):
        ColorTheme.from_yaml("colour: 5")


def test_unknown_nested_field_rejected():
    with pytest.raises(ThemeError, match="permission.bogus"):
        ColorTheme.from_yaml("permission:\n  bogus: 5")


def test_file_type_cannot_be_set():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("file-type:\n  pipe: 5")


def test_value_out_of_range_in_document():
    with pytest.raises(ThemeError, match="tree-edge"):
        ColorTheme.from_yaml("tree-edge: 300")


def test_section_must_be_mapping():
    with pytest.raises(ThemeError):
        ColorTheme.from_yaml("permission: 5")


def test_top_level_must_be_mapping():
    with pytest.raises(ThemeError):
        ColorTheme.from_mapping([1, 2, 3])


def test_missing_file(tmp_path):
    with pytest.raises(ThemeError):
        ColorTheme.from_path(tmp_path / "missing.yaml")


def test_ansi_color_validates():
    with pytest.raises(ThemeError):
        AnsiColor(256)