import pytest

from lstheme.color import ThemeError
from lstheme.icon import ByType, IconTheme

PARTIAL_DEFAULT_YAML = """---
name:
  .trash: \uf1f8
  .cargo: \ue68b
  .emacs.d: \ue632
  a.out: \uf489
extension:
  go: \ue627
  hs: \ue777
  rs: \ue68b
filetype:
  dir: \uf115
  file: \uf016
  pipe: \U000f0232
  socket: \U000f01a8
  executable: \uf489
  symlink-dir: \uf482
  symlink-file: \uf481
  device-char: \ue601
  device-block: \U000f072b
  special: \uf2dc
"""


def test_default_theme():
    theme = IconTheme.from_yaml(PARTIAL_DEFAULT_YAML)
    assert theme.filetype.dir == IconTheme().filetype.dir
    assert theme == IconTheme()


def test_partial_default_theme_file(tmp_path):
    path = tmp_path / "icon.yaml"
    path.write_text(PARTIAL_DEFAULT_YAML + "\n", encoding="utf-8")
    decoded = IconTheme.from_path(path)
    assert decoded.filetype.dir == IconTheme().filetype.dir
    assert decoded.filetype == ByType()


def test_empty_theme_return_default():
    assert IconTheme.from_yaml("  ") == IconTheme()


def test_partial_theme_return_default():
    theme = IconTheme.from_yaml("filetype:\n  dir: \uf115")
    assert theme.filetype.dir == IconTheme().filetype.dir


def test_empty_dir_value_from_yaml():
    theme = IconTheme.from_yaml("filetype:\n  dir: ")
    assert theme.filetype.dir == ""
    assert theme.filetype.file == "\uf016"


def test_custom_icon_by_name():
    theme = IconTheme.from_yaml("name:\n  cargo.toml: \U0001f4e6")
    assert theme.name["cargo.toml"] == "\U0001f4e6"


def test_default_icon_by_name_with_custom_entry():
    theme = IconTheme.from_yaml("name:\n  cargo.toml: \U0001f4e6")
    assert theme.name["cargo.lock"] == "\ue68b"


def test_custom_icon_by_extension():
    theme = IconTheme.from_yaml("extension:\n  rs: \U0001f980")
    assert theme.extension["rs"] == "\U0001f980"


def test_default_icon_by_extension_with_custom_entry():
    theme = IconTheme.from_yaml("extension:\n  rs: \U0001f980")
    assert theme.extension["go"] == "\ue627"


def test_new_name_entry_is_added():
    theme = IconTheme.from_yaml("name:\n  brandnew: X")
    assert theme.name["brandnew"] == "X"
    assert len(theme.name) == len(IconTheme().name) + 1


def test_kebab_case_filetype_keys():
    theme = IconTheme.from_yaml("filetype:\n  symlink-dir: L\n  device-block: B")
    assert theme.filetype.symlink_dir == "L"
    assert theme.filetype.device_block == "B"


def test_unknown_top_level_field_rejected():
    with pytest.raises(ThemeError, match="unknown field"):
        IconTheme.from_yaml("colors:\n  dir: x")


def test_unknown_filetype_field_rejected():
    with pytest.raises(ThemeError, match="filetype.symlink_dir"):
        IconTheme.from_yaml("filetype:\n  symlink_dir: x")


def test_non_mapping_document_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("- a\n- b")


def test_non_mapping_name_rejected():
    with pytest.raises(ThemeError, match="name"):
        IconTheme.from_mapping({"name": ["x"]})


def test_non_string_icon_rejected():
    with pytest.raises(ThemeError, match="filetype.dir"):
        IconTheme.from_mapping({"filetype": {"dir": 5}})


def test_invalid_yaml_rejected():
    with pytest.raises(ThemeError, match="invalid YAML"):
        IconTheme.from_yaml("name: [unclosed")


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ThemeError, match="cannot read"):
        IconTheme.from_path(tmp_path / "absent.yaml")


def test_unicode_theme():
    theme = IconTheme.unicode()
    assert theme.name == {}
    assert theme.extension == {}
    assert theme.filetype.dir == "\U0001f4c2"
    assert theme.filetype.special == "\U0001f4df"


def test_by_type_defaults():
    by_type = ByType()
    assert by_type.pipe == "\U000f0232"
    assert by_type.executable == "\uf489"
    assert by_type.device_char == "\ue601"


def test_default_tables_not_shared():
    first = IconTheme()
    first.name["rs"] = "changed"
    assert "rs" not in IconTheme().name
    assert IconTheme().extension["rs"] == "\ue68b"