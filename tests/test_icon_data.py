import pytest

from lstheme.icon_data import default_icons_by_extension, default_icons_by_name


@pytest.mark.parametrize(
    ("name", "icon"),
    [
        ("cargo.lock", "\ue68b"),
        ("cargo.toml", "\ue68b"),
        (".trash", "\uf1f8"),
        ("a.out", "\uf489"),
        (".emacs.d", "\ue632"),
        ("src", "\U000f19fc"),
    ],
)
def test_known_names(name, icon):
    assert default_icons_by_name()[name] == icon


@pytest.mark.parametrize(
    ("extension", "icon"),
    [
        ("go", "\ue627"),
        ("hs", "\ue777"),
        ("rs", "\ue68b"),
        ("7z", "\uf410"),
        ("torrent", "\U000f048d"),
    ],
)
def test_known_extensions(extension, icon):
    assert default_icons_by_extension()[extension] == icon


def test_extension_keys_are_lower_case():
    keys = default_icons_by_extension().keys()
    assert all(key == key.lower() for key in keys)


def test_extension_keys_have_no_leading_dot():
    assert not any(key.startswith(".") for key in default_icons_by_extension())


def test_every_icon_is_a_single_character():
    for table in (default_icons_by_name(), default_icons_by_extension()):
        assert all(len(icon) == 1 for icon in table.values())


def test_name_table_returns_fresh_copy():
    first = default_icons_by_name()
    first["cargo.toml"] = "changed"
    del first["cargo.lock"]
    second = default_icons_by_name()
    assert second["cargo.toml"] == "\ue68b"
    assert second["cargo.lock"] == "\ue68b"


def test_extension_table_returns_fresh_copy():
    first = default_icons_by_extension()
    first.clear()
    assert default_icons_by_extension()["go"] == "\ue627"


@pytest.mark.parametrize(
    ("key", "icon"),
    [
        ("css", "\ue749"),
        ("desktop", "\uf108"),
        ("js", "\ue74e"),
    ],
)
def test_keys_in_both_tables_share_icon(key, icon):
    assert default_icons_by_name()[key] == icon
    assert default_icons_by_extension()[key] == icon


def test_unknown_entries_are_absent():
    assert "no-such-file-name" not in default_icons_by_name()
    assert "no-such-extension" not in default_icons_by_extension()