# lstheme

Theme definitions for a colourful directory listing. The package provides
colours for each part of a long listing, icons for file names, extensions
and file types, and symbols for git status. Themes are read from YAML. Any
entry that a theme file leaves out keeps its default.

## Install

```
pip install lstheme
```

## Colour themes (`lstheme.color`)

```python
from lstheme.color import ColorTheme, AnsiColor, RgbColor

theme = ColorTheme.from_yaml("""
user: 130
permission:
  read: dark_green
  write: "#ff007f"
  exec: [255, 0, 0]
""")

assert theme.user == AnsiColor(130)
assert theme.permission.write == RgbColor(255, 0, 127)
assert theme.group == ColorTheme.default_dark().group
```

A colour can be written in any of these forms:

* A name, in any letter case: `black`, `blue`, `dark_blue`, `cyan`,
  `dark_cyan`, `green`, `dark_green`, `grey`, `dark_grey`, `magenta`,
  `dark_magenta`, `red`, `dark_red`, `white`, `yellow`, `dark_yellow`.
* An ANSI 256-colour index from 0 to 255.
* A hex string such as `"#ff007f"`.
* The string forms `ansi_(N)` and `rgb_(R,G,B)`.
* A list of three integers `[r, g, b]`, each from 0 to 255.

`parse_color(value)` turns any of these into a `NamedColor`, an `AnsiColor`
or an `RgbColor`. It raises `ThemeError` for anything else.

The theme is made of dataclass sections:

* `ColorTheme`: `user`, `group`, `permission`, `attributes`, `date`, `size`,
  `inode`, `tree_edge`, `links`, `git_status` and `file_type`.
* `Permission`, `Attributes`, `Date`, `Size`, `INode`, `Links` and
  `GitStatus`: the sections named above.
* `FileType`, with the nested sections `File`, `Dir` and `Symlink`.

Keys in theme files are kebab-case, for example `exec-sticky`, `tree-edge`
and `git-status`. An unknown key or a bad value raises `ThemeError`. The
`file_type` section is not read from files: it always holds its defaults.

You can load a theme in three ways:

* `ColorTheme.from_yaml(text)` reads a YAML document. An empty document
  gives the defaults.
* `ColorTheme.from_path(path)` reads a YAML file.
* `ColorTheme.from_mapping(data)` takes a dictionary you have already parsed.

`ColorTheme.default_dark()` returns the default theme, which is meant for
dark terminal backgrounds.

## Icon themes (`lstheme.icon`)

```python
from lstheme.icon import IconTheme

icons = IconTheme.from_yaml("""
extension:
  rs: "🦀"
filetype:
  dir: "📁"
""")

icons.extension["rs"]   # "🦀"
icons.extension["go"]   # the built-in Go icon is still there
icons.filetype.dir      # "📁"
```

`IconTheme` has three parts:

* `name`: a dictionary of icons keyed by file name.
* `extension`: a dictionary of icons keyed by extension.
* `filetype`: a `ByType` with one icon for each kind of entry. The kinds are
  `dir`, `file`, `pipe`, `socket`, `executable`, `device-char`,
  `device-block`, `special`, `symlink-dir` and `symlink-file`.

Entries under `name` and `extension` are merged over the built-in tables.
You can get copies of those tables from
`lstheme.icon_data.default_icons_by_name()` and
`lstheme.icon_data.default_icons_by_extension()`. YAML scalars are taken as
text, and an empty value becomes an empty string.

`IconTheme.unicode()` gives a theme with these settings:

* File-type icons are standard Unicode emoji, the same as `ByType.unicode()`.
* The name table is empty.
* The extension table is empty.

Icon themes are loaded with `from_yaml`, `from_path` and `from_mapping`. These
work the same way as for colour themes.

## Git status symbols (`lstheme.git`)

```python
from lstheme.git import GitThemeSymbols

symbols = GitThemeSymbols.from_yaml("modified: '~'")
symbols.modified   # "~"
symbols.deleted    # "D"
```

These are the default symbols:

| Status | Symbol |
|--------|--------|
| default | `-` |
| unmodified | `.` |
| new-in-index | `N` |
| new-in-workdir | `?` |
| deleted | `D` |
| modified | `M` |
| renamed | `R` |
| ignored | `I` |
| typechange | `T` |
| conflicted | `C` |

## What this package does not do

This package only defines and loads themes. It does not do any of the
following:

* List directories.
* Read git status.
* Detect the terminal's background.
* Write escape sequences.

Choosing an icon for a given file, for example by lower-casing its name
first, is left to the code that uses the tables.

## Tests

```
pip install -e ".[test]"
pytest
```