"""Built-in icon tables keyed by file name and by file extension."""

from __future__ import annotations

__all__ = ["default_icons_by_name", "default_icons_by_extension"]

_LOCK_ICON = "\uf023"
_CONFIG_ICON = "\ue615"

# File names are matched in lower case.
_BY_NAME: dict[str, str] = {
    "a.out": "\uf489",
    "api": "\U000f048d",
    ".asoundrc": "\ue615",
    ".atom": "\ue764",
    ".ash": "\uf489",
    ".ash_history": "\uf489",
    "authorized_keys": "\ue60a",
    "assets": "\uf0c7",
    ".android": "\uf17b",
    ".audacity-data": "\ue5fc",
    "backups": "\U000f006f",
    ".bash_history": "\U000f1183",
    ".bash_logout": "\U000f1183",
    ".bash_profile": "\U000f1183",
    ".bashrc": "\U000f1183",
    "bin": "\ue5fc",
    ".bpython_history": "\ue606",
    "build": "\uf487",
    "bspwmrc": "\ue615",
    "build.ninja": "\uf0ad",
    ".cache": "\U000f00e8",
    "cache": "\U000f00e8",
    "cargo.lock": "\ue68b",
    "cargo.toml": "\ue68b",
    ".cargo": "\ue68b",
    ".ccls-cache": "\U000f00e8",
    "changelog": "\ue609",
    ".clang-format": "\ue615",
    "composer.json": "\ue608",
    "composer.lock": "\ue608",
    "conf.d": "\ue5fc",
    "config.ac": "\ue615",
    "config.el": "\ue632",
    "config.mk": "\ue615",
    ".config": "\ue5fc",
    "config": "\ue5fc",
    "configure": "\uf0ad",
    "content": "\uf0c7",
    "contributing": "\ue60a",
    "copyright": "\ue60a",
    "cron.daily": "\ue5fc",
    "cron.d": "\ue5fc",
    "cron.deny": "\ue615",
    "cron.hourly": "\ue5fc",
    "cron.monthly": "\ue5fc",
    "crontab": "\ue615",
    "cron.weekly": "\ue5fc",
    "crypttab": "\ue615",
    ".cshrc": "\U000f1183",
    "csh.cshrc": "\U000f1183",
    "csh.login": "\U000f1183",
    "csh.logout": "\U000f1183",
    "css": "\ue749",
    "custom.el": "\ue632",
    ".dbus": "\uf013",
    "desktop": "\uf108",
    "docker-compose.yml": "\uf308",
    "dockerfile": "\uf308",
    "doc": "\uf02d",
    "dist": "\uf487",
    "documents": "\uf02d",
    ".doom.d": "\ue632",
    "downloads": "\U000f024d",
    ".ds_store": "\uf179",
    ".editorconfig": "\ue615",
    ".electron-gyp": "\ue5fa",
    ".emacs.d": "\ue632",
    ".env": "\uf462",
    "environment": "\uf462",
    ".eslintrc.json": "\uf462",
    ".eslintrc.js": "\uf462",
    ".eslintrc.yml": "\uf462",
    "etc": "\ue5fc",
    "favicon.ico": "\uf005",
    "favicons": "\uf005",
    ".fennelrc": "\ue615",
    "fstab": "\uf1c0",
    ".fastboot": "\uf17b",
    ".gitattributes": "\uf1d3",
    ".gitconfig": "\uf1d3",
    ".git-credentials": "\ue60a",
    ".github": "\ue5fd",
    "gitignore_global": "\uf1d3",
    ".gitignore": "\uf1d3",
    ".gitlab-ci.yml": "\uf296",
    ".gitmodules": "\uf1d3",
    ".git": "\ue5fb",
    ".gnupg": "\U000f08ac",
    "go.mod": "\ue627",
    "go.sum": "\ue627",
    "go.work": "\ue627",
    "gradle": "\ue660",
    "gradle.properties": "\ue660",
    "gradlew": "\ue660",
    "gradlew.bat": "\ue660",
    "group": "\ue615",
    "gruntfile.coffee": "\ue611",
    "gruntfile.js": "\ue611",
    "gruntfile.ls": "\ue611",
    "gshadow": "\ue615",
    "gulpfile.coffee": "\ue610",
    "gulpfile.js": "\ue610",
    "gulpfile.ls": "\ue610",
    "heroku.yml": "\ue77b",
    "hidden": "\uf023",
    "home": "\uf015",
    "hostname": "\ue615",
    "hosts": "\U000f0002",
    ".htaccess": "\ue615",
    "htoprc": "\ue615",
    ".htpasswd": _CONFIG_ICON,
    ".icons": "\uf005",
    "icons": "\uf005",
    "id_dsa": "\U000f0dd6",
    "id_ecdsa": "\U000f0dd6",
    "id_rsa": "\U000f0dd6",
    ".idlerc": "\ue235",
    "img": "\uf1c5",
    "include": "\ue5fc",
    "init.el": "\ue632",
    ".inputrc": "\ue615",
    "inputrc": "\ue615",
    ".java": "\ue256",
    "jenkinsfile": "\ue66e",
    "js": "\ue74e",
    ".jupyter": "\ue606",
    "kbuild": "\ue615",
    "kconfig": "\ue615",
    "kdeglobals": "\ue615",
    "kdenliverc": "\ue615",
    "known_hosts": "\ue60a",
    ".kshrc": "\uf489",
    "libexec": "\uf121",
    "lib32": "\uf121",
    "lib64": "\uf121",
    "lib": "\uf121",
    "license.md": "\ue60a",
    "licenses": "\ue60a",
    "license.txt": "\ue60a",
    "license": "\ue60a",
    "localized": "\uf179",
    "lsb-release": "\ue615",
    ".lynxrc": "\ue615",
    ".mailcap": "\U000f01f0",
    "mail": "\U000f01f0",
    "magic": "\uf0d0",
    "maintainers": "\ue60a",
    "makefile.ac": "\ue615",
    "makefile": "\ue615",
    "manifest": "\uf292",
    "md5sum": "\U000f0565",
    "meson.build": "\uf0ad",
    "metadata": "\ue5fc",
    "metadata.xml": "\uf462",
    "media": "\uf40f",
    ".mime.types": "\U000f0645",
    "mime.types": "\U000f0645",
    "module.symvers": "\uf471",
    ".mozilla": "\ue786",
    "music": "\U000f1359",
    "muttrc": "\ue615",
    ".muttrc": "\ue615",
    ".mutt": "\ue615",
    ".mypy_cache": "\U000f00e8",
    "neomuttrc": "\ue615",
    ".neomuttrc": "\ue615",
    "netlify.toml": "\uf233",
    ".nix-channels": "\uf313",
    ".nix-defexpr": "\uf313",
    ".node-gyp": "\ue5fa",
    "node_modules": "\ue5fa",
    ".node_repl_history": "\ue718",
    "npmignore": "\ue71e",
    ".npm": "\ue5fa",
    "nvim": "\uf36f",
    "obj": "\ue624",
    "os-release": "\ue615",
    "package.json": "\ue718",
    "package-lock.json": "\ue718",
    "packages.el": "\ue632",
    "pam.d": "\U000f08ac",
    "passwd": _LOCK_ICON,
    "pictures": "\U000f024f",
    "pkgbuild": "\uf303",
    ".pki": "\uf023",
    "portage": "\uf30d",
    "profile": "\ue615",
    ".profile": "\ue615",
    "public": "\uf415",
    "__pycache__": "\ue606",
    "pyproject.toml": "\ue606",
    ".python_history": "\ue606",
    ".pypirc": "\ue606",
    "rc.lua": "\ue615",
    "readme": "\ue609",
    ".release.toml": "\ue68b",
    "requirements.txt": "\U000f0320",
    "robots.txt": "\U000f06a9",
    "root": "\U000f0250",
    "rubydoc": "\ue73b",
    "runtime.txt": "\U000f0320",
    ".rustup": "\ue68b",
    "rustfmt.toml": "\ue68b",
    ".rvm": "\ue21e",
    "sass": "\ue603",
    "sbin": "\ue5fc",
    "scripts": "\uf489",
    "scss": "\ue603",
    "sha256sum": "\U000f0565",
    "shadow": "\ue615",
    "share": "\uf064",
    ".shellcheckrc": "\ue615",
    "shells": "\ue615",
    ".spacemacs": "\ue632",
    ".sqlite_history": "\ue7c4",
    "src": "\U000f19fc",
    ".ssh": "\U000f08ac",
    "static": "\uf0c7",
    "std": "\U000f0171",
    "styles": "\ue749",
    "subgid": "\ue615",
    "subuid": "\ue615",
    "sudoers": "\uf023",
    "sxhkdrc": "\ue615",
    "template": "\uf32e",
    "tests": "\U000f0668",
    "tigrc": "\ue615",
    "timezone": "\uf43a",
    "tox.ini": "\ue615",
    ".trash": "\uf1f8",
    "ts": "\ue628",
    ".tox": "\ue606",
    "unlicense": "\ue60a",
    "url": "\uf0ac",
    "user-dirs.dirs": "\ue5fc",
    "vagrantfile": "\ue615",
    "vendor": "\U000f0ae6",
    "venv": "\U000f0320",
    "videos": "\uf03d",
    ".viminfo": "\ue62b",
    ".vimrc": "\ue62b",
    "vimrc": "\ue62b",
    ".vim": "\ue62b",
    "vim": "\ue62b",
    ".vscode": "\ue70c",
    "webpack.config.js": "\U000f072b",
    ".wgetrc": "\ue615",
    "wgetrc": "\ue615",
    ".xauthority": "\ue615",
    ".Xauthority": "\ue615",
    "xbps.d": "\uf32e",
    "xbps-src": "\uf32e",
    ".xinitrc": "\ue615",
    ".xmodmap": "\ue615",
    ".Xmodmap": "\ue615",
    "xmonad.hs": "\ue615",
    "xorg.conf.d": "\ue5fc",
    ".xprofile": "\ue615",
    ".Xprofile": "\ue615",
    ".xresources": "\ue615",
    ".yarnrc": "\ue6a7",
    "yarn.lock": "\ue6a7",
    "zathurarc": "\ue615",
    ".zcompdump": "\ue615",
    ".zlogin": "\U000f1183",
    ".zlogout": "\U000f1183",
    ".zprofile": "\U000f1183",
    ".zsh_history": "\U000f1183",
    ".zshrc": "\U000f1183",
}

# Extensions are matched in lower case.
_BY_EXTENSION: dict[str, str] = {
    "1": "\uf02d",
    "2": "\uf02d",
    "3": "\uf02d",
    "4": "\uf02d",
    "5": "\uf02d",
    "6": "\uf02d",
    "7": "\uf02d",
    "7z": "\uf410",
    "8": "\uf02d",
    "890": "\U000f015e",
    "a": "\ue624",
    "ai": "\ue7b4",
    "ape": "\uf001",
    "apk": "\ue70e",
    "apng": "\uf1c5",
    "ar": "\uf410",
    "asc": "\U000f099d",
    "asm": "\uf471",
    "asp": "\uf121",
    "avi": "\uf008",
    "avif": "\uf1c5",
    "avro": "\ue60b",
    "awk": "\uf489",
    "bak": "\U000f006f",
    "bash_history": "\uf489",
    "bash_profile": "\uf489",
    "bashrc": "\uf489",
    "bash": "\uf489",
    "bat": "\uf17a",
    "bin": "\ueae8",
    "bio": "\U000f0411",
    "blend": "\U000f00ab",
    "blend1": "\U000f00ab",
    "bmp": "\uf1c5",
    "bz2": "\uf410",
    "cc": "\ue61d",
    "cfg": "\ue615",
    "cip": "\U000f015e",
    "cjs": "\ue74e",
    "class": "\ue738",
    "cljs": "\ue76a",
    "clj": "\ue768",
    "cls": "\ue600",
    "cl": "\U000f0172",
    "coffee": "\uf0f4",
    "conf": "\ue615",
    "cpp": "\ue61d",
    "cp": "\ue61d",
    "cshtml": "\uf1fa",
    "csh": "\uf489",
    "csproj": "\U000f031b",
    "css": "\ue749",
    "cs": "\U000f031b",
    "csv": "\uf1c3",
    "csx": "\U000f031b",
    "cts": "\ue628",
    "c++": "\ue61d",
    "c": "\ue61e",
    "cue": "\uf001",
    "cxx": "\ue61d",
    "cypher": "\uf1c0",
    "dart": "\ue798",
    "dat": "\uf1c0",
    "db": "\uf1c0",
    "deb": "\uf187",
    "desktop": "\uf108",
    "diff": "\ue728",
    "dll": "\uf17a",
    "dockerfile": "\uf308",
    "doc": "\uf1c2",
    "docx": "\uf1c2",
    "download": "\uf43a",
    "ds_store": "\uf179",
    "dump": "\uf1c0",
    "ebook": "\ue28b",
    "ebuild": "\uf30d",
    "eclass": "\uf30d",
    "editorconfig": "\ue615",
    "egg-info": "\ue606",
    "ejs": "\ue618",
    "elc": "\U000f0172",
    "elf": "\uf489",
    "elm": "\ue62c",
    "el": "\U000f0172",
    "env": "\uf462",
    "eot": "\uf031",
    "epub": "\ue28a",
    "erb": "\ue73b",
    "erl": "\ue7b1",
    "exe": "\uf17a",
    "exs": "\ue62d",
    "ex": "\ue62d",
    "fish": "\uf489",
    "flac": "\uf001",
    "flv": "\uf008",
    "fnl": "\ue6af",
    "font": "\uf031",
    "fpl": "\U000f0411",
    "fsi": "\ue7a7",
    "fs": "\ue7a7",
    "fsx": "\ue7a7",
    "gdoc": "\uf1c2",
    "gemfile": "\ue21e",
    "gemspec": "\ue21e",
    "gform": "\uf298",
    "gif": "\uf1c5",
    "git": "\uf1d3",
    "go": "\ue627",
    "gradle": "\ue660",
    "gsheet": "\uf1c3",
    "gslides": "\uf1c4",
    "guardfile": "\ue21e",
    "gv": "\U000f1049",
    "gz": "\uf410",
    "hbs": "\ue60f",
    "heic": "\uf1c5",
    "heif": "\uf1c5",
    "heix": "\uf1c5",
    "hh": "\uf0fd",
    "hpp": "\uf0fd",
    "hs": "\ue777",
    "html": "\uf13b",
    "htm": "\uf13b",
    "h": "\uf0fd",
    "hxx": "\uf0fd",
    "ico": "\uf1c5",
    "image": "\uf1c5",
    "img": "\uf1c0",
    "iml": "\ue7b5",
    "info": "\ue795",
    "in": "\uf15c",
    "ini": "\ue615",
    "ipynb": "\ue606",
    "iso": "\uf1c0",
    "j2": "\ue000",
    "jar": "\ue738",
    "java": "\ue738",
    "jinja": "\ue000",
    "jl": "\ue624",
    "jpeg": "\uf1c5",
    "jpg": "\uf1c5",
    "jsonc": "\ue60b",
    "json": "\ue60b",
    "js": "\ue74e",
    "jsx": "\ue7ba",
    "key": "\U000f0306",
    "ksh": "\uf489",
    "kt": "\ue634",
    "kts": "\ue634",
    "kusto": "\uf1c0",
    "ldb": "\uf1c0",
    "ld": "\ue624",
    "less": "\ue758",
    "lhs": "\ue777",
    "license": "\ue60a",
    "lisp": "\U000f0172",
    "list": "\uf03a",
    "localized": "\uf179",
    "lock": "\uf023",
    "log": "\uf18d",
    "lss": "\ue749",
    "lua": "\ue620",
    "lz": "\uf410",
    "mgc": "\uf0d0",
    "m3u8": "\U000f0411",
    "m3u": "\U000f0411",
    "m4a": "\uf001",
    "m4v": "\uf008",
    "magnet": "\uf076",
    "malloy": "\uf1c0",
    "man": "\uf02d",
    "markdown": "\ue609",
    "md": "\ue609",
    "mjs": "\ue74e",
    "mkd": "\ue609",
    "mk": "\uf085",
    "mkv": "\uf008",
    "ml": "\ue67a",
    "mli": "\ue67a",
    "mll": "\ue67a",
    "mly": "\ue67a",
    "mobi": "\ue28b",
    "mov": "\uf008",
    "mp3": "\uf001",
    "mp4": "\uf008",
    "msi": "\uf17a",
    "mts": "\ue628",
    "mustache": "\ue60f",
    "nim": "\ue677",
    "nimble": "\ue677",
    "nix": "\uf313",
    "npmignore": "\ue71e",
    "odp": "\uf1c4",
    "ods": "\uf1c3",
    "odt": "\uf1c2",
    "ogg": "\uf001",
    "ogv": "\uf008",
    "old": "\U000f006f",
    "opus": "\uf001",
    "orig": "\U000f006f",
    "org": "\ue633",
    "otf": "\uf031",
    "o": "\ueae8",
    "part": "\uf43a",
    "patch": "\ue728",
    "pdb": "\U000f0aaa",
    "pdf": "\uf1c1",
    "pem": "\U000f0306",
    "phar": "\ue608",
    "php": "\ue608",
    "pkg": "\uf187",
    "pl": "\ue67e",
    "plist": "\uf302",
    "pls": "\U000f0411",
    "plx": "\ue67e",
    "pm": "\ue67e",
    "png": "\uf1c5",
    "pod": "\ue67e",
    "pp": "\ue631",
    "ppt": "\uf1c4",
    "pptx": "\uf1c4",
    "procfile": "\ue21e",
    "properties": "\ue60b",
    "prql": "\uf1c0",
    "ps1": "\uf489",
    "psd": "\ue7b8",
    "pub": "\U000f0306",
    "sbv": "\U000f015e",
    "scc": "\U000f015e",
    "slt": "\U000f0221",
    "smi": "\U000f015e",
    "pxm": "\uf1c5",
    "pyc": "\ue606",
    "py": "\ue606",
    "rakefile": "\ue21e",
    "rar": "\uf410",
    "razor": "\uf1fa",
    "rb": "\ue21e",
    "rdata": "\U000f07d4",
    "rdb": "\ue76d",
    "rdoc": "\ue609",
    "rds": "\U000f07d4",
    "readme": "\ue609",
    "rlib": "\ue68b",
    "rl": "\uf11c",
    "rmd": "\ue609",
    "rmeta": "\ue68b",
    "rpm": "\uf187",
    "rproj": "\U000f05c6",
    "rq": "\uf1c0",
    "rspec_parallel": "\ue21e",
    "rspec_status": "\ue21e",
    "rspec": "\ue21e",
    "rss": "\uf09e",
    "rs": "\ue68b",
    "rtf": "\uf15c",
    "rubydoc": "\ue73b",
    "r": "\U000f07d4",
    "ru": "\ue21e",
    "sass": "\ue603",
    "scala": "\ue737",
    "scpt": "\uf302",
    "scss": "\ue603",
    "shell": "\uf489",
    "sh": "\uf489",
    "sig": "\ue60a",
    "slim": "\ue73b",
    "sln": "\ue70c",
    "so": "\ue624",
    "sqlite3": "\ue7c4",
    "sql": "\uf1c0",
    "srt": "\U000f0a16",
    "styl": "\ue600",
    "stylus": "\ue600",
    "sublime-menu": "\ue7aa",
    "sublime-package": "\ue7aa",
    "sublime-project": "\ue7aa",
    "sublime-session": "\ue7aa",
    "sub": "\U000f0a16",
    "s": "\uf471",
    "svg": "\uf1c5",
    "svelte": "\ue697",
    "swift": "\ue755",
    "swp": "\ue62b",
    "sym": "\ueae8",
    "tar": "\uf410",
    "taz": "\uf410",
    "tbz": "\uf410",
    "tbz2": "\uf410",
    "tex": "\ue600",
    "tgz": "\uf410",
    "tiff": "\uf1c5",
    "timestamp": "\uf43a",
    "toml": "\ue60b",
    "torrent": "\U000f048d",
    "trash": "\uf1f8",
    "ts": "\ue628",
    "tsx": "\ue7ba",
    "ttc": "\uf031",
    "ttf": "\uf031",
    "t": "\ue769",
    "twig": "\ue61c",
    "txt": "\uf15c",
    "unity": "\ue721",
    "unity32": "\ue721",
    "video": "\uf008",
    "vim": "\ue62b",
    "vlc": "\U000f0411",
    "vtt": "\U000f015e",
    "vue": "\U000f0844",
    "wav": "\uf001",
    "webm": "\uf008",
    "webp": "\uf1c5",
    "whl": "\uf487",
    "windows": "\uf17a",
    "wma": "\uf001",
    "wmv": "\uf008",
    "woff2": "\uf031",
    "woff": "\uf031",
    "wpl": "\U000f0411",
    "xbps": "\uf187",
    "xcf": "\uf1c5",
    "xls": "\uf1c3",
    "xlsx": "\uf1c3",
    "xml": "\uf121",
    "xul": "\uf269",
    "xz": "\uf410",
    "yaml": "\ue60b",
    "yml": "\ue60b",
    "zip": "\uf410",
    "zig": "\ue6a9",
    "zshrc": "\uf489",
    "zsh-theme": "\uf489",
    "zsh": "\uf489",
    "zst": "\uf410",
}


def default_icons_by_name() -> dict[str, str]:
    """Return a fresh copy of the built-in icons keyed by file name."""
    return dict(_BY_NAME)


def default_icons_by_extension() -> dict[str, str]:
    """Return a fresh copy of the built-in icons keyed by file extension."""
    return dict(_BY_EXTENSION)