"""INI-backed settings stored under the user's configuration directory."""

from __future__ import annotations

import configparser
import os
import re
import shutil
from pathlib import Path
from typing import Any

_APP_NAME = "iq-notifier"
_APP_VERSION = "0.4.1"

SHARE_DIR = Path("/usr/share") / _APP_NAME

_GENERAL = "General"
_THEMES_MARKER = "/themes/default/theme"
_ITEM = re.compile(r'\s*(?:"((?:[^"\\]|\\.)*)"|([^,"]*))\s*')
_ESCAPE = re.compile(r"\\(.)")


def application_name() -> str:
    return _APP_NAME


def application_version() -> str:
    return _APP_VERSION


def config_dir() -> Path:
    """The application's directory inside the XDG configuration home."""
    base = os.environ.get("XDG_CONFIG_HOME")
    home = Path(base) if base and os.path.isabs(base) else Path.home() / ".config"
    return home / application_name()


def _unescape(text: str) -> str:
    return _ESCAPE.sub(lambda m: "\n" if m.group(1) == "n" else m.group(1), text)


def _parse(text: str) -> str | list[str]:
    """Parse a stored value: a plain string or a comma separated list."""
    items: list[str] = []
    pos = 0
    while True:
        match = _ITEM.match(text, pos)
        if match.group(1) is not None:
            items.append(_unescape(match.group(1)))
        else:
            items.append(match.group(2).strip())
        pos = match.end()
        if pos >= len(text):
            break
        if text[pos] != ",":
            return text.strip()
        pos += 1
    return items[0] if len(items) == 1 else items


def _quote(text: str) -> str:
    if any(c in text for c in ',"\n\\') or text != text.strip():
        escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return text


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(_quote(str(v)) for v in value)
    if value is None:
        return ""
    return _quote(str(value))


def _convert(raw: str | list[str], default: Any) -> Any:
    """Convert a stored value to the type of the default."""
    if isinstance(default, bool):
        text = raw if isinstance(raw, str) else ",".join(raw)
        return text.strip().lower() not in ("", "0", "false")
    if isinstance(default, int):
        if isinstance(raw, list):
            raise ValueError(f"expected an integer, got a list: {raw!r}")
        return int(raw.strip())
    if isinstance(default, float):
        if isinstance(raw, list):
            raise ValueError(f"expected a number, got a list: {raw!r}")
        return float(raw.strip())
    if isinstance(default, str):
        return raw if isinstance(raw, str) else ", ".join(raw)
    if isinstance(default, (list, tuple)):
        return list(raw) if isinstance(raw, list) else [raw]
    return raw


def _split_key(full_key: str) -> tuple[str, str]:
    section, sep, name = full_key.partition("/")
    if not sep:
        return _GENERAL, full_key
    return section, name


class Config:
    """Settings of one category in one file below :func:`config_dir`.

    On first use a missing file is created from the shared example, or,
    for the default theme, the shared themes directory is copied over.
    """

    def __init__(
        self,
        category: str,
        file_name: str = "config",
        *,
        share_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self.category = f"{category}/" if category else ""
        self.file_name = file_name
        self._share_dir = Path(share_dir) if share_dir is not None else SHARE_DIR
        self.path = self._prepare_file()

    def value(self, key: str, default: Any = None) -> Any:
        """Return the stored value converted to ``default``'s type, or ``default``.

        Raises ValueError when the stored value cannot be converted.
        """
        section, name = _split_key(self.category + key)
        parser = self._load()
        if not parser.has_option(section, name):
            return default
        return _convert(_parse(parser.get(section, name)), default)

    def set_value(self, key: str, value: Any) -> None:
        section, name = _split_key(self.category + key)
        parser = self._load()
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, name, _format(value))
        for empty in [s for s in parser.sections() if not parser.options(s)]:
            parser.remove_section(empty)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as stream:
            parser.write(stream, space_around_delimiters=False)

    def _load(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            delimiters=("=",),
            comment_prefixes=(";", "#"),
            default_section="\x00defaults",
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        text = self.path.read_text(encoding="utf-8") if self.path.is_file() else ""
        try:
            parser.read_string(f"[{_GENERAL}]\n{text}")
        except configparser.Error as error:
            raise RuntimeError(f"{self.path} is not a valid config file") from error
        return parser

    def _prepare_file(self) -> Path:
        directory = config_dir()
        path = directory / self.file_name
        if path.exists():
            if not path.is_file():
                raise RuntimeError(f"{path} is not a valid config file")
            return path
        directory.mkdir(parents=True, exist_ok=True)
        posix = path.as_posix()
        if _THEMES_MARKER in posix:
            self._copy_themes(Path(posix.replace("/default/theme", "")))
        else:
            self._copy_example(path)
        return path

    def _copy_example(self, destination: Path) -> bool:
        example = self._share_dir / f"{self.file_name}.example"
        if not example.is_file():
            return False
        try:
            shutil.copyfile(example, destination)
        except OSError:
            return False
        return True

    def _copy_themes(self, destination: Path) -> bool:
        try:
            shutil.copytree(self._share_dir / "themes", destination)
        except OSError:
            return False
        return True


class Configurable:
    """A component with its own settings category and an ``enabled`` switch."""

    def __init__(
        self, name: str, *, share_dir: str | os.PathLike[str] | None = None
    ) -> None:
        self.name = name
        self.config = Config(name, share_dir=share_dir)

    def is_enabled(self) -> bool:
        return bool(self.config.value("enabled", False))