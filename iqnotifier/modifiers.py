"""Notification modifiers applied before a notification is delivered."""

from __future__ import annotations

import os
import zlib
from pathlib import Path
from typing import Any, Iterable
from urllib.parse import unquote, urlparse

from PIL import Image

from .config import Configurable
from .notification import Notification, NotificationModifier

_UINT32 = 0xFFFFFFFF
_PIXMAP_SIZE = 256


def _cache_home() -> Path:
    base = os.environ.get("XDG_CACHE_HOME")
    if base and os.path.isabs(base):
        return Path(base)
    return Path.home() / ".cache"


def _default_icon_dirs() -> list[Path]:
    data_home = os.environ.get("XDG_DATA_HOME")
    home = Path(data_home) if data_home and os.path.isabs(data_home) else (
        Path.home() / ".local" / "share"
    )
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    dirs = [home / "icons", Path.home() / ".icons"]
    dirs += [Path(d) / "icons" for d in data_dirs.split(":") if os.path.isabs(d)]
    dirs.append(Path("/usr/share/pixmaps"))
    return dirs


def _icon_size(path: Path) -> int:
    width, _, _ = path.parts[-3].partition("x")
    return int(width) if width.isdigit() else 0


def _to_qml_absolute_path(path: str) -> str:
    return "file://" + path if path.startswith("/") else path


class IDGenerator(NotificationModifier):
    """Gives new notifications consecutive ids."""

    def __init__(self) -> None:
        self.last_id = 0

    def modify(self, notification: Notification) -> None:
        if notification.replaces_id == 0:
            self.last_id = (self.last_id + 1) & _UINT32
            notification.id = self.last_id


class IconHandler(NotificationModifier):
    """Resolves image hints and icon names to local image URLs."""

    def __init__(
        self,
        *,
        cache_dir: str | os.PathLike[str] | None = None,
        icon_dirs: Iterable[str | os.PathLike[str]] | None = None,
    ) -> None:
        self._cache_dir = Path(cache_dir) if cache_dir is not None else _cache_home()
        self._icon_dirs = (
            [Path(d) for d in icon_dirs] if icon_dirs is not None else _default_icon_dirs()
        )
        self._cached: dict[int, str] = {}

    def modify(self, notification: Notification) -> None:
        hints = notification.hints
        if hints.get("image_data") is not None:
            notification.icon_url = self._image_from_hint(hints["image_data"])
        elif hints.get("image_path") is not None:
            notification.icon_url = self._image_from_string(str(hints["image_path"]))
        elif notification.icon_url:
            if notification.icon_url.lower().startswith(("http://", "https://")):
                return
            notification.icon_url = self._image_from_string(notification.icon_url)
        elif hints.get("icon_data") is not None:
            notification.icon_url = self._image_from_hint(hints["icon_data"])

        notification.icon_url = _to_qml_absolute_path(notification.icon_url)

    def _image_file(self, key: int) -> Path:
        return self._cache_dir / f"iq-cached_{key}.png"

    def _cache_image(self, image: Image.Image, key: int) -> bool:
        file_name = self._image_file(key)
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            image.save(file_name, "PNG")
        except (OSError, ValueError, SystemError):
            return False
        self._cached[key] = str(file_name)
        return True

    def _image_from_hint(self, hint: Any) -> str:
        try:
            width, height, rowstride, has_alpha, bits, channels, data = hint
            width, height, rowstride = int(width), int(height), int(rowstride)
            data = bytes(data)
        except (TypeError, ValueError):
            return ""

        key = zlib.crc32(data)
        if key not in self._cached:
            rgb = not has_alpha and channels == 3 and bits == 8
            mode = "RGB" if rgb else "RGBA"
            try:
                image = Image.frombytes(mode, (width, height), data, "raw", mode, rowstride)
            except (ValueError, OSError, SystemError):
                return ""
            if not self._cache_image(image, key):
                return ""
        return self._cached[key]

    def _image_from_string(self, text: str) -> str:
        url = urlparse(text)
        if url.scheme == "file":
            local = unquote(url.path)
            if local and os.path.exists(local):
                return local

        icon = self._find_icon(text)
        if icon is None:
            return ""
        key = zlib.crc32(str(icon).encode("utf-8"))
        if key not in self._cached:
            try:
                with Image.open(icon) as source:
                    image = source.convert("RGBA")
            except (OSError, ValueError):
                return ""
            image.thumbnail((_PIXMAP_SIZE, _PIXMAP_SIZE))
            if not self._cache_image(image, key):
                return ""
        return self._cached[key]

    def _find_icon(self, name: str) -> Path | None:
        if not name or "/" in name:
            return None
        for base in self._icon_dirs:
            if not base.is_dir():
                continue
            for extension in (".png", ".xpm"):
                direct = base / f"{name}{extension}"
                if direct.is_file():
                    return direct
            matches = sorted(base.glob(f"*/*/*/{name}.png"), key=_icon_size, reverse=True)
            if matches:
                return matches[0]
        return None


class DefaultTimeout(NotificationModifier, Configurable):
    """Replaces a server-decides timeout with the configured default."""

    REAL_DEFAULT = 3500

    def __init__(self, *, share_dir: str | os.PathLike[str] | None = None) -> None:
        Configurable.__init__(self, "default_timeout", share_dir=share_dir)
        try:
            configured = int(self.config.value("default_timeout", self.REAL_DEFAULT))
        except ValueError:
            configured = 0
        timeout = configured & 0xFFFF if configured >= 0 else 0
        self.default_timeout = timeout or self.REAL_DEFAULT

    def modify(self, notification: Notification) -> None:
        if notification.expire_timeout < 0:
            notification.expire_timeout = self.default_timeout


class TitleToIcon(NotificationModifier, Configurable):
    """Uses the application name as icon name when the title repeats it."""

    def __init__(self, *, share_dir: str | os.PathLike[str] | None = None) -> None:
        Configurable.__init__(self, "title_to_icon", share_dir=share_dir)

    def modify(self, notification: Notification) -> None:
        if notification.icon_url:
            return
        if notification.application.casefold() == notification.title.casefold():
            notification.icon_url = notification.application.lower().replace(" ", "-")


class BodyToTitleWhenTitleIsAppName(NotificationModifier, Configurable):
    """Moves the body into the title when the title is the application name."""

    def __init__(self, *, share_dir: str | os.PathLike[str] | None = None) -> None:
        Configurable.__init__(
            self, "body_to_title_when_title_is_app_name", share_dir=share_dir
        )

    def modify(self, notification: Notification) -> None:
        if notification.application.casefold() == notification.title.casefold():
            notification.title = notification.body
            notification.body = ""


class ReplaceMinusToDash(NotificationModifier, Configurable):
    """Replaces a spaced hyphen with a spaced em dash in title and body."""

    MINUS_PATTERN = " - "
    REPLACE_TO = " — "

    def __init__(self, *, share_dir: str | os.PathLike[str] | None = None) -> None:
        Configurable.__init__(self, "replace_minus_to_dash", share_dir=share_dir)
        self.fix_title = bool(self.config.value("title", True))
        self.fix_body = bool(self.config.value("body", True))

    def modify(self, notification: Notification) -> None:
        if self.fix_title:
            notification.title = notification.title.replace(
                self.MINUS_PATTERN, self.REPLACE_TO
            )
        if self.fix_body:
            notification.body = notification.body.replace(
                self.MINUS_PATTERN, self.REPLACE_TO
            )