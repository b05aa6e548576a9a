"""Theme settings for popups, the tray icon and the history window."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Any

from .config import Config, config_dir
from .disposition import Rect, Screen

_THEME_NAME = "theme_name"
_THEME_NAME_DEFAULT = "default"


class _Setting:
    """A read-only theme value looked up in the theme's configuration."""

    def __init__(self, kind: str, key: str, default: Any) -> None:
        self.kind = kind
        self.key = key
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Theme | None, owner: type) -> Any:
        if obj is None:
            return self
        reader = getattr(obj, f"_read_{self.kind}")
        return reader(self.key, self.default)


class Theme:
    """Values of one part of a theme, read from the theme's configuration."""

    def __init__(self, config: Config, theme_dir: str | os.PathLike[str]) -> None:
        self.config = config
        self.theme_dir = str(theme_dir)

    def to_relative_url(self, path: str) -> str:
        """A file URL for a path relative to the theme directory."""
        return f"file:///{self.theme_dir}/{path}"

    def _read_uint(self, key: str, default: int) -> int:
        try:
            value = int(self.config.value(key, default))
        except ValueError:
            return 0
        return value if value >= 0 else 0

    def _read_double(self, key: str, default: float) -> float:
        try:
            return float(self.config.value(key, default))
        except ValueError:
            return 0.0

    def _read_string(self, key: str, default: str) -> str:
        return str(self.config.value(key, default))

    def _read_image(self, key: str, default: str) -> str:
        value = self._read_string(key, default)
        if value == default:
            return value
        return self.to_relative_url(value)


def _p(name: str) -> str:
    return f"popup_notifications/{name}"


def _h(name: str) -> str:
    return f"history_window/{name}"


class NotificationsTheme(Theme):
    """Appearance of the popup notifications."""

    font_size = _Setting("uint", _p("font_size"), 0)
    bar_font_size = _Setting("uint", _p("bar_font_size"), 0)
    icon_size = _Setting("uint", _p("icon_size"), 0)
    bar_height = _Setting("uint", _p("bar_height"), 0)
    expiration_bar_height = _Setting("uint", _p("expiration_bar_height"), 0)
    show_animation_duration = _Setting("uint", _p("show_animation_duration"), 120)
    drop_animation_duration = _Setting("uint", _p("drop_animation_duration"), 120)
    close_button_image_scale = _Setting("double", _p("close_button_image_scale"), 0.4)
    extra_button_image_scale = _Setting("double", _p("extra_button_image_scale"), 0.6)

    bg_color = _Setting("string", _p("bg_color"), "#19202d")
    bar_bg_color = _Setting("string", _p("bar_bg_color"), "#262d3a")
    bar_text_color = _Setting("string", _p("bar_text_color"), "#92969c")
    expiration_bar_color = _Setting("string", _p("expiration_bar_color"), "#30394a")
    title_text_color = _Setting("string", _p("title_text_color"), "#ffffff")
    body_text_color = _Setting("string", _p("body_text_color"), "#92969c")
    button_bg_color = _Setting("string", _p("button_bg_color"), "#343b4d")
    button_text_color = _Setting("string", _p("button_text_color"), "#ffffff")
    extra_bg_color = _Setting("string", _p("extra_bg_color"), "#262d3a")
    extra_unread_circle_color = _Setting(
        "string", _p("extra_unread_circle_color"), "#d74a37"
    )
    extra_unread_text_color = _Setting(
        "string", _p("extra_unread_text_color"), "#ffffff"
    )

    bg_image = _Setting("image", _p("bg_image"), "")
    close_button_image = _Setting("image", _p("close_button_image"), "img/close.png")
    extra_close_button_image = _Setting(
        "image", _p("extra_close_button_image"), "img/close.png"
    )
    extra_close_all_button_image = _Setting(
        "image", _p("extra_close_all_button_image"), "img/closeAll.png"
    )
    extra_close_visible_button_image = _Setting(
        "image", _p("extra_close_visible_button_image"), "img/closeVisible.png"
    )

    @property
    def icon_position(self) -> bool:
        """True to put the icon on the left side, False to put it on top."""
        position = self._read_string(_p("icon_position"), "top")
        return position.casefold() == "left"


class TrayIconTheme(Theme):
    """Appearance of the tray icon."""

    icon = _Setting("image", "tray/icon", "img/warning.png")


class WindowPosition(IntEnum):
    """Corner of the screen the history window sticks to."""

    UNDEFINED = 0
    LEFT_TOP = 1
    LEFT_BOT = 2
    RIGHT_BOT = 3
    RIGHT_TOP = 4


class HistoryWindowTheme(Theme):
    """Appearance and placement of the history window."""

    close_icon = _Setting("image", _h("close_icon"), "img/close.png")
    bg_image = _Setting("image", _h("bg_image"), "")
    window_title = _Setting("string", _h("window_title"), "IQ Notifier")

    height = _Setting("uint", _h("height"), 0)
    width = _Setting("uint", _h("width"), 0)
    bar_height = _Setting("uint", _h("bar_height"), 32)
    notification_height = _Setting("uint", _h("notification_height"), 0)
    bar_font_size = _Setting("uint", _h("bar_font_size"), 0)
    napp_font_size = _Setting("uint", _h("napp_font_size"), 0)
    ntitle_font_size = _Setting("uint", _h("ntitle_font_size"), 0)
    nbody_font_size = _Setting("uint", _h("nbody_font_size"), 0)

    bg_color = _Setting("string", _h("bg_color"), "#262d3a")
    bar_bg_color = _Setting("string", _h("bar_bg_color"), "#262d3a")
    bar_text_color = _Setting("string", _h("bar_text_color"), "#92969c")
    nbg_color = _Setting("string", _h("nbg_color"), "#19202d")
    napp_text_color = _Setting("string", _h("napp_text_color"), "#92969c")
    ntitle_text_color = _Setting("string", _h("ntitle_text_color"), "white")
    nbody_text_color = _Setting("string", _h("nbody_text_color"), "#92969c")

    def __init__(
        self,
        config: Config,
        theme_dir: str | os.PathLike[str],
        screen: Screen | None = None,
    ) -> None:
        super().__init__(config, theme_dir)
        self.screen = screen

    @property
    def window_position(self) -> WindowPosition:
        value = self._read_uint(_h("window_position"), int(WindowPosition.UNDEFINED))
        try:
            return WindowPosition(value)
        except ValueError:
            return WindowPosition.UNDEFINED

    @property
    def x(self) -> int:
        position = self.window_position
        if position in (WindowPosition.LEFT_BOT, WindowPosition.LEFT_TOP):
            return self._geometry().left
        if position in (WindowPosition.RIGHT_BOT, WindowPosition.RIGHT_TOP):
            geometry = self._geometry()
            return geometry.x + geometry.width - self.width
        return self._read_uint(_h("x"), 0)

    @property
    def y(self) -> int:
        position = self.window_position
        if position in (WindowPosition.RIGHT_TOP, WindowPosition.LEFT_TOP):
            return self._geometry().top
        if position in (WindowPosition.RIGHT_BOT, WindowPosition.LEFT_BOT):
            geometry = self._geometry()
            return geometry.y + geometry.height - self.height
        return self._read_uint(_h("y"), 0)

    def _geometry(self) -> Rect:
        if self.screen is None:
            raise ValueError("HistoryWindowTheme: a screen is needed to place the window")
        return self.screen.available_geometry


class Themes:
    """Loads the configured theme and exposes its parts."""

    def __init__(
        self,
        *,
        share_dir: str | os.PathLike[str] | None = None,
        screen: Screen | None = None,
    ) -> None:
        self.config = Config("theme", share_dir=share_dir)
        self.theme_name = str(self.config.value(_THEME_NAME, _THEME_NAME_DEFAULT))
        self.theme_config = Config(
            "", self.theme_config_file, share_dir=share_dir
        )
        theme_dir = f"{config_dir().as_posix()}/{self.theme_config_dir}"
        self.notifications_theme = NotificationsTheme(self.theme_config, theme_dir)
        self.tray_icon_theme = TrayIconTheme(self.theme_config, theme_dir)
        self.history_window_theme = HistoryWindowTheme(
            self.theme_config, theme_dir, screen
        )

    @property
    def theme_config_dir(self) -> str:
        return f"themes/{self.theme_name}"

    @property
    def theme_config_file(self) -> str:
        return f"{self.theme_config_dir}/theme"