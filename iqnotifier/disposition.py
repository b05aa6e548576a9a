"""Screen geometry and the interface for placing popups on screen."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .notification import Signal


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Margins:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class Rect:
    """An integer rectangle whose right and bottom edges are inclusive."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_point(cls, top_left: Point, size: Size) -> Rect:
        return cls(top_left.x, top_left.y, size.width, size.height)

    @classmethod
    def from_edges(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        return cls(left, top, right - left + 1, bottom - top + 1)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def top_left(self) -> Point:
        return Point(self.left, self.top)

    def top_right(self) -> Point:
        return Point(self.right, self.top)

    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def contains(self, other: Rect) -> bool:
        """True if ``other`` lies wholly inside this rectangle, edges included."""
        if self.is_null or other.is_null:
            return False
        return (
            self.left <= other.left
            and other.right <= self.right
            and self.top <= other.top
            and other.bottom <= self.bottom
        )

    def adjusted(self, left: int, top: int, right: int, bottom: int) -> Rect:
        return Rect.from_edges(
            self.left + left, self.top + top, self.right + right, self.bottom + bottom
        )

    def shrunk(self, margins: Margins) -> Rect:
        return self.adjusted(margins.left, margins.top, -margins.right, -margins.bottom)

    def moved_top(self, top: int) -> Rect:
        return Rect(self.x, top, self.width, self.height)


class Screen:
    """A screen's available area; emits ``available_geometry_changed`` on change."""

    def __init__(self, available_geometry: Rect) -> None:
        self._available_geometry = available_geometry
        self.available_geometry_changed = Signal()

    @property
    def available_geometry(self) -> Rect:
        return self._available_geometry

    @available_geometry.setter
    def available_geometry(self, value: Rect) -> None:
        if value != self._available_geometry:
            self._available_geometry = value
            self.available_geometry_changed.emit()

    @property
    def available_size(self) -> Size:
        return self._available_geometry.size


class Disposition(ABC):
    """Decides where popups go on a screen.

    Emits ``move_notification(id, point)`` when a placed popup has to move.
    """

    def __init__(self, screen: Screen) -> None:
        self._screen = screen
        self.spacing = 0
        self.margins = Margins()
        self.extra_window_size = Size()
        self.available_screen_geometry = Rect()
        self.move_notification = Signal()
        screen.available_geometry_changed.connect(
            self._recalculate_available_screen_geometry
        )

    @property
    def screen(self) -> Screen:
        return self._screen

    @abstractmethod
    def poses(self, notification_id: int, size: Size) -> Point | None:
        """Position for a popup of this size, or None when there is no room."""

    @abstractmethod
    def external_window_pos(self) -> Point:
        """Position of the window that counts popups without room."""

    def set_extra_window_size(self, value: Size) -> None:
        self.extra_window_size = value

    def set_margins(self, value: Margins) -> None:
        self.margins = value
        self._recalculate_available_screen_geometry()

    def set_spacing(self, value: int) -> None:
        self.spacing = value

    @abstractmethod
    def remove(self, notification_id: int) -> None:
        """Forget a popup and move the others if needed."""

    @abstractmethod
    def remove_all(self) -> None:
        """Forget every popup."""

    def _recalculate_available_screen_geometry(self) -> None:
        self.available_screen_geometry = self._screen.available_geometry.shrunk(
            self.margins
        )


class FullscreenDetector(ABC):
    """Reports whether full-screen windows are present."""

    @abstractmethod
    def fullscreen_windows_on_current_desktop(self) -> bool:
        """True if the current desktop has a full-screen window."""

    @abstractmethod
    def fullscreen_windows(self) -> bool:
        """True if any desktop has a full-screen window."""