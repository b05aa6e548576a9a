"""Placement of popups in a column growing down from the top right corner."""

from __future__ import annotations

from .disposition import Disposition, Margins, Point, Rect, Screen, Size


class TopDown(Disposition):
    """Stacks popups from the top right corner downwards.

    The bottom of the screen is kept free for the window that counts
    popups without room.
    """

    def __init__(self, screen: Screen) -> None:
        self._dispositions: dict[int, Rect] = {}
        super().__init__(screen)
        self._recalculate_available_screen_geometry()

    def poses(self, notification_id: int, size: Size) -> Point | None:
        placed = self._dispositions.get(notification_id)
        if placed is not None:
            return placed.top_left()

        available = self._available_geometry()
        point = available.top_right() - Point(size.width - 1, 0)
        rect = Rect.from_point(point, size)
        if available.contains(rect):
            self._dispositions[notification_id] = rect
            return point
        return None

    def external_window_pos(self) -> Point:
        return self.available_screen_geometry.bottom_right() - Point(
            self.extra_window_size.width - 1, 0
        )

    def set_extra_window_size(self, value: Size) -> None:
        super().set_extra_window_size(value)
        self._recalculate_available_screen_geometry()

    def set_spacing(self, value: int) -> None:
        super().set_spacing(value)
        self._recalculate_available_screen_geometry()

    def remove(self, notification_id: int) -> None:
        removed = self._dispositions.get(notification_id)
        if removed is None:
            return

        move_up = self.spacing + removed.height
        moved: dict[int, Point] = {}
        for other in sorted(key for key in self._dispositions if key > notification_id):
            rect = self._dispositions[other]
            rect = rect.moved_top(rect.top - move_up)
            self._dispositions[other] = rect
            moved[other] = rect.top_left()

        for other, point in moved.items():
            self.move_notification.emit(other, point)

        self._dispositions.pop(notification_id, None)

    def remove_all(self) -> None:
        self._dispositions.clear()

    def _recalculate_available_screen_geometry(self) -> None:
        super()._recalculate_available_screen_geometry()
        extra_bottom_margin = self.extra_window_size.height + self.spacing
        self.available_screen_geometry = self.available_screen_geometry.shrunk(
            Margins(0, 0, 0, extra_bottom_margin)
        )

    def _available_geometry(self) -> Rect:
        if not self._dispositions:
            return self.available_screen_geometry
        geometry = self.available_screen_geometry.adjusted(0, self.spacing, 0, 0)
        last = self._dispositions[max(self._dispositions)]
        # The top margin is already part of the available screen geometry.
        return geometry.adjusted(0, last.bottom - self.margins.top, 0, 0)