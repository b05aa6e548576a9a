"""Popup notifications: placement, queueing of popups without room, and user actions."""

from __future__ import annotations

import os
from collections import deque

from .config import Configurable
from .disposition import Disposition, FullscreenDetector, Margins, Point, Size
from .notification import ClosingReason, Notification, NotificationReceiver, Signal

_CLOSE_ALL_BY_RIGHT_CLICK = "close_all_by_right_click"
_CLOSE_VISIBLE_BY_MIDDLE_CLICK = "close_visible_by_middle_click"
_CLOSE_BY_LEFT_CLICK = "close_by_left_click"
_SPACING = "spacing"
_GLOBAL_MARGINS = "global_margins"
_EXTRA_WINDOW_WIDTH = "extra_window_width"
_EXTRA_WINDOW_HEIGHT = "extra_window_height"
_WIDTH = "width"
_HEIGHT = "height"
_DONT_SHOW_WHEN_FULLSCREEN_ANY = "dont_show_when_fullscreen_any"
_DONT_SHOW_WHEN_FULLSCREEN_CURRENT_DESKTOP = "dont_show_when_fullscreen_current_desktop"

_GLOBAL_MARGINS_FACTOR = 0.02610966057441253264
_EXTRA_WINDOW_WIDTH_FACTOR = 0.21961932650073206442
_EXTRA_WINDOW_HEIGHT_FACTOR = 0.08355091383812010444 / 2
_WIDTH_FACTOR = 0.21961932650073206442
_HEIGHT_FACTOR = 0.28198433420365535248


class Notifications(NotificationReceiver, Configurable):
    """Shows notifications as popups placed by a disposition.

    Notifications without room on screen wait in a queue until space frees up.

    Signals: ``create_notification(id, size, pos, expire_timeout, app_name,
    body, title, icon_url, actions)``, ``drop_notification(id)``,
    ``drop_all_visible()``, ``move_notification(id, pos)``,
    ``extra_notifications_count_changed()`` and
    ``dont_show_when_fullscreen_current_desktop_changed()``.
    """

    def __init__(
        self,
        disposition: Disposition | None,
        *,
        share_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        if disposition is None:
            raise ValueError("Notifications: provide disposition")
        NotificationReceiver.__init__(self)
        Configurable.__init__(self, "popup_notifications", share_dir=share_dir)

        self.extra_notifications_count_changed = Signal()
        self.create_notification = Signal()
        self.drop_notification = Signal()
        self.drop_all_visible = Signal()
        self.move_notification = Signal()
        self.dont_show_when_fullscreen_current_desktop_changed = Signal()

        self.disposition = disposition
        self._extra_notifications: deque[Notification] = deque()
        self._fullscreen_detector: FullscreenDetector | None = None

        disposition.set_extra_window_size(self.extra_window_size())
        disposition.set_spacing(self._spacing())
        disposition.set_margins(self._margins())

        self.drop_notification.connect(disposition.remove)
        disposition.move_notification.connect(self._on_disposition_moved)

    def set_fullscreen_detector(self, detector: FullscreenDetector | None) -> None:
        self._fullscreen_detector = detector

    def extra_window_size(self) -> Size:
        return self._window_size(
            _EXTRA_WINDOW_WIDTH,
            _EXTRA_WINDOW_HEIGHT,
            _EXTRA_WINDOW_WIDTH_FACTOR,
            _EXTRA_WINDOW_HEIGHT_FACTOR,
        )

    def extra_window_pos(self) -> Point:
        return self.disposition.external_window_pos()

    def extra_notifications_count(self) -> int:
        return len(self._extra_notifications)

    def close_all_by_right_click(self) -> bool:
        return bool(self.config.value(_CLOSE_ALL_BY_RIGHT_CLICK, True))

    def close_visible_by_left_click(self) -> bool:
        return bool(self.config.value(_CLOSE_VISIBLE_BY_MIDDLE_CLICK, True))

    def close_by_left_click(self) -> bool:
        return bool(self.config.value(_CLOSE_BY_LEFT_CLICK, False))

    def dont_show_when_fullscreen_any(self) -> bool:
        return bool(self.config.value(_DONT_SHOW_WHEN_FULLSCREEN_ANY, False))

    def dont_show_when_fullscreen_current_desktop(self) -> bool:
        return bool(
            self.config.value(_DONT_SHOW_WHEN_FULLSCREEN_CURRENT_DESKTOP, False)
        )

    def set_dont_show_when_fullscreen_current_desktop(self, value: bool) -> None:
        self.config.set_value(_DONT_SHOW_WHEN_FULLSCREEN_CURRENT_DESKTOP, bool(value))
        self.dont_show_when_fullscreen_current_desktop_changed.emit()

    def on_create_notification(self, notification: Notification) -> None:
        if not self._should_show_popup():
            return
        if not self._create_if_space_available(notification):
            self._extra_notifications.append(notification)
            self.extra_notifications_count_changed.emit()

    def on_drop_notification(self, notification_id: int) -> None:
        self.drop_notification.emit(int(notification_id))
        self.notification_dropped.emit(notification_id, ClosingReason.CLOSED)

    def on_close_button_pressed(self, notification_id: int) -> None:
        self.drop_notification.emit(notification_id)
        self.notification_dropped.emit(notification_id, ClosingReason.DISMISSED)
        self._check_extra_notifications()

    def on_action_button_pressed(self, notification_id: int, action: str) -> None:
        self.drop_notification.emit(notification_id)
        self.action_invoked.emit(notification_id, action)
        self.notification_dropped.emit(notification_id, ClosingReason.DISMISSED)

    def on_expired(self, notification_id: int) -> None:
        self.drop_notification.emit(notification_id)
        self.notification_dropped.emit(notification_id, ClosingReason.EXPIRED)

    def on_drop_all(self) -> None:
        self.on_drop_stacked()
        self.on_drop_visible()

    def on_drop_stacked(self) -> None:
        self._extra_notifications.clear()
        self.extra_notifications_count_changed.emit()

    def on_drop_visible(self) -> None:
        self.drop_all_visible.emit()
        self.disposition.remove_all()
        self._check_extra_notifications()

    def _on_disposition_moved(self, notification_id: int, pos: Point) -> None:
        self.move_notification.emit(int(notification_id), pos)
        self._check_extra_notifications()

    def _spacing(self) -> int:
        return int(self.config.value(_SPACING, 0))

    def _margins(self) -> Margins:
        field = self.config.value(_GLOBAL_MARGINS)
        if isinstance(field, list) and len(field) == 4:
            try:
                left, top, right, bottom = (int(item) for item in field)
            except ValueError as error:
                raise ValueError("config: global_margins wrong value") from error
            return Margins(left, top, right, bottom)
        height = self.disposition.screen.available_size.height
        margin = int(_GLOBAL_MARGINS_FACTOR * height)
        return Margins(margin, margin, margin, margin)

    def _window_size(
        self,
        width_key: str,
        height_key: str,
        width_factor: float,
        height_factor: float,
    ) -> Size:
        width = self._size_value(width_key)
        height = self._size_value(height_key)
        if width and height:
            return Size(width, height)
        screen = self.disposition.screen.available_size
        return Size(int(width_factor * screen.width), int(height_factor * screen.height))

    def _size_value(self, key: str) -> int:
        try:
            value = int(self.config.value(key, 0))
        except ValueError as error:
            raise ValueError(
                "config: window or extra_window size wrong value"
            ) from error
        if value < 0:
            raise ValueError("config: window or extra_window size wrong value")
        return value

    def _create_if_space_available(self, notification: Notification) -> bool:
        size = self._window_size(_WIDTH, _HEIGHT, _WIDTH_FACTOR, _HEIGHT_FACTOR)
        pos = self.disposition.poses(notification.id, size)
        if pos is None:
            return False
        shown_id = notification.replaces_id or notification.id
        self.create_notification.emit(
            int(shown_id),
            size,
            pos,
            int(notification.expire_timeout),
            notification.application,
            notification.body,
            notification.title,
            notification.icon_url,
            list(notification.actions),
        )
        return True

    def _check_extra_notifications(self) -> None:
        while self._extra_notifications and self._create_if_space_available(
            self._extra_notifications[0]
        ):
            self._extra_notifications.popleft()
            self.extra_notifications_count_changed.emit()

    def _should_show_popup(self) -> bool:
        detector = self._fullscreen_detector
        if detector is None:
            return True
        if (
            self.dont_show_when_fullscreen_current_desktop()
            and detector.fullscreen_windows_on_current_desktop()
        ):
            return False
        if self.dont_show_when_fullscreen_any() and detector.fullscreen_windows():
            return False
        return True