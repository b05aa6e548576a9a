"""The history of received notifications and a list model over it."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .config import Configurable
from .notification import Notification, NotificationReceiver, Signal

_USER_ROLE = 0x0100


@dataclass(frozen=True)
class HistoryNotification:
    """The part of a notification kept in the history."""

    id: int = 0
    application: str = ""
    title: str = ""
    body: str = ""
    icon_url: str = ""

    @classmethod
    def from_notification(cls, notification: Notification) -> HistoryNotification:
        return cls(
            id=notification.id,
            application=notification.application,
            title=notification.title,
            body=notification.body,
            icon_url=notification.icon_url,
        )


class HistoryRole(IntEnum):
    """Data roles of the history model."""

    ID = _USER_ROLE + 1
    APPLICATION = _USER_ROLE + 2
    TITLE = _USER_ROLE + 3
    BODY = _USER_ROLE + 4
    ICON_URL = _USER_ROLE + 5


_ROLE_NAMES = {
    HistoryRole.ID: "id_",
    HistoryRole.APPLICATION: "application",
    HistoryRole.TITLE: "title",
    HistoryRole.BODY: "body",
    HistoryRole.ICON_URL: "iconUrl",
}

_ROLE_ATTRIBUTES = {
    HistoryRole.ID: "id",
    HistoryRole.APPLICATION: "application",
    HistoryRole.TITLE: "title",
    HistoryRole.BODY: "body",
    HistoryRole.ICON_URL: "icon_url",
}


class History(NotificationReceiver, Configurable):
    """Keeps received notifications, newest first.

    Emits ``row_inserted()`` whenever a notification is added.
    """

    def __init__(self, *, share_dir: str | os.PathLike[str] | None = None) -> None:
        NotificationReceiver.__init__(self)
        Configurable.__init__(self, "history", share_dir=share_dir)
        self.row_inserted = Signal()
        self._notifications: deque[HistoryNotification] = deque()
        self._model = HistoryModel(self)

    @property
    def model(self) -> HistoryModel:
        return self._model

    def on_create_notification(self, notification: Notification) -> None:
        self._notifications.appendleft(HistoryNotification.from_notification(notification))
        self.row_inserted.emit()

    def on_drop_notification(self, notification_id: int) -> None:
        """Closed popups stay in the history."""

    def remove(self, index: int) -> None:
        self._model.remove_rows(index, 1)


class HistoryModel:
    """A list model of a history's notifications.

    Emits ``rows_inserted(first, last)`` and ``rows_removed(first, last)``.
    """

    def __init__(self, history: History) -> None:
        self._history = history
        self.rows_inserted = Signal()
        self.rows_removed = Signal()
        history.row_inserted.connect(self._on_history_row_inserted)

    def row_count(self) -> int:
        return len(self._history._notifications)

    def data(self, row: int, role: int) -> Any:
        """The value of ``role`` in ``row``, or None for a bad row or role."""
        items = self._history._notifications
        if not 0 <= row < len(items):
            return None
        try:
            attribute = _ROLE_ATTRIBUTES[HistoryRole(role)]
        except ValueError:
            return None
        return getattr(items[row], attribute)

    def insert_rows(self, row: int, count: int) -> bool:
        """Announce a new first row; only a single row at the top is accepted."""
        if row or count > 1:
            return False
        self.rows_inserted.emit(0, 0)
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        items = self._history._notifications
        if row < 0 or row >= len(items) or row + count <= 0:
            return False
        first = max(0, row)
        last = min(row + count - 1, len(items) - 1)
        for _ in range(first, last + 1):
            del items[first]
        self.rows_removed.emit(first, last)
        return True

    def role_names(self) -> dict[HistoryRole, str]:
        return dict(_ROLE_NAMES)

    def _on_history_row_inserted(self) -> None:
        self.insert_rows(0, 1)