"""Notification records, signals and the interfaces that consume notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable


class Signal:
    """A list of callables invoked, in connection order, on every emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove a connected slot; raises ValueError if it is not connected."""
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class ClosingReason(IntEnum):
    """Reasons reported with the NotificationClosed signal."""

    EXPIRED = 1
    DISMISSED = 2
    CLOSED = 3
    UNDEFINED = 4


class ExpireTimeout(IntEnum):
    """Special values of a notification's expiration timeout."""

    SERVER_DECIDES = -1
    FOREVER = 0


@dataclass
class Notification:
    """A notification as handled inside the daemon."""

    id: int = 0
    application: str = ""
    body: str = ""
    title: str = ""
    icon_url: str = ""
    actions: list[str] = field(default_factory=list)
    hints: dict[str, Any] = field(default_factory=dict)
    expire_timeout: int = ExpireTimeout.SERVER_DECIDES
    replaces_id: int = 0

    def __str__(self) -> str:
        text = f"#{self.id}"
        if self.replaces_id:
            text += f"→{self.replaces_id}"
        return (
            f"{text}|{self.application}|{self.body}|{self.title}"
            f"|{self.icon_url}|t{int(self.expire_timeout)}"
        )


@dataclass
class DBusNotification:
    """A notification in the shape of the desktop notifications bus call."""

    id: int = 0
    app_name: str = ""
    replaces_id: int = 0
    app_icon: str = ""
    summary: str = ""
    body: str = ""
    actions: list[str] = field(default_factory=list)
    hints: dict[str, Any] = field(default_factory=dict)
    expire_timeout: int = ExpireTimeout.SERVER_DECIDES


class NotificationModifier(ABC):
    """Changes a notification in place before it is delivered."""

    @abstractmethod
    def modify(self, notification: Notification) -> None:
        """Modify the notification in place."""


class NotificationReceiver(ABC):
    """Something that shows or records notifications.

    Emits ``notification_dropped(id, reason)`` and ``action_invoked(id, key)``.
    """

    def __init__(self) -> None:
        self.notification_dropped = Signal()
        self.action_invoked = Signal()

    @abstractmethod
    def on_create_notification(self, notification: Notification) -> None:
        """Handle a newly created notification."""

    @abstractmethod
    def on_drop_notification(self, notification_id: int) -> None:
        """Handle a request to close a notification."""