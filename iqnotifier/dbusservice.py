"""The desktop notifications bus interface and the path a notification takes."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, NamedTuple

from .config import Configurable, application_name, application_version
from .notification import (
    ClosingReason,
    Notification,
    NotificationModifier,
    NotificationReceiver,
    Signal,
)

_CAPABILITIES = ("actions", "body", "body-markup", "icon-static", "persistence")
_SPEC_VERSION = "1.2"


class ServerInformation(NamedTuple):
    name: str
    vendor: str
    version: str
    spec_version: str


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


class DBusService:
    """Implements the notification server calls and relays them to receivers.

    Bus signals: ``action_invoked(id, key)`` and ``notification_closed(id, reason)``.
    Internal signals: ``create_notification(notification)`` and
    ``drop_notification(id)``.
    """

    def __init__(self) -> None:
        self.action_invoked = Signal()
        self.notification_closed = Signal()
        self.create_notification = Signal()
        self.drop_notification = Signal()
        self._modifiers: list[NotificationModifier] = []

    @staticmethod
    def version_string() -> str:
        return application_version()

    @staticmethod
    def app_string() -> str:
        return application_name()

    def connect_receiver(self, receiver: NotificationReceiver) -> DBusService:
        self.create_notification.connect(receiver.on_create_notification)
        self.drop_notification.connect(receiver.on_drop_notification)
        receiver.action_invoked.connect(self.on_action_invoked)
        receiver.notification_dropped.connect(self.on_notification_dropped)
        return self

    def add_modifier(self, modifier: NotificationModifier) -> DBusService:
        """Add a modifier; a configurable one is added only when it is enabled."""
        if isinstance(modifier, Configurable) and not modifier.is_enabled():
            return self
        self._modifiers.append(modifier)
        return self

    def get_capabilities(self) -> list[str]:
        return list(_CAPABILITIES)

    def get_server_information(self) -> ServerInformation:
        return ServerInformation(
            name=application_name(),
            vendor=application_name(),
            version=self.version_string(),
            spec_version=_SPEC_VERSION,
        )

    def notify(
        self,
        app_name: str,
        replaces_id: int,
        app_icon: str,
        summary: str,
        body: str,
        actions: Iterable[str],
        hints: Mapping[str, Any],
        expire_timeout: int,
    ) -> int:
        notification = Notification(
            id=replaces_id,
            application=app_name,
            body=body,
            title=summary,
            icon_url=app_icon,
            actions=list(actions),
            hints=dict(hints),
            expire_timeout=_to_int32(expire_timeout),
            replaces_id=replaces_id,
        )
        for modifier in self._modifiers:
            modifier.modify(notification)
        self.create_notification.emit(notification)
        return notification.id

    def close_notification(self, notification_id: int) -> None:
        self.drop_notification.emit(notification_id)

    def on_notification_dropped(
        self, notification_id: int, reason: ClosingReason
    ) -> None:
        self.notification_closed.emit(notification_id, int(reason))

    def on_action_invoked(self, notification_id: int, action_key: str) -> None:
        self.action_invoked.emit(notification_id, action_key)