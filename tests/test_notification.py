import pytest

from iqnotifier.notification import (
    ClosingReason,
    DBusNotification,
    ExpireTimeout,
    Notification,
    NotificationModifier,
    NotificationReceiver,
    Signal,
)


def test_signal_calls_slots_in_order():
    calls = []
    signal = Signal()
    signal.connect(lambda x: calls.append(("a", x)))
    signal.connect(lambda x: calls.append(("b", x)))
    signal.emit(7)
    assert calls == [("a", 7), ("b", 7)]


def test_signal_disconnect():
    calls = []
    signal = Signal()

    def slot(*args):
        calls.append(("removed", args))

    def kept(*args):
        calls.append(("kept", args))

    signal.connect(slot)
    signal.connect(kept)
    signal.disconnect(slot)
    signal.emit(1, 2)
    assert calls == [("kept", (1, 2))]
    with pytest.raises(ValueError):
        signal.disconnect(slot)


def test_signal_disconnect_unknown_raises():
    with pytest.raises(ValueError):
        Signal().disconnect(print)


def test_notification_str_without_replacement():
    n = Notification(
        id=5, application="app", body="body", title="title",
        icon_url="icon", expire_timeout=-1,
    )
    assert str(n) == "#5|app|body|title|icon|t-1"


def test_notification_str_with_replacement():
    n = Notification(id=7, replaces_id=3, application="app", expire_timeout=1000)
    assert str(n) == "#7→3|app||||t1000"


def test_notification_defaults_are_independent():
    a = Notification()
    b = Notification()
    a.actions.append("x")
    a.hints["k"] = 1
    assert b.actions == []
    assert b.hints == {}
    assert a.expire_timeout == ExpireTimeout.SERVER_DECIDES


def test_dbus_notification_fields():
    n = DBusNotification(app_name="app", summary="s", replaces_id=2)
    assert (n.app_name, n.summary, n.replaces_id, n.body) == ("app", "s", 2, "")


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        NotificationModifier()
    with pytest.raises(TypeError):
        NotificationReceiver()


class _Recorder(NotificationReceiver):
    def __init__(self):
        super().__init__()
        self.created = []
        self.dropped = []

    def on_create_notification(self, notification):
        self.created.append(notification)

    def on_drop_notification(self, notification_id):
        self.dropped.append(notification_id)


def test_receiver_signals_are_per_instance():
    first, second = _Recorder(), _Recorder()
    seen = []
    first.notification_dropped.connect(lambda i, r: seen.append((i, r)))
    second.notification_dropped.emit(4, ClosingReason(3))
    first.notification_dropped.emit(9, ClosingReason(1))
    assert seen == [(9, ClosingReason.EXPIRED)]
    assert int(seen[0][1]) == 1
    assert ClosingReason(3) == ClosingReason.CLOSED


def test_receiver_slots_record_notifications():
    receiver = _Recorder()
    n = Notification(id=3, title="t")
    receiver.on_create_notification(n)
    receiver.on_drop_notification(3)
    assert [str(x) for x in receiver.created] == ["#3||||t||t-1"]
    assert receiver.dropped == [3]


class _Upper(NotificationModifier):
    def modify(self, notification):
        notification.title = notification.title.upper()


def test_modifier_changes_in_place():
    n = Notification(title="hello")
    _Upper().modify(n)
    assert n.title == "HELLO"