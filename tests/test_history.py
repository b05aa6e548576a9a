import pytest

from iqnotifier.config import Config
from iqnotifier.history import History, HistoryNotification, HistoryRole
from iqnotifier.notification import Notification


@pytest.fixture
def share(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path / "share"


@pytest.fixture
def history(share):
    return History(share_dir=share)


def record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def add(history, nid, title):
    history.on_create_notification(
        Notification(id=nid, application="app", title=title, body="body", icon_url="icon")
    )


def test_history_notification_copies_fields():
    item = HistoryNotification.from_notification(
        Notification(id=3, application="a", title="t", body="b", icon_url="i")
    )
    assert item == HistoryNotification(3, "a", "t", "b", "i")


def test_newest_first(history):
    add(history, 1, "first")
    add(history, 2, "second")
    model = history.model
    assert model.row_count() == 2
    assert model.data(0, HistoryRole.TITLE) == "second"
    assert model.data(1, HistoryRole.TITLE) == "first"
    assert model.data(0, HistoryRole.ID) == 2
    assert model.data(1, HistoryRole.APPLICATION) == "app"
    assert model.data(1, HistoryRole.BODY) == "body"
    assert model.data(1, HistoryRole.ICON_URL) == "icon"


def test_data_for_bad_row_or_role(history):
    add(history, 1, "first")
    assert history.model.data(1, HistoryRole.TITLE) is None
    assert history.model.data(-1, HistoryRole.TITLE) is None
    assert history.model.data(0, 0) is None


def test_create_announces_row(history):
    inserted = record(history.model.rows_inserted)
    add(history, 1, "first")
    assert inserted == [(0, 0)]


def test_insert_rows_only_at_top(history):
    assert history.model.insert_rows(1, 1) is False
    assert history.model.insert_rows(0, 2) is False
    assert history.model.insert_rows(0, 1) is True


def test_remove(history):
    add(history, 1, "first")
    add(history, 2, "second")
    removed = record(history.model.rows_removed)
    history.remove(0)
    assert history.model.row_count() == 1
    assert history.model.data(0, HistoryRole.TITLE) == "first"
    assert removed == [(0, 0)]


@pytest.mark.parametrize("row, count", [(5, 1), (-1, 1), (0, 0), (2, 1)])
def test_remove_rows_rejects_bad_ranges(history, row, count):
    add(history, 1, "first")
    add(history, 2, "second")
    assert history.model.remove_rows(row, count) is False
    assert history.model.row_count() == 2


def test_remove_rows_clamps_to_end(history):
    for nid in (1, 2, 3):
        add(history, nid, f"n{nid}")
    removed = record(history.model.rows_removed)
    assert history.model.remove_rows(1, 10) is True
    assert history.model.row_count() == 1
    assert history.model.data(0, HistoryRole.TITLE) == "n3"
    assert removed == [(1, 2)]


def test_drop_keeps_history(history):
    add(history, 1, "first")
    history.on_drop_notification(1)
    assert history.model.row_count() == 1


def test_role_names(history):
    names = history.model.role_names()
    assert names[HistoryRole.ID] == "id_"
    assert names[HistoryRole.ICON_URL] == "iconUrl"
    assert set(names) == set(HistoryRole)


def test_enabled_from_config(share):
    assert History(share_dir=share).is_enabled() is False
    Config("history", share_dir=share).set_value("enabled", True)
    assert History(share_dir=share).is_enabled() is True