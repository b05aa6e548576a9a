import pytest

from iqnotifier.disposition import (
    Disposition,
    FullscreenDetector,
    Margins,
    Point,
    Rect,
    Screen,
    Size,
)


class _Fixed(Disposition):
    def poses(self, notification_id, size):
        return Point(0, 0)

    def external_window_pos(self):
        return Point(0, 0)

    def remove(self, notification_id):
        pass

    def remove_all(self):
        pass


def test_rect_edges_are_inclusive():
    rect = Rect(0, 0, 100, 50)
    assert rect.top_right() == Point(99, 0)
    assert rect.bottom_right() == Point(99, 49)


def test_rect_from_edges_round_trip():
    rect = Rect(3, 4, 20, 30)
    assert Rect.from_edges(rect.left, rect.top, rect.right, rect.bottom) == rect


def test_adjusted_zero_is_identity():
    rect = Rect(5, 6, 70, 80)
    assert rect.adjusted(0, 0, 0, 0) == rect


def test_shrunk_moves_each_edge():
    rect = Rect(0, 0, 1000, 800)
    margins = Margins(10, 20, 30, 40)
    inner = rect.shrunk(margins)
    assert inner.left == rect.left + margins.left
    assert inner.top == rect.top + margins.top
    assert inner.right == rect.right - margins.right
    assert inner.bottom == rect.bottom - margins.bottom


def test_contains():
    outer = Rect(0, 0, 100, 100)
    assert outer.contains(outer)
    assert outer.contains(Rect(10, 10, 5, 5))
    assert not outer.contains(Rect(90, 90, 20, 5))
    assert not outer.contains(Rect(50, 50, 0, 0))
    assert not Rect().contains(Rect(0, 0, 1, 1))


def test_moved_top_keeps_size():
    rect = Rect(5, 10, 30, 40)
    moved = rect.moved_top(100)
    assert moved.top == 100
    assert moved.size == rect.size
    assert moved.left == rect.left


def test_point_arithmetic_round_trip():
    a, b = Point(3, 9), Point(4, 1)
    assert (a + b) - b == a


def test_screen_reports_size_and_change():
    changes = []
    screen = Screen(Rect(0, 0, 1920, 1080))
    screen.available_geometry_changed.connect(lambda: changes.append(1))
    assert screen.available_size == Size(1920, 1080)
    screen.available_geometry = Rect(0, 0, 1920, 1080)
    assert changes == []
    screen.available_geometry = Rect(0, 30, 1920, 1050)
    assert changes == [1]


def test_set_margins_recalculates():
    screen = Screen(Rect(0, 0, 1920, 1080))
    disposition = _Fixed(screen)
    margins = Margins(5, 6, 7, 8)
    disposition.set_margins(margins)
    assert disposition.available_screen_geometry == screen.available_geometry.shrunk(margins)


def test_screen_change_recalculates():
    screen = Screen(Rect(0, 0, 1920, 1080))
    disposition = _Fixed(screen)
    margins = Margins(1, 2, 3, 4)
    disposition.set_margins(margins)
    screen.available_geometry = Rect(0, 0, 1280, 720)
    assert disposition.available_screen_geometry == Rect(0, 0, 1280, 720).shrunk(margins)
    assert disposition.screen is screen


def test_setters_store_values():
    disposition = _Fixed(Screen(Rect(0, 0, 100, 100)))
    disposition.set_spacing(4)
    disposition.set_extra_window_size(Size(30, 10))
    assert disposition.spacing == 4
    assert disposition.extra_window_size == Size(30, 10)


def test_abstract_interfaces():
    with pytest.raises(TypeError):
        Disposition(Screen(Rect(0, 0, 10, 10)))
    with pytest.raises(TypeError):
        FullscreenDetector()