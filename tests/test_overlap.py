from __future__ import annotations

import pytest

from core.types import Rect
from rendering.graphic import (
    CircleShape, Graphic, LineShape, Obscurement, PolygonShape, RectangleShape,
    TextShape,
)
from rendering.overlap import (
    graphic_obscurement,
    rect_overlaps_circle,
    rect_overlaps_polygon,
    rect_overlaps_rect,
    rect_overlaps_segment,
    segment_intersection,
    segments_cross,
    shape_overlaps_rect,
)

RECT = Rect(10.0, 10.0, 20.0, 10.0)


@pytest.mark.parametrize("other, expected", [
    (Rect(0.0, 0.0, 15.0, 15.0), True),
    (Rect(12.0, 12.0, 2.0, 2.0), True),      # contained
    (Rect(30.0, 10.0, 5.0, 5.0), False),     # shares an edge only
    (Rect(40.0, 40.0, 5.0, 5.0), False),
])
def test_rect_overlaps_rect(other, expected) -> None:
    assert rect_overlaps_rect(RECT, other) is expected


def test_empty_rect_overlaps_nothing() -> None:
    empty = Rect(15.0, 15.0, 0.0, 0.0)
    assert not rect_overlaps_rect(empty, RECT)
    assert not rect_overlaps_circle(empty, (15.0, 15.0), 5.0)
    assert not rect_overlaps_segment(empty, (0.0, 0.0), (30.0, 30.0))
    assert not rect_overlaps_polygon(empty, [(0.0, 0.0), (40.0, 0.0), (0.0, 40.0)])
    assert not rect_overlaps_rect(Rect(15.0, 15.0, -3.0, 4.0), RECT)


@pytest.mark.parametrize("center, radius, expected", [
    ((20.0, 15.0), 1.0, True),     # centre inside
    ((35.0, 15.0), 5.0, True),     # touches right edge
    ((35.0, 15.0), 4.9, False),
    ((33.0, 24.0), 5.0, True),     # corner within reach (3-4-5)
    ((34.0, 24.0), 5.0, False),
])
def test_rect_overlaps_circle(center, radius, expected) -> None:
    assert rect_overlaps_circle(RECT, center, radius) is expected


@pytest.mark.parametrize("start, finish, expected", [
    ((0.0, 15.0), (40.0, 15.0), True),    # passes straight through
    ((15.0, 12.0), (50.0, 50.0), True),   # starts inside
    ((0.0, 0.0), (40.0, 40.0), True),     # diagonal through it
    ((0.0, 0.0), (5.0, 40.0), False),     # entirely to the left
    ((0.0, 30.0), (40.0, 25.0), False),   # below
    ((0.0, 5.0), (40.0, 9.0), False),     # above, bbox overlaps in x
])
def test_rect_overlaps_segment(start, finish, expected) -> None:
    assert rect_overlaps_segment(RECT, start, finish) is expected


def test_segments_cross() -> None:
    assert segments_cross((0.0, 0.0), (10.0, 10.0), (0.0, 10.0), (10.0, 0.0))
    assert not segments_cross((0.0, 0.0), (10.0, 0.0), (0.0, 5.0), (10.0, 5.0))


def test_segment_intersection() -> None:
    assert segment_intersection((0.0, 0.0), (10.0, 10.0),
                                (0.0, 10.0), (10.0, 0.0)) == pytest.approx((5.0, 5.0))
    # endpoint on the other segment counts
    assert segment_intersection((0.0, 5.0), (10.0, 5.0),
                                (10.0, 0.0), (10.0, 10.0)) == pytest.approx((10.0, 5.0))
    assert segment_intersection((0.0, 0.0), (10.0, 0.0),
                                (0.0, 1.0), (10.0, 1.0)) is None
    assert segment_intersection((0.0, 0.0), (4.0, 4.0),
                                (0.0, 10.0), (10.0, 0.0)) is None


def test_rect_overlaps_polygon_with_hole() -> None:
    outer = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0)]
    hole = [(40.0, 40.0), (60.0, 40.0), (60.0, 60.0), (40.0, 60.0)]
    assert rect_overlaps_polygon(Rect(10.0, 10.0, 5.0, 5.0), outer, [hole])
    assert not rect_overlaps_polygon(Rect(45.0, 45.0, 5.0, 5.0), outer, [hole])
    assert rect_overlaps_polygon(Rect(55.0, 45.0, 10.0, 5.0), outer, [hole])
    assert not rect_overlaps_polygon(Rect(200.0, 200.0, 5.0, 5.0), outer, [hole])
    # rect enclosing the whole polygon touches its edges
    assert rect_overlaps_polygon(Rect(-10.0, -10.0, 200.0, 200.0), outer, [hole])


def test_shape_dispatch() -> None:
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert shape_overlaps_rect(RectangleShape(Rect(5.0, 5.0, 10.0, 10.0)), rect)
    assert shape_overlaps_rect(TextShape(Rect(5.0, 5.0, 10.0, 10.0), "M42"), rect)
    assert shape_overlaps_rect(CircleShape((12.0, 5.0), 3.0), rect)
    assert shape_overlaps_rect(LineShape((-5.0, 5.0), (15.0, 5.0)), rect)
    assert shape_overlaps_rect(
        PolygonShape(((2.0, 2.0), (8.0, 2.0), (5.0, 8.0))), rect)
    assert not shape_overlaps_rect(CircleShape((20.0, 20.0), 3.0), rect)


def test_graphic_obscurement_reports_worst_class() -> None:
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    soft = Graphic("grid", [LineShape((-5.0, 5.0), (15.0, 5.0),
                                      obscurement=Obscurement.PREFERRED)])
    ignored = Graphic("aura", [CircleShape((5.0, 5.0), 20.0,
                                           obscurement=Obscurement.NEVER)])
    opaque = Graphic("star", [CircleShape((5.0, 5.0), 2.0)])
    far = Graphic("far", [CircleShape((50.0, 50.0), 2.0)])

    assert graphic_obscurement([], rect) == Obscurement.NEVER
    assert graphic_obscurement([ignored, far], rect) == Obscurement.NEVER
    assert graphic_obscurement([ignored, soft], rect) == Obscurement.PREFERRED
    assert graphic_obscurement([soft, opaque], rect) == Obscurement.ALWAYS
    assert graphic_obscurement([soft, opaque], rect, excluding="star") == Obscurement.PREFERRED
