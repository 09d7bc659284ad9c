"""
Overlap kernel: does a candidate name rectangle touch an existing shape?

All predicates take the candidate rectangle as one operand. A rectangle of
zero (or negative) size overlaps nothing.

Known approximation: the segment crossing test uses strict orientation
comparisons, so segments that are exactly collinear with a rectangle edge
and only touch it are not guaranteed to be detected.

Polygons, holes included, are tested with shapely; touching the boundary
counts as overlapping.
"""

from __future__ import annotations
from typing import Iterable, Optional, Sequence

from shapely.geometry import Polygon, box

from core.types import Point, Rect
from rendering.graphic import (
    CircleShape, Graphic, LineShape, Obscurement, PolygonShape,
    RectangleShape, Shape, TextShape,
)


# ---------------------------------------------------------------------------
# Segment helpers
# ---------------------------------------------------------------------------

def _ccw(a: Point, b: Point, c: Point) -> bool:
    return (c[1] - a[1]) * (b[0] - a[0]) > (b[1] - a[1]) * (c[0] - a[0])


def segments_cross(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Each segment's endpoints lie on opposite sides of the other."""
    return (_ccw(p1, q1, q2) != _ccw(p2, q1, q2) and
            _ccw(p1, p2, q1) != _ccw(p1, p2, q2))


def segment_intersection(p1: Point, p2: Point, q1: Point, q2: Point) -> Optional[Point]:
    """
    Point where segment p1-p2 meets segment q1-q2, endpoints included.
    Parallel (and degenerate) segments return None.
    """
    rx, ry = p2[0] - p1[0], p2[1] - p1[1]
    sx, sy = q2[0] - q1[0], q2[1] - q1[1]
    denom = rx * sy - ry * sx
    if abs(denom) < 1e-12:
        return None

    qpx, qpy = q1[0] - p1[0], q1[1] - p1[1]
    t = (qpx * sy - qpy * sx) / denom
    u = (qpx * ry - qpy * rx) / denom
    if not (0.0 <= t <= 1.0 and 0.0 <= u <= 1.0):
        return None
    return (p1[0] + t * rx, p1[1] + t * ry)


def rect_edges(rect: Rect):
    tl = (rect.min_x, rect.min_y)
    tr = (rect.max_x, rect.min_y)
    br = (rect.max_x, rect.max_y)
    bl = (rect.min_x, rect.max_y)
    return [(tl, tr), (tr, br), (br, bl), (bl, tl)]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def rect_overlaps_rect(rect: Rect, other: Rect) -> bool:
    if rect.is_empty or other.is_empty:
        return False
    return (rect.min_x < other.max_x and other.min_x < rect.max_x and
            rect.min_y < other.max_y and other.min_y < rect.max_y)


def rect_overlaps_circle(rect: Rect, center: Point, radius: float) -> bool:
    if rect.is_empty or radius < 0:
        return False
    closest_x = max(rect.min_x, min(center[0], rect.max_x))
    closest_y = max(rect.min_y, min(center[1], rect.max_y))
    dx = center[0] - closest_x
    dy = center[1] - closest_y
    return dx * dx + dy * dy <= radius * radius


def rect_overlaps_segment(rect: Rect, start: Point, finish: Point) -> bool:
    if rect.is_empty:
        return False

    # bounding box entirely to one side
    if start[0] < rect.min_x and finish[0] < rect.min_x: return False
    if start[0] > rect.max_x and finish[0] > rect.max_x: return False
    if start[1] < rect.min_y and finish[1] < rect.min_y: return False
    if start[1] > rect.max_y and finish[1] > rect.max_y: return False

    if rect.contains_point(start) or rect.contains_point(finish):
        return True

    for a, b in rect_edges(rect):
        if segments_cross(a, b, start, finish):
            return True
    return False


def rect_overlaps_polygon(rect: Rect, vertices: Sequence[Point],
                          holes: Iterable[Sequence[Point]] = ()) -> bool:
    if rect.is_empty or len(vertices) < 3:
        return False
    if not rect_overlaps_rect(rect, Rect.from_points(vertices)):
        return False

    polygon = Polygon(vertices, [h for h in holes if len(h) >= 3])
    return polygon.intersects(box(rect.min_x, rect.min_y, rect.max_x, rect.max_y))


def shape_overlaps_rect(shape: Shape, rect: Rect) -> bool:
    if isinstance(shape, (RectangleShape, TextShape)):
        return rect_overlaps_rect(rect, shape.rect)
    if isinstance(shape, CircleShape):
        return rect_overlaps_circle(rect, shape.center, shape.radius)
    if isinstance(shape, LineShape):
        return rect_overlaps_segment(rect, shape.start, shape.finish)
    if isinstance(shape, PolygonShape):
        return rect_overlaps_polygon(rect, shape.vertices, shape.holes)
    return False


# ---------------------------------------------------------------------------
# Graphic-level queries
# ---------------------------------------------------------------------------

def graphic_overlaps_rect(graphic: Graphic, rect: Rect) -> bool:
    """Any shape of the graphic overlaps, whatever its obscurement."""
    return any(shape_overlaps_rect(s, rect) for s in graphic.shapes)


def graphic_obscurement(graphics: Iterable[Graphic], rect: Rect,
                        excluding=None) -> Obscurement:
    """
    Worst obscurement class among shapes overlapping rect.

    Args:
        graphics: graphics to test
        rect: candidate rectangle
        excluding: object id of a graphic to ignore

    Returns:
        ALWAYS as soon as an opaque shape overlaps, PREFERRED if only
        soft shapes overlap, otherwise NEVER.
    """
    worst = Obscurement.NEVER
    for graphic in graphics:
        if excluding is not None and graphic.object_id == excluding:
            continue
        for shape in graphic.shapes:
            if shape.obscurement <= worst:
                continue
            if not shape_overlaps_rect(shape, rect):
                continue
            if shape.obscurement == Obscurement.ALWAYS:
                return Obscurement.ALWAYS
            worst = shape.obscurement
    return worst
