"""
Boundary slots: name rectangles where lines leave the view.

Used to label coordinate lines: wherever a line of the graphic crosses a
view wall, a slot is placed flush against that wall and centred on the
crossing along the wall, pulled back inside the view if needed.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Tuple

from core.types import Point, Rect, Size
from layout.name_slots import Slot
from rendering.graphic import Graphic
from rendering.overlap import segment_intersection


class Wall(Enum):
    NORTH = "north"   # top, y = 0
    EAST  = "east"    # right, x = width
    SOUTH = "south"   # bottom, y = height
    WEST  = "west"    # left, x = 0


def view_walls(view: Rect) -> List[Tuple[Wall, Point, Point]]:
    return [
        (Wall.NORTH, (view.min_x, view.min_y), (view.max_x, view.min_y)),
        (Wall.EAST,  (view.max_x, view.min_y), (view.max_x, view.max_y)),
        (Wall.SOUTH, (view.min_x, view.max_y), (view.max_x, view.max_y)),
        (Wall.WEST,  (view.min_x, view.min_y), (view.min_x, view.max_y)),
    ]


def boundary_crossings(graphic: Graphic, view: Rect) -> List[Tuple[Wall, Point]]:
    """Crossings of every line shape with the view walls, shape order first."""
    walls = view_walls(view)
    crossings = []
    for line in graphic.lines():
        for wall, a, b in walls:
            point = segment_intersection(line.start, line.finish, a, b)
            if point is not None:
                crossings.append((wall, point))
    return crossings


def centred_position(n: float, extent: float, minimum: float, maximum: float) -> float:
    """
    Offset of an extent centred on n, moved to stay within [minimum, maximum].
    When the extent is longer than the range it is pinned to minimum.
    """
    pos = n - 0.5 * extent
    if pos + extent > maximum:
        pos = maximum - extent
    if pos < minimum:
        pos = minimum
    return pos


def slot_for_crossing(wall: Wall, point: Point, name_size: Size, view: Rect) -> Rect:
    w, h = name_size
    if wall in (Wall.NORTH, Wall.SOUTH):
        x = centred_position(point[0], w, view.min_x, view.max_x)
        y = view.min_y if wall is Wall.NORTH else view.max_y - h
    else:
        y = centred_position(point[1], h, view.min_y, view.max_y)
        x = view.max_x - w if wall is Wall.EAST else view.min_x
    return Rect(x, y, w, h)


def slots_for_name(graphic: Graphic, name_size: Size, view_size: Size) -> List[Slot]:
    view = Rect(0.0, 0.0, view_size[0], view_size[1])
    slots = []
    for wall, point in boundary_crossings(graphic, view):
        rect = slot_for_crossing(wall, point, name_size, view)
        slots.append(Slot(rect=rect, angle=_WALL_ANGLES[wall], anchor=(0.5, 0.5)))
    return slots


# Compass bearing of each wall, kept on the slot for bookkeeping
_WALL_ANGLES = {Wall.NORTH: 0, Wall.EAST: 90, Wall.SOUTH: 180, Wall.WEST: 270}
