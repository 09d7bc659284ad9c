"""
Ring slots: candidate name rectangles around an object's glyph.

Candidates sit on a ring one pixel outside the largest circle of the
object's graphic, at 16 compass angles measured clockwise from screen
"up". Each angle pins one of a few fixed anchor points of the name's
bounding box to the ring, so a name at 0° sits above the glyph, at 90° to
its right, and so on.

The angle list is rotated by a stable hash of the name, which spreads
names around their glyphs without favouring one side, while keeping the
order a pure function of the name.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from core.coords import fnv1a_32
from core.types import Point, Rect, Size
from rendering.graphic import Graphic

Anchor = Tuple[float, float]

ANGLES = (0, 30, 45, 60, 90, 120, 135, 150, 180,
          210, 225, 240, 270, 300, 315, 330)

# Clearance between the glyph and the name, pixels
RING_GAP = 1.0

_ANCHORS: Dict[int, Tuple[Anchor, ...]] = {}
for _angles, _anchors in (
    ((0,),            ((0.25, 1.0), (0.75, 1.0), (0.5, 1.0))),
    ((30, 45, 60),    ((0.0, 1.0), (0.0, 0.75))),
    ((90,),           ((0.0, 0.5),)),
    ((120, 135, 150), ((0.0, 0.0), (0.0, 0.25))),
    ((180,),          ((0.25, 0.0), (0.75, 0.0), (0.5, 0.0))),
    ((210, 225, 240), ((1.0, 0.25), (1.0, 0.0))),
    ((270,),          ((1.0, 0.5),)),
    ((300, 315, 330), ((1.0, 0.75), (1.0, 1.0))),
):
    for _a in _angles:
        _ANCHORS[_a] = _anchors


@dataclass(frozen=True, slots=True)
class Slot:
    rect: Rect
    angle: int
    anchor: Anchor


def anchors_for_angle(angle: int) -> Tuple[Anchor, ...]:
    return _ANCHORS.get(angle, ())


def ordered_angles(name: str) -> Tuple[int, ...]:
    """ANGLES rotated by the name's hash."""
    offset = fnv1a_32(name) % len(ANGLES)
    return ANGLES[offset:] + ANGLES[:offset]


def slot_rect(name_size: Size, center: Point, radius: float,
              angle: int, anchor: Anchor) -> Rect:
    w, h = name_size
    ax, ay = anchor
    alpha = math.radians(angle - 90)
    ring = radius + RING_GAP
    x = center[0] + ring * math.cos(alpha) - ax * w
    y = center[1] + ring * math.sin(alpha) - ay * h
    return Rect(x, y, w, h)


def slots_for_name(name: str, graphic: Graphic, name_size: Size) -> List[Slot]:
    """
    Candidate slots for a name around the graphic's largest circle.
    Empty when the graphic has no circle.
    """
    circle = graphic.largest_circle()
    if circle is None:
        return []

    slots: List[Slot] = []
    for angle in ordered_angles(name):
        for anchor in anchors_for_angle(angle):
            rect = slot_rect(name_size, circle.center, circle.radius, angle, anchor)
            slots.append(Slot(rect=rect, angle=angle, anchor=anchor))
    return slots
