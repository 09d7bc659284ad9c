"""
Graphic model: immutable screen-space shapes grouped under an owner.

A Graphic is what a chart object, a piece of furniture or a placed name
turns into once projected. Every shape carries an Obscurement class that
tells the names fitter how strongly the shape resists being covered.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple, Union

from core.types import Point, Rect

Color = Tuple[int, int, int]


class Obscurement(IntEnum):
    """Ordered by severity, so max() gives the worst class."""
    NEVER     = 0    # ignored when placing names
    PREFERRED = 1    # soft: names may cover it only if nothing better exists
    ALWAYS    = 2    # opaque: names may never cover it


@dataclass(frozen=True, slots=True)
class Fill:
    color: Color


@dataclass(frozen=True, slots=True)
class Stroke:
    width: float
    color: Color


Style = Union[Fill, Stroke]


@dataclass(frozen=True, slots=True)
class RectangleShape:
    rect: Rect
    styles: Tuple[Style, ...] = ()
    obscurement: Obscurement = Obscurement.ALWAYS

    @property
    def midpoint(self) -> Point:
        return self.rect.center

    @property
    def bounds(self) -> Rect:
        return self.rect


@dataclass(frozen=True, slots=True)
class LineShape:
    start: Point
    finish: Point
    styles: Tuple[Style, ...] = ()
    obscurement: Obscurement = Obscurement.ALWAYS

    @property
    def midpoint(self) -> Point:
        return (0.5 * (self.start[0] + self.finish[0]),
                0.5 * (self.start[1] + self.finish[1]))

    @property
    def bounds(self) -> Rect:
        return Rect.from_points((self.start, self.finish))


@dataclass(frozen=True, slots=True)
class CircleShape:
    center: Point
    radius: float
    styles: Tuple[Style, ...] = ()
    obscurement: Obscurement = Obscurement.ALWAYS

    @property
    def midpoint(self) -> Point:
        return self.center

    @property
    def bounds(self) -> Rect:
        return Rect.around_circle(self.center, self.radius)


@dataclass(frozen=True, slots=True)
class PolygonShape:
    """Closed outline with optional holes (used for the Milky Way)."""
    vertices: Tuple[Point, ...]
    holes: Tuple[Tuple[Point, ...], ...] = ()
    styles: Tuple[Style, ...] = ()
    obscurement: Obscurement = Obscurement.NEVER

    @property
    def midpoint(self) -> Point:
        if not self.vertices:
            return (0.0, 0.0)
        return self.bounds.center

    @property
    def bounds(self) -> Rect:
        if not self.vertices:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect.from_points(self.vertices)


@dataclass(frozen=True, slots=True)
class TextShape:
    rect: Rect
    # Opaque handle produced by the text resolver of the rendering layer
    text: Any
    styles: Tuple[Style, ...] = ()
    obscurement: Obscurement = Obscurement.ALWAYS

    @property
    def midpoint(self) -> Point:
        return self.rect.center

    @property
    def bounds(self) -> Rect:
        return self.rect


Shape = Union[RectangleShape, LineShape, CircleShape, PolygonShape, TextShape]


@dataclass(frozen=True)
class Graphic:
    object_id: Any
    shapes: Tuple[Shape, ...] = ()

    def __post_init__(self):
        # accept any iterable of shapes but store an immutable tuple
        object.__setattr__(self, "shapes", tuple(self.shapes))

    @classmethod
    def new_label(cls, shapes) -> "Graphic":
        """A graphic for a placed name, under a freshly minted id."""
        return cls(object_id=uuid.uuid4(), shapes=tuple(shapes))

    def largest_circle(self) -> Optional[CircleShape]:
        circles = [s for s in self.shapes if isinstance(s, CircleShape)]
        if not circles:
            return None
        return max(circles, key=lambda c: c.radius)

    def lines(self):
        return [s for s in self.shapes if isinstance(s, LineShape)]
