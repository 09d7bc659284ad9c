from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

# Screen points are plain (x, y) tuples in pixels, y pointing down.
Point = Tuple[float, float]
Size = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class Position:
    """A point on the celestial sphere, J2000 degrees."""
    ra_deg: float
    dec_deg: float


@dataclass(frozen=True, slots=True)
class ViewGeometry:
    # chart center in equatorial J2000 degrees
    center_ra_deg: float = 0.0
    center_dec_deg: float = 0.0
    # angular diameter spanned by the shorter screen side, degrees
    diameter_deg: float = 60.0
    width: int = 800
    height: int = 600

    @property
    def size(self) -> Size:
        return (float(self.width), float(self.height))


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def around_circle(cls, center: Point, radius: float) -> "Rect":
        return cls(center[0] - radius, center[1] - radius, 2.0 * radius, 2.0 * radius)

    @classmethod
    def from_points(cls, points) -> "Rect":
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        x0, y0 = min(xs), min(ys)
        return cls(x0, y0, max(xs) - x0, max(ys) - y0)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def max_y(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Point:
        return (self.x + 0.5 * self.w, self.y + 0.5 * self.h)

    @property
    def is_empty(self) -> bool:
        return self.w <= 0.0 or self.h <= 0.0

    def contains_point(self, p: Point) -> bool:
        return self.min_x <= p[0] <= self.max_x and self.min_y <= p[1] <= self.max_y

    def contains_rect(self, other: "Rect") -> bool:
        return (other.min_x >= self.min_x and other.min_y >= self.min_y and
                other.max_x <= self.max_x and other.max_y <= self.max_y)

    def enlarge(self, delta: float) -> "Rect":
        """Grow by delta on every side, snapped to whole pixels."""
        return Rect(int(self.x - delta), int(self.y - delta),
                    int(self.w + 2.0 * delta), int(self.h + 2.0 * delta))
