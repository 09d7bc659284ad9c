"""
Celestial Mathematics

Projections from the celestial sphere onto the chart plane:
- Projector / ReversibleProjector protocols
- Gnomonic (tangent-plane) projection centred on a RA/Dec view centre
- Helpers for pixel scales and magnitude-based glyph sizes
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from core.coords import clamp, wrap_deg
from core.types import Point, Position, ViewGeometry


# Shapes plotted up to this many pixels outside the view still count as
# visible: partially visible objects compete for label space at the edge.
NEAR_VIEW_MARGIN_PX = 30.0

ONE_MINUTE_DEG = 1.0 / 60.0


@runtime_checkable
class Projector(Protocol):
    def project(self, position: Position) -> Optional[Point]: ...

    def is_near_view(self, point: Point) -> bool: ...


@runtime_checkable
class ReversibleProjector(Protocol):
    def unproject(self, point: Point) -> Optional[Position]: ...


class GnomonicProjection:
    """
    Gnomonic sky chart projection.

    Projects RA/Dec coordinates onto the plane tangent to the sphere at
    the view centre. Great circles become straight lines. North up,
    east left (as seen in a standard star atlas).

    Only the hemisphere in front of the tangent plane can be projected;
    anything else yields None.
    """

    def __init__(self, center_ra: float, center_dec: float,
                 diameter_deg: float, width: int, height: int):
        """
        Args:
            center_ra: RA of chart center (degrees)
            center_dec: Dec of chart center (degrees)
            diameter_deg: Angular diameter spanned by the shorter screen side
            width, height: Screen dimensions in pixels
        """
        self.center_ra  = center_ra
        self.center_dec = center_dec
        self.diameter   = diameter_deg
        self.width      = width
        self.height     = height

        self.x_mid = 0.5 * width
        self.y_mid = 0.5 * height
        self.k = min(self.x_mid, self.y_mid) / (0.5 * math.radians(diameter_deg))

        # Precompute
        self._a0 = math.radians(center_ra)
        self._cos_dec0 = math.cos(math.radians(center_dec))
        self._sin_dec0 = math.sin(math.radians(center_dec))

    @classmethod
    def for_view(cls, view: ViewGeometry) -> "GnomonicProjection":
        return cls(view.center_ra_deg, view.center_dec_deg,
                   view.diameter_deg, view.width, view.height)

    def project(self, position: Position) -> Optional[Point]:
        """
        Project RA/Dec to screen (x, y).
        Returns None if the point is on or behind the tangent plane horizon.
        """
        a   = math.radians(position.ra_deg)
        d   = math.radians(position.dec_deg)
        cos_d   = math.cos(d)
        sin_d   = math.sin(d)
        cos_da  = math.cos(a - self._a0)

        cos_c = self._sin_dec0 * sin_d + self._cos_dec0 * cos_d * cos_da
        if cos_c <= 1e-12:
            return None

        # RA increases to the left
        dx = -(cos_d * math.sin(a - self._a0)) / cos_c
        dy = (self._cos_dec0 * sin_d - self._sin_dec0 * cos_d * cos_da) / cos_c

        return (self.x_mid + self.k * dx, self.y_mid - self.k * dy)

    def unproject(self, point: Point) -> Optional[Position]:
        """
        Convert screen (x, y) back to RA/Dec.

        Every screen point has an inverse under the gnomonic projection,
        so this never returns None; the Optional keeps the protocol honest
        for projections that cannot always invert.
        """
        x = -(point[0] - self.x_mid) / self.k
        y = (self.y_mid - point[1]) / self.k

        rho = math.hypot(x, y)
        if rho < 1e-12:
            return Position(wrap_deg(self.center_ra), self.center_dec)

        c = math.atan(rho)
        sin_c = math.sin(c)
        cos_c = math.cos(c)

        sin_dec = cos_c * self._sin_dec0 + y * sin_c * self._cos_dec0 / rho
        dec = math.asin(clamp(sin_dec, -1.0, 1.0))
        ra = self._a0 + math.atan2(
            x * sin_c,
            rho * self._cos_dec0 * cos_c - y * self._sin_dec0 * sin_c
        )

        return Position(wrap_deg(math.degrees(ra)), math.degrees(dec))

    def is_near_view(self, point: Point) -> bool:
        """Check if pixel coordinates are on screen or within the near-view margin"""
        px, py = point
        m = NEAR_VIEW_MARGIN_PX
        return (-m <= px <= self.width + m and
                -m <= py <= self.height + m)


class Projection(Enum):
    GNOMONIC = "gnomonic"

    def make_projector(self, view: ViewGeometry) -> Projector:
        if self is Projection.GNOMONIC:
            return GnomonicProjection.for_view(view)
        raise ValueError(f"Unsupported projection: {self.value}")


def minute_scale(projector: Projector, view: ViewGeometry) -> float:
    """Pixel length of one minute of RA at the view centre."""
    p1 = projector.project(Position(view.center_ra_deg, view.center_dec_deg))
    p2 = projector.project(Position(view.center_ra_deg + ONE_MINUTE_DEG,
                                    view.center_dec_deg))
    if p1 is None or p2 is None:
        return 0.0
    return abs(p2[0] - p1[0])


def apparent_size(projector: Projector, position: Position,
                  diameter_deg: float) -> Optional[float]:
    """
    Pixel size of an apparent angular diameter centred at position.
    None when the object cannot be projected.
    """
    p1 = projector.project(position)
    other_dec = position.dec_deg + diameter_deg
    if other_dec > 90.0:
        other_dec = position.dec_deg - diameter_deg
    p2 = projector.project(Position(position.ra_deg, other_dec))
    if p1 is None or p2 is None:
        return None
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def magnitude_to_radius(mag: float) -> float:
    """
    Convert object magnitude to glyph radius in pixels.

    Brighter objects get larger glyphs: magnitude 7 and fainter = 1 px,
    magnitude -2 = 8 px.
    """
    sized = max(1.0, 8.0 - mag) * 1.6
    return float(math.ceil(round(0.5 * sized, 9)))
