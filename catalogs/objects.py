"""
Chart Objects

Stars, planets and deep sky objects as they appear on the chart. Each
object knows how to plot itself into a Graphic through a projector, and
declares how its names should be fitted.
"""

from __future__ import annotations
import logging
import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from core.celestial_math import Projector, apparent_size, magnitude_to_radius
from core.configuration import Configuration
from core.types import Point, Position
from layout.names_fitter import FittingStyle, NameStyle
from rendering.graphic import (
    CircleShape, Fill, Graphic, LineShape, Obscurement, PolygonShape, Stroke,
)

logger = logging.getLogger(__name__)

EXTERIOR_NAMES = NameStyle(fitting_style=FittingStyle.EXTERIOR)

# Width of the background-coloured halo around star and planet glyphs
AURA_WIDTH = 1.0

# Smallest cluster glyph radius, pixels
MIN_CLUSTER_RADIUS = 4.0


def _plot_near_view(projector: Projector, position: Position) -> Optional[Point]:
    """Rounded plot of a position, None when off the view."""
    plot = projector.project(position)
    if plot is None or not projector.is_near_view(plot):
        return None
    return (float(round(plot[0])), float(round(plot[1])))


# ---------------------------------------------------------------------------
# Stars and planets
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Star:
    position: Position
    magnitude: float
    names: Tuple[str, ...] = ()
    is_double: bool = False
    is_variable: bool = False
    id: Any = field(default_factory=uuid.uuid4)

    name_style = EXTERIOR_NAMES

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        plot = _plot_near_view(projector, self.position)
        if plot is None:
            return None

        scheme = configuration.color_scheme
        radius = magnitude_to_radius(self.magnitude)
        x, y = plot
        shapes = []

        if configuration.show_star_aura:
            shapes.append(CircleShape(
                center=plot, radius=radius + AURA_WIDTH,
                styles=(Fill(scheme.background),),
                obscurement=Obscurement.NEVER))

        shapes.append(CircleShape(
            center=plot, radius=radius,
            styles=(Fill(scheme.star),),
            obscurement=Obscurement.ALWAYS))

        if self.is_double:
            wing = max(0.7 * radius, 1.0)
            for sign in (-1.0, 1.0):
                shapes.append(LineShape(
                    start=(x + sign * radius, y),
                    finish=(x + sign * (radius + wing), y),
                    styles=(Stroke(1.0, scheme.star),),
                    obscurement=Obscurement.ALWAYS))

        if self.is_variable:
            shell_half = max(math.floor(0.1 * radius), 0.5)
            shell_width = 2.0 * shell_half
            shell_radius = max(radius - shell_width - shell_half, 0.0)
            shapes.append(CircleShape(
                center=plot, radius=shell_radius,
                styles=(Stroke(shell_width, scheme.background),),
                obscurement=Obscurement.NEVER))

        return Graphic(object_id=self.id, shapes=shapes)


@dataclass(frozen=True)
class Planet:
    position: Position
    magnitude: float
    names: Tuple[str, ...] = ()
    id: Any = field(default_factory=uuid.uuid4)

    name_style = EXTERIOR_NAMES

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        plot = _plot_near_view(projector, self.position)
        if plot is None:
            return None

        scheme = configuration.color_scheme
        radius = magnitude_to_radius(self.magnitude)
        shapes = []
        if configuration.show_star_aura:
            shapes.append(CircleShape(
                center=plot, radius=radius + AURA_WIDTH,
                styles=(Fill(scheme.background),),
                obscurement=Obscurement.NEVER))
        shapes.append(CircleShape(
            center=plot, radius=radius,
            styles=(Fill(scheme.planet),),
            obscurement=Obscurement.ALWAYS))
        return Graphic(object_id=self.id, shapes=shapes)


# ---------------------------------------------------------------------------
# Deep sky
# ---------------------------------------------------------------------------

class ClusterType(Enum):
    OPEN = "open"
    GLOBULAR = "globular"


@dataclass(frozen=True)
class Cluster:
    position: Position
    magnitude: float
    apparent_diameter_deg: float
    cluster_type: ClusterType = ClusterType.OPEN
    names: Tuple[str, ...] = ()
    id: Any = field(default_factory=uuid.uuid4)

    name_style = EXTERIOR_NAMES

    def __post_init__(self):
        if self.apparent_diameter_deg < 0:
            raise ValueError(f"Cluster diameter must not be negative: {self.apparent_diameter_deg}")

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        plot = _plot_near_view(projector, self.position)
        if plot is None:
            return None
        size = apparent_size(projector, self.position, self.apparent_diameter_deg)
        if size is None:
            return None

        scheme = configuration.color_scheme
        radius = max(float(round(0.5 * size)), MIN_CLUSTER_RADIUS)
        border = Stroke(0.5, scheme.cluster_border)
        x, y = plot

        shapes = [CircleShape(
            center=plot, radius=radius,
            styles=(Fill(scheme.cluster_interior), border),
            obscurement=Obscurement.ALWAYS)]

        if self.cluster_type is ClusterType.GLOBULAR:
            shapes.append(LineShape((x - radius, y), (x + radius, y),
                                    styles=(border,), obscurement=Obscurement.ALWAYS))
            shapes.append(LineShape((x, y + radius), (x, y - radius),
                                    styles=(border,), obscurement=Obscurement.ALWAYS))

        return Graphic(object_id=self.id, shapes=shapes)


@dataclass(frozen=True)
class PlanetaryNebula:
    position: Position
    magnitude: float
    names: Tuple[str, ...] = ()
    id: Any = field(default_factory=uuid.uuid4)

    name_style = EXTERIOR_NAMES

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        plot = _plot_near_view(projector, self.position)
        if plot is None:
            return None

        radius = magnitude_to_radius(self.magnitude)
        wing = max(0.5 * round(radius), 1.0)
        stroke = (Stroke(0.5, configuration.color_scheme.planetary_nebula),)
        x, y = plot

        shapes = [CircleShape(center=plot, radius=radius, styles=stroke,
                              obscurement=Obscurement.ALWAYS)]
        # four short wings pointing out of the ring
        for dx, dy in ((-1.0, 0.0), (1.0, 0.0), (0.0, -1.0), (0.0, 1.0)):
            start = (x + dx * radius, y + dy * radius)
            finish = (start[0] + dx * wing, start[1] + dy * wing)
            shapes.append(LineShape(start, finish, styles=stroke,
                                    obscurement=Obscurement.ALWAYS))

        return Graphic(object_id=self.id, shapes=shapes)


@dataclass(frozen=True)
class Nebulosity:
    """
    Extended diffuse region such as the Milky Way, drawn as a filled
    outline with holes. Its magnitude selects one of five interior
    shades (bands 0..4).
    """
    position: Position
    magnitude: float
    boundary: Tuple[Position, ...]
    holes: Tuple[Tuple[Position, ...], ...] = ()
    names: Tuple[str, ...] = ()
    id: Any = field(default_factory=uuid.uuid4)

    name_style = EXTERIOR_NAMES

    def interior_band(self) -> int:
        """
        Shade band for the magnitude. Values that are not exactly one of
        0..4 are rounded to the nearest band and clamped into range.
        """
        band = min(max(int(round(self.magnitude)), 0), 4)
        if band != self.magnitude:
            logger.warning("Nebulosity magnitude %s is not a whole band 0..4, using %d",
                           self.magnitude, band)
        return band

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        scheme = configuration.color_scheme
        vertices = _plot_positions(projector, self.boundary)
        if len(vertices) < 3:
            return None
        holes = tuple(h for h in (_plot_positions(projector, ring) for ring in self.holes)
                      if len(h) >= 3)

        styles = [Fill(scheme.milky_way_interior[self.interior_band()])]
        if configuration.show_milky_way_border:
            styles.append(Stroke(0.5, scheme.milky_way_border))

        shape = PolygonShape(vertices=vertices, holes=holes, styles=tuple(styles),
                             obscurement=Obscurement.NEVER)
        return Graphic(object_id=self.id, shapes=[shape])


def _plot_positions(projector: Projector, positions: Sequence[Position]) -> Tuple[Point, ...]:
    points: List[Point] = []
    for position in positions:
        plot = projector.project(position)
        if plot is not None:
            points.append((float(round(plot[0])), float(round(plot[1]))))
    return tuple(points)
