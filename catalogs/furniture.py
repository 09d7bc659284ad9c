"""
Chart Furniture

Everything drawn on the chart that is not a celestial object: the RA/Dec
coordinate grid and constellation stick figures.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import numpy as np

from core.celestial_math import Projector
from core.configuration import Configuration
from core.constellation_data import get_constellation_patterns
from core.coords import ra_hours
from core.types import Position
from layout.great_circle import Sense, plot_great_circle
from layout.names_fitter import FittingStyle, NameStyle
from rendering.graphic import Color, Graphic, LineShape, Obscurement, Stroke


@dataclass(frozen=True)
class CoordinateLine:
    """
    One grid line: a circle of declination (LATITUDE) or an hour circle
    (LONGITUDE). Its name is placed where the line leaves the view.
    """
    sense: Sense
    coordinate_deg: float
    names: Tuple[str, ...] = ()
    text_background: Optional[Color] = None
    id: Any = field(default_factory=uuid.uuid4)

    @property
    def name_style(self) -> NameStyle:
        return NameStyle(fitting_style=FittingStyle.BOUNDARY,
                         text_background=self.text_background)

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        graphic = plot_great_circle(
            projector, self.coordinate_deg, self.sense,
            color=configuration.color_scheme.coordinate_lines,
            object_id=self.id)
        return graphic if graphic.shapes else None

    @classmethod
    def latitudes(cls, spacing_deg: float = 10.0,
                  text_background: Optional[Color] = None) -> List["CoordinateLine"]:
        """Circles of declination from -90 to +90, named like '-10°'."""
        decs = np.arange(-90.0, 90.0 + 1e-9, spacing_deg)
        return [cls(sense=Sense.LATITUDE, coordinate_deg=float(d),
                    names=(f"{float(d):g}°",), text_background=text_background)
                for d in decs]

    @classmethod
    def longitudes(cls, spacing_deg: float = 15.0,
                   text_background: Optional[Color] = None) -> List["CoordinateLine"]:
        """Hour circles from 0h, named like '3h'."""
        ras = np.arange(0.0, 360.0 - 1e-9, spacing_deg)
        return [cls(sense=Sense.LONGITUDE, coordinate_deg=float(r),
                    names=(f"{ra_hours(float(r))}h",), text_background=text_background)
                for r in ras]


@dataclass(frozen=True)
class ConstellationPattern:
    name: str
    pattern: Tuple[Tuple[Position, Position], ...]
    id: Any = field(default_factory=uuid.uuid4)

    def plot_graphic(self, projector: Projector,
                     configuration: Configuration) -> Optional[Graphic]:
        stroke = (Stroke(1.0, configuration.color_scheme.constellation_pattern),)
        shapes = []
        for pos1, pos2 in self.pattern:
            p1 = projector.project(pos1)
            p2 = projector.project(pos2)
            if p1 is None or p2 is None:
                continue
            if not (projector.is_near_view(p1) or projector.is_near_view(p2)):
                continue
            # whole pixels, truncated
            start = (float(int(p1[0])), float(int(p1[1])))
            finish = (float(int(p2[0])), float(int(p2[1])))
            shapes.append(LineShape(start, finish, styles=stroke,
                                    obscurement=Obscurement.PREFERRED))

        if not shapes:
            return None
        return Graphic(object_id=self.id, shapes=shapes)


def standard_constellations() -> List[ConstellationPattern]:
    patterns = []
    for name, segments in get_constellation_patterns().items():
        pattern = tuple((Position(*a), Position(*b)) for a, b in segments)
        patterns.append(ConstellationPattern(name=name, pattern=pattern))
    return patterns
