"""
Chart Layout

Builds one chart in three strictly ordered phases:

  1. furniture  - coordinate grid and constellation figures
  2. objects    - stars, planets and deep sky objects, brightest first
  3. names      - one names fitter pass over everything plotted above

Each phase completes before the next starts, so the fitter always sees the
full set of graphics it has to avoid.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from catalogs.furniture import CoordinateLine
from core.celestial_math import Projector, minute_scale
from core.configuration import Configuration
from core.types import Point, ViewGeometry
from layout.names_fitter import Nameable, NamesFitter, TextResolver
from rendering.graphic import Graphic

logger = logging.getLogger(__name__)


class ChartLayout:
    """
    Layout of one view of the sky.

    Objects and furniture are anything with an ``id`` and a
    ``plot_graphic(projector, configuration)`` method returning a Graphic
    or None. Those that also carry ``names`` are offered to the fitter.
    """

    def __init__(self, objects: Iterable[Any], furniture: Iterable[Any],
                 configuration: Configuration, view: ViewGeometry):
        self.configuration = configuration
        self.view = view
        self.objects = list(objects)
        self.furniture = list(furniture)

        self.projector: Projector = configuration.projection.make_projector(view)
        self.minute_scale = minute_scale(self.projector, view)

        self.furniture_graphics: List[Graphic] = []
        self.object_graphics: List[Graphic] = []
        self._coordinate_lines: List[CoordinateLine] = []
        self._plotted: List[Tuple[Any, Graphic]] = []
        self._tree: Optional[cKDTree] = None

    # -----------------------------------------------------------------------
    # Phases
    # -----------------------------------------------------------------------

    def build(self):
        """Run the furniture and object phases."""
        self.build_furniture()
        self.build_objects()

    def build_furniture(self) -> List[Graphic]:
        self._coordinate_lines = self._make_coordinate_lines()
        graphics = []
        for item in [*self._coordinate_lines, *self.furniture]:
            graphic = item.plot_graphic(self.projector, self.configuration)
            if graphic is not None:
                graphics.append(graphic)

        self.furniture_graphics = graphics
        logger.info("Plotted %d furniture graphics", len(graphics))
        return graphics

    def build_objects(self) -> List[Graphic]:
        plotted = []
        for obj in sorted(self.objects, key=lambda o: o.magnitude):
            graphic = obj.plot_graphic(self.projector, self.configuration)
            if graphic is not None:
                plotted.append((obj, graphic))

        self._plotted = plotted
        self.object_graphics = [g for _, g in plotted]
        self._tree = None
        logger.info("Plotted %d of %d objects", len(plotted), len(self.objects))
        return self.object_graphics

    def layout_names(self, text_resolver: TextResolver) -> List[Graphic]:
        """
        Fit names for every nameable furniture item and plotted object.
        Returns no labels when names are switched off.
        """
        if not self.configuration.show_names:
            return []

        candidates: Sequence[Any] = [*self._coordinate_lines, *self.furniture,
                                     *(obj for obj, _ in self._plotted)]
        nameables = [c for c in candidates if isinstance(c, Nameable)]

        background = None
        if self.configuration.name_backgrounds:
            background = self.configuration.color_scheme.background

        fitter = NamesFitter(nameables,
                             [*self.furniture_graphics, *self.object_graphics],
                             self.view.size, background_color=background)
        return fitter.fit(text_resolver)

    @property
    def graphics(self) -> List[Graphic]:
        """Furniture first, then objects, in drawing order."""
        return [*self.furniture_graphics, *self.object_graphics]

    # -----------------------------------------------------------------------
    # Hit testing
    # -----------------------------------------------------------------------

    def nearest_object(self, point: Point) -> Optional[Tuple[Any, float]]:
        """Plotted object whose glyph centre is closest to a screen point."""
        if not self._plotted:
            return None
        if self._tree is None:
            centres = np.asarray([_glyph_centre(g) for _, g in self._plotted],
                                 dtype=np.float64)
            self._tree = cKDTree(centres)

        distance, index = self._tree.query(np.asarray(point, dtype=np.float64))
        return self._plotted[int(index)][0], float(distance)

    def _make_coordinate_lines(self) -> List[CoordinateLine]:
        config = self.configuration
        background = config.color_scheme.coordinate_text_background
        lines: List[CoordinateLine] = []
        if config.latitude_spacing_deg is not None:
            lines.extend(CoordinateLine.latitudes(config.latitude_spacing_deg, background))
        if config.longitude_spacing_deg is not None:
            lines.extend(CoordinateLine.longitudes(config.longitude_spacing_deg, background))
        return lines


def _glyph_centre(graphic: Graphic) -> Point:
    circle = graphic.largest_circle()
    if circle is not None:
        return circle.center
    return graphic.shapes[0].bounds.center
