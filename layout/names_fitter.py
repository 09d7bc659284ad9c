"""
Names Fitter

Places the names of chart entities so they neither hide each other nor
the graphics they describe.

The fitter is a greedy, priority-ordered heuristic: brighter entities
(lower magnitude) claim space first, and each placed name becomes an
opaque graphic that every later candidate must avoid. For each name:

  1. the text resolver measures it (no measurement, no name)
  2. candidate slots are generated from the entity's own graphic
     (ring slots, or boundary slots for grid lines)
  3. candidates are filtered and bucketed by obscurement:
       ALWAYS    -> rejected
       PREFERRED -> secondary bucket
       NEVER     -> primary bucket
  4. the candidate with the most open space around it is chosen,
     primary bucket first

Nothing here raises: an entity without a visible graphic, a name that
cannot be measured, or a name without an acceptable slot simply produces
no label.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple,
    runtime_checkable,
)

import numpy as np

from core.types import Rect, Size
from layout import boundary_slots, name_slots
from layout.name_slots import Slot
from rendering.graphic import (
    Color, Fill, Graphic, Obscurement, RectangleShape, TextShape,
)
from rendering.overlap import graphic_obscurement, graphic_overlaps_rect

logger = logging.getLogger(__name__)

# (opaque text handle, (width, height) in pixels), or None if unresolvable
TextResolver = Callable[[str], Optional[Tuple[Any, Size]]]

# Padding of the optional background behind a name, pixels
BACKGROUND_PADDING = 1.0


class FittingStyle(Enum):
    INTERIOR = "interior"   # the name may cover its own non-opaque shapes
    EXTERIOR = "exterior"   # the name must stay clear of its own graphic
    BOUNDARY = "boundary"   # the name sits where the graphic meets the view edge


@dataclass(frozen=True)
class NameStyle:
    fitting_style: FittingStyle = FittingStyle.EXTERIOR
    text_background: Optional[Color] = None


DEFAULT_NAME_STYLE = NameStyle()


@runtime_checkable
class Nameable(Protocol):
    """
    Anything with an id and names. Optional attributes, read once:
      name_style: NameStyle (default: exterior, no background)
      magnitude:  float, lower is placed first (default: before everything)
    """
    id: Any
    names: Sequence[str]


@dataclass(frozen=True)
class _Entry:
    id: Any
    names: Tuple[str, ...]
    fitting_style: FittingStyle
    text_background: Optional[Color]
    magnitude: float


def _sort_magnitude(magnitude: Optional[float]) -> float:
    """No magnitude sorts first; an undefined (NaN) one sorts last."""
    if magnitude is None:
        return -math.inf
    magnitude = float(magnitude)
    return math.inf if math.isnan(magnitude) else magnitude


def _ingest(nameable: Nameable) -> _Entry:
    style = getattr(nameable, "name_style", None) or DEFAULT_NAME_STYLE
    magnitude = getattr(nameable, "magnitude", None)
    return _Entry(
        id=nameable.id,
        names=tuple(nameable.names),
        fitting_style=style.fitting_style,
        text_background=style.text_background,
        magnitude=_sort_magnitude(magnitude),
    )


def _merge_graphics(graphics: Iterable[Graphic]) -> Dict[Any, Graphic]:
    lookup: Dict[Any, Graphic] = {}
    for g in graphics:
        existing = lookup.get(g.object_id)
        if existing is None:
            lookup[g.object_id] = g
        else:
            lookup[g.object_id] = Graphic(g.object_id, existing.shapes + g.shapes)
    return lookup


class NamesFitter:
    """
    Fits names for a set of nameable entities against existing graphics.

    The fitter holds only its inputs; every call to fit() starts from a
    fresh id -> graphic map, so repeated or concurrent calls are
    independent and produce identical results for identical resolvers.
    """

    def __init__(self, nameables: Iterable[Nameable], graphics: Iterable[Graphic],
                 view_size: Size, background_color: Optional[Color] = None):
        """
        Args:
            nameables: entities to name, any order
            graphics: graphics of all visible objects and furniture
            view_size: (width, height) of the view in pixels
            background_color: ambient background drawn behind every name;
                              None draws a background only for entities
                              that declare one
        """
        self.view_size = (float(view_size[0]), float(view_size[1]))
        self.view_rect = Rect(0.0, 0.0, self.view_size[0], self.view_size[1])
        self.background_color = background_color
        self._graphics = tuple(graphics)
        entries = [_ingest(n) for n in nameables]
        # stable: equal magnitudes keep their input order
        self._entries = sorted(entries, key=lambda e: e.magnitude)

    def fit(self, text_resolver: TextResolver) -> List[Graphic]:
        lookup = _merge_graphics(self._graphics)
        labels: List[Graphic] = []

        for entry in self._entries:
            own = lookup.get(entry.id)
            if own is None:
                continue

            for name in entry.names:
                resolved = text_resolver(name)
                if resolved is None:
                    logger.debug("No text for name %r", name)
                    continue
                handle, size = resolved

                label = self._fit_name(entry, name, handle, size, own, lookup)
                if label is None:
                    logger.debug("No room for name %r", name)
                    continue

                lookup[label.object_id] = label
                labels.append(label)

        logger.info("Fitted %d names for %d entities", len(labels), len(self._entries))
        return labels

    # -----------------------------------------------------------------------
    # Per-name fitting
    # -----------------------------------------------------------------------

    def _fit_name(self, entry: _Entry, name: str, handle: Any, size: Size,
                  own: Graphic, lookup: Dict[Any, Graphic]) -> Optional[Graphic]:
        if entry.fitting_style is FittingStyle.BOUNDARY:
            rect = self._fit_boundary(own, size)
        else:
            rect = self._fit_ring(entry, name, size, own, lookup)

        if rect is None:
            return None
        return self._make_label(entry, rect, handle)

    def _fit_boundary(self, own: Graphic, size: Size) -> Optional[Rect]:
        slots = boundary_slots.slots_for_name(own, size, self.view_size)
        if not slots:
            return None
        rect = slots[0].rect
        if not self.view_rect.contains_rect(rect):
            return None
        return rect

    def _fit_ring(self, entry: _Entry, name: str, size: Size, own: Graphic,
                  lookup: Dict[Any, Graphic]) -> Optional[Rect]:
        slots = name_slots.slots_for_name(name, own, size)
        if not slots:
            return None

        others = [g for g in lookup.values() if g.object_id != own.object_id]
        # exterior names already keep clear of every own shape
        if entry.fitting_style is FittingStyle.EXTERIOR:
            blockers = others
        else:
            blockers = list(lookup.values())
        primary, secondary = self._bucket_slots(slots, entry.fitting_style, own, blockers)

        chosen = self._select(primary, others) or self._select(secondary, others)
        return chosen.rect if chosen is not None else None

    def _bucket_slots(self, slots: Sequence[Slot], style: FittingStyle,
                      own: Graphic, blockers: Sequence[Graphic]):
        primary: List[Slot] = []
        secondary: List[Slot] = []

        for slot in slots:
            if not self.view_rect.contains_rect(slot.rect):
                continue

            # a name never sits on the thing it names
            if style is FittingStyle.EXTERIOR and graphic_overlaps_rect(own, slot.rect):
                continue

            worst = graphic_obscurement(blockers, slot.rect)
            if worst == Obscurement.ALWAYS:
                continue
            if worst == Obscurement.PREFERRED:
                secondary.append(slot)
            else:
                primary.append(slot)

        return primary, secondary

    @staticmethod
    def _select(slots: Sequence[Slot], others: Sequence[Graphic]) -> Optional[Slot]:
        """
        Pick the slot whose centre is farthest from the nearest shape
        midpoint of any other graphic. Ties go to the earliest slot.
        """
        if not slots:
            return None
        if len(slots) == 1:
            return slots[0]

        midpoints = [s.midpoint for g in others for s in g.shapes]
        if not midpoints:
            return slots[0]

        mids = np.asarray(midpoints, dtype=np.float64)
        centers = np.asarray([s.rect.center for s in slots], dtype=np.float64)
        d2 = ((centers[:, None, :] - mids[None, :, :]) ** 2).sum(axis=2)
        nearest = d2.min(axis=1)
        # argmax returns the first index of the maximum
        return slots[int(np.argmax(nearest))]

    def _make_label(self, entry: _Entry, rect: Rect, handle: Any) -> Graphic:
        shapes = []
        background = entry.text_background
        if background is None:
            background = self.background_color
        if background is not None:
            shapes.append(RectangleShape(
                rect=rect.enlarge(BACKGROUND_PADDING),
                styles=(Fill(background),),
                obscurement=Obscurement.ALWAYS))
        shapes.append(TextShape(rect=rect, text=handle, obscurement=Obscurement.ALWAYS))
        return Graphic.new_label(shapes)
