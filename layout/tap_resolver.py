"""
Tap resolution: from a screen point back to the sky.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from core.celestial_math import Projector, ReversibleProjector
from core.types import Point, Position

logger = logging.getLogger(__name__)

# point -> (object, pixel distance) or None
NearestObjectProvider = Callable[[Point], Optional[Tuple[Any, float]]]


@dataclass(frozen=True)
class TapResolution:
    position: Position
    nearest_object: Optional[Any] = None


class TapResolver:
    """Resolves taps for projectors that can invert a screen point."""

    def __init__(self, effective_radius: float, projector: ReversibleProjector,
                 provider: NearestObjectProvider):
        self.effective_radius = effective_radius
        self.projector = projector
        self.provider = provider

    @classmethod
    def create(cls, effective_radius: Optional[float], projector: Projector,
               provider: NearestObjectProvider) -> Optional["TapResolver"]:
        """None when taps are disabled or the projection cannot be inverted."""
        if effective_radius is None:
            return None
        if not isinstance(projector, ReversibleProjector):
            logger.debug("Projector %s cannot unproject, taps disabled",
                         type(projector).__name__)
            return None
        return cls(effective_radius, projector, provider)

    def resolve_tap(self, point: Point) -> Optional[TapResolution]:
        position = self.projector.unproject(point)
        if position is None:
            return None

        nearest = None
        found = self.provider(point)
        if found is not None:
            obj, distance = found
            if distance <= self.effective_radius:
                nearest = obj
        return TapResolution(position=position, nearest_object=nearest)
