"""
Core chart types and maths.

Main exports:
    Position, Rect, ViewGeometry  - value types
    GnomonicProjection            - tangent-plane projector (reversible)
    Projection                    - enum of available projections
    Configuration, ColorScheme    - chart settings and palette
"""
from .types import Point, Position, Rect, Size, ViewGeometry
from .celestial_math import (
    GnomonicProjection,
    Projection,
    Projector,
    ReversibleProjector,
    apparent_size,
    magnitude_to_radius,
    minute_scale,
)
from .configuration import (
    ColorScheme,
    Configuration,
    STANDARD_COLOR_SCHEME,
    load_configuration,
)

__all__ = [
    "Point",
    "Position",
    "Rect",
    "Size",
    "ViewGeometry",
    "GnomonicProjection",
    "Projection",
    "Projector",
    "ReversibleProjector",
    "apparent_size",
    "magnitude_to_radius",
    "minute_scale",
    "ColorScheme",
    "Configuration",
    "STANDARD_COLOR_SCHEME",
    "load_configuration",
]
