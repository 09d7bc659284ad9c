"""
Chart configuration and colour scheme.

Configuration is plain data: what to show, how to project, which colours
to use. It is read once before a layout pass and never mutated by it.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, Tuple

from core.celestial_math import Projection

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ColorScheme:
    """
    Colour palette for a printed-atlas look: dark ink on a pale field.
    """
    background:                  RGB = (240, 255, 255)
    constellation_pattern:       RGB = (192, 192, 216)
    coordinate_lines:            RGB = (182, 182, 182)
    coordinate_text:             RGB = (182, 182, 182)
    coordinate_text_background:  RGB = (240, 255, 255)
    star:                        RGB = (0, 0, 0)
    planet:                      RGB = (48, 48, 48)
    star_name_text:              RGB = (32, 32, 32)
    cluster_name_text:           RGB = (32, 32, 32)
    cluster_border:              RGB = (0, 0, 0)
    cluster_interior:            RGB = (240, 230, 130)
    planetary_nebula_name:       RGB = (32, 32, 32)
    planetary_nebula:            RGB = (0, 0, 0)
    milky_way_border:            RGB = (128, 128, 128)
    # Milky Way interior, magnitude bands 0..4
    milky_way_interior: Tuple[RGB, ...] = (
        (240, 230, 130),
        (200, 230, 130),
        (160, 230, 130),
        (120, 230, 130),
        (80, 230, 130),
    )


STANDARD_COLOR_SCHEME = ColorScheme()


@dataclass
class Configuration:
    projection: Projection = Projection.GNOMONIC
    color_scheme: ColorScheme = field(default_factory=ColorScheme)

    show_names: bool = True
    show_star_aura: bool = True
    show_milky_way_border: bool = False
    # Paint the chart background behind every name, not only grid labels
    name_backgrounds: bool = False

    # Grid spacing; None hides that family of coordinate lines
    latitude_spacing_deg: Optional[float] = 10.0
    longitude_spacing_deg: Optional[float] = 15.0

    # Tap radius in pixels; None disables hit testing
    tap_effective_radius: Optional[float] = 20.0

    name_font_size: int = 12

    @classmethod
    def from_dict(cls, data: dict) -> "Configuration":
        """
        Build a configuration from a JSON-style dict.

        Raises:
            ValueError: on unknown keys or an unknown projection name
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = dict(data)
        if "projection" in values:
            try:
                values["projection"] = Projection(values["projection"])
            except ValueError:
                raise ValueError(f"Unknown projection: {values['projection']!r}") from None
        if "color_scheme" in values:
            values["color_scheme"] = _color_scheme_from_dict(values["color_scheme"])

        for key in ("latitude_spacing_deg", "longitude_spacing_deg"):
            spacing = values.get(key)
            if spacing is not None and spacing <= 0:
                raise ValueError(f"{key} must be positive, got {spacing}")

        return cls(**values)


def _color_scheme_from_dict(data: dict) -> ColorScheme:
    known = {f.name for f in fields(ColorScheme)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown colour scheme keys: {', '.join(unknown)}")

    values = {}
    for key, value in data.items():
        if key == "milky_way_interior":
            values[key] = tuple(tuple(c) for c in value)
        else:
            values[key] = tuple(value)
    return replace(STANDARD_COLOR_SCHEME, **values)


def load_configuration(path: str | Path) -> Configuration:
    """
    Load a configuration from a JSON file.

    Args:
        path: JSON file holding a subset of the Configuration fields

    Returns:
        Configuration with defaults for every key the file omits
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = json.load(f)
    config = Configuration.from_dict(data)
    logger.info("Loaded chart configuration from %s", path)
    return config
