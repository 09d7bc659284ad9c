"""
Layout - where things go on the chart.

    great_circle    - coordinate grid lines
    name_slots      - candidate name rectangles around a glyph
    boundary_slots  - candidate name rectangles at the view edge
    names_fitter    - greedy name placement
    tap_resolver    - screen point back to sky position

The three-phase pipeline is layout.chart_layout.ChartLayout; it depends on
the catalogs package and is imported from its own module.
"""
from .great_circle import Sense, plot_great_circle
from .name_slots import Slot
from .names_fitter import (
    FittingStyle,
    NameStyle,
    Nameable,
    NamesFitter,
    TextResolver,
)
from .tap_resolver import TapResolution, TapResolver

__all__ = [
    "Sense",
    "plot_great_circle",
    "Slot",
    "FittingStyle",
    "NameStyle",
    "Nameable",
    "NamesFitter",
    "TextResolver",
    "TapResolution",
    "TapResolver",
]
