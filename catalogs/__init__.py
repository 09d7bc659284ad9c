"""
Catalogs - the things a chart shows.

Objects (stars, planets, deep sky) and furniture (grid lines,
constellation figures) each plot their own Graphic through a projector.
"""
from .objects import (
    Cluster,
    ClusterType,
    Nebulosity,
    Planet,
    PlanetaryNebula,
    Star,
)
from .furniture import ConstellationPattern, CoordinateLine, standard_constellations

__all__ = [
    "Cluster",
    "ClusterType",
    "Nebulosity",
    "Planet",
    "PlanetaryNebula",
    "Star",
    "ConstellationPattern",
    "CoordinateLine",
    "standard_constellations",
]
