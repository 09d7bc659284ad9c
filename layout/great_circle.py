"""
Great circles: coordinate grid lines swept around the whole sphere.

A circle of latitude holds declination fixed and sweeps right ascension;
a circle of longitude holds right ascension fixed and sweeps declination.
Each is sampled at fixed steps, projected, and split into the runs of
consecutive visible samples. Every run becomes a polyline of soft
(PREFERRED) line shapes: names may cover grid lines if nothing better fits.
"""

from __future__ import annotations
import uuid
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from core.celestial_math import Projector
from core.types import Point, Position
from rendering.graphic import Color, Graphic, LineShape, Obscurement, Stroke


class Sense(Enum):
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


# Sample tables, degrees. 121 samples around a latitude ring (the first
# and last coincide so the ring closes), 17 along a longitude meridian.
LATITUDE_SWEEP = np.arange(0, 361, 3, dtype=np.float64)
LONGITUDE_SWEEP = np.arange(-80, 81, 10, dtype=np.float64)


def sweep_for(sense: Sense) -> np.ndarray:
    return LATITUDE_SWEEP if sense is Sense.LATITUDE else LONGITUDE_SWEEP


def position_on_circle(sense: Sense, angle_deg: float, sweep_deg: float) -> Position:
    if sense is Sense.LATITUDE:
        return Position(ra_deg=sweep_deg, dec_deg=angle_deg)
    return Position(ra_deg=angle_deg, dec_deg=sweep_deg)


def sample_points(projector: Projector, angle_deg: float,
                  sense: Sense) -> List[Optional[Point]]:
    """Projected samples, None where a sample cannot be projected."""
    return [projector.project(position_on_circle(sense, angle_deg, float(s)))
            for s in sweep_for(sense)]


def extract_runs(points: Sequence[Optional[Point]]) -> List[List[Point]]:
    """
    Maximal runs of consecutive non-None points with at least two points.
    The sequence must be None-terminated so the final run is flushed.
    """
    if points and points[-1] is not None:
        raise ValueError("points must be None-terminated")

    runs: List[List[Point]] = []
    current: List[Point] = []
    for pt in points:
        if pt is not None:
            current.append(pt)
            continue
        if len(current) > 1:
            runs.append(current)
        current = []
    return runs


def run_to_lines(run: Sequence[Point], color: Color) -> List[LineShape]:
    style = (Stroke(width=1.0, color=color),)
    return [LineShape(start=a, finish=b, styles=style,
                      obscurement=Obscurement.PREFERRED)
            for a, b in zip(run, run[1:])]


def plot_great_circle(projector: Projector, angle_deg: float, sense: Sense,
                      color: Color, object_id=None) -> Graphic:
    """
    Plot the visible parts of one great circle.

    Args:
        projector: sphere to screen projection
        angle_deg: the fixed coordinate (declination for LATITUDE,
                   right ascension for LONGITUDE)
        sense: which family of great circle
        color: stroke colour of the lines
        object_id: owner id; a fresh id when omitted

    Returns:
        Graphic of PREFERRED line shapes (possibly none)
    """
    points = sample_points(projector, angle_deg, sense)
    points.append(None)

    shapes: List[LineShape] = []
    for run in extract_runs(points):
        shapes.extend(run_to_lines(run, color))

    return Graphic(object_id=object_id if object_id is not None else uuid.uuid4(),
                   shapes=shapes)
