from __future__ import annotations

from typing import Optional

import pytest

from core.celestial_math import GnomonicProjection
from core.types import Point, Position
from layout.great_circle import (
    LATITUDE_SWEEP,
    LONGITUDE_SWEEP,
    Sense,
    extract_runs,
    plot_great_circle,
)
from rendering.graphic import LineShape, Obscurement

GREY = (182, 182, 182)


def test_sample_tables() -> None:
    assert len(LATITUDE_SWEEP) == 121
    assert LATITUDE_SWEEP[0] == 0.0 and LATITUDE_SWEEP[-1] == 360.0
    assert len(LONGITUDE_SWEEP) == 17
    assert LONGITUDE_SWEEP[0] == -80.0 and LONGITUDE_SWEEP[-1] == 80.0


def test_extract_runs_drops_isolated_points() -> None:
    a, b, c, d, e = (0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0), (4.0, 0.0)
    runs = extract_runs([a, b, None, c, None, d, e, None])
    assert runs == [[a, b], [d, e]]


def test_extract_runs_single_gap_splits_runs() -> None:
    a, b, d, e = (0.0, 0.0), (1.0, 0.0), (3.0, 0.0), (4.0, 0.0)
    assert extract_runs([a, b, None, d, e, None]) == [[a, b], [d, e]]


def test_extract_runs_empty_and_all_hidden() -> None:
    assert extract_runs([]) == []
    assert extract_runs([None, None]) == []


def test_extract_runs_requires_terminator() -> None:
    with pytest.raises(ValueError):
        extract_runs([(0.0, 0.0), (1.0, 1.0)])


def test_equator_splits_into_two_runs() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    graphic = plot_great_circle(proj, 0.0, Sense.LATITUDE, GREY, object_id="equator")

    assert graphic.object_id == "equator"
    # RA 0..87 and 273..360 are in front of the tangent plane, 30 samples each
    assert len(graphic.shapes) == 58
    for line in graphic.shapes:
        assert isinstance(line, LineShape)
        assert line.obscurement == Obscurement.PREFERRED
        assert line.start[1] == pytest.approx(300.0)
        assert line.finish[1] == pytest.approx(300.0)


def test_meridian_through_centre_is_one_run() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    graphic = plot_great_circle(proj, 0.0, Sense.LONGITUDE, GREY)
    assert len(graphic.shapes) == 16
    assert all(s.start[0] == pytest.approx(400.0) for s in graphic.shapes)
    # consecutive lines share endpoints
    for first, second in zip(graphic.shapes, graphic.shapes[1:]):
        assert first.finish == second.start


def test_hidden_circle_plots_nothing() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    assert plot_great_circle(proj, 180.0, Sense.LONGITUDE, GREY).shapes == ()

    polar = GnomonicProjection(0.0, 90.0, 60.0, 800, 600)
    assert plot_great_circle(polar, 0.0, Sense.LATITUDE, GREY).shapes == ()


def test_fresh_id_when_none_given() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    g1 = plot_great_circle(proj, 0.0, Sense.LONGITUDE, GREY)
    g2 = plot_great_circle(proj, 0.0, Sense.LONGITUDE, GREY)
    assert g1.object_id != g2.object_id


class _BlindSpotProjector:
    """Projects declination straight to x, except at the equator."""

    def project(self, position: Position) -> Optional[Point]:
        if position.dec_deg == 0.0:
            return None
        return (position.dec_deg, 0.0)


def test_one_unprojectable_sample_splits_the_circle() -> None:
    graphic = plot_great_circle(_BlindSpotProjector(), 0.0, Sense.LONGITUDE, GREY)

    # -80..-10 and 10..80: eight samples and seven lines each
    assert len(graphic.shapes) == 14
    south = [s for s in graphic.shapes if s.start[0] < 0.0]
    north = [s for s in graphic.shapes if s.start[0] > 0.0]
    assert len(south) == 7 and len(north) == 7
    assert all(s.finish[0] < 0.0 for s in south)
    assert not any(s.start == (-10.0, 0.0) and s.finish == (10.0, 0.0)
                   for s in graphic.shapes)
