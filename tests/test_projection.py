from __future__ import annotations

import math

import pytest

from core.celestial_math import (
    GnomonicProjection,
    NEAR_VIEW_MARGIN_PX,
    Projection,
    Projector,
    ReversibleProjector,
    apparent_size,
    magnitude_to_radius,
    minute_scale,
)
from core.coords import clamp, fnv1a_32, ra_hours, wrap_deg
from core.types import Position, Rect, ViewGeometry


def test_centre_projects_to_view_middle() -> None:
    proj = GnomonicProjection(120.0, 30.0, 60.0, 800, 600)
    assert proj.project(Position(120.0, 30.0)) == pytest.approx((400.0, 300.0))


def test_scale_uses_shorter_side() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    assert proj.k == pytest.approx(300.0 / math.radians(30.0))


def test_ra_increases_to_the_left_and_north_is_up() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    east = proj.project(Position(10.0, 0.0))
    north = proj.project(Position(0.0, 10.0))
    assert east[0] < 400.0
    assert east[1] == pytest.approx(300.0)
    assert north[1] < 300.0
    assert north[0] == pytest.approx(400.0)


def test_tangent_distance() -> None:
    # gnomonic: a point 10 degrees from the centre lies k * tan(10) away
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    x, _ = proj.project(Position(350.0, 0.0))
    assert x - 400.0 == pytest.approx(proj.k * math.tan(math.radians(10.0)))


@pytest.mark.parametrize("position", [
    Position(180.0, 0.0),    # antipode
    Position(90.0, 0.0),     # exactly on the horizon
    Position(0.0, -90.0),
])
def test_points_on_or_behind_horizon_do_not_project(position) -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    assert proj.project(position) is None


def test_near_view_margin() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    m = NEAR_VIEW_MARGIN_PX
    assert proj.is_near_view((0.0, 0.0))
    assert proj.is_near_view((-m, 600.0 + m))
    assert not proj.is_near_view((-m - 1.0, 300.0))
    assert not proj.is_near_view((400.0, 600.0 + m + 1.0))


@pytest.mark.parametrize("ra, dec", [
    (84.0, 0.0), (95.0, 12.0), (70.0, -15.0), (84.0, 25.0),
])
def test_unproject_inverts_project(ra, dec) -> None:
    proj = GnomonicProjection(84.0, 5.0, 60.0, 800, 600)
    back = proj.unproject(proj.project(Position(ra, dec)))
    assert back.ra_deg == pytest.approx(ra, abs=1e-9)
    assert back.dec_deg == pytest.approx(dec, abs=1e-9)


def test_unproject_wraps_ra_into_range() -> None:
    proj = GnomonicProjection(0.0, 0.0, 60.0, 800, 600)
    # right of centre is west, i.e. RA just below 360
    back = proj.unproject((500.0, 300.0))
    assert 270.0 < back.ra_deg < 360.0


def test_projection_is_reversible_projector() -> None:
    proj = Projection.GNOMONIC.make_projector(ViewGeometry())
    assert isinstance(proj, Projector)
    assert isinstance(proj, ReversibleProjector)


def test_minute_scale() -> None:
    view = ViewGeometry(0.0, 0.0, 60.0, 800, 600)
    proj = Projection.GNOMONIC.make_projector(view)
    expected = proj.k * math.tan(math.radians(1.0 / 60.0))
    assert minute_scale(proj, view) == pytest.approx(expected)


def test_apparent_size_near_pole_measures_southwards() -> None:
    proj = GnomonicProjection(0.0, 89.0, 20.0, 400, 400)
    size = apparent_size(proj, Position(0.0, 89.5), 1.0)
    assert size is not None and size > 0.0


@pytest.mark.parametrize("mag, radius", [
    (-2.0, 8.0), (1.0, 6.0), (3.0, 4.0), (7.0, 1.0), (12.0, 1.0),
])
def test_magnitude_to_radius(mag, radius) -> None:
    assert magnitude_to_radius(mag) == radius


def test_fnv1a_known_values() -> None:
    assert fnv1a_32("") == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C


def test_angle_helpers() -> None:
    assert wrap_deg(-30.0) == pytest.approx(330.0)
    assert wrap_deg(725.0) == pytest.approx(5.0)
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert ra_hours(45.0) == 3
    assert ra_hours(359.0) == 23


def test_rect_helpers() -> None:
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.center == (25.0, 40.0)
    assert r.contains_point((10.0, 60.0))
    assert r.contains_rect(Rect(10.0, 20.0, 30.0, 40.0))
    assert not r.contains_rect(Rect(9.0, 20.0, 30.0, 40.0))
    assert r.enlarge(1.0) == Rect(9, 19, 32, 42)
    assert Rect(0.0, 0.0, 0.0, 5.0).is_empty
