from __future__ import annotations

import pytest

from catalogs import Cluster, ConstellationPattern, Star
from core.configuration import Configuration
from core.types import Position, Rect, ViewGeometry
from layout.chart_layout import ChartLayout
from rendering.graphic import TextShape
from rendering.overlap import rect_overlaps_rect

VIEW = ViewGeometry(84.0, 0.0, 40.0, 800, 600)


def _objects():
    return [
        Star(Position(85.0, 1.0), 3.0, names=("Faint",)),
        Star(Position(84.0, 0.0), 0.5, names=("Bright",)),
        Star(Position(264.0, 0.0), 0.0, names=("Hidden",)),
        Cluster(Position(80.0, -3.0), 4.0, apparent_diameter_deg=1.0, names=("Cl",)),
    ]


def _furniture():
    return [ConstellationPattern("Belt", (
        (Position(83.0020, -0.2990), Position(85.1900, -1.9430)),
    ))]


def test_build_plots_visible_objects_brightest_first() -> None:
    layout = ChartLayout(_objects(), _furniture(), Configuration(), VIEW)
    layout.build()

    assert len(layout.object_graphics) == 3
    first = layout.object_graphics[0].largest_circle()
    assert first.center == (400.0, 300.0)
    assert layout.minute_scale > 0.0


def test_build_furniture_includes_grid_and_patterns() -> None:
    belt = _furniture()
    layout = ChartLayout([], belt, Configuration(), VIEW)
    graphics = layout.build_furniture()
    ids = {g.object_id for g in graphics}
    assert belt[0].id in ids
    assert len(graphics) >= 3               # equator, a meridian and the belt


def test_grid_can_be_hidden() -> None:
    config = Configuration(latitude_spacing_deg=None, longitude_spacing_deg=None)
    layout = ChartLayout([], _furniture(), config, VIEW)
    assert len(layout.build_furniture()) == 1


def test_layout_names(resolver) -> None:
    layout = ChartLayout(_objects(), _furniture(), Configuration(), VIEW)
    layout.build()
    labels = layout.layout_names(resolver)

    texts = [s.text for g in labels for s in g.shapes if isinstance(s, TextShape)]
    assert "Bright" in texts
    assert "Hidden" not in texts
    assert "0°" in texts

    view = Rect(0.0, 0.0, 800.0, 600.0)
    rects = [s.rect for g in labels for s in g.shapes if isinstance(s, TextShape)]
    for i, rect in enumerate(rects):
        assert view.contains_rect(rect)
        assert not any(rect_overlaps_rect(rect, other) for other in rects[i + 1:])


def test_name_backgrounds_use_chart_background(resolver) -> None:
    config = Configuration(name_backgrounds=True, latitude_spacing_deg=None,
                           longitude_spacing_deg=None)
    layout = ChartLayout(_objects(), [], config, VIEW)
    layout.build()
    labels = layout.layout_names(resolver)
    assert labels
    for label in labels:
        assert label.shapes[0].styles[0].color == config.color_scheme.background


def test_names_switched_off(resolver) -> None:
    layout = ChartLayout(_objects(), _furniture(), Configuration(show_names=False), VIEW)
    layout.build()
    assert layout.layout_names(resolver) == []


def test_nearest_object() -> None:
    objects = _objects()
    layout = ChartLayout(objects, [], Configuration(), VIEW)
    assert layout.nearest_object((400.0, 300.0)) is None

    layout.build()
    obj, distance = layout.nearest_object((403.0, 304.0))
    assert obj is objects[1]
    assert distance == pytest.approx(5.0)
