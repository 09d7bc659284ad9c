"""
Star chart viewer.

Opens a pygame window on a gnomonic chart with labelled stars, grid and
constellation figures, or writes a single PNG with --screenshot.

Keys: arrows pan, +/- zoom, N toggles names, Esc quits. Clicking reports
the sky position and the nearest object.
"""

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import pygame

from catalogs import (
    Cluster, ClusterType, Nebulosity, Planet, PlanetaryNebula, Star,
    standard_constellations,
)
from core.configuration import Configuration, load_configuration
from core.constellation_data import get_named_stars
from core.coords import clamp
from core.types import Position, ViewGeometry
from layout.chart_layout import ChartLayout
from layout.tap_resolver import TapResolver
from rendering.artist import GraphicsArtist, make_text_resolver

logger = logging.getLogger("starchart")

W, H = 1200, 720

# Visual magnitudes of the brighter figure stars; the rest default to 3
_MAGNITUDES = {
    "Sirius": -1.46, "Vega": 0.03, "Capella": 0.08, "Rigel": 0.13,
    "Betelgeuse": 0.50, "Altair": 0.77, "Aldebaran": 0.85, "Antares": 0.96,
    "Pollux": 1.14, "Deneb": 1.25, "Castor": 1.58, "Bellatrix": 1.64,
    "Elnath": 1.65, "Alnilam": 1.69, "Alnitak": 1.77, "Alioth": 1.77,
    "Dubhe": 1.79, "Alkaid": 1.86, "Sargas": 1.86, "Alhena": 1.92,
    "Saiph": 2.06, "Mizar": 2.23, "Schedar": 2.24, "Sadr": 2.23,
    "Mintaka": 2.23, "Caph": 2.28, "Dschubba": 2.29, "Merak": 2.37,
    "Gamma Cas": 2.47, "Phecda": 2.44, "Shaula": 1.62, "Gienah": 2.48,
}

_DOUBLES = {"Mizar", "Albireo", "Castor"}
_VARIABLES = {"Betelgeuse", "Gamma Cas", "Sheliak"}


def demo_objects() -> List[object]:
    objects: List[object] = []
    for name, (ra, dec) in get_named_stars().items():
        objects.append(Star(position=Position(ra, dec),
                            magnitude=_MAGNITUDES.get(name, 3.0),
                            names=(name,),
                            is_double=name in _DOUBLES,
                            is_variable=name in _VARIABLES))

    objects += [
        Planet(Position(74.0, 22.5), -2.2, names=("Jupiter",)),
        Cluster(Position(56.75, 24.12), 1.6, apparent_diameter_deg=1.8,
                names=("Pleiades", "M45")),
        Cluster(Position(250.42, 36.46), 5.8, apparent_diameter_deg=0.33,
                cluster_type=ClusterType.GLOBULAR, names=("M13",)),
        PlanetaryNebula(Position(283.40, 33.03), 8.8, names=("M57",)),
        Nebulosity(Position(300.0, 38.0), 1,
                   boundary=(Position(290.0, 20.0), Position(300.0, 30.0),
                             Position(312.0, 48.0), Position(318.0, 52.0),
                             Position(308.0, 55.0), Position(298.0, 42.0),
                             Position(286.0, 28.0)),
                   holes=((Position(300.0, 40.0), Position(304.0, 44.0),
                           Position(300.0, 46.0)),)),
    ]
    return objects


class ChartApp:
    """Holds the current view and rebuilds the layout whenever it changes."""

    def __init__(self, view: ViewGeometry, configuration: Configuration):
        self.view = view
        self.configuration = configuration
        self.objects = demo_objects()
        self.furniture = standard_constellations()

        self.font = pygame.font.Font(None, configuration.name_font_size + 4)
        self.resolver = make_text_resolver(self.font,
                                           configuration.color_scheme.star_name_text)
        self.layout: Optional[ChartLayout] = None
        self.labels = []
        self.tap_resolver: Optional[TapResolver] = None
        self.rebuild()

    def rebuild(self):
        self.layout = ChartLayout(self.objects, self.furniture,
                                  self.configuration, self.view)
        self.layout.build()
        self.labels = self.layout.layout_names(self.resolver)
        self.tap_resolver = TapResolver.create(
            self.configuration.tap_effective_radius,
            self.layout.projector, self.layout.nearest_object)

    def draw(self, surface: pygame.Surface):
        artist = GraphicsArtist(surface, self.configuration.color_scheme)
        artist.clear()
        artist.draw_graphics(self.layout.graphics)
        artist.draw_graphics(self.labels)

    def pan(self, d_ra: float, d_dec: float):
        step = self.view.diameter_deg / 10.0
        dec = clamp(self.view.center_dec_deg + d_dec * step, -89.0, 89.0)
        ra = (self.view.center_ra_deg + d_ra * step) % 360.0
        self.view = replace(self.view, center_ra_deg=ra, center_dec_deg=dec)
        self.rebuild()

    def zoom(self, factor: float):
        diameter = clamp(self.view.diameter_deg * factor, 2.0, 120.0)
        self.view = replace(self.view, diameter_deg=diameter)
        self.rebuild()

    def toggle_names(self):
        self.configuration = replace(self.configuration,
                                     show_names=not self.configuration.show_names)
        self.rebuild()

    def tap(self, point):
        if self.tap_resolver is None:
            return
        resolution = self.tap_resolver.resolve_tap((float(point[0]), float(point[1])))
        if resolution is None:
            return
        pos = resolution.position
        obj = resolution.nearest_object
        logger.info("Tap at RA %.3f Dec %+.3f, nearest: %s", pos.ra_deg, pos.dec_deg,
                    obj.names[0] if obj is not None and obj.names else "nothing")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Gnomonic star chart with fitted names")
    parser.add_argument("--ra", type=float, default=84.0, help="view centre RA, degrees")
    parser.add_argument("--dec", type=float, default=5.0, help="view centre Dec, degrees")
    parser.add_argument("--diameter", type=float, default=60.0,
                        help="angular diameter of the shorter side, degrees")
    parser.add_argument("--width", type=int, default=W)
    parser.add_argument("--height", type=int, default=H)
    parser.add_argument("--config", type=Path, help="JSON chart configuration")
    parser.add_argument("--screenshot", type=Path,
                        help="write one frame to this PNG and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    configuration = load_configuration(args.config) if args.config else Configuration()
    view = ViewGeometry(args.ra, args.dec, args.diameter, args.width, args.height)

    pygame.init()

    if args.screenshot:
        app = ChartApp(view, configuration)
        surface = pygame.Surface((view.width, view.height))
        app.draw(surface)
        pygame.image.save(surface, str(args.screenshot))
        logger.info("Wrote %s", args.screenshot)
        pygame.quit()
        return

    screen = pygame.display.set_mode((view.width, view.height))
    pygame.display.set_caption("Star Chart")
    clock = pygame.time.Clock()
    app = ChartApp(view, configuration)

    keys = {
        pygame.K_LEFT:  lambda: app.pan(1, 0),
        pygame.K_RIGHT: lambda: app.pan(-1, 0),
        pygame.K_UP:    lambda: app.pan(0, 1),
        pygame.K_DOWN:  lambda: app.pan(0, -1),
        pygame.K_PLUS:  lambda: app.zoom(0.8),
        pygame.K_EQUALS: lambda: app.zoom(0.8),
        pygame.K_MINUS: lambda: app.zoom(1.25),
        pygame.K_n:     app.toggle_names,
    }

    running = True
    while running:
        clock.tick(30)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in keys:
                    keys[ev.key]()
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                app.tap(ev.pos)

        app.draw(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
