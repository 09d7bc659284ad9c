"""
Graphics Artist

Draws layout Graphics onto a pygame Surface, and measures names with a
pygame font for the names fitter.

Nothing in the layout core touches pygame: shapes are plain geometry plus
Fill/Stroke styles, and text handles are whatever the resolver returns
(here, a pre-rendered Surface).
"""

from __future__ import annotations
from typing import Iterable, Optional, Tuple

import pygame

from core.configuration import ColorScheme
from core.types import Rect, Size
from layout.names_fitter import TextResolver
from rendering.graphic import (
    CircleShape, Color, Fill, Graphic, LineShape, PolygonShape, RectangleShape,
    Stroke, TextShape,
)


def make_text_resolver(font: pygame.font.Font, color: Color) -> TextResolver:
    """
    Build a TextResolver that renders names with a pygame font.
    The handle is the rendered Surface; empty names do not resolve.
    """
    def resolve(name: str) -> Optional[Tuple[pygame.Surface, Size]]:
        if not name:
            return None
        surface = font.render(name, True, color)
        w, h = surface.get_size()
        return surface, (float(w), float(h))

    return resolve


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))


def _ipt(p) -> Tuple[int, int]:
    return (int(round(p[0])), int(round(p[1])))


def _stroke_width(stroke: Stroke) -> int:
    # pygame cannot draw hairlines thinner than one pixel
    return max(1, int(round(stroke.width)))


class GraphicsArtist:
    """Renders Graphics onto a pygame Surface, in the order given."""

    def __init__(self, surface: pygame.Surface, color_scheme: ColorScheme):
        self.surface = surface
        self.color_scheme = color_scheme

    def clear(self):
        self.surface.fill(self.color_scheme.background)

    def draw_graphics(self, graphics: Iterable[Graphic]):
        for graphic in graphics:
            self.draw_graphic(graphic)

    def draw_graphic(self, graphic: Graphic):
        for shape in graphic.shapes:
            if isinstance(shape, TextShape):
                self._draw_text(shape)
            elif isinstance(shape, CircleShape):
                self._draw_circle(shape)
            elif isinstance(shape, LineShape):
                self._draw_line(shape)
            elif isinstance(shape, RectangleShape):
                self._draw_rect(shape)
            elif isinstance(shape, PolygonShape):
                self._draw_polygon(shape)

    # -----------------------------------------------------------------------
    # Shapes
    # -----------------------------------------------------------------------

    def _draw_circle(self, shape: CircleShape):
        center = _ipt(shape.center)
        radius = int(round(shape.radius))
        if radius <= 0:
            return
        for style in shape.styles:
            if isinstance(style, Fill):
                pygame.draw.circle(self.surface, style.color, center, radius)
            else:
                pygame.draw.circle(self.surface, style.color, center, radius,
                                   _stroke_width(style))

    def _draw_line(self, shape: LineShape):
        for style in shape.styles:
            if isinstance(style, Stroke):
                pygame.draw.line(self.surface, style.color, _ipt(shape.start),
                                 _ipt(shape.finish), _stroke_width(style))

    def _draw_rect(self, shape: RectangleShape):
        rect = _to_pygame_rect(shape.rect)
        for style in shape.styles:
            if isinstance(style, Fill):
                pygame.draw.rect(self.surface, style.color, rect)
            else:
                pygame.draw.rect(self.surface, style.color, rect, _stroke_width(style))

    def _draw_polygon(self, shape: PolygonShape):
        outer = [_ipt(p) for p in shape.vertices]
        holes = [[_ipt(p) for p in ring] for ring in shape.holes]
        for style in shape.styles:
            if isinstance(style, Fill):
                pygame.draw.polygon(self.surface, style.color, outer)
                # holes show the chart background through the fill
                for ring in holes:
                    pygame.draw.polygon(self.surface, self.color_scheme.background, ring)
            else:
                width = _stroke_width(style)
                pygame.draw.polygon(self.surface, style.color, outer, width)
                for ring in holes:
                    pygame.draw.polygon(self.surface, style.color, ring, width)

    def _draw_text(self, shape: TextShape):
        if isinstance(shape.text, pygame.Surface):
            self.surface.blit(shape.text, _ipt((shape.rect.x, shape.rect.y)))
