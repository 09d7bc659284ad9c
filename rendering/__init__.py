"""
Rendering - the shape model shared by layout and drawing.

Graphics are plain data (shapes + styles + obscurement class). The overlap
kernel answers which of them a candidate rectangle touches. Drawing with
pygame lives in rendering.artist and is imported on its own.
"""
from .graphic import (
    CircleShape,
    Fill,
    Graphic,
    LineShape,
    Obscurement,
    PolygonShape,
    RectangleShape,
    Stroke,
    TextShape,
)
from .overlap import graphic_obscurement, shape_overlaps_rect

__all__ = [
    "CircleShape",
    "Fill",
    "Graphic",
    "LineShape",
    "Obscurement",
    "PolygonShape",
    "RectangleShape",
    "Stroke",
    "TextShape",
    "graphic_obscurement",
    "shape_overlaps_rect",
]
