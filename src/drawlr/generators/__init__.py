"""
Generators module - Procedural riders and lines.

This module contains:
- create_riders: Groups of riders with random, fixed or spaced starts
- polygon_lines, thick_polygon_lines: Regular polygons
- function_lines: Curves of y = f(x)
"""

from drawlr.generators.riders import CoordMode, CoordOptions, create_riders
from drawlr.generators.shapes import polygon_lines, thick_polygon_lines
from drawlr.generators.functions import function_lines

__all__ = [
    "CoordMode",
    "CoordOptions",
    "create_riders",
    "polygon_lines",
    "thick_polygon_lines",
    "function_lines",
]
