"""
drawlr - Procedural track building for the Line Rider game.

This package provides:
- A track model (riders, layers, lines) with game-assigned line ids
- Generators for riders, regular polygons and function curves
- JSON export compatible with the game's track importer
"""

__version__ = "0.1.0"

from drawlr.errors import DrawError, PreconditionViolation
from drawlr.track.game import Game, GameConfig
from drawlr.track.entities import Line, LineType, Layer, Rider, Version
from drawlr.track.geometry import Coordinates
from drawlr.generators.riders import CoordOptions, create_riders
from drawlr.generators.shapes import polygon_lines, thick_polygon_lines
from drawlr.generators.functions import function_lines

__all__ = [
    "Game",
    "GameConfig",
    "Coordinates",
    "Line",
    "LineType",
    "Layer",
    "Rider",
    "Version",
    "CoordOptions",
    "create_riders",
    "polygon_lines",
    "thick_polygon_lines",
    "function_lines",
    "DrawError",
    "PreconditionViolation",
    "__version__",
]
