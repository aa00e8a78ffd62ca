"""
Track module - Line Rider track data structures and export.

This module contains:
- Coordinates: 2D points
- Rider, Layer, Line: Track entities
- Game: Track aggregate assigning line ids
- exporter: JSON encoding with the game's field names
"""

from drawlr.track.geometry import Coordinates
from drawlr.track.entities import Line, LineType, Layer, Rider, Version
from drawlr.track.game import Game, GameConfig

__all__ = [
    "Coordinates",
    "Line",
    "LineType",
    "Layer",
    "Rider",
    "Version",
    "Game",
    "GameConfig",
]
