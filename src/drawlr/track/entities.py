"""
Track entities - Riders, layers and lines.

Defines:
- Line types understood by the game
- Rider starting state
- Layers grouping lines
- Line segments
- Track format version
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from drawlr.track.geometry import Coordinates


DEFAULT_VERSION = "6.2"


class LineType(IntEnum):
    """Line types used by the game."""
    STANDARD = 0       # Blue, solid
    ACCELERATION = 1   # Red, speeds riders up
    SCENERY = 2        # Green, no collision


@dataclass
class Rider:
    """A rider (sledder) with starting position and velocity."""
    start_position: Coordinates = field(default_factory=Coordinates)
    start_velocity: Coordinates = field(default_factory=Coordinates)
    remountable: int = 0


@dataclass
class Layer:
    """A named group of lines that can be hidden or locked in the editor."""
    id: int = 0
    name: str = ""
    visible: bool = False
    editable: bool = False

    @classmethod
    def base(cls) -> "Layer":
        """Default layer every track starts with."""
        return cls(0, "Base Layer", True, True)


@dataclass
class Line:
    """A single line from (x1, y1) to (x2, y2).

    The game requires a unique id for every line. Lines are created with
    id None and receive their id when added to a Game.
    """
    id: Optional[int] = None
    kind: int = LineType.STANDARD

    # Endpoints
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    flipped: bool = False
    left_extended: bool = False
    right_extended: bool = False

    @classmethod
    def between(
        cls,
        start: Coordinates,
        end: Coordinates,
        kind: int = LineType.STANDARD,
        flipped: bool = False,
        extended: bool = False,
    ) -> "Line":
        """Create an uncommitted line between two points.

        Args:
            start: First endpoint
            end: Second endpoint
            kind: Line type
            flipped: Whether the line is flipped
            extended: Sets both left and right extensions

        Returns:
            Line with id None
        """
        return cls(
            kind=kind,
            x1=start.x,
            y1=start.y,
            x2=end.x,
            y2=end.y,
            flipped=flipped,
            left_extended=extended,
            right_extended=extended,
        )

    @property
    def start(self) -> Coordinates:
        return Coordinates(self.x1, self.y1)

    @property
    def end(self) -> Coordinates:
        return Coordinates(self.x2, self.y2)

    @property
    def length(self) -> float:
        """Length of the line segment."""
        return self.start.distance_to(self.end)


class Version(str):
    """Track format version tag.

    Serialized as a plain string. Only the default has been tested
    against the game importer.
    """

    def __new__(cls, tag: str = DEFAULT_VERSION) -> "Version":
        return super().__new__(cls, tag)
