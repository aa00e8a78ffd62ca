"""
Game - Complete Line Rider track representation.

Contains:
- Track metadata (label, creator, duration, version, audio)
- Riders
- Layers
- Lines with game-assigned ids
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
import logging

from drawlr.track.entities import Layer, Line, Rider, Version
from drawlr.track.exporter import dumps, field_name, to_field_tree, write_text
from drawlr.track.geometry import Coordinates


logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Track metadata."""
    label: str = "Track created by drawlr"
    creator: str = "drawlr"
    description: str = ""
    duration: int = 120
    version: Version = field(default_factory=Version)
    audio: Optional[str] = None
    start_position: Coordinates = field(default_factory=Coordinates)

    def __post_init__(self):
        if not isinstance(self.version, Version):
            self.version = Version(self.version)


class Game:
    """A Line Rider track that lines and riders can be added to.

    The track is append-only: lines and riders are never removed or
    reordered. Every added line is copied and given an id equal to its
    1-based insertion rank.

    Usage:
        game = Game()
        game.add_lines(polygon_lines(6, 40))
        game.add_riders(create_riders(2, CoordOptions.rand(), CoordOptions.other()))
        game.write_to_file("track.json")
    """

    def __init__(self, config: GameConfig | None = None):
        """Initialize track with optional metadata.

        Args:
            config: Track metadata. Uses defaults if None.
        """
        config = config or GameConfig()
        self.config = replace(config, start_position=replace(config.start_position))

        self._riders: List[Rider] = []
        self._layers: List[Layer] = [Layer.base()]
        self._lines: List[Line] = []

    @property
    def label(self) -> str:
        return self.config.label

    @property
    def creator(self) -> str:
        return self.config.creator

    @property
    def description(self) -> str:
        return self.config.description

    @property
    def duration(self) -> int:
        return self.config.duration

    @property
    def version(self) -> Version:
        return self.config.version

    @property
    def audio(self) -> Optional[str]:
        return self.config.audio

    @property
    def start_position(self) -> Coordinates:
        return self.config.start_position

    @property
    def riders(self) -> Tuple[Rider, ...]:
        """Riders in insertion order."""
        return tuple(self._riders)

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers)

    @property
    def lines(self) -> Tuple[Line, ...]:
        """Committed lines in id order."""
        return tuple(self._lines)

    @property
    def num_lines(self) -> int:
        return len(self._lines)

    @property
    def num_riders(self) -> int:
        return len(self._riders)

    def add_line(self, line: Line) -> int:
        """Add a single line to the track.

        The given line is not modified; a copy carrying the new id is stored.

        Args:
            line: Line to add. Any existing id is overwritten.

        Returns:
            Id assigned to the line
        """
        committed = replace(line, id=len(self._lines) + 1)
        self._lines.append(committed)
        return committed.id

    def add_lines(self, lines: Iterable[Line]) -> List[int]:
        """Add several lines, assigning ids in iteration order.

        Args:
            lines: Lines to add

        Returns:
            Assigned ids
        """
        ids = [self.add_line(line) for line in lines]
        logger.debug(f"Added {len(ids)} lines ({self.num_lines} total)")
        return ids

    def add_rider(self, rider: Rider) -> None:
        """Add a single rider to the track."""
        self._riders.append(replace(
            rider,
            start_position=replace(rider.start_position),
            start_velocity=replace(rider.start_velocity),
        ))

    def add_riders(self, riders: Iterable[Rider]) -> None:
        """Add several riders to the track."""
        count = 0
        for rider in riders:
            self.add_rider(rider)
            count += 1
        logger.debug(f"Added {count} riders ({self.num_riders} total)")

    def get_state(self) -> dict:
        """Get the complete track as a JSON field tree.

        Returns:
            Dictionary with the game's field names and ordering
        """
        return {
            "label": self.label,
            "creator": self.creator,
            "description": self.description,
            "duration": self.duration,
            "version": str(self.version),
            "audio": self.audio,
            field_name("start_position"): to_field_tree(self.start_position),
            "riders": to_field_tree(self._riders),
            "layers": to_field_tree(self._layers),
            "lines": to_field_tree(self._lines),
        }

    def construct_game(self, indent: int | None = None) -> str:
        """Construct the JSON document the game can import.

        Args:
            indent: Pretty-print indent. Compact output if None.

        Returns:
            JSON text
        """
        return dumps(self.get_state(), indent=indent)

    def write_to_file(self, filename: str | Path) -> Path:
        """Write the JSON document to a file, replacing existing content.

        Args:
            filename: Output file path

        Returns:
            Path to written file

        Raises:
            OSError: If the file cannot be written
        """
        logger.info(
            f"Writing track '{self.label}' with {self.num_lines} lines "
            f"and {self.num_riders} riders"
        )
        return write_text(filename, self.construct_game())
