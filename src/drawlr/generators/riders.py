"""
Rider generator - Create groups of riders with random or spaced starts.

Each of a rider's start position and start velocity is chosen by a
CoordOptions value:
- Random within a default box
- Random within a given box
- A fixed coordinate (or origin)
- Evenly spaced across a given box
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional
import logging
import numpy as np

from drawlr.errors import PreconditionViolation, check_min_max
from drawlr.track.entities import Rider
from drawlr.track.geometry import Coordinates


logger = logging.getLogger(__name__)

# Box used by CoordMode.RAND
DEFAULT_RANDOM_MIN = Coordinates(-10.0, -10.0)
DEFAULT_RANDOM_MAX = Coordinates(10.0, 10.0)


class CoordMode(Enum):
    """How coordinates are chosen for each rider."""
    RAND = "rand"
    RAND_RANGE = "rand_range"
    OTHER = "other"
    EVENLY_SPACED = "evenly_spaced"


@dataclass
class CoordOptions:
    """Coordinate selection for create_riders.

    Use the classmethod constructors rather than building this directly.
    """
    mode: CoordMode = CoordMode.OTHER
    min: Optional[Coordinates] = None
    max: Optional[Coordinates] = None
    value: Optional[Coordinates] = None

    @classmethod
    def rand(cls) -> "CoordOptions":
        """Uniform random coordinates in [-10, 10] x [-10, 10]."""
        return cls(CoordMode.RAND, replace(DEFAULT_RANDOM_MIN), replace(DEFAULT_RANDOM_MAX))

    @classmethod
    def rand_range(cls, min: Coordinates, max: Coordinates) -> "CoordOptions":
        """Uniform random coordinates between two corners."""
        return cls(CoordMode.RAND_RANGE, min, max)

    @classmethod
    def other(cls, value: Coordinates | None = None) -> "CoordOptions":
        """The given coordinates for every rider, or origin if None."""
        return cls(CoordMode.OTHER, value=value)

    @classmethod
    def evenly_spaced(cls, min: Coordinates, max: Coordinates) -> "CoordOptions":
        """Coordinates spread from min to max across the riders."""
        return cls(CoordMode.EVENLY_SPACED, min, max)

    def validate(self) -> None:
        """Check box corners for the modes that use them.

        Raises:
            PreconditionViolation: If a corner is missing or max < min
        """
        if self.mode == CoordMode.OTHER:
            return
        if self.min is None or self.max is None:
            raise PreconditionViolation(f"{self.mode.value} requires min and max coordinates")
        check_min_max(self.min.x, self.max.x, "x")
        check_min_max(self.min.y, self.max.y, "y")

    def coordinates_for(self, index: int, count: int, rng: np.random.Generator) -> Coordinates:
        """Coordinates for rider `index` out of `count`.

        Args:
            index: Rider index, 0-based
            count: Total number of riders
            rng: Random source for the random modes

        Returns:
            Chosen coordinates
        """
        if self.mode in (CoordMode.RAND, CoordMode.RAND_RANGE):
            return Coordinates(
                float(rng.uniform(self.min.x, self.max.x)),
                float(rng.uniform(self.min.y, self.max.y)),
            )

        if self.mode == CoordMode.EVENLY_SPACED:
            # A single rider sits at min
            t = index / (count - 1) if count > 1 else 0.0
            return self.min + (self.max - self.min) * t

        return Coordinates(self.value.x, self.value.y) if self.value else Coordinates.origin()


def create_riders(
    n: int,
    start_position: CoordOptions,
    start_velocity: CoordOptions,
    remountable: int | None = None,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> List[Rider]:
    """Create `n` riders with the given start position and velocity options.

    Args:
        n: Number of riders
        start_position: How start positions are chosen
        start_velocity: How start velocities are chosen
        remountable: Remount setting for every rider. 0 if None.
        rng: Random source. Created from `seed` if None.
        seed: Seed for a new random source (None for random)

    Returns:
        Riders in generation order

    Raises:
        PreconditionViolation: If n is negative or a box has max < min
    """
    if n < 0:
        raise PreconditionViolation(f"Rider count must be non-negative, got {n}")

    start_position.validate()
    start_velocity.validate()

    rng = rng if rng is not None else np.random.default_rng(seed)
    remountable = remountable or 0

    riders = []
    for i in range(n):
        riders.append(Rider(
            start_position=start_position.coordinates_for(i, n, rng),
            start_velocity=start_velocity.coordinates_for(i, n, rng),
            remountable=remountable,
        ))

    logger.debug(
        f"Created {n} riders (position: {start_position.mode.value}, "
        f"velocity: {start_velocity.mode.value})"
    )
    return riders
