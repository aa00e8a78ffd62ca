"""
Track geometry - 2D coordinates used by every track entity.

Line Rider uses screen-style coordinates: +X to the right, +Y downwards.
"""

from dataclasses import dataclass
import numpy as np


@dataclass
class Coordinates:
    """A point (or vector) on the 2D track plane."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Coordinates") -> "Coordinates":
        return Coordinates(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coordinates") -> "Coordinates":
        return Coordinates(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Coordinates":
        return Coordinates(self.x * scalar, self.y * scalar)

    @classmethod
    def origin(cls) -> "Coordinates":
        return cls(0.0, 0.0)

    @classmethod
    def polar(cls, radius: float, angle: float, center: "Coordinates | None" = None) -> "Coordinates":
        """Point at a given radius and angle (radians) around a center.

        Args:
            radius: Distance from center
            angle: Angle in radians, 0 = +X direction
            center: Center point. Origin if None.

        Returns:
            Coordinates of the point
        """
        center = center or cls.origin()
        return cls(
            float(center.x + radius * np.cos(angle)),
            float(center.y + radius * np.sin(angle)),
        )

    def distance_to(self, other: "Coordinates") -> float:
        """Euclidean distance to another point."""
        return float(np.hypot(self.x - other.x, self.y - other.y))
