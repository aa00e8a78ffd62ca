"""
Shape generator - Regular polygons made of lines.

As the number of sides grows a polygon approximates a circle, so these
are also used for round obstacles and loops.
"""

from typing import List
import numpy as np

from drawlr.errors import PreconditionViolation
from drawlr.track.entities import Line, LineType
from drawlr.track.geometry import Coordinates


def polygon_lines(
    sides: int,
    radius: float,
    center: Coordinates | None = None,
    rotation: float | None = None,
    kind: int = LineType.STANDARD,
) -> List[Line]:
    """Create the lines of a regular polygon.

    The first vertex sits half a vertex angle past 0 (plus `rotation`),
    so by default the polygon rests on a flat edge instead of a corner.
    Lines are flipped and extended on both ends.

    Args:
        sides: Number of sides (at least 1)
        radius: Distance from center to each vertex
        center: Polygon center. Origin if None.
        rotation: Extra rotation in radians
        kind: Line type

    Returns:
        `sides` uncommitted lines forming a closed loop

    Raises:
        PreconditionViolation: If sides < 1 or radius < 0
    """
    if sides < 1:
        raise PreconditionViolation(f"Polygon needs at least 1 side, got {sides}")
    if radius < 0:
        raise PreconditionViolation(f"Polygon radius must be non-negative, got {radius}")

    center = center or Coordinates.origin()

    vertex_angle = 2 * np.pi / sides
    initial_angle = vertex_angle / 2 + (rotation or 0.0)

    # Walk around the circle, joining each vertex to the next
    first_point = Coordinates.polar(radius, initial_angle, center)
    lines = []
    for i in range(1, sides + 1):
        second_point = Coordinates.polar(radius, initial_angle + i * vertex_angle, center)
        lines.append(Line.between(first_point, second_point, kind, flipped=True, extended=True))
        first_point = second_point

    return lines


def thick_polygon_lines(
    sides: int,
    radius: float,
    center: Coordinates | None = None,
    rotation: float | None = None,
    thickness: int = 1,
    kind: int = LineType.STANDARD,
) -> List[Line]:
    """Create concentric polygons of radius, radius + 1, ... (see polygon_lines).

    Args:
        sides: Number of sides
        radius: Radius of the innermost polygon
        center: Polygon center. Origin if None.
        rotation: Extra rotation in radians
        thickness: Number of polygons
        kind: Line type

    Returns:
        Lines of every polygon, innermost first

    Raises:
        PreconditionViolation: If thickness < 0 or the polygon arguments are invalid
    """
    if thickness < 0:
        raise PreconditionViolation(f"Thickness must be non-negative, got {thickness}")

    lines = []
    for i in range(thickness):
        lines.extend(polygon_lines(sides, radius + i, center, rotation, kind))

    return lines
