"""
Function generator - Sketch y = f(x) with short lines.
"""

from typing import Callable, List, Tuple
import logging
import numpy as np

from drawlr.errors import PreconditionViolation
from drawlr.track.entities import Line, LineType
from drawlr.track.geometry import Coordinates


logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10
DEFAULT_KIND = LineType.ACCELERATION


def function_lines(
    func: Callable[[float], float],
    value_range: range | Tuple[int, int],
    iterations: int | None = None,
    kind: int | None = None,
) -> List[Line]:
    """Create lines approximating `func` over an integer range.

    Each integer unit is split into `iterations` steps. Within a unit the
    fractional samples are visited from the largest down to the smallest,
    and every sample is joined to the one before it. Line order decides
    the ids the lines get when added to a Game.

    Args:
        func: Function to sketch
        value_range: Half-open integer range [start, end), as a range or a pair
        iterations: Steps per integer unit (default 10). 1 gives no lines.
        kind: Line type (default acceleration)

    Returns:
        (end - start) * (iterations - 1) uncommitted lines

    Raises:
        PreconditionViolation: If iterations < 1, the range has a step other than 1,
            or a range end is not an integer
    """
    if isinstance(value_range, range):
        if value_range.step != 1:
            raise PreconditionViolation(f"Range step must be 1, got {value_range.step}")
        start, end = value_range.start, value_range.stop
    else:
        start, end = value_range
        if not all(isinstance(v, (int, np.integer)) for v in (start, end)):
            raise PreconditionViolation(f"Range ends must be integers, got {start!r} and {end!r}")
        start, end = int(start), int(end)

    num_iterations = DEFAULT_ITERATIONS if iterations is None else iterations
    if num_iterations < 1:
        raise PreconditionViolation(f"Iterations must be at least 1, got {num_iterations}")
    kind = DEFAULT_KIND if kind is None else kind

    last = Coordinates(float(start), float(func(float(start))))
    lines = []
    for i in range(start, end):
        for j in range(num_iterations - 1, 0, -1):
            x = i + j / num_iterations
            point = Coordinates(x, float(func(x)))
            lines.append(Line.between(last, point, kind))
            last = point

    logger.debug(f"Sketched function over [{start}, {end}) with {len(lines)} lines")
    return lines
