"""
Errors raised by drawlr.

Generators validate their arguments up front and raise before producing
any lines or riders. File-system errors from writing a track are not
wrapped; callers see the underlying OSError.
"""


class DrawError(Exception):
    """Base class for drawlr errors."""


class PreconditionViolation(DrawError, ValueError):
    """Invalid arguments passed to a generator."""


def check_min_max(min_value: float, max_value: float, axis: str = "") -> None:
    """Raise if a range is inverted.
    
    Args:
        min_value: Lower bound
        max_value: Upper bound
        axis: Axis name used in the error message
        
    Raises:
        PreconditionViolation: If max_value < min_value
    """
    if max_value < min_value:
        where = f" on {axis} axis" if axis else ""
        raise PreconditionViolation(
            f"Max ({max_value}) is less than min ({min_value}){where}"
        )
