"""Build path elements from command letters and their numbers.

A single command letter may be followed by several argument groups, each of
which becomes its own element. A moveto followed by extra coordinate pairs
yields implicit line-to elements.
"""

from typing import Callable, Dict, List, Sequence

from .elements import (
    ABSOLUTE,
    RELATIVE,
    Arc,
    ClosePath,
    CubicBezier,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    PathElement,
    QuadraticBezier,
    SmoothCubicBezier,
    SmoothQuadraticBezier,
    VerticalLineTo,
)
from .errors import ArityError, PathSyntaxError

# Number of values consumed by one repetition of each command
ARITY = {
    "C": 6,
    "S": 4,
    "L": 2,
    "Z": 0,
    "Q": 4,
    "T": 2,
    "H": 1,
    "V": 1,
    "A": 7,
    "M": 2,
}


def position_type(command: str) -> str:
    """Return "relative" for a lowercase command letter, "absolute" for uppercase."""
    if command.islower():
        return RELATIVE
    if command.isupper():
        return ABSOLUTE
    raise PathSyntaxError(f"I don't know what to do with '{command}'")


def check_arity(command: str, numbers: Sequence, path: str = "") -> None:
    """Check that a command has a valid number of values.

    Args:
        command: Command letter
        numbers: Values following the command letter
        path: Full path data, used in error messages

    Raises:
        ArityError: If the count does not fit the command
        PathSyntaxError: If the command letter is unknown
    """
    key = command.upper()
    if key not in ARITY:
        raise PathSyntaxError(f"I don't know what to do with a curve type '{command}'")

    count = len(numbers)
    expected = ARITY[key]
    if key == "Z":
        if count > 0:
            raise ArityError(
                command, count,
                f"Wrong number of values for a Z command {count} in '{path}'",
            )
    elif key == "M" and count < expected:
        raise ArityError(
            command, count, f"Need at least {expected} numbers for move to in '{path}'"
        )
    elif count % expected != 0:
        raise ArityError(
            command, count,
            f"Wrong number of values for a {key} command {count} in '{path}'",
        )


def _groups(values: List[float], size: int) -> List[List[float]]:
    return [values[i:i + size] for i in range(0, len(values), size)]


def _build_lineto(values, position, command):
    key = "L" if position == ABSOLUTE else "l"
    return [LineTo(pair, position, key) for pair in _groups(values, 2)]


def _build_moveto(values, position, command):
    elements = [MoveTo(values[:2], position, command)]
    # Extra pairs after a moveto are implicit line-to commands
    elements.extend(_build_lineto(values[2:], position, command))
    return elements


def _build_horizontal(values, position, command):
    return [HorizontalLineTo(x, position, command) for x in values]


def _build_vertical(values, position, command):
    return [VerticalLineTo(y, position, command) for y in values]


def _build_cubic(values, position, command):
    return [
        CubicBezier(group[0:2], group[2:4], group[4:6], position, command)
        for group in _groups(values, 6)
    ]


def _build_smooth_cubic(values, position, command):
    return [
        SmoothCubicBezier(group[0:2], group[2:4], position, command)
        for group in _groups(values, 4)
    ]


def _build_quadratic(values, position, command):
    return [
        QuadraticBezier(group[0:2], group[2:4], position, command)
        for group in _groups(values, 4)
    ]


def _build_smooth_quadratic(values, position, command):
    return [
        SmoothQuadraticBezier(pair, position, command)
        for pair in _groups(values, 2)
    ]


def _build_arc(values, position, command):
    return [Arc(*group, position=position, svg_key=command) for group in _groups(values, 7)]


def _build_closepath(values, position, command):
    return [ClosePath(position, command)]


_BUILDERS: Dict[str, Callable[..., List[PathElement]]] = {
    "M": _build_moveto,
    "L": _build_lineto,
    "H": _build_horizontal,
    "V": _build_vertical,
    "C": _build_cubic,
    "S": _build_smooth_cubic,
    "Q": _build_quadratic,
    "T": _build_smooth_quadratic,
    "A": _build_arc,
    "Z": _build_closepath,
}


def build_elements(command: str, numbers: Sequence[str], path: str = "") -> List[PathElement]:
    """Expand one command and its numbers into path elements.

    Args:
        command: Command letter
        numbers: Number strings (or numbers) following the command
        path: Full path data, used in error messages

    Returns:
        List of path elements, one per argument group
    """
    check_arity(command, numbers, path)
    position = position_type(command)
    values = [float(number) for number in numbers]
    return _BUILDERS[command.upper()](values, position, command)
