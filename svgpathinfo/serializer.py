"""Render path elements back into SVG path data."""

from typing import Callable, Dict, Iterable, Type

from .elements import (
    ABSOLUTE,
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
from .errors import UnsupportedElementError

DEFAULT_PRECISION = 6


def _letter(element: PathElement) -> str:
    return element.letter if element.position == ABSOLUTE else element.letter.lower()


def _number(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def _pair(point, precision: int) -> str:
    return f"{_number(point[0], precision)},{_number(point[1], precision)}"


def _points(element: PathElement, precision: int) -> str:
    pairs = " ".join(_pair(getattr(element, field), precision) for field in element.point_fields)
    return f"{_letter(element)}{pairs}"


def _scalar(element: PathElement, precision: int) -> str:
    value = getattr(element, element.scalar_fields[0])
    return f"{_letter(element)}{_number(value, precision)}"


def _flag(value: float, precision: int) -> str:
    if float(value).is_integer():
        return str(int(value))
    return _number(value, precision)


def _arc(element: Arc, precision: int) -> str:
    values = [
        _number(element.rx, precision),
        _number(element.ry, precision),
        _number(element.x_axis_rotation, precision),
        _flag(element.large_arc_flag, precision),
        _flag(element.sweep_flag, precision),
        _number(element.x, precision),
        _number(element.y, precision),
    ]
    return f"{_letter(element)}{','.join(values)}"


def _closepath(element: ClosePath, precision: int) -> str:
    return _letter(element)


_EMITTERS: Dict[Type[PathElement], Callable[[PathElement, int], str]] = {
    MoveTo: _points,
    LineTo: _points,
    HorizontalLineTo: _scalar,
    VerticalLineTo: _scalar,
    CubicBezier: _points,
    SmoothCubicBezier: _points,
    QuadraticBezier: _points,
    SmoothQuadraticBezier: _points,
    Arc: _arc,
    ClosePath: _closepath,
}


def serialize(elements: Iterable[PathElement], precision: int = DEFAULT_PRECISION) -> str:
    """Create path data from a sequence of path elements.

    Absolute elements are written with uppercase command letters and
    relative ones with lowercase letters. Every number uses fixed-point
    notation with the given number of decimals.

    Args:
        elements: Path elements in path order
        precision: Number of decimals for each number

    Returns:
        SVG path data string

    Raises:
        UnsupportedElementError: If an element type has no emitter
    """
    fragments = []
    for element in elements:
        emitter = _EMITTERS.get(type(element))
        if emitter is None:
            raise UnsupportedElementError(
                f"Don't know how to deal with type '{getattr(element, 'type', element)}'"
            )
        fragments.append(emitter(element, precision))
    return " ".join(fragments)
