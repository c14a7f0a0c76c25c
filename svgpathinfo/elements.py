"""Path element types.

Each drawing command of a path is represented by one element object. The
set of element classes is closed: ELEMENT_TYPES lists every one of them and
the modules that dispatch on element type check against it.

Coordinates are stored as numpy float arrays of shape (2,).
"""

from typing import Dict, Sequence, Tuple, Type

import numpy as np

RELATIVE = "relative"
ABSOLUTE = "absolute"


def as_point(value: Sequence[float]) -> np.ndarray:
    """Convert a coordinate pair to a float array.

    Args:
        value: Sequence of two numbers

    Returns:
        Array of shape (2,)
    """
    point = np.array(value, dtype=float)
    if point.shape != (2,):
        raise ValueError(f"Expected a pair of coordinates, got {value!r}")
    return point


class PathElement:
    """Base class of all path elements."""

    # Element type tag, e.g. "cubic-bezier"
    type = None
    # Description used in the SVG grammar
    name = None
    # Absolute command letter
    letter = None
    # Names of the attributes holding coordinate pairs
    point_fields: Tuple[str, ...] = ()
    # Names of the attributes holding scalars
    scalar_fields: Tuple[str, ...] = ()

    def __init__(self, position: str = ABSOLUTE, svg_key: str = None):
        """Initialize common element fields.

        Args:
            position: "relative" or "absolute"
            svg_key: Originating command letter (derived from position if omitted)
        """
        if position not in (RELATIVE, ABSOLUTE):
            raise ValueError(f"Unknown position type '{position}'")
        self.position = position
        if svg_key is None:
            svg_key = self.letter if position == ABSOLUTE else self.letter.lower()
        self.svg_key = svg_key

    @property
    def is_relative(self) -> bool:
        return self.position == RELATIVE

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.point_fields + self.scalar_fields

    def __repr__(self) -> str:
        args = ", ".join(f"{field}={self._field_repr(field)}" for field in self.fields)
        if args:
            args += ", "
        return (
            f"{self.__class__.__name__}({args}position={self.position!r}, "
            f"svg_key={self.svg_key!r})"
        )

    def _field_repr(self, field: str) -> str:
        value = getattr(self, field)
        if isinstance(value, np.ndarray):
            return f"({value[0]:g}, {value[1]:g})"
        return f"{value:g}"

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        if (self.position, self.svg_key) != (other.position, other.svg_key):
            return False
        for field in self.point_fields:
            if not np.array_equal(getattr(self, field), getattr(other, field)):
                return False
        return all(
            getattr(self, field) == getattr(other, field)
            for field in self.scalar_fields
        )

    __hash__ = None


class MoveTo(PathElement):
    type = "moveto"
    name = "moveto"
    letter = "M"
    point_fields = ("point",)

    def __init__(self, point, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.point = as_point(point)


class LineTo(PathElement):
    type = "line-to"
    name = "lineto"
    letter = "L"
    point_fields = ("point",)

    def __init__(self, point, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.point = as_point(point)

    @property
    def end(self) -> np.ndarray:
        return self.point


class HorizontalLineTo(PathElement):
    type = "horizontal-line-to"
    name = "horizontal lineto"
    letter = "H"
    scalar_fields = ("x",)

    def __init__(self, x, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.x = float(x)


class VerticalLineTo(PathElement):
    type = "vertical-line-to"
    name = "vertical lineto"
    letter = "V"
    scalar_fields = ("y",)

    def __init__(self, y, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.y = float(y)


class CubicBezier(PathElement):
    type = "cubic-bezier"
    name = "curveto"
    letter = "C"
    point_fields = ("control1", "control2", "end")

    def __init__(self, control1, control2, end, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.control1 = as_point(control1)
        self.control2 = as_point(control2)
        self.end = as_point(end)


class SmoothCubicBezier(PathElement):
    type = "smooth-cubic-bezier"
    name = "shorthand/smooth curveto"
    letter = "S"
    point_fields = ("control2", "end")

    def __init__(self, control2, end, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.control2 = as_point(control2)
        self.end = as_point(end)


class QuadraticBezier(PathElement):
    type = "quadratic-bezier"
    name = "quadratic Bézier curveto"
    letter = "Q"
    point_fields = ("control", "end")

    def __init__(self, control, end, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.control = as_point(control)
        self.end = as_point(end)


class SmoothQuadraticBezier(PathElement):
    type = "smooth-quadratic-bezier"
    name = "shorthand/smooth quadratic Bézier curveto"
    letter = "T"
    point_fields = ("end",)

    def __init__(self, end, position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.end = as_point(end)


class Arc(PathElement):
    type = "arc"
    name = "elliptical arc"
    letter = "A"
    scalar_fields = ("rx", "ry", "x_axis_rotation", "large_arc_flag", "sweep_flag", "x", "y")

    def __init__(self, rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x, y,
                 position=ABSOLUTE, svg_key=None):
        super().__init__(position, svg_key)
        self.rx = float(rx)
        self.ry = float(ry)
        self.x_axis_rotation = float(x_axis_rotation)
        self.large_arc_flag = float(large_arc_flag)
        self.sweep_flag = float(sweep_flag)
        self.x = float(x)
        self.y = float(y)

    @property
    def end(self) -> np.ndarray:
        return np.array([self.x, self.y])


class ClosePath(PathElement):
    type = "closepath"
    name = "closepath"
    letter = "Z"


ELEMENT_TYPES: Tuple[Type[PathElement], ...] = (
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CubicBezier,
    SmoothCubicBezier,
    QuadraticBezier,
    SmoothQuadraticBezier,
    Arc,
    ClosePath,
)

ELEMENTS_BY_TYPE: Dict[str, Type[PathElement]] = {
    cls.type: cls for cls in ELEMENT_TYPES
}
