"""svgpathinfo: parse, normalize, reverse and serialize SVG path data."""

__version__ = "0.1.0"

from .elements import (
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
from .errors import (
    ArityError,
    InvariantError,
    MissingContextError,
    MissingMovetoError,
    PathSyntaxError,
    SVGPathError,
    UnsupportedElementError,
)
from .path_processor import PathProcessor, parse, reverse, serialize
