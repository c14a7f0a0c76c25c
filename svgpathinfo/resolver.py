"""Relative to absolute coordinate resolution.

The resolver walks the element list once, keeping track of the current
point and of where the current subpath started. Relative coordinates are
offset by the current point, and, if requested, smooth curves are rewritten
as explicit curves by reflecting the previous control point.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .elements import (
    ABSOLUTE,
    Arc,
    ClosePath,
    CubicBezier,
    HorizontalLineTo,
    MoveTo,
    PathElement,
    QuadraticBezier,
    SmoothCubicBezier,
    SmoothQuadraticBezier,
    VerticalLineTo,
    as_point,
)
from .errors import InvariantError, MissingContextError

# Set up logging
logger = logging.getLogger(__name__)


class ResolverState:
    """Bookkeeping carried from one element to the next."""

    def __init__(self, initial_position: Optional[np.ndarray] = None):
        """Initialize resolver state.

        Args:
            initial_position: Offset for a relative first moveto (optional)
        """
        self.initial_position = initial_position
        self.current_point = np.zeros(2)
        self.subpath_start_point = np.zeros(2)
        self.drawing_has_started = False
        self.previous = None
        self.seen_moveto = False

    def begin_drawing(self, verbose: bool = False):
        """Record the subpath start at the first drawing element."""
        if self.drawing_has_started:
            return
        if verbose:
            logger.info(
                f"Beginning drawing at [{self.current_point[0]:.4f}, "
                f"{self.current_point[1]:.4f}]"
            )
        self.drawing_has_started = True
        self.subpath_start_point = self.current_point.copy()


def _offset(element: PathElement, state: ResolverState) -> None:
    """Add the current point to the coordinates of a relative element."""
    if isinstance(element, MoveTo) and not state.seen_moveto:
        origin = state.initial_position
        if origin is None:
            origin = state.current_point
    else:
        origin = state.current_point

    for field in element.point_fields:
        setattr(element, field, getattr(element, field) + origin)

    if isinstance(element, HorizontalLineTo):
        element.x += origin[0]
    elif isinstance(element, VerticalLineTo):
        element.y += origin[1]
    elif isinstance(element, Arc):
        # Radii, rotation and flags are not positions
        element.x += origin[0]
        element.y += origin[1]


def _reflect(element: PathElement, state: ResolverState) -> PathElement:
    """Rewrite a smooth curve as the equivalent explicit curve."""
    previous = state.previous
    if isinstance(element, SmoothCubicBezier):
        if previous is None:
            raise MissingContextError("No previous element for smooth cubic bezier")
        if not isinstance(previous, CubicBezier):
            raise MissingContextError(f"Bad previous element type {previous.type}")
        control1 = 2 * state.current_point - previous.control2
        return CubicBezier(control1, element.control2, element.end, element.position, "C")

    if isinstance(element, SmoothQuadraticBezier):
        if previous is None:
            raise MissingContextError("No previous element for smooth quadratic bezier")
        if not isinstance(previous, QuadraticBezier):
            raise MissingContextError(f"Bad previous element type {previous.type}")
        control = 2 * state.current_point - previous.control
        return QuadraticBezier(control, element.end, element.position, "Q")

    return element


def _advance(element: PathElement, state: ResolverState, verbose: bool) -> None:
    """Move the current point to the end of an element."""
    if isinstance(element, MoveTo):
        state.current_point = element.point.copy()
        state.subpath_start_point = element.point.copy()
        state.drawing_has_started = False
        state.seen_moveto = True
    elif isinstance(element, ClosePath):
        if verbose:
            logger.info(
                f"Closing drawing shape to [{state.subpath_start_point[0]:.4f}, "
                f"{state.subpath_start_point[1]:.4f}]"
            )
        state.current_point = state.subpath_start_point.copy()
        state.drawing_has_started = False
    elif isinstance(element, HorizontalLineTo):
        state.current_point[0] = element.x
    elif isinstance(element, VerticalLineTo):
        state.current_point[1] = element.y
    else:
        state.current_point = np.array(element.end, dtype=float)


def make_absolute(
    elements: List[PathElement],
    initial_position: Optional[Sequence[float]] = None,
    no_smooth: bool = False,
    verbose: bool = False,
) -> List[PathElement]:
    """Convert all elements of a path to absolute coordinates.

    The list is updated in place; smooth curves rewritten with no_smooth are
    replaced by new explicit curve elements.

    Args:
        elements: Path elements in path order
        initial_position: Position a relative first moveto is measured from
            (defaults to the origin)
        no_smooth: Replace smooth curves by explicit ones
        verbose: Log where each subpath starts and closes

    Returns:
        The same list, with every element absolute

    Raises:
        MissingContextError: If a smooth curve has no curve to reflect
        InvariantError: If an element has no command letter
    """
    if initial_position is not None:
        try:
            initial_position = as_point(initial_position)
        except (TypeError, ValueError):
            raise ValueError(
                "The initial position supplied doesn't look like a pair of coordinates"
            )

    if verbose:
        logger.info("Making all coordinates absolute.")

    state = ResolverState(initial_position)
    for index, element in enumerate(elements):
        if element.is_relative:
            _offset(element, state)

        if not isinstance(element, (MoveTo, ClosePath)):
            state.begin_drawing(verbose)

        if no_smooth:
            element = _reflect(element, state)
            elements[index] = element

        _advance(element, state, verbose)

        element.position = ABSOLUTE
        if not element.svg_key:
            raise InvariantError(f"No SVG key for {element.type} element")
        element.svg_key = element.svg_key.upper()
        state.previous = element

    return elements
