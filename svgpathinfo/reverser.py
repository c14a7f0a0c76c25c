"""Reverse the direction of a path made of cubic bezier curves."""

import logging
from typing import List

from .elements import ClosePath, CubicBezier, MoveTo, PathElement
from .errors import UnsupportedElementError

# Set up logging
logger = logging.getLogger(__name__)


def reverse_elements(elements: List[PathElement]) -> List[PathElement]:
    """Build elements tracing the same curves from end to start.

    The input must be absolute, start with a moveto and contain only cubic
    bezier curves after it, optionally ending in a closepath.

    Args:
        elements: Absolute path elements

    Returns:
        New list of path elements, starting with a moveto at the old end point

    Raises:
        UnsupportedElementError: If the path contains other drawing commands
    """
    closed = len(elements) > 1 and isinstance(elements[-1], ClosePath)
    curves = elements[1:-1] if closed else elements[1:]
    for element in curves:
        if not isinstance(element, CubicBezier):
            raise UnsupportedElementError(
                f"Can't handle path element type '{element.type}'"
            )

    reversed_curves = []
    end_point = elements[0].point
    for curve in curves:
        # Each curve ends where the previous one started
        reversed_curves.insert(
            0, CubicBezier(curve.control2, curve.control1, end_point)
        )
        end_point = curve.end

    result = [MoveTo(end_point)] + reversed_curves
    if closed:
        result.append(ClosePath())

    logger.debug(f"Reversed {len(curves)} curves")
    return result
