#!/usr/bin/env python3
"""Test script for the absolute coordinate resolver.

This script tests converting relative paths to absolute ones and rewriting
smooth curves as explicit curves.
"""

import copy
import logging
import sys

import numpy as np
import pytest

from svgpathinfo.elements import (
    Arc,
    ClosePath,
    CubicBezier,
    LineTo,
    MoveTo,
    QuadraticBezier,
    SmoothCubicBezier,
)
from svgpathinfo.errors import InvariantError, MissingContextError
from svgpathinfo.path_processor import parse
from svgpathinfo.resolver import make_absolute
from svgpathinfo.serializer import serialize

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("test_resolver")


def test_absolute_input():
    """Test that an absolute path is returned unchanged."""
    logger.info("Testing absolute input...")

    elements = parse("M10,10 L20,20 L30,10 Z", absolute=True)
    logger.info(f"Elements: {elements}")
    assert [element.type for element in elements] == [
        "moveto", "line-to", "line-to", "closepath"
    ]
    assert all(element.position == "absolute" for element in elements)
    assert elements[0] == MoveTo((10, 10))
    assert elements[2] == LineTo((30, 10))


def test_relative_lines():
    """Test relative lines, including horizontal and vertical ones."""
    logger.info("Testing relative lines...")

    elements = parse("m0,0 l5,5", absolute=True)
    assert elements == [MoveTo((0, 0), "absolute", "M"), LineTo((5, 5), "absolute", "L")]

    elements = parse("m10,10 l5,5 h10 v-5 z l1,1", absolute=True)
    assert elements[2].x == 25
    assert elements[3].y == 10
    assert elements[4].svg_key == "Z"
    # After the closepath the current point is back at the subpath start
    np.testing.assert_array_equal(elements[5].point, [11, 11])
    assert [element.svg_key for element in elements] == ["M", "L", "H", "V", "Z", "L"]


def test_implicit_lineto_relative():
    """Test that implicit line-tos after a relative moveto are relative."""
    logger.info("Testing implicit relative line-to...")

    elements = parse("m1,1 2,2 3,3", absolute=True)
    assert elements == [
        MoveTo((1, 1)),
        LineTo((3, 3)),
        LineTo((6, 6)),
    ]


def test_relative_curves_and_arcs():
    """Test relative cubic curves and arcs."""
    logger.info("Testing relative curves and arcs...")

    elements = parse("M1,1 c1,1 2,2 3,3", absolute=True)
    assert elements[1] == CubicBezier((2, 2), (3, 3), (4, 4))

    elements = parse("M10,10 a5,6 30 0,1 10,0", absolute=True)
    arc = elements[1]
    assert isinstance(arc, Arc)
    assert (arc.rx, arc.ry, arc.x_axis_rotation) == (5, 6, 30)
    assert (arc.large_arc_flag, arc.sweep_flag) == (0, 1)
    assert (arc.x, arc.y) == (20, 10)

    elements = parse("M10,10 q5,10 10,0", absolute=True)
    assert elements[1] == QuadraticBezier((15, 20), (20, 10))


def test_smooth_cubic_reflection():
    """Test rewriting smooth cubic curves as explicit ones."""
    logger.info("Testing smooth cubic reflection...")

    for path in [
        "M0,0 C0,10 10,10 10,0 S20,-10 20,0",
        "m0,0 c0,10 10,10 10,0 s10,-10 10,0",
    ]:
        elements = parse(path, absolute=True, no_smooth=True)
        logger.info(f"{path} -> {elements}")
        assert elements[2] == CubicBezier((10, -10), (20, -10), (20, 0), "absolute", "C")

    # no_shortcuts is an alias of no_smooth
    elements = parse("M0,0 C0,10 10,10 10,0 S20,-10 20,0 S30,10 30,0",
                     {"absolute": True, "no_shortcuts": True})
    assert elements[3] == CubicBezier((20, 10), (30, 10), (30, 0))

    # Without no_smooth the smooth curve is kept
    elements = parse("m0,0 c0,10 10,10 10,0 s10,-10 10,0", absolute=True)
    assert elements[2] == SmoothCubicBezier((20, -10), (20, 0), "absolute", "S")


def test_smooth_quadratic_reflection():
    """Test rewriting smooth quadratic curves as explicit ones."""
    logger.info("Testing smooth quadratic reflection...")

    elements = parse("M0,0 Q5,10 10,0 T20,0 T30,0", absolute=True, no_smooth=True)
    assert elements[2] == QuadraticBezier((15, -10), (20, 0), "absolute", "Q")
    assert elements[3] == QuadraticBezier((25, 10), (30, 0), "absolute", "Q")

    elements = parse("m0,0 q5,10 10,0 t10,0", absolute=True, no_smooth=True)
    assert elements[2] == QuadraticBezier((15, -10), (20, 0))


def test_missing_reflection_context():
    """Test that smooth curves need a matching previous curve."""
    logger.info("Testing missing reflection context...")

    with pytest.raises(MissingContextError):
        parse("M0,0 L1,1 S2,2 3,3", absolute=True, no_smooth=True)
    with pytest.raises(MissingContextError):
        parse("M0,0 S1,1 2,2", absolute=True, no_smooth=True)
    with pytest.raises(MissingContextError):
        parse("M0,0 C1,1 2,2 3,3 T4,4", absolute=True, no_smooth=True)
    with pytest.raises(MissingContextError):
        make_absolute([SmoothCubicBezier((1, 1), (2, 2))], no_smooth=True)


def test_initial_position():
    """Test the offset of a relative first moveto."""
    logger.info("Testing initial position...")

    elements = parse("m1,1 l1,1 m1,1", absolute=True, initial_position=(10, 20))
    assert elements == [MoveTo((11, 21)), LineTo((12, 22)), MoveTo((13, 23))]

    # Absolute movetos ignore it
    elements = parse("M1,1", absolute=True, initial_position=[10, 20])
    assert elements == [MoveTo((1, 1))]

    with pytest.raises(ValueError):
        parse("m1,1", absolute=True, initial_position=(1, 2, 3))


def test_subpaths():
    """Test that each moveto starts a new subpath."""
    logger.info("Testing subpaths...")

    elements = parse("M0,0 L1,1 M10,10 L11,11 Z l1,1", absolute=True)
    np.testing.assert_array_equal(elements[-1].point, [11, 11])

    elements = parse("M0,0 L10,0 L10,10 Z l5,5", absolute=True)
    np.testing.assert_array_equal(elements[-1].point, [5, 5])


def test_idempotent():
    """Test that resolving an absolute path again changes nothing."""
    logger.info("Testing idempotence...")

    path = "m10,10 l5,5 h10 v-5 c1,1 2,2 3,3 s1,1 2,2 q1,1 2,2 t1,1 a5,5 0 1,0 3,3 z"
    elements = parse(path, absolute=True)
    again = parse(serialize(elements), absolute=True)
    assert again == elements

    before = copy.deepcopy(elements)
    assert make_absolute(elements) == before


def test_invariant_error():
    """Test that elements without a command letter are rejected."""
    logger.info("Testing invariant error...")

    with pytest.raises(InvariantError):
        make_absolute([MoveTo((0, 0), svg_key=""), ClosePath()])


def test_verbose_logging(caplog):
    """Test that verbose parsing traces subpath bookkeeping."""
    logger.info("Testing verbose logging...")

    with caplog.at_level(logging.INFO):
        parse("M1,2 L3,4 Z", absolute=True, verbose=True)

    assert "Beginning drawing at [1.0000, 2.0000]" in caplog.text
    assert "Closing drawing shape to [1.0000, 2.0000]" in caplog.text


def main():
    """Main function."""
    tests = [
        test_absolute_input,
        test_relative_lines,
        test_implicit_lineto_relative,
        test_relative_curves_and_arcs,
        test_smooth_cubic_reflection,
        test_smooth_quadratic_reflection,
        test_missing_reflection_context,
        test_initial_position,
        test_subpaths,
        test_idempotent,
        test_invariant_error,
    ]

    failure_count = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            logger.error(f"{test.__name__} failed: {e}")
            failure_count += 1

    logger.info(f"Test results: {len(tests) - failure_count} succeeded, {failure_count} failed")


if __name__ == "__main__":
    main()
