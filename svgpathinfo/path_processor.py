"""
Path processing for SVG path data.

This module ties the tokenizer, command builder, resolver, serializer and
reverser together. The module level functions parse, serialize and reverse
are the main entry points; PathProcessor applies configured defaults to
them.
"""

import logging
from typing import Any, Dict, List, Optional

from .builder import build_elements
from .elements import PathElement
from .errors import PathSyntaxError
from .resolver import make_absolute
from .reverser import reverse_elements
from .serializer import DEFAULT_PRECISION, serialize
from .tokenizer import scan_numbers, tokenize

# Set up logging
logger = logging.getLogger(__name__)

# Options understood by parse()
PARSE_OPTIONS = ("absolute", "no_shortcuts", "no_smooth", "initial_position", "verbose")


def parse(path: str, options: Optional[Dict[str, Any]] = None, **kwargs) -> List[PathElement]:
    """
    Parse SVG path data into a list of path elements.

    Options may be given as a dictionary, as keyword arguments, or both
    (keyword arguments win):

    * absolute: convert all coordinates to absolute ones
    * no_shortcuts / no_smooth: with absolute, rewrite smooth curves as
      explicit curves
    * initial_position: pair a relative first moveto is measured from
    * verbose: log each parsing step

    Args:
        path (str): SVG path data string
        options (dict): Parse options (optional)

    Returns:
        List[PathElement]: Path elements in path order
    """
    if not path:
        raise PathSyntaxError("parse: no input")
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise TypeError("parse: options should be a dictionary")

    options = dict(options, **kwargs)
    for key in options:
        if key not in PARSE_OPTIONS:
            logger.warning(f"Ignoring unknown parse option: {key}")

    verbose = bool(options.get("verbose"))
    if verbose:
        logger.info(f"I am trying to split up '{path}'.")

    elements = []
    for token in tokenize(path):
        numbers = scan_numbers(token.values)
        if verbose:
            logger.info(f"Extracted {len(numbers)} numbers: {' ! '.join(numbers)}")
        elements.extend(build_elements(token.command, numbers, path))

    if options.get("absolute"):
        no_smooth = options.get("no_shortcuts") or options.get("no_smooth")
        make_absolute(
            elements,
            initial_position=options.get("initial_position"),
            no_smooth=bool(no_smooth),
            verbose=verbose,
        )

    return elements


def reverse(path: str, precision: int = DEFAULT_PRECISION) -> str:
    """
    Reverse the direction of a path made of cubic bezier curves.

    Args:
        path (str): SVG path data string
        precision (int): Number of decimals in the output

    Returns:
        str: Path data tracing the same curves backwards
    """
    elements = parse(path, absolute=True, no_smooth=True)
    return serialize(reverse_elements(elements), precision)


class PathProcessor:
    """Processes SVG path data using configured defaults."""

    def __init__(self, config: Dict = None):
        """
        Initialize a path processor.

        Args:
            config (dict): Configuration dictionary with "parse" and
                "output" sections (optional)
        """
        self.config = config or {}
        self.options = dict(self.config.get("parse", {}))
        self.precision = self.config.get("output", {}).get("precision", DEFAULT_PRECISION)

    def parse(self, path: str, **overrides) -> List[PathElement]:
        """Parse path data; options not given fall back to the configured ones."""
        options = dict(self.options)
        options.update((key, value) for key, value in overrides.items() if value is not None)
        return parse(path, options)

    def serialize(self, elements: List[PathElement]) -> str:
        return serialize(elements, self.precision)

    def reverse(self, path: str) -> str:
        return reverse(path, self.precision)

    def normalize(self, path: str, **overrides) -> str:
        """Parse path data and serialize it again."""
        return self.serialize(self.parse(path, **overrides))
