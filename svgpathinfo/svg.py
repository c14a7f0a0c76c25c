"""SVG document module for svgpathinfo.

This module reads SVG files with lxml and collects the path data of every
<path> element, so that it can be parsed into path elements.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from lxml import etree

from .elements import PathElement
from .path_processor import parse

# Set up logging
logger = logging.getLogger(__name__)

# SVG namespace
SVG_NS = "{http://www.w3.org/2000/svg}"


class SVGDocument:
    """Class for reading path data from an SVG document."""

    def __init__(self, file_path: Union[str, Path], options: Optional[Dict[str, Any]] = None):
        """Initialize SVG document from file.

        Args:
            file_path: Path to SVG file
            options: Parse options applied to every path (optional)
        """
        self.file_path = Path(file_path)
        self.options = options or {}
        self.tree = None
        self.root = None
        self.paths = []

        self._parse()

    def _parse(self):
        """Parse the SVG file and extract its paths."""
        try:
            self.tree = etree.parse(str(self.file_path))
        except (OSError, etree.XMLSyntaxError) as e:
            logger.error(f"Error parsing SVG file {self.file_path}: {e}")
            raise
        self.root = self.tree.getroot()
        self._extract_paths()

    def _extract_paths(self):
        """Extract all path elements from the SVG document."""
        # Paths in the SVG namespace, and paths in documents without one
        path_elements = self.root.findall(f".//{SVG_NS}path") + self.root.findall(".//path")
        if self.root.tag in (f"{SVG_NS}path", "path"):
            path_elements.insert(0, self.root)

        for path_elem in path_elements:
            if not path_elem.get("d", "").strip():
                logger.warning(f"Skipping path without data (line {path_elem.sourceline})")
                continue
            self.paths.append(SVGPath(path_elem, self.options))

        logger.info(f"Extracted {len(self.paths)} paths from SVG")

    def get_paths(self) -> List["SVGPath"]:
        """Get all paths from the document.

        Returns:
            List of SVGPath objects
        """
        return self.paths


class SVGPath:
    """Class representing an SVG path element and its parsed data."""

    def __init__(self, path_element, options: Optional[Dict[str, Any]] = None):
        """Initialize from an SVG path element.

        Args:
            path_element: lxml Element for the path
            options: Parse options (optional)
        """
        self.element = path_element
        self.id = path_element.get("id")
        self.path_data = path_element.get("d", "")
        self.elements: List[PathElement] = parse(self.path_data, options or {})


def parse_svg(file_path: Union[str, Path], options: Optional[Dict[str, Any]] = None) -> SVGDocument:
    """Parse an SVG file and return the document object.

    Args:
        file_path: Path to SVG file
        options: Parse options applied to every path (optional)

    Returns:
        SVGDocument object
    """
    return SVGDocument(file_path, options)
