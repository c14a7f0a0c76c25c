"""Exceptions raised by svgpathinfo.

Every error derives from SVGPathError, which is a ValueError so callers
that already guard path parsing with ``except ValueError`` keep working.
"""


class SVGPathError(ValueError):
    """Base class for all path processing errors."""


class PathSyntaxError(SVGPathError):
    """Raised when path data is malformed."""


class MissingMovetoError(PathSyntaxError):
    """Raised when path data does not start with a moveto command."""


class ArityError(PathSyntaxError):
    """Raised when a command has the wrong number of arguments."""

    def __init__(self, command: str, count: int, message: str):
        super().__init__(message)
        self.command = command
        self.count = count


class UnsupportedElementError(SVGPathError):
    """Raised when an operation cannot handle a path element type."""


class MissingContextError(SVGPathError):
    """Raised when a smooth curve has no matching curve to reflect."""


class InvariantError(SVGPathError):
    """Raised when an element is missing data it should always carry."""
