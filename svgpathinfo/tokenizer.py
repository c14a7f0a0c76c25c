"""Tokenizer and number scanner for SVG path data.

The tokenizer splits path data on command letters, giving one token per
command letter with the raw argument text that follows it. The number
scanner then pulls the numeric literals out of the argument text.
"""

import logging
from typing import List, NamedTuple

from . import grammar
from .errors import MissingMovetoError

# Set up logging
logger = logging.getLogger(__name__)


class Token(NamedTuple):
    """A command letter with its argument text."""

    command: str
    values: str
    original: str


def tokenize(path: str) -> List[Token]:
    """Split path data into command tokens.

    Args:
        path: SVG path data string

    Returns:
        List of tokens, in path order

    Raises:
        MissingMovetoError: If the path does not start with a moveto
    """
    parts = grammar.COMMAND_SPLIT.split(path)
    if (
        len(parts) < 2
        or not grammar.ONLY_WSP.fullmatch(parts[0])
        or parts[1] not in "Mm"
    ):
        raise MissingMovetoError(f"No moveto at start of path '{path}'")

    tokens = []
    for i in range(1, len(parts), 2):
        command = parts[i]
        values = parts[i + 1] if i + 1 < len(parts) else ""
        original = f"{command}{values}"

        # The number scanner decides the real argument shape, this is
        # only a diagnostic.
        if not grammar.COMMAND.match(original):
            logger.warning(
                f"Cannot parse '{original}' using moveto/drawto command grammar"
            )

        values = grammar.LEADING_WSP.sub("", values)
        tokens.append(Token(command, values, original))

    return tokens


def scan_numbers(values: str) -> List[str]:
    """Extract numeric literals from command argument text.

    Leading plus signs are removed from the returned literals.

    Args:
        values: Argument text following a command letter

    Returns:
        List of number strings, in order
    """
    numbers = grammar.NUMBER.findall(values)
    return [number[1:] if number.startswith("+") else number for number in numbers]
