"""Regular expressions for the SVG path data grammar.

The patterns follow the BNF in https://www.w3.org/TR/SVG/paths.html#PathDataBNF
and are composed from small pieces, so each production can be matched on its
own. They are compiled once at import time and never modified.

Command patterns capture the command letter in group 1 and the argument
text in group 2.
"""

import re

# Pattern source fragments

WSP = r"[\x20\x09\x0D\x0A]"

COMMA_WSP = rf"(?:{WSP}+|{WSP}*,{WSP}*)"

DIGIT_SEQUENCE = r"[0-9]+"
SIGN = r"[+\-]"
FRACTIONAL_CONSTANT = rf"(?:{DIGIT_SEQUENCE}?\.{DIGIT_SEQUENCE})"
EXPONENT = rf"(?:[eE]{SIGN}?{DIGIT_SEQUENCE})"
FLOATING_POINT_CONSTANT = (
    rf"(?:{FRACTIONAL_CONSTANT}{EXPONENT}?|{DIGIT_SEQUENCE}{EXPONENT})"
)

# The floating point constant must come before the plain digit sequence,
# otherwise the shorter match wins every time.
NONNEGATIVE_NUMBER = rf"(?:{FLOATING_POINT_CONSTANT}|{DIGIT_SEQUENCE})"
NUMBER_SOURCE = rf"(?:{SIGN}?{NONNEGATIVE_NUMBER})"
FLAG = r"[01]"

COORDINATE_PAIR = rf"(?:{NUMBER_SOURCE}{COMMA_WSP}?{NUMBER_SOURCE})"
COORDINATE_PAIRS = rf"(?:(?:{COORDINATE_PAIR}{COMMA_WSP}?)*{COORDINATE_PAIR})"
NUMBERS = rf"(?:(?:{NUMBER_SOURCE}{COMMA_WSP}?)*{NUMBER_SOURCE})"

_QUADRATIC_ARGUMENT = rf"(?:{COORDINATE_PAIR}{COMMA_WSP}?{COORDINATE_PAIR})"
_SMOOTH_CURVETO_ARGUMENT = _QUADRATIC_ARGUMENT
_CURVETO_ARGUMENT = rf"(?:(?:{COORDINATE_PAIR}{COMMA_WSP}?){{2}}{COORDINATE_PAIR})"
_ARC_ARGUMENT = (
    rf"(?:{NONNEGATIVE_NUMBER}{COMMA_WSP}?{NONNEGATIVE_NUMBER}{COMMA_WSP}?"
    rf"{NUMBER_SOURCE}{COMMA_WSP}{FLAG}{COMMA_WSP}?{FLAG}{COMMA_WSP}?"
    rf"{COORDINATE_PAIR})"
)


def _repeated(argument: str) -> str:
    """Return a pattern for one or more comma/space separated arguments."""
    return rf"(?:(?:{argument}{COMMA_WSP}?)*{argument})"


MOVETO_SOURCE = rf"([Mm]){WSP}*({COORDINATE_PAIRS})"
CLOSEPATH_SOURCE = r"([Zz])"
LINETO_SOURCE = rf"([Ll]){WSP}*({COORDINATE_PAIRS})"
HORIZONTAL_LINETO_SOURCE = rf"([Hh]){WSP}*({NUMBERS})"
VERTICAL_LINETO_SOURCE = rf"([Vv]){WSP}*({NUMBERS})"
CURVETO_SOURCE = rf"([Cc]){WSP}*({_repeated(_CURVETO_ARGUMENT)})"
SMOOTH_CURVETO_SOURCE = rf"([Ss]){WSP}*({_repeated(_SMOOTH_CURVETO_ARGUMENT)})"
QUADRATIC_BEZIER_CURVETO_SOURCE = (
    rf"([Qq]){WSP}*({_repeated(_QUADRATIC_ARGUMENT)})"
)
SMOOTH_QUADRATIC_BEZIER_CURVETO_SOURCE = (
    rf"([Tt]){WSP}*({COORDINATE_PAIRS})"
)
ELLIPTICAL_ARC_SOURCE = rf"([Aa]){WSP}*({_repeated(_ARC_ARGUMENT)})"

DRAWTO_COMMAND_SOURCE = "(" + "|".join([
    CLOSEPATH_SOURCE,
    LINETO_SOURCE,
    HORIZONTAL_LINETO_SOURCE,
    VERTICAL_LINETO_SOURCE,
    CURVETO_SOURCE,
    SMOOTH_CURVETO_SOURCE,
    QUADRATIC_BEZIER_CURVETO_SOURCE,
    SMOOTH_QUADRATIC_BEZIER_CURVETO_SOURCE,
    ELLIPTICAL_ARC_SOURCE,
]) + ")"

DRAWTO_COMMANDS_SOURCE = (
    rf"(?:(?:{DRAWTO_COMMAND_SOURCE}{WSP}*)*{DRAWTO_COMMAND_SOURCE})"
)
MOVETO_DRAWTO_COMMAND_GROUP_SOURCE = (
    rf"(?:{MOVETO_SOURCE}{WSP}*{DRAWTO_COMMANDS_SOURCE}?)"
)
SVG_PATH_SOURCE = rf"{WSP}*(?:{MOVETO_DRAWTO_COMMAND_GROUP_SOURCE}{WSP}*)*"

# Compiled patterns

NUMBER = re.compile(NUMBER_SOURCE)
MOVETO = re.compile(MOVETO_SOURCE)
CLOSEPATH = re.compile(CLOSEPATH_SOURCE)
LINETO = re.compile(LINETO_SOURCE)
HORIZONTAL_LINETO = re.compile(HORIZONTAL_LINETO_SOURCE)
VERTICAL_LINETO = re.compile(VERTICAL_LINETO_SOURCE)
CURVETO = re.compile(CURVETO_SOURCE)
SMOOTH_CURVETO = re.compile(SMOOTH_CURVETO_SOURCE)
QUADRATIC_BEZIER_CURVETO = re.compile(QUADRATIC_BEZIER_CURVETO_SOURCE)
SMOOTH_QUADRATIC_BEZIER_CURVETO = re.compile(SMOOTH_QUADRATIC_BEZIER_CURVETO_SOURCE)
ELLIPTICAL_ARC = re.compile(ELLIPTICAL_ARC_SOURCE)
DRAWTO_COMMAND = re.compile(DRAWTO_COMMAND_SOURCE)
DRAWTO_COMMANDS = re.compile(DRAWTO_COMMANDS_SOURCE)
MOVETO_DRAWTO_COMMAND_GROUP = re.compile(MOVETO_DRAWTO_COMMAND_GROUP_SOURCE)
SVG_PATH = re.compile(SVG_PATH_SOURCE)

# Used by the tokenizer to check each command on its own
COMMAND = re.compile(rf"{MOVETO_SOURCE}|{DRAWTO_COMMAND_SOURCE}")

# Splits path data on command letters, keeping the letters
COMMAND_SPLIT = re.compile(r"([cslqtahvzm])", re.IGNORECASE)

LEADING_WSP = re.compile(rf"^{WSP}*")
ONLY_WSP = re.compile(rf"{WSP}*")
