"""Parsing helpers for palette color expressions.

An expression is either a hex literal (``#rrggbb``) or a function call:

    hsl(hue | $hue_name, saturation, lightness)
    adjust(color, saturation_delta, lightness_delta)
    lighten(color, amount)
    darken(color, amount)
    mix(color1, color2, weight)

Function names are case-insensitive. Arguments are split on commas and
stripped of surrounding whitespace; nothing is evaluated here.
"""

import re
from collections import namedtuple

from ..errors import (
    ArgumentCountMismatch,
    InvalidColorExpression,
    InvalidNumber,
    UnknownColorFunction,
)

ColorExpression = namedtuple("ColorExpression", ["function", "args", "source"])

# Function name -> number of arguments
FUNCTION_ARITY = {
    "hsl": 3,
    "adjust": 3,
    "lighten": 2,
    "darken": 2,
    "mix": 3,
}

CALL_PATTERN = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\((.*)\)", re.DOTALL)
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def split_arguments(source, arguments, expected):
    """Split a comma separated argument list, checking the argument count."""
    parts = [part.strip() for part in arguments.split(",")]
    if len(parts) != expected:
        raise ArgumentCountMismatch(source, expected, len(parts))
    return parts


def parse_expression(text):
    """Parse a function-call color expression into a ColorExpression.

    Raises:
        UnknownColorFunction: the call syntax is valid but the name is not
        ArgumentCountMismatch: wrong number of arguments for the function
        InvalidColorExpression: anything that is not a function call
    """
    match = CALL_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidColorExpression(text)

    function = match.group(1).lower()
    if function not in FUNCTION_ARITY:
        raise UnknownColorFunction(text, match.group(1))

    args = split_arguments(text, match.group(2), FUNCTION_ARITY[function])
    return ColorExpression(function, tuple(args), text)


def parse_number(value, source):
    """Parse a decimal argument; ``source`` is the whole expression for errors."""
    if NUMBER_PATTERN.fullmatch(value) is None:
        raise InvalidNumber(source, value)
    return float(value)
