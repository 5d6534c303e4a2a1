"""Compile highlight directives into Neovim ``nvim_set_hl`` calls.

A directive is a space separated string of up to four values::

    fg [bg [style [sp]]]
    link:Group

Color values are palette names or ``-`` for NONE. The style value is a
string of single character flags (see STYLE_FLAGS) or ``-``.
"""

import logging
from collections import namedtuple

from ..color import to_hex
from ..errors import InvalidHighlightDirective, NonStringValue, UnknownStyleFlag
from ..palette.loader import check_name
from ..palette.resolver import lookup_color

logger = logging.getLogger(__name__)

HighlightDirective = namedtuple(
    "HighlightDirective", ["group", "fg", "bg", "sp", "styles", "link"]
)

NO_COLOR = "NONE"
LINK_PREFIX = "link:"

STYLE_FLAGS = {
    "b": "bold",
    "i": "italic",
    "u": "underline",
    "c": "undercurl",
    "d": "underdouble",
    "t": "underdotted",
    "h": "underdashed",
    "o": "standout",
    "s": "strikethrough",
    "n": "nocombine",
    "r": "reverse",
}


def lookup_highlight_color(value, palette):
    """Return the hex for a palette name, or NONE for ``-``."""
    if value == "-":
        return NO_COLOR
    return to_hex(lookup_color(value, palette))


def parse_style_flags(style):
    """Map a flag string such as ``"bi"`` to attribute names, in input order.

    Repeated flags are kept as given.
    """
    attributes = []
    for flag in style:
        if flag == "-":
            continue
        if flag not in STYLE_FLAGS:
            raise UnknownStyleFlag(flag)
        attributes.append(STYLE_FLAGS[flag])
    return tuple(attributes)


def compile_highlight(group, directive, palette):
    """Compile one highlight group directive against a resolved palette.

    Returns:
        HighlightDirective with hex colors (or NONE) and style attributes
    """
    values = [value for value in directive.split(" ") if value]

    if len(values) == 1 and LINK_PREFIX in values[0]:
        target = check_name("link target", values[0].split(LINK_PREFIX, 1)[1])
        return HighlightDirective(group, None, None, None, (), target)

    if not 1 <= len(values) <= 4:
        raise InvalidHighlightDirective(group, directive)

    fg = lookup_highlight_color(values[0], palette)
    bg = lookup_highlight_color(values[1], palette) if len(values) > 1 else NO_COLOR
    styles = parse_style_flags(values[2]) if len(values) > 2 else ()
    sp = lookup_highlight_color(values[3], palette) if len(values) > 3 else None

    return HighlightDirective(group, fg, bg, sp, styles, None)


def render_highlight(highlight):
    """Render a HighlightDirective as a line of the generated Lua module."""
    if highlight.link is not None:
        options = f'link = "{highlight.link}"'
    else:
        parts = [f'fg = "{highlight.fg}"', f'bg = "{highlight.bg}"']
        if highlight.sp is not None:
            parts.append(f'sp = "{highlight.sp}"')
        parts.extend(f"{attribute} = true" for attribute in highlight.styles)
        options = ", ".join(parts)

    return f'\n    hl(0, "{highlight.group}", {{ {options} }})'


def compile_highlights(highlights, palette):
    """Compile every highlight group, preserving the source order."""
    compiled = []
    for group, directive in highlights.items():
        if not isinstance(directive, str):
            raise NonStringValue("highlights", group, directive)
        compiled.append(compile_highlight(group, directive, palette))
        logger.debug("Compiled highlight %s: %s", group, compiled[-1])
    return compiled


def render_highlights(compiled):
    return [render_highlight(highlight) for highlight in compiled]
