import logging
from collections import namedtuple
from enum import Enum

from .color import to_hex
from .errors import InvalidBackground, NonStringValue
from .nvim.highlights import compile_highlights, render_highlights
from .palette import load_theme_description, resolve_color, resolve_palette

logger = logging.getLogger(__name__)


class Background(Enum):
    DARK = "dark"
    LIGHT = "light"

    def __str__(self):
        return self.value


Theme = namedtuple(
    "Theme", ["name", "background", "palette", "highlights", "globals", "directives"]
)


def parse_background(value):
    """Parse 'dark' or 'light' (any case) into a Background."""
    lowered = value.lower() if isinstance(value, str) else None
    for background in Background:
        if background.value == lowered:
            return background
    raise InvalidBackground(value)


def resolve_globals(globals_table, palette, hues=None):
    """Resolve global variable bindings to (variable, hex) pairs.

    A value naming a palette entry takes that entry's color; anything else is
    resolved as a color expression. The palette itself is never extended.
    """
    resolved = []
    for key, value in (globals_table or {}).items():
        if not isinstance(value, str):
            raise NonStringValue("globals", key, value)
        if value in palette:
            color = palette[value]
        else:
            color = resolve_color(value, palette, hues)
        resolved.append((key, to_hex(color)))
    return resolved


def build_theme(description):
    """Compile a loaded theme description into a Theme.

    Args:
        description: dict as returned by load_theme_description

    Returns:
        Theme with the resolved palette, rendered highlight lines (in source
        order), global bindings and the structured highlight directives
    """
    hues = description.get("hues")
    palette = resolve_palette(description["colors"], hues)
    directives = compile_highlights(description["highlights"], palette)
    globals_ = resolve_globals(description.get("globals"), palette, hues)
    background = parse_background(description["background"])

    logger.debug(
        "Built theme %s: %d colors, %d highlights, %d globals",
        description["name"],
        len(palette),
        len(directives),
        len(globals_),
    )

    return Theme(
        name=description["name"],
        background=background,
        palette=palette,
        highlights=render_highlights(directives),
        globals=globals_,
        directives=directives,
    )


def compile_theme(path):
    """Load a theme description from ``path`` and build it."""
    return build_theme(load_theme_description(path))
