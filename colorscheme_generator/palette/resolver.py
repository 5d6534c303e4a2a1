import logging

from ..color import (
    adjust_color,
    copy_color,
    create_hsl_color,
    darken_color,
    lighten_color,
    mix_colors,
    parse_hex,
    to_hex,
)
from ..errors import MissingHueTable, NonStringValue, UnknownColorReference, UnknownHue
from .expressions import parse_expression, parse_number

logger = logging.getLogger(__name__)


def lookup_color(name, palette):
    """Return the palette entry called ``name``.

    Raises:
        UnknownColorReference: ``name`` has not been resolved (yet)
    """
    try:
        return palette[name]
    except KeyError:
        raise UnknownColorReference(name) from None


def lookup_hue(name, hues):
    if hues is None:
        raise MissingHueTable(name)
    try:
        return hues[name]
    except KeyError:
        raise UnknownHue(name) from None


def _resolve_hsl(expression, palette, hues):
    hue, saturation, lightness = expression.args
    if hue.startswith("$"):
        hue_degrees = lookup_hue(hue[1:], hues)
    else:
        hue_degrees = parse_number(hue, expression.source)
    return create_hsl_color(
        hue_degrees,
        parse_number(saturation, expression.source),
        parse_number(lightness, expression.source),
    )


def _resolve_adjust(expression, palette, hues):
    name, saturation_delta, lightness_delta = expression.args
    return adjust_color(
        lookup_color(name, palette),
        parse_number(saturation_delta, expression.source),
        parse_number(lightness_delta, expression.source),
    )


def _resolve_lighten(expression, palette, hues):
    name, amount = expression.args
    return lighten_color(
        lookup_color(name, palette), parse_number(amount, expression.source)
    )


def _resolve_darken(expression, palette, hues):
    name, amount = expression.args
    return darken_color(
        lookup_color(name, palette), parse_number(amount, expression.source)
    )


def _resolve_mix(expression, palette, hues):
    name1, name2, weight = expression.args
    return mix_colors(
        lookup_color(name1, palette),
        lookup_color(name2, palette),
        parse_number(weight, expression.source),
    )


RESOLVERS = {
    "hsl": _resolve_hsl,
    "adjust": _resolve_adjust,
    "lighten": _resolve_lighten,
    "darken": _resolve_darken,
    "mix": _resolve_mix,
}


def resolve_color(definition, palette, hues=None):
    """Resolve a single color definition against an existing palette.

    Args:
        definition: Hex literal or color expression string
        palette: Colors resolved so far (only these can be referenced)
        hues: Optional hue name -> degrees table for ``$name`` hue references

    Returns:
        HslColor or RgbColor
    """
    if definition.startswith("#"):
        return parse_hex(definition)

    expression = parse_expression(definition)
    return RESOLVERS[expression.function](expression, palette, hues)


def resolve_palette(colors, hues=None):
    """Resolve an ordered name -> definition mapping into a palette dict.

    Entries are resolved strictly in iteration order, so a definition can only
    refer to names declared before it. A definition that is exactly the name
    of an earlier entry copies that entry. The first failure is raised as is.

    Args:
        colors: Ordered mapping of color name -> definition string
        hues: Optional hue name -> degrees table

    Returns:
        dict of color name -> HslColor/RgbColor in declaration order
    """
    palette = {}

    for name, definition in colors.items():
        if not isinstance(definition, str):
            raise NonStringValue("colors", name, definition)

        if definition in palette:
            palette[name] = copy_color(palette[definition])
            logger.debug("Aliased color %s -> %s", name, definition)
            continue

        palette[name] = resolve_color(definition, palette, hues)
        logger.debug("Resolved color %s = %s (%s)", name, to_hex(palette[name]), definition)

    return palette
