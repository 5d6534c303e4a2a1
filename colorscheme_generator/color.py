import math
import re
from collections import namedtuple

from .errors import (
    HueOutOfRange,
    InvalidHexFormat,
    InvalidMixWeight,
    LightnessOutOfRange,
    SaturationOutOfRange,
)


class HslColor(namedtuple("HslColor", ["hue", "saturation", "lightness"])):
    """HSL color; hue is a fraction of a full turn, saturation and lightness 0-1.

    Use create_hsl_color to build one from a hue in degrees.
    """

    __slots__ = ()

    def __new__(cls, hue, saturation, lightness):
        if not 0.0 <= hue <= 1.0:
            raise HueOutOfRange(hue * 360.0)
        if not 0.0 <= saturation <= 1.0:
            raise SaturationOutOfRange(saturation)
        if not 0.0 <= lightness <= 1.0:
            raise LightnessOutOfRange(lightness)
        return super().__new__(cls, hue, saturation, lightness)


RgbColor = namedtuple("RgbColor", ["r", "g", "b"])

HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6})")


def create_hsl_color(hue, saturation, lightness):
    """Create an HslColor from a hue in degrees, validating every component.

    Args:
        hue: Hue in degrees, 0-360 inclusive
        saturation: Saturation, 0-1 inclusive
        lightness: Lightness, 0-1 inclusive

    Returns:
        HslColor with the hue normalized to a fraction of a turn

    Raises:
        HueOutOfRange, SaturationOutOfRange, LightnessOutOfRange
    """
    if not 0.0 <= hue <= 360.0:
        raise HueOutOfRange(hue)
    if not 0.0 <= saturation <= 1.0:
        raise SaturationOutOfRange(saturation)
    if not 0.0 <= lightness <= 1.0:
        raise LightnessOutOfRange(lightness)
    return HslColor(hue / 360.0, float(saturation), float(lightness))


def parse_hex(hex_color):
    """Parse a '#rrggbb' string (any case) into an RgbColor."""
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        raise InvalidHexFormat(hex_color)
    digits = match.group(1)
    return RgbColor(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def _to_channel(value):
    # Round half away from zero; value is never negative here
    return max(0, min(255, int(math.floor(value * 255.0 + 0.5))))


def _hue_to_rgb(p, q, t):
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(color):
    """Convert an HslColor to an RgbColor."""
    h, s, l = color

    # Achromatic
    if s == 0.0:
        channel = _to_channel(l)
        return RgbColor(channel, channel, channel)

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    return RgbColor(
        _to_channel(_hue_to_rgb(p, q, h + 1.0 / 3.0)),
        _to_channel(_hue_to_rgb(p, q, h)),
        _to_channel(_hue_to_rgb(p, q, h - 1.0 / 3.0)),
    )


def rgb_to_hsl(color):
    """Convert an RgbColor to an HslColor."""
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2.0

    # Achromatic
    if max_c == min_c:
        return HslColor(0.0, 0.0, l)

    d = max_c - min_c
    s = d / (2.0 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

    if r == max_c:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif g == max_c:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0

    return HslColor((h / 6.0) % 1.0, s, l)


def to_rgb(color):
    if isinstance(color, RgbColor):
        return color
    if isinstance(color, HslColor):
        return hsl_to_rgb(color)
    raise TypeError(f"Expected HslColor or RgbColor, got {type(color).__name__}")


def to_hsl(color):
    if isinstance(color, HslColor):
        return color
    if isinstance(color, RgbColor):
        return rgb_to_hsl(color)
    raise TypeError(f"Expected HslColor or RgbColor, got {type(color).__name__}")


def to_hex(color):
    """Render any color as lowercase '#rrggbb'."""
    return rgb_to_hex(*to_rgb(color))


def copy_color(color):
    """Return an independent copy of a color, keeping its representation."""
    if not isinstance(color, (HslColor, RgbColor)):
        raise TypeError(f"Expected HslColor or RgbColor, got {type(color).__name__}")
    return color._replace()


def _clamp(value):
    return max(0.0, min(1.0, value))


def adjust_color(color, saturation_delta=0.0, lightness_delta=0.0):
    """Shift saturation and lightness, clamping both into 0-1.

    RGB input is converted to HSL first; the result is always an HslColor
    with the original hue.
    """
    h, s, l = to_hsl(color)
    return HslColor(h, _clamp(s + saturation_delta), _clamp(l + lightness_delta))


def lighten_color(color, amount):
    h, s, l = to_hsl(color)
    return HslColor(h, s, _clamp(l + amount))


def darken_color(color, amount):
    h, s, l = to_hsl(color)
    return HslColor(h, s, _clamp(l - amount))


def mix_colors(color1, color2, weight):
    """Blend two colors in RGB space.

    weight=1 returns color1, weight=0 returns color2. Channels are truncated,
    not rounded.
    """
    if not 0.0 <= weight <= 1.0:
        raise InvalidMixWeight(weight)

    r1, g1, b1 = to_rgb(color1)
    r2, g2, b2 = to_rgb(color2)
    r = int(r2 + (r1 - r2) * weight)
    g = int(g2 + (g1 - g2) * weight)
    b = int(b2 + (b1 - b2) * weight)
    return RgbColor(r, g, b)

