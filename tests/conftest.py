"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from colorscheme_generator.color import RgbColor

EXAMPLE_THEME = Path(__file__).parent.parent / "themes" / "dusk.toml"

MINIMAL_THEME = """\
name = "tiny"
background = "light"

[hues]
base = 230

[colors]
red = "#ff0000"
dark_red = "darken(red, 0.2)"
bg = "hsl($base, 0.2, 0.11)"
white = "#ffffff"
alert = "red"

[highlights]
Normal = "white bg"
Error = "red - bi"
Comment = "link:Normal"

[globals]
terminal_color_1 = "red"
terminal_color_9 = "lighten(red, 0.1)"
"""


@pytest.fixture
def palette():
    """A small resolved palette."""
    return {
        "red": RgbColor(255, 0, 0),
        "bg": RgbColor(0x16, 0x18, 0x22),
        "white": RgbColor(255, 255, 255),
        "black": RgbColor(0, 0, 0),
    }


@pytest.fixture
def theme_file(tmp_path):
    """Write the minimal TOML theme to a temporary file."""
    path = tmp_path / "tiny.toml"
    path.write_text(MINIMAL_THEME)
    return path


@pytest.fixture
def example_theme_path():
    return EXAMPLE_THEME
