"""Tests for theme assembly."""

import pytest

from colorscheme_generator import Background, build_theme, compile_theme
from colorscheme_generator.color import RgbColor, to_hex
from colorscheme_generator.errors import (
    InvalidBackground,
    NonStringValue,
    ThemeConfigError,
    UnknownColorReference,
)
from colorscheme_generator.theme import parse_background, resolve_globals


def description(**overrides):
    data = {
        "name": "test",
        "background": "dark",
        "colors": {"red": "#ff0000", "black": "#000000"},
        "highlights": {"Normal": "red black", "Link": "link:Normal"},
        "hues": None,
        "globals": None,
    }
    data.update(overrides)
    return data


class TestBackground:
    @pytest.mark.parametrize("value", ["dark", "Dark", "DARK"])
    def test_dark(self, value):
        assert parse_background(value) is Background.DARK

    def test_light(self):
        assert parse_background("LiGhT") is Background.LIGHT

    @pytest.mark.parametrize("value", ["dim", "", " dark"])
    def test_invalid(self, value):
        with pytest.raises(InvalidBackground) as exc_info:
            parse_background(value)
        assert exc_info.value.background == value
        assert isinstance(exc_info.value, ThemeConfigError)

    def test_str(self):
        assert str(Background.LIGHT) == "light"


class TestResolveGlobals:
    def test_names_and_expressions(self, palette):
        resolved = resolve_globals(
            {"terminal_color_1": "red", "terminal_color_9": "darken(red, 0.2)"}, palette
        )
        assert resolved == [("terminal_color_1", "#ff0000"), ("terminal_color_9", "#990000")]

    def test_does_not_extend_palette(self, palette):
        before = dict(palette)
        resolve_globals({"x": "#123456"}, palette)
        assert palette == before

    def test_empty(self, palette):
        assert resolve_globals(None, palette) == []

    def test_unknown_reference(self, palette):
        with pytest.raises(UnknownColorReference):
            resolve_globals({"x": "lighten(nothing, 0.1)"}, palette)

    def test_non_string(self, palette):
        with pytest.raises(NonStringValue):
            resolve_globals({"x": 1}, palette)


class TestBuildTheme:
    def test_builds_theme(self):
        theme = build_theme(description(globals={"fg": "red"}))
        assert theme.name == "test"
        assert theme.background is Background.DARK
        assert theme.palette == {"red": RgbColor(255, 0, 0), "black": RgbColor(0, 0, 0)}
        assert theme.highlights == [
            '\n    hl(0, "Normal", { fg = "#ff0000", bg = "#000000" })',
            '\n    hl(0, "Link", { link = "Normal" })',
        ]
        assert theme.globals == [("fg", "#ff0000")]
        assert [d.group for d in theme.directives] == ["Normal", "Link"]

    def test_invalid_background(self):
        with pytest.raises(InvalidBackground):
            build_theme(description(background="sepia"))

    def test_highlight_error_aborts(self):
        with pytest.raises(UnknownColorReference):
            build_theme(description(highlights={"Normal": "blue"}))


def test_compile_theme_file(theme_file):
    theme = compile_theme(theme_file)
    assert theme.background is Background.LIGHT
    assert to_hex(theme.palette["dark_red"]) == "#990000"
    assert to_hex(theme.palette["bg"]) == "#161822"
    assert theme.palette["alert"] == theme.palette["red"]
    assert theme.globals[0] == ("terminal_color_1", "#ff0000")
    assert len(theme.highlights) == 3


def test_example_theme_compiles(example_theme_path):
    theme = compile_theme(example_theme_path)
    assert theme.name == "dusk"
    assert to_hex(theme.palette["bg"]) == "#161822"
    assert len(theme.highlights) == 19
