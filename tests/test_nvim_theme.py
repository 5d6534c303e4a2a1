"""Tests for the generated Lua files."""

from colorscheme_generator import compile_theme
from colorscheme_generator.nvim import generate_colors_loader, generate_nvim_init


def test_init_module(theme_file):
    theme = compile_theme(theme_file)
    lua = generate_nvim_init(theme)

    assert lua.startswith("local M = {}\n")
    assert lua.endswith("return M\n")
    assert "local hl = vim.api.nvim_set_hl" in lua
    assert 'vim.o.background = "light"' in lua
    assert 'vim.g.colors_name = "tiny"' in lua
    assert 'vim.g.terminal_color_1 = "#ff0000"' in lua


def test_highlights_are_written_in_order(theme_file):
    theme = compile_theme(theme_file)
    lua = generate_nvim_init(theme)

    positions = [lua.index(line) for line in theme.highlights]
    assert positions == sorted(positions)
    assert lua.index(theme.highlights[-1]) < lua.index("function M.init()")
    assert '{ link = "Normal" }' in lua


def test_colors_loader():
    assert generate_colors_loader("dusk") == 'require("dusk").init()\n'
