from .highlights import compile_highlight, compile_highlights, render_highlight
from .theme import generate_colors_loader, generate_nvim_init

__all__ = [
    "compile_highlight",
    "compile_highlights",
    "render_highlight",
    "generate_colors_loader",
    "generate_nvim_init",
]
