from .loader import load_theme_description
from .resolver import lookup_color, resolve_color, resolve_palette

__all__ = ["load_theme_description", "lookup_color", "resolve_color", "resolve_palette"]
