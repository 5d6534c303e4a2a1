from .theme import Background, Theme, build_theme, compile_theme

__version__ = "0.1.0"

__all__ = ["Background", "Theme", "build_theme", "compile_theme"]
