import json
import logging
import tomllib
from pathlib import Path

from ..errors import (
    InvalidThemeDocument,
    MissingField,
    ThemeFileNotFound,
    ThemeStructureError,
    UnsafeName,
    UnsupportedThemeFormat,
)

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".toml", ".json")
REQUIRED_FIELDS = ("name", "background", "colors", "highlights")
TABLE_FIELDS = ("colors", "highlights", "hues", "globals")
UNSAFE_CHARACTERS = ("\"", "\\")


def check_name(kind, name):
    """Reject names that would break out of a generated Lua string literal."""
    if any(c in name for c in UNSAFE_CHARACTERS):
        raise UnsafeName(kind, name)
    return name


def _read_document(path):
    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_theme_description(path):
    """Load a theme description from a TOML or JSON file.

    Args:
        path: Path to the theme description

    Returns:
        dict with ``name``, ``background``, ``colors`` and ``highlights``, and
        ``hues``/``globals`` set to None when the file omits them. Table order
        is the order of the file.
    """
    path = Path(path)
    if not path.is_file():
        raise ThemeFileNotFound(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise UnsupportedThemeFormat(path)

    logger.debug("Reading theme description %s", path)
    try:
        data = _read_document(path)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidThemeDocument(path, e) from e
    if not isinstance(data, dict):
        raise ThemeStructureError(f"Theme description {str(path)!r} must be a table")

    for field in REQUIRED_FIELDS:
        if field not in data:
            raise MissingField(field, path)

    for field in ("name", "background"):
        if not isinstance(data[field], str):
            raise ThemeStructureError(f"Field {field!r} must be a string")

    for field in TABLE_FIELDS:
        if field in data and not isinstance(data[field], dict):
            raise ThemeStructureError(f"Field {field!r} must be a table")

    hues = data.get("hues")
    if hues is not None:
        for key, value in hues.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ThemeStructureError(f"Hue {key!r} must be a number, got {value!r}")

    check_name("theme name", data["name"])
    for group in data["highlights"]:
        check_name("highlight group", group)
    for key in data.get("globals") or {}:
        check_name("global", key)

    return {
        "name": data["name"],
        "background": data["background"],
        "colors": data["colors"],
        "highlights": data["highlights"],
        "hues": hues,
        "globals": data.get("globals"),
    }
