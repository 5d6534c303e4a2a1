import json

from ..color import to_hex


def palette_to_dict(theme):
    """Flatten a compiled theme's palette to name -> hex plus metadata keys."""
    data = {k: to_hex(v) for k, v in theme.palette.items()}
    data["_name"] = theme.name
    data["_background"] = str(theme.background)
    if theme.globals:
        data["_globals"] = dict(theme.globals)
    return data


def export_json(theme, filepath):
    """Export the resolved palette as JSON.

    Args:
        theme: Compiled Theme
        filepath: Output file path
    """
    with open(filepath, "w") as f:
        json.dump(palette_to_dict(theme), f, indent=2)
