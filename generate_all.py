#!/usr/bin/env python3
"""
Generate every colorscheme described in themes/.
All themes share one Neovim runtime directory: out/colors and out/lua.
"""

import argparse
import subprocess
from pathlib import Path

THEME_EXTENSIONS = {".toml", ".json"}


def find_themes(themes_dir):
    """Return the theme description files in ``themes_dir``, sorted."""
    if not themes_dir.exists():
        return []
    return sorted(f for f in themes_dir.iterdir() if f.suffix.lower() in THEME_EXTENSIONS)


def build_command(theme_path, out_dir, report=False):
    cmd = [
        "uv",
        "run",
        "colorscheme-generator",
        str(theme_path),
        "-o",
        str(out_dir),
    ]
    if report:
        cmd.append("--report")
    return cmd


def main():
    parser = argparse.ArgumentParser(
        description="Generate all colorschemes from the theme descriptions in themes/"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Write a readability report for every theme",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    themes_dir = root / "themes"
    out_dir = root / "out"

    out_dir.mkdir(parents=True, exist_ok=True)

    themes = find_themes(themes_dir)
    if not themes:
        print(f"No theme descriptions in {themes_dir}")
        return

    print(f"Found {len(themes)} themes to process\n")

    failed = []
    for theme_path in themes:
        print(f"{'=' * 60}")
        print(f"Generating: {theme_path.stem}")
        print(f"{'=' * 60}")

        result = subprocess.run(build_command(theme_path, out_dir, args.report), cwd=root)

        if result.returncode != 0:
            print(f"Error generating {theme_path.stem}")
            failed.append(theme_path.stem)
            continue
        print()

    print(f"{'=' * 60}")
    print("Done! Colorschemes written to:")
    print(f"  {out_dir}")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
