import argparse
import logging
import os

from .errors import ThemeError
from .export import export_json, generate_readability_report, print_palette
from .nvim import generate_colors_loader, generate_nvim_init
from .theme import compile_theme


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a Neovim Lua colorscheme from a theme description"
    )
    parser.add_argument(
        "theme_path",
        help="Path to the theme description (.toml or .json)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: current working directory)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Also export the resolved palette as palette-<name>.json",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the palette and write a highlight readability report",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every resolution step",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    except ThemeError as e:
        parser.exit(1, f"error: {e}\n")


def _run(args):
    """Compile the theme and write the generated files."""
    output_dir = args.output or os.getcwd()

    print(f"Loading theme: {args.theme_path}")
    theme = compile_theme(args.theme_path)
    name = theme.name

    print(f"Theme: {name} ({theme.background})")

    lua_dir = os.path.join(output_dir, "lua", name)
    colors_dir = os.path.join(output_dir, "colors")
    os.makedirs(lua_dir, exist_ok=True)
    os.makedirs(colors_dir, exist_ok=True)

    init_path = os.path.join(lua_dir, "init.lua")
    colors_path = os.path.join(colors_dir, f"{name}.lua")
    exported = [init_path, colors_path]

    with open(init_path, "w") as f:
        f.write(generate_nvim_init(theme))

    with open(colors_path, "w") as f:
        f.write(generate_colors_loader(name))

    if args.json:
        palette_json_path = os.path.join(output_dir, f"palette-{name}.json")
        export_json(theme, palette_json_path)
        exported.append(palette_json_path)

    if args.report:
        print_palette(theme)
        report, issues = generate_readability_report(theme)
        print("\n" + report)

        report_path = os.path.join(output_dir, f"readability_report-{name}.txt")
        with open(report_path, "w") as f:
            f.write(report)
        exported.append(report_path)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print(f"\n{len(theme.palette)} colors, {len(theme.highlights)} highlights")
    print("=" * 60)


if __name__ == "__main__":
    main()
