import numpy as np

from ..color import to_hex

# WCAG AA for normal text
MIN_HIGHLIGHT_CONTRAST = 4.5


def palette_luminance(hex_colors):
    """Relative luminance (WCAG 2.0) for a list of '#rrggbb' strings.

    Returns:
        numpy array of luminances, one per input color
    """
    if not hex_colors:
        return np.zeros(0)

    channels = np.array(
        [[int(h[i : i + 2], 16) for i in (1, 3, 5)] for h in hex_colors],
        dtype=float,
    ) / 255.0
    linear = np.where(
        channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4
    )
    return linear @ np.array([0.2126, 0.7152, 0.0722])


def contrast_ratios(fg_luminance, bg_luminance):
    lighter = np.maximum(fg_luminance, bg_luminance)
    darker = np.minimum(fg_luminance, bg_luminance)
    return (lighter + 0.05) / (darker + 0.05)


def generate_readability_report(theme, min_contrast=MIN_HIGHLIGHT_CONTRAST):
    """Generate a contrast report for highlights that set both fg and bg.

    Returns:
        tuple: (report text, list of (group, fg, bg, achieved contrast))
    """
    pairs = [
        (d.group, d.fg, d.bg)
        for d in theme.directives
        if d.link is None and d.fg != "NONE" and d.bg != "NONE"
    ]

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {theme.name} ({str(theme.background).upper()})")
    report.append(f"Highlights with fg and bg: {len(pairs)} (min: {min_contrast}:1)")
    report.append("-" * 50)

    issues = []
    if pairs:
        ratios = contrast_ratios(
            palette_luminance([fg for _, fg, _ in pairs]),
            palette_luminance([bg for _, _, bg in pairs]),
        )
        for (group, fg, bg), ratio in zip(pairs, ratios.tolist()):
            status = "✓" if ratio >= min_contrast else "✗ FAIL"
            if ratio < min_contrast:
                issues.append((group, fg, bg, ratio))
            report.append(f"  {group:24} {fg} on {bg}  {ratio:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for group, fg, bg, achieved in issues:
            report.append(
                f"  - {group}: {fg} on {bg} has {achieved:.1f}:1, needs {min_contrast}:1"
            )
    else:
        report.append("ALL HIGHLIGHTS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(theme):
    """Print the resolved palette with each color's contrast against the first entry."""
    names = list(theme.palette)
    hex_colors = [to_hex(theme.palette[n]) for n in names]
    luminance = palette_luminance(hex_colors)

    print("\n" + "=" * 60)
    print(f"PALETTE: {theme.name} ({str(theme.background).upper()})")
    print("=" * 60)

    if not names:
        return

    contrast = contrast_ratios(luminance, luminance[0])
    print(f"(contrast measured against {names[0]})")
    for name, hex_color, ratio in zip(names, hex_colors, contrast.tolist()):
        print(f"  {name:18} {hex_color}  (contrast: {ratio:.1f}:1)")
