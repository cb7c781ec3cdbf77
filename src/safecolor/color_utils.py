"""Color parsing and formatting utilities for safecolor."""

import re
import warnings

import numpy as np

# colour-science announces its optional SciPy features on import
with warnings.catch_warnings():
    warnings.simplefilter("ignore")
    import colour

from .color_space import RGB  # noqa: E402
from .generator import format_rgb  # noqa: E402


def parse_hex_color(color_str: str) -> RGB | None:
    """Parse hexadecimal color format #RRGGBB."""
    color_str = color_str.strip()
    if not color_str.startswith("#"):
        return None

    hex_str = color_str[1:]
    if len(hex_str) != 6:
        return None

    try:
        r = int(hex_str[0:2], 16)
        g = int(hex_str[2:4], 16)
        b = int(hex_str[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None


def parse_rgb_color(color_str: str) -> RGB | None:
    """Parse RGB color format rgb(R, G, B)."""
    pattern = r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)"
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    r = int(match.group(1))
    g = int(match.group(2))
    b = int(match.group(3))

    if not all(0 <= val <= 255 for val in [r, g, b]):
        return None

    return (r, g, b)


def parse_hsl_color(color_str: str) -> RGB | None:
    """Parse HSL color format hsl(H, S%, L%)."""
    pattern = (
        r"hsl\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
        r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    try:
        h = float(match.group(1))
        s = float(match.group(2))
        lightness = float(match.group(3))

        if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= lightness <= 100):
            return None

        hsl = np.array([(h % 360) / 360, s / 100, lightness / 100])
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            rgb = colour.models.rgb.cylindrical.HSL_to_RGB(hsl)
        r, g, b = (int(v) for v in np.floor(np.asarray(rgb) * 255 + 0.5))
        return (r, g, b)
    except (ValueError, AttributeError):
        return None


def parse_color(color_str: str) -> RGB:
    """Parse color string in various formats."""
    color_str = color_str.strip()

    parsers = [parse_hex_color, parse_rgb_color, parse_hsl_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RRGGBB, rgb(R,G,B), hsl(H,S%,L%)"
    )


def format_color_output(colors: list[RGB], format_type: str = "rgb") -> list[str]:
    """Format 8-bit colors for output."""
    formatted: list[str] = []

    for rgb in colors:
        if format_type == "hex":
            r, g, b = rgb
            formatted.append(f"#{r:02X}{g:02X}{b:02X}")
        else:
            formatted.append(format_rgb(rgb))

    return formatted
