"""Conversions between 8-bit sRGB and HSL.

HSL values use degrees for hue and the unit interval for saturation and
lightness. Both directions follow the textbook chroma construction step by
step, so channels that land exactly on a .5 tie round the same way as other
implementations of the same formulas; the string-to-color mapping depends on
that.
"""

import math

__all__ = ["RGB", "HSL", "rgb_to_hsl", "hsl_to_rgb"]

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert an 8-bit RGB triple to HSL.

    Hue is rounded to the nearest whole degree and kept in [0, 360).
    Achromatic colors get a hue and saturation of 0.

    Examples:
        >>> rgb_to_hsl((255, 0, 0))
        (0.0, 1.0, 0.5)
        >>> rgb_to_hsl((255, 255, 255))
        (0.0, 0.0, 1.0)
    """
    r, g, b = (c / 255 for c in rgb)
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    chroma = cmax - cmin
    lightness = (cmax + cmin) / 2

    if not chroma:
        return (0.0, 0.0, lightness)

    saturation = chroma / (1 - abs(2 * lightness - 1))
    if cmax == r:
        # math.fmod keeps the sign of the dividend, like the six-sector formula expects
        sector = math.fmod((g - b) / chroma, 6)
    elif cmax == g:
        sector = (b - r) / chroma + 2
    else:
        sector = (r - g) / chroma + 4

    hue = float(_round_half_up(sector * 60))
    if hue < 0:
        hue += 360
    return (hue % 360, saturation, lightness)


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert an HSL triple back to 8-bit RGB, rounding each channel half up.

    Uses chroma ``c``, the second-largest component ``x`` and the lightness
    match ``m`` over six 60-degree hue sectors.
    """
    hue, saturation, lightness = hsl
    hue %= 360
    c = (1 - abs(2 * lightness - 1)) * saturation
    x = c * (1 - abs((hue / 60) % 2 - 1))
    m = lightness - c / 2

    if hue < 60:
        r, g, b = c, x, 0.0
    elif hue < 120:
        r, g, b = x, c, 0.0
    elif hue < 180:
        r, g, b = 0.0, c, x
    elif hue < 240:
        r, g, b = 0.0, x, c
    elif hue < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )
