"""WCAG luminance and contrast calculations for safecolor.

This module implements the Web Content Accessibility Guidelines (WCAG) 2.x
relative luminance formula for 8-bit sRGB colors, and derives from it the
band of luminance values a generated color may take so that it keeps a
target contrast ratio against a reference color.

Example:
    >>> from safecolor.luminance import acceptable_luma_band
    >>> band = acceptable_luma_band((0, 0, 0), 4.5)
    >>> round(band.min_luma, 3), band.max_luma
    (0.225, 1.0)
"""

from typing import NamedTuple

from .color_space import RGB

__all__ = [
    "LumaBand",
    "relative_luminance",
    "contrast_ratio",
    "acceptable_luma_band",
]


class LumaBand(NamedTuple):
    """Closed interval of acceptable relative luminance values."""

    min_luma: float
    max_luma: float

    @property
    def is_degenerate(self) -> bool:
        """True when the band has collapsed to a single value."""
        return self.min_luma == self.max_luma

    def contains(self, luma: float) -> bool:
        return self.min_luma <= luma <= self.max_luma


def relative_luminance(rgb: RGB) -> float:
    """Compute the relative luminance of an 8-bit sRGB color.

    Each channel is scaled to [0, 1] and linearized before the channels are
    weighted by the sensitivity of the eye to red, green and blue light.

    Args:
        rgb: Color as three integers in [0, 255].

    Returns:
        float: Luminance in [0.0, 1.0]; 0.0 for black and 1.0 for white.

    Algorithm Details:
        Linearization:
        - For c <= 0.04045: linear_c = c / 12.92
        - For c > 0.04045: linear_c = ((c + 0.055) / 1.055)^2.4

        Luminance:
        - L = 0.2126 x R_linear + 0.7152 x G_linear + 0.0722 x B_linear

    Examples:
        >>> relative_luminance((0, 0, 0))
        0.0
        >>> relative_luminance((255, 255, 255))
        1.0
        >>> round(relative_luminance((255, 0, 0)), 4)
        0.2126

    References:
        - WCAG 2.1: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    def linearize(channel: float) -> float:
        c = channel / 255
        if c <= 0.04045:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def contrast_ratio(l1: float, l2: float) -> float:
    """Calculate the WCAG contrast ratio between two luminance values.

    The ratio is order-independent and ranges from 1.0 (identical) to 21.0
    (black against white).

    Examples:
        >>> contrast_ratio(0.0, 1.0)
        21.0
        >>> contrast_ratio(0.5, 0.5)
        1.0
    """
    light = max(l1, l2)
    dark = min(l1, l2)
    return (light + 0.05) / (dark + 0.05)


def acceptable_luma_band(reference: RGB, contrast: float) -> LumaBand:
    """Derive the luminance band a color needs to contrast with ``reference``.

    The edge luminance is the luminance a darker color would need to reach
    exactly ``contrast`` against the reference:

        edge = (L_ref + 0.05) / contrast - 0.05

    Three cases follow from where the edge falls:

    - ``0 < edge < 1``: the new color must be darker, band ``[0, edge]``.
    - ``edge`` is exactly 0 or 1: only pure black or pure white qualifies,
      the band collapses to ``[edge, edge]``.
    - otherwise no darker color can reach the ratio and the new color must be
      lighter, band ``[(L_ref + 0.05) * contrast, 1]``.

    Args:
        reference: The color the generated color is measured against.
        contrast: Target contrast ratio, e.g. 4.5 for WCAG AA body text.

    Returns:
        LumaBand: The acceptable ``(min_luma, max_luma)`` interval. The lower
        bound of a "lighter" band can exceed 1 when the ratio is unreachable.
    """
    reference_luma = relative_luminance(reference)
    edge_luma = (reference_luma + 0.05) / contrast - 0.05

    if 0 < edge_luma < 1:
        return LumaBand(0.0, edge_luma)
    if edge_luma == 0 or edge_luma == 1:
        return LumaBand(edge_luma, edge_luma)
    return LumaBand((reference_luma + 0.05) * contrast, 1.0)
