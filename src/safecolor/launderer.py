"""Move a color into a luma band by adjusting its HSL lightness and saturation.

Two adjustment policies are available:

- ``"hashed"``: deterministic steps sized by the remaining luminance gap,
  used for colors derived from a string so the same string always lands on
  the same color.
- ``"random"``: lightness jumps by a random fraction, used for colors that
  were random to begin with.
"""

import logging
from typing import Literal

import numpy as np

from .color_space import RGB, hsl_to_rgb, rgb_to_hsl
from .errors import ConvergenceError
from .luminance import LumaBand, relative_luminance

__all__ = ["SeedMode", "launder", "DEFAULT_STEP", "DEFAULT_MAX_ITERATIONS"]

logger = logging.getLogger(__name__)

SeedMode = Literal["hashed", "random"]

DEFAULT_STEP = 0.05
DEFAULT_MAX_ITERATIONS = 1000


def _gap_step(gap: float, step: float) -> float:
    """Round the luminance gap to two decimals, falling back to ``step``."""
    return round(gap, 2) or step


def _lighten(
    hsl: tuple[float, float, float],
    gap: float,
    mode: SeedMode,
    step: float,
    rng: np.random.Generator,
) -> tuple[float, float, float]:
    hue, saturation, lightness = hsl
    if mode == "hashed":
        step_size = _gap_step(gap, step)
        if lightness == 1:
            saturation = min(saturation + step_size, 1.0)
        else:
            lightness = min(lightness + step_size, 1.0)
    else:
        lightness = (1 - lightness) * rng.random() + lightness
    return (hue, saturation, lightness)


def _darken(
    hsl: tuple[float, float, float],
    gap: float,
    mode: SeedMode,
    step: float,
    rng: np.random.Generator,
) -> tuple[float, float, float]:
    hue, saturation, lightness = hsl
    if mode == "hashed":
        step_size = _gap_step(gap, step)
        if lightness == 0:
            saturation = max(saturation - step_size, 0.0)
        else:
            lightness = max(lightness - step_size, 0.0)
    elif lightness > 0:
        lightness = rng.random() % lightness
    return (hue, saturation, lightness)


def launder(
    color: RGB,
    band: LumaBand,
    mode: SeedMode = "hashed",
    step: float = DEFAULT_STEP,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: np.random.Generator | None = None,
) -> RGB:
    """Adjust ``color`` until its relative luminance lies inside ``band``.

    Colors already inside the band are returned unchanged. Otherwise the
    color is converted to HSL, lightened or darkened according to ``mode``,
    converted back and checked again.

    Args:
        color: Starting color as an 8-bit RGB triple.
        band: Target luminance interval.
        mode: ``"hashed"`` for gap-sized deterministic steps, ``"random"``
            for random lightness jumps.
        step: Step used by the hashed policy when the rounded gap is 0.
        max_iterations: Number of adjustments to try before giving up.
        rng: Source of random draws for the random policy. A fresh
            generator is created when omitted.

    Returns:
        RGB: A color whose luminance is within ``band``.

    Raises:
        ConvergenceError: If the band was not reached after
            ``max_iterations`` adjustments.
    """
    if rng is None:
        rng = np.random.default_rng()

    for iteration in range(max_iterations + 1):
        luma = relative_luminance(color)
        if band.contains(luma):
            logger.debug("Laundered to rgb%s after %d iterations", color, iteration)
            return color
        if iteration == max_iterations:
            break

        hsl = rgb_to_hsl(color)
        if luma < band.min_luma:
            hsl = _lighten(hsl, band.min_luma - luma, mode, step, rng)
        else:
            hsl = _darken(hsl, luma - band.max_luma, mode, step, rng)
        color = hsl_to_rgb(hsl)

    raise ConvergenceError(color, band, max_iterations)
