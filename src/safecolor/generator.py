"""Contrast-safe color generation.

``SafeColor`` produces colors that keep a minimum WCAG contrast ratio
against a reference color. Passing a string makes the result deterministic,
which is handy for avatars, tags or user names that should always get the
same color:

    >>> from safecolor import SafeColor
    >>> safe = SafeColor(color=(255, 255, 255), contrast=4.5)
    >>> safe.generate("hello") == safe.generate("hello")
    True

Without a string a random color is drawn and laundered instead.
"""

import logging
from typing import NotRequired, TypedDict

import numpy as np

from .color_space import RGB
from .errors import ConfigurationError
from .launderer import DEFAULT_MAX_ITERATIONS, DEFAULT_STEP, SeedMode, launder
from .luminance import LumaBand, acceptable_luma_band

__all__ = [
    "SafeColor",
    "SafeColorOptions",
    "string_hash",
    "hash_to_rgb",
    "format_rgb",
    "DEFAULT_COLOR",
    "DEFAULT_CONTRAST",
]

logger = logging.getLogger(__name__)

DEFAULT_COLOR: RGB = (0, 0, 0)
DEFAULT_CONTRAST = 4.5

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)


class SafeColorOptions(TypedDict):
    """Keyword options accepted by :meth:`SafeColor.from_options`."""

    color: NotRequired[RGB]
    contrast: NotRequired[float]
    step: NotRequired[float]
    max_iterations: NotRequired[int]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def string_hash(text: str) -> int:
    """Hash a string to a signed 32-bit integer.

    Uses the classic ``h = c + (h << 5) - h`` rolling hash over the UTF-16
    code units of ``text``, wrapping to 32 bits after every character so the
    value matches the well-known JavaScript string hash.

    Examples:
        >>> string_hash("")
        0
        >>> string_hash("a")
        97
        >>> string_hash("abc")
        96354
    """
    units = np.frombuffer(text.encode("utf-16-le"), dtype="<u2")
    value = 0
    for unit in units:
        value = _to_int32(int(unit) + (value << 5) - value)
    return value


def hash_to_rgb(value: int) -> RGB:
    """Take the three low bytes of a hash as red, green and blue."""
    r, g, b = ((value >> shift) & 255 for shift in (0, 8, 16))
    return (r, g, b)


def format_rgb(rgb: RGB) -> str:
    """Format a color as ``rgb(R, G, B)``."""
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


class SafeColor:
    """Generate colors with a guaranteed contrast against a reference color.

    Args:
        color: Reference color as an 8-bit RGB triple (default black).
        contrast: Minimum contrast ratio to keep (default 4.5).
        step: Fallback adjustment used when laundering string-derived colors
            (default 0.05).
        max_iterations: Laundering attempts before
            :class:`~safecolor.errors.ConvergenceError` is raised.
        rng: numpy random generator for the random path. A fresh, unseeded
            generator is used when omitted.

    Raises:
        ConfigurationError: If any option is out of range.

    Notes:
        Each call works on local state only, but the random generator is
        shared by all calls of one instance; use one instance per thread.
    """

    def __init__(
        self,
        color: RGB | None = None,
        contrast: float | None = None,
        step: float | None = None,
        *,
        max_iterations: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.color = _validate_color(DEFAULT_COLOR if color is None else color)
        self.contrast = DEFAULT_CONTRAST if contrast is None else contrast
        self.step = DEFAULT_STEP if step is None else step
        self.max_iterations = (
            DEFAULT_MAX_ITERATIONS if max_iterations is None else max_iterations
        )
        self._rng = rng if rng is not None else np.random.default_rng()

        if not self.contrast > 0:
            raise ConfigurationError(f"contrast must be greater than 0, got {self.contrast}")
        if not self.step > 0:
            raise ConfigurationError(f"step must be greater than 0, got {self.step}")
        if self.max_iterations < 1:
            raise ConfigurationError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )

    @classmethod
    def from_options(
        cls, options: SafeColorOptions, *, rng: np.random.Generator | None = None
    ) -> "SafeColor":
        """Build an instance from an options mapping; missing keys use defaults."""
        return cls(
            color=options.get("color"),
            contrast=options.get("contrast"),
            step=options.get("step"),
            max_iterations=options.get("max_iterations"),
            rng=rng,
        )

    def __repr__(self) -> str:
        return (
            f"SafeColor(color={self.color}, contrast={self.contrast}, "
            f"step={self.step}, max_iterations={self.max_iterations})"
        )

    def luma_band(self) -> LumaBand:
        """Band of luminance values that meet the configured contrast."""
        return acceptable_luma_band(self.color, self.contrast)

    def generate_rgb(self, seed: str | None = None) -> RGB:
        """Generate a contrast-safe color as an RGB triple.

        Args:
            seed: String to derive the color from. ``None`` or an empty
                string produces a random color.

        Returns:
            RGB: The generated color.

        Raises:
            ConvergenceError: If the color could not be moved into the band,
                which happens when the configured contrast is unreachable.
        """
        band = self.luma_band()
        logger.debug("Luma band for rgb%s at %s:1 is %s", self.color, self.contrast, band)

        if band.is_degenerate:
            return WHITE if band.min_luma == 1 else BLACK

        mode: SeedMode
        if not seed:
            mode = "random"
            r, g, b = (int(v) for v in self._rng.integers(0, 256, size=3))
            start: RGB = (r, g, b)
        else:
            mode = "hashed"
            start = hash_to_rgb(string_hash(seed))
        logger.debug("Seed color rgb%s (%s)", start, mode)

        return launder(
            start,
            band,
            mode=mode,
            step=self.step,
            max_iterations=self.max_iterations,
            rng=self._rng,
        )

    def generate(self, seed: str | None = None) -> str:
        """Generate a contrast-safe color formatted as ``rgb(R, G, B)``."""
        return format_rgb(self.generate_rgb(seed))


def _validate_color(color: RGB) -> RGB:
    try:
        components = tuple(color)
    except TypeError:
        raise ConfigurationError(f"color must be an RGB triple, got {color!r}") from None

    if len(components) != 3 or not all(
        isinstance(c, (int, np.integer)) and not isinstance(c, bool) and 0 <= c <= 255
        for c in components
    ):
        raise ConfigurationError(
            f"color must be three integers in [0, 255], got {color!r}"
        )
    r, g, b = (int(c) for c in components)
    return (r, g, b)
