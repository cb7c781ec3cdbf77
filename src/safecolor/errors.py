"""Exceptions raised by safecolor."""

from .luminance import LumaBand

__all__ = ["SafeColorError", "ConfigurationError", "ConvergenceError"]


class SafeColorError(ValueError):
    """Base class for all safecolor errors."""


class ConfigurationError(SafeColorError):
    """Raised when a SafeColor instance is built with invalid options."""


class ConvergenceError(SafeColorError):
    """Raised when laundering does not reach the luma band in time.

    Attributes:
        color: The last color produced before giving up.
        band: The band the color was being moved into.
        iterations: Number of adjustments that were attempted.
    """

    color: tuple[int, int, int]
    band: LumaBand
    iterations: int

    def __init__(self, color: tuple[int, int, int], band: LumaBand, iterations: int) -> None:
        self.color = color
        self.band = band
        self.iterations = iterations
        super().__init__(
            f"Color did not reach luma band [{band.min_luma:.4f}, {band.max_luma:.4f}] "
            f"after {iterations} iterations (last color: rgb{color})"
        )
