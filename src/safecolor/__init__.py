"""safecolor - Generate colors that keep a WCAG contrast ratio against a reference color"""

__version__ = "0.1.0"

from .color_space import hsl_to_rgb, rgb_to_hsl
from .errors import ConfigurationError, ConvergenceError, SafeColorError
from .generator import SafeColor, SafeColorOptions, format_rgb, hash_to_rgb, string_hash
from .launderer import SeedMode, launder
from .luminance import LumaBand, acceptable_luma_band, contrast_ratio, relative_luminance

__all__ = [
    "SafeColor",
    "SafeColorOptions",
    "SafeColorError",
    "ConfigurationError",
    "ConvergenceError",
    "LumaBand",
    "SeedMode",
    "acceptable_luma_band",
    "contrast_ratio",
    "format_rgb",
    "hash_to_rgb",
    "hsl_to_rgb",
    "launder",
    "relative_luminance",
    "rgb_to_hsl",
    "string_hash",
]
