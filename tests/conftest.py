"""Test configuration and fixtures for safecolor tests."""

import numpy as np
import pytest
from hypothesis import settings

# Keep property-based tests quick; colour-science calls are not free
settings.register_profile("fast", max_examples=50, deadline=None)
settings.load_profile("fast")

RGB = tuple[int, int, int]


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded numpy generator for reproducible random paths."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_colors() -> list[RGB]:
    """Provide sample 8-bit RGB colors for testing."""
    return [
        (0, 0, 0),          # Black
        (255, 255, 255),    # White
        (255, 0, 0),        # Red
        (0, 255, 0),        # Green
        (0, 0, 255),        # Blue
        (128, 128, 128),    # Gray
        (255, 255, 0),      # Yellow
        (255, 0, 255),      # Magenta
        (0, 255, 255),      # Cyan
    ]


@pytest.fixture
def known_luminance_values() -> list[tuple[RGB, float]]:
    """Provide colors with known luminance values for testing."""
    return [
        ((0, 0, 0), 0.0),           # Black
        ((255, 255, 255), 1.0),     # White
        ((255, 0, 0), 0.2126),      # Red
        ((0, 255, 0), 0.7152),      # Green
        ((0, 0, 255), 0.0722),      # Blue
    ]


class ColorTestHelpers:
    """Helper class with utility methods for color testing."""

    @staticmethod
    def is_valid_rgb(rgb: RGB) -> bool:
        """Check if RGB values are integers in [0, 255]."""
        return len(rgb) == 3 and all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)

    @staticmethod
    def max_channel_difference(color1: RGB, color2: RGB) -> int:
        """Largest per-channel difference between two colors."""
        return max(abs(c1 - c2) for c1, c2 in zip(color1, color2))


@pytest.fixture
def color_helpers() -> ColorTestHelpers:
    """Provide helper methods for color testing."""
    return ColorTestHelpers()
