"""Tests for safecolor.color_utils module."""

from unittest.mock import patch

import pytest

from safecolor.color_utils import (
    format_color_output,
    parse_color,
    parse_hex_color,
    parse_hsl_color,
    parse_rgb_color,
)


class TestParseHexColor:
    """Test the parse_hex_color function."""

    def test_valid_hex_uppercase(self):
        """Test valid uppercase hex color."""
        assert parse_hex_color("#FF0000") == (255, 0, 0)

    def test_valid_hex_lowercase(self):
        """Test valid lowercase hex color."""
        assert parse_hex_color("#00ff00") == (0, 255, 0)

    def test_valid_hex_with_whitespace(self):
        """Test valid hex color with whitespace."""
        assert parse_hex_color("  #282C34  ") == (40, 44, 52)

    def test_invalid_missing_hash(self):
        """Test invalid hex without # prefix."""
        assert parse_hex_color("FF0000") is None

    def test_invalid_length(self):
        """Test invalid hex with the wrong number of digits."""
        assert parse_hex_color("#FF00") is None
        assert parse_hex_color("#FF000000") is None

    def test_invalid_characters(self):
        """Test invalid hex characters."""
        assert parse_hex_color("#GG0000") is None


class TestParseRgbColor:
    """Test the parse_rgb_color function."""

    def test_valid_rgb(self):
        """Test valid RGB color."""
        assert parse_rgb_color("rgb(12, 200, 47)") == (12, 200, 47)

    def test_valid_rgb_no_spaces(self):
        """Test valid RGB color without spaces."""
        assert parse_rgb_color("rgb(255,0,0)") == (255, 0, 0)

    def test_valid_rgb_case_insensitive(self):
        """Test RGB parsing is case insensitive."""
        assert parse_rgb_color("RGB(1, 2, 3)") == (1, 2, 3)

    def test_invalid_out_of_range(self):
        """Test invalid RGB with out of range values."""
        assert parse_rgb_color("rgb(256, 0, 0)") is None

    def test_invalid_missing_component(self):
        """Test invalid RGB with a missing component."""
        assert parse_rgb_color("rgb(255, 0)") is None


class TestParseHslColor:
    """Test the parse_hsl_color function."""

    def test_valid_hsl_red(self):
        """Test valid HSL red."""
        assert parse_hsl_color("hsl(0, 100%, 50%)") == (255, 0, 0)

    def test_valid_hsl_blue(self):
        """Test valid HSL blue."""
        assert parse_hsl_color("hsl(240, 100%, 50%)") == (0, 0, 255)

    def test_valid_hsl_white(self):
        """Test valid HSL white."""
        assert parse_hsl_color("hsl(0, 0%, 100%)") == (255, 255, 255)

    def test_hue_of_360_wraps(self):
        """Test a hue of 360 degrees equals 0."""
        assert parse_hsl_color("hsl(360, 100%, 50%)") == (255, 0, 0)

    def test_valid_hsl_with_decimals(self):
        """Test HSL with decimal values."""
        result = parse_hsl_color("hsl(120.5, 80.5%, 60.5%)")
        assert result is not None
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in result)

    def test_invalid_out_of_range(self):
        """Test invalid HSL with out of range values."""
        assert parse_hsl_color("hsl(361, 50%, 50%)") is None
        assert parse_hsl_color("hsl(180, 101%, 50%)") is None
        assert parse_hsl_color("hsl(180, 50%, 101%)") is None

    def test_invalid_missing_percent(self):
        """Test invalid HSL missing % signs."""
        assert parse_hsl_color("hsl(180, 50, 50)") is None

    @patch("colour.models.rgb.cylindrical.HSL_to_RGB")
    def test_hsl_attribute_error_handling(self, mock_hsl_to_rgb):
        """Test HSL parsing AttributeError exception handling."""
        mock_hsl_to_rgb.side_effect = AttributeError("Mock error")
        assert parse_hsl_color("hsl(180, 50%, 50%)") is None


class TestParseColor:
    """Test the parse_color function."""

    def test_parse_color_formats(self):
        """Test parse_color accepts every supported format."""
        assert parse_color("#FFFFFF") == (255, 255, 255)
        assert parse_color("rgb(0, 255, 0)") == (0, 255, 0)
        assert parse_color("hsl(240, 100%, 50%)") == (0, 0, 255)

    @pytest.mark.parametrize(
        "color_input",
        ["invalid", "", "   ", "#GG0000", "rgb(256, 0, 0)", "hsv(0, 100%, 100%)"],
    )
    def test_parse_color_invalid(self, color_input):
        """Test unsupported strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid color format"):
            parse_color(color_input)


class TestFormatColorOutput:
    """Test the format_color_output function."""

    def test_format_rgb(self):
        """Test rgb output format."""
        assert format_color_output([(255, 0, 0), (0, 12, 3)], "rgb") == [
            "rgb(255, 0, 0)",
            "rgb(0, 12, 3)",
        ]

    def test_format_hex(self):
        """Test hex output format."""
        assert format_color_output([(255, 0, 0), (0, 12, 3)], "hex") == [
            "#FF0000",
            "#000C03",
        ]

    def test_default_is_rgb(self):
        """Test the default format is rgb."""
        assert format_color_output([(1, 2, 3)]) == ["rgb(1, 2, 3)"]

    def test_empty(self):
        """Test an empty list formats to an empty list."""
        assert format_color_output([], "hex") == []
