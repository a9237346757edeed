"""Tests for color and opacity parsing."""
import pytest

from badgen.color import NAMED_COLORS, parse_color, parse_opacity, require_color, require_opacity
from badgen.errors import ConfigurationError


class TestParseColor:
    def test_named_lowercase(self):
        assert parse_color("green") == "#3C1"

    def test_named_uppercase(self):
        assert parse_color("BLUE") == "#08C"

    def test_grey_and_gray(self):
        assert parse_color("grey") == parse_color("gray") == "#999"

    def test_mixed_case_name_rejected(self):
        assert parse_color("Green") is None

    def test_short_hex(self):
        assert parse_color("fff") == "#fff"

    def test_long_hex_with_hash(self):
        assert parse_color("#A1B2C3") == "#A1B2C3"

    @pytest.mark.parametrize("value", ["", "ggg", "12345", "#12", "1234567", "url(#x)"])
    def test_invalid(self, value):
        assert parse_color(value) is None

    def test_non_string(self):
        assert parse_color(123) is None

    def test_all_named_colors_are_hex(self):
        for name, hex_val in NAMED_COLORS.items():
            assert len(hex_val) in (3, 6)
            int(hex_val, 16)  # validates hex

    def test_require_color_raises(self):
        with pytest.raises(ConfigurationError, match="value_color"):
            require_color("nope", "value_color")


class TestParseOpacity:
    @pytest.mark.parametrize("value", ["0", ".0", ".00", "0.00", 0, 0.0])
    def test_transparent(self, value):
        assert parse_opacity(value) == "0"

    @pytest.mark.parametrize("value", ["1", "1.0", "1.00", 1, 1.0])
    def test_opaque(self, value):
        assert parse_opacity(value) == "1"

    @pytest.mark.parametrize(
        "value,expected",
        [(".1", ".1"), ("0.1", ".1"), ("0.11", ".11"), ("0.10", ".1"), (0.25, ".25"), (0.05, ".05")],
    )
    def test_fraction(self, value, expected):
        assert parse_opacity(value) == expected

    @pytest.mark.parametrize("value", ["2", "0.", "1.", ".a", "0.a", "0.111", "1.5", -0.1, 0.333, True, None])
    def test_invalid(self, value):
        assert parse_opacity(value) is None

    def test_require_opacity_raises(self):
        with pytest.raises(ConfigurationError):
            require_opacity("half")
