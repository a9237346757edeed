"""Tests for the style catalog and style validation."""
import pytest

from badgen.errors import ConfigurationError
from badgen.style import MAX_PIXELS, OPTION_NAMES, Gradient, Style, StyleKind


class TestCanonicalStyles:
    def test_classic(self):
        style = Style.classic()
        assert style.kind is StyleKind.CLASSIC
        assert style.corner_radius == 3
        assert style.gradient == Gradient(start="#eee", end=None, opacity=".1")
        assert style.text_shadow_opacity == ".25"

    def test_flat(self):
        style = Style.flat()
        assert style.kind is StyleKind.FLAT
        assert style.corner_radius == 0
        assert style.gradient is None
        assert style.text_shadow_opacity == ".1"

    def test_default_colors_normalized(self):
        style = Style.classic()
        assert style.label_color == "#555"
        assert style.value_color == "#08C"
        assert style.text_color == "#fff"

    def test_named(self):
        assert Style.named("flat") == Style.flat()
        assert Style.named("CLASSIC") == Style.classic()
        assert Style.named(StyleKind.FLAT) == Style.flat()

    def test_named_unknown(self):
        with pytest.raises(ConfigurationError, match="unknown style"):
            Style.named("plastic")

    def test_immutable(self):
        style = Style.classic()
        with pytest.raises(AttributeError):
            style.font_size = 12

    def test_label_fill_defaults_to_text_color(self):
        assert Style.classic().label_fill == "#fff"
        assert Style.custom(label_text_color="000").label_fill == "#000"


class TestCustomStyles:
    def test_overrides_options(self):
        style = Style.custom("flat", value_color="green", horizontal_padding=6)
        assert style.kind is StyleKind.FLAT
        assert style.value_color == "#3C1"
        assert style.horizontal_padding == 6

    def test_with_options_keeps_base(self):
        style = Style.classic().with_options(font_size=12)
        assert style.font_size == 12
        assert style.gradient is not None

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="unknown style option"):
            Style.custom("classic", padding=4)

    def test_kind_is_not_an_option(self):
        assert "kind" not in OPTION_NAMES
        with pytest.raises(ConfigurationError):
            Style.classic().with_options(kind="flat")

    def test_gradient_from_dict(self):
        style = Style.custom(gradient={"start": "fff", "end": "000", "opacity": 0.2})
        assert style.gradient == Gradient(start="#fff", end="#000", opacity=".2")

    def test_gradient_with_unknown_key(self):
        with pytest.raises(ConfigurationError, match="gradient"):
            Style.custom(gradient={"colour": "fff"})

    def test_to_options_round_trip(self):
        style = Style.custom("flat", value_color="red", min_width=30)
        assert Style.custom(**style.to_options()) == style

    def test_classic_without_corners(self):
        style = Style.custom("classic", corner_radius=0)
        assert style.corner_radius == 0
        assert style.gradient is not None


class TestValidation:
    def test_negative_padding(self):
        with pytest.raises(ConfigurationError, match="horizontal_padding"):
            Style.custom(horizontal_padding=-1)

    def test_negative_vertical_padding(self):
        with pytest.raises(ConfigurationError, match="vertical_padding"):
            Style.custom(vertical_padding=-0.5)

    @pytest.mark.parametrize("font_size", [0, -11])
    def test_font_size_must_be_positive(self, font_size):
        with pytest.raises(ConfigurationError, match="font_size"):
            Style.custom(font_size=font_size)

    def test_zero_height(self):
        with pytest.raises(ConfigurationError, match="height"):
            Style.custom(height=0)

    def test_zero_min_width(self):
        with pytest.raises(ConfigurationError, match="min_width"):
            Style.custom(min_width=0)

    def test_negative_corner_radius(self):
        with pytest.raises(ConfigurationError, match="corner_radius"):
            Style.custom(corner_radius=-3)

    @pytest.mark.parametrize("value", ["5", None, True, float("nan"), float("inf")])
    def test_non_numeric(self, value):
        with pytest.raises(ConfigurationError):
            Style.custom(horizontal_padding=value)

    def test_text_must_fit_height(self):
        with pytest.raises(ConfigurationError, match="does not fit"):
            Style.custom(font_size=16)

    def test_larger_badge_fits_larger_text(self):
        style = Style.custom(font_size=16, height=28)
        assert style.height == 28

    def test_invalid_color(self):
        with pytest.raises(ConfigurationError, match="label_color"):
            Style.custom(label_color="not-a-color")

    def test_invalid_opacity(self):
        with pytest.raises(ConfigurationError, match="text_shadow_opacity"):
            Style.custom(text_shadow_opacity="0.333")

    def test_flat_rejects_gradient(self):
        with pytest.raises(ConfigurationError, match="gradient"):
            Style.custom("flat", gradient=Gradient())

    def test_flat_rejects_corner_radius(self):
        with pytest.raises(ConfigurationError, match="corner_radius"):
            Style.custom("flat", corner_radius=2)

    @pytest.mark.parametrize(
        "name", ["height", "font_size", "horizontal_padding", "min_width", "text_shadow_offset"]
    )
    def test_oversized_pixel_values(self, name):
        with pytest.raises(ConfigurationError, match=name):
            Style.custom(**{name: 1e307})

    def test_upper_bound_is_inclusive(self):
        assert Style.custom(horizontal_padding=MAX_PIXELS).horizontal_padding == MAX_PIXELS

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Style.custom(horizontal_padding=-1)
