"""Tests for the layout engine."""
import pytest

from badgen.layout import VIEWBOX_SCALE, Box, Layout, TextRun, compute_layout, to_units
from badgen.style import Style
from badgen.text import text_width_units


@pytest.fixture
def tight_style():
    """Flat style at 10px with 2px padding, where "I" and "l" never hit the floor."""
    return Style.custom("flat", font_size=10, horizontal_padding=2, min_width=1)


class TestToUnits:
    def test_pixels_to_units(self):
        assert to_units(5) == 500
        assert to_units(1.234) == 123


class TestComputeLayout:
    def test_exact_geometry(self, tight_style):
        # At 10px one design unit is 0.05 units: I = 307, l = 256.
        layout = compute_layout("I", "l", tight_style)
        assert layout.label == Box(0, 707, "#555")
        assert layout.value == Box(707, 656, "#08C")
        assert layout.label_text == TextRun("I", 200, 307)
        assert layout.value_text == TextRun("l", 907, 256)
        assert layout.width == 1363
        assert layout.height == 2000
        assert layout.scale == VIEWBOX_SCALE

    def test_width_is_sum_of_boxes(self):
        layout = compute_layout("minzipped size", "4.2 KB", Style.flat())
        assert layout.width == layout.label.width + layout.value.width
        assert layout.value.x == layout.label.width

    def test_box_is_text_plus_padding(self):
        style = Style.classic()
        layout = compute_layout("downloads", "12", style)
        padding = to_units(style.horizontal_padding)
        assert layout.label.width == text_width_units("downloads", 11, VIEWBOX_SCALE) + 2 * padding
        assert layout.label_text.x == padding

    def test_no_label_single_box(self):
        layout = compute_layout(None, "passing", Style.classic())
        assert layout.label is None
        assert layout.label_text is None
        assert not layout.has_label
        assert layout.value.x == 0
        assert layout.width == layout.value.width

    def test_empty_value_gets_min_width(self):
        style = Style.classic()
        layout = compute_layout(None, "", style)
        assert layout.value.width == to_units(style.min_width)
        assert layout.width == 2000

    def test_empty_value_text_centered(self):
        layout = compute_layout(None, "", Style.classic())
        assert layout.value_text == TextRun("", 1000, 0)

    def test_empty_label_still_has_box(self):
        layout = compute_layout("", "1.0", Style.flat())
        assert layout.has_label
        assert layout.label.width == 2000

    def test_narrow_text_centered_in_floor(self):
        layout = compute_layout(None, "I", Style.classic())
        # 338 units of text in a 2000 unit box
        assert layout.value.width == 2000
        assert layout.value_text.x == 831

    def test_baseline_centered(self):
        # Text height at 11px: 11 * (2000 - 426) / 2000 px = 865 units.
        layout = compute_layout("a", "b", Style.classic())
        assert layout.baseline == 1433

    def test_taller_badge_moves_baseline(self):
        style = Style.custom(height=30)
        assert compute_layout(None, "x", style).baseline == 1933

    def test_colors_from_style(self):
        style = Style.custom(label_color="black", value_color="orange")
        layout = compute_layout("a", "b", style)
        assert layout.label.color == "#2A2A2A"
        assert layout.value.color == "#F73"

    def test_deterministic(self):
        style = Style.classic()
        assert compute_layout("coverage", "97%", style) == compute_layout("coverage", "97%", style)

    def test_returns_layout(self):
        assert isinstance(compute_layout(None, "x", Style.flat()), Layout)
