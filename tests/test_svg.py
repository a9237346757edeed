"""Tests for SVG serialization."""
import xml.etree.ElementTree as ET

import pytest

from badgen.errors import ConfigurationError
from badgen.layout import compute_layout
from badgen.style import Style
from badgen.svg import LABEL_PATH_ID, VALUE_PATH_ID, accessible_title, render

NS = "{http://www.w3.org/2000/svg}"


def _render(label, value, style):
    return render(compute_layout(label, value, style), style)


class TestDocument:
    def test_well_formed(self):
        root = ET.fromstring(_render("build", "passing", Style.classic()))
        assert root.tag == f"{NS}svg"

    def test_pixel_size_and_viewbox(self):
        style = Style.custom("flat", font_size=10, horizontal_padding=2, min_width=1)
        root = ET.fromstring(_render("I", "l", style))
        assert root.get("width") == "13.63"
        assert root.get("height") == "20"
        assert root.get("viewBox") == "0 0 1363 2000"

    def test_accessible_title(self):
        root = ET.fromstring(_render("downloads", "12", Style.classic()))
        assert root.find(f"{NS}title").text == "downloads: 12"
        assert root.get("role") == "img"
        assert root.get("aria-label") == "downloads: 12"

    def test_title_without_label(self):
        layout = compute_layout(None, "ok", Style.flat())
        assert accessible_title(layout) == "ok"

    def test_no_external_references(self):
        svg = _render("font", "free", Style.classic())
        assert "<text" not in svg
        assert "font-family" not in svg
        assert "http" not in svg.replace('xmlns="http://www.w3.org/2000/svg"', "")

    def test_glyph_paths_in_defs(self):
        root = ET.fromstring(_render("label", "value", Style.classic()))
        ids = [p.get("id") for p in root.find(f"{NS}defs")]
        assert ids == [LABEL_PATH_ID, VALUE_PATH_ID]

    def test_text_drawn_with_shadow(self):
        root = ET.fromstring(_render(None, "ok", Style.classic()))
        uses = root.findall(f"{NS}use")
        assert [u.get("href") for u in uses] == [f"#{VALUE_PATH_ID}", f"#{VALUE_PATH_ID}"]
        assert uses[0].get("opacity") == ".25"
        assert uses[0].get("transform") == "translate(100,100)"
        assert uses[1].get("fill") == "#fff"

    def test_transparent_shadow_omitted(self):
        style = Style.custom(text_shadow_opacity=0)
        root = ET.fromstring(_render(None, "ok", style))
        assert len(root.findall(f"{NS}use")) == 1

    def test_label_text_color(self):
        style = Style.custom(label_text_color="333")
        root = ET.fromstring(_render("a", "b", style))
        fills = [u.get("fill") for u in root.findall(f"{NS}use") if u.get("opacity") is None]
        assert fills == ["#333", "#fff"]


class TestClassic:
    def test_rounded_mask_and_gradient(self):
        svg = _render("downloads", "12", Style.classic())
        root = ET.fromstring(svg)
        rect = root.find(f"{NS}mask/{NS}rect")
        assert rect.get("rx") == "300"
        assert root.find(f"{NS}linearGradient") is not None
        group = root.find(f"{NS}g")
        assert group.get("mask") == "url(#m)"
        fills = [p.get("fill") for p in group.findall(f"{NS}path")]
        assert fills == ["#555", "#08C", "url(#g)"]

    def test_gradient_end_color(self):
        style = Style.custom(gradient={"start": "fff", "end": "000"})
        root = ET.fromstring(_render(None, "x", style))
        stops = root.findall(f"{NS}linearGradient/{NS}stop")
        assert stops[0].get("stop-color") == "#fff"
        assert stops[1].get("stop-color") == "#000"

    def test_square_classic_still_masks_gradient(self):
        root = ET.fromstring(_render(None, "x", Style.custom(corner_radius=0)))
        assert root.find(f"{NS}mask/{NS}rect").get("rx") is None


class TestFlat:
    def test_no_mask_or_gradient(self):
        svg = _render("minzipped size", "4.2 KB", Style.flat())
        assert "<mask" not in svg
        assert "rx=" not in svg
        assert "linearGradient" not in svg

    def test_two_boxes(self):
        root = ET.fromstring(_render("minzipped size", "4.2 KB", Style.flat()))
        boxes = [p for p in root.findall(f"{NS}path")]
        assert [b.get("fill") for b in boxes] == ["#555", "#08C"]
        assert boxes[0].get("d").startswith("M0 0h")

    def test_single_box_without_label(self):
        root = ET.fromstring(_render(None, "", Style.flat()))
        boxes = root.findall(f"{NS}path")
        assert len(boxes) == 1
        assert boxes[0].get("d") == "M0 0h2000v2000H0z"
        assert root.get("width") == "20"


class TestPrecision:
    def test_decimal_coordinates(self):
        style = Style.flat()
        layout = compute_layout(None, "I", style)
        coarse = render(layout, style)
        fine = render(layout, style, precision=2)
        assert coarse != fine
        assert "." in ET.fromstring(fine).find(f"{NS}defs/{NS}path").get("d")

    def test_negative_precision_rejected(self):
        style = Style.flat()
        with pytest.raises(ConfigurationError, match="precision"):
            render(compute_layout(None, "I", style), style, precision=-1)
