"""Tests for the MCP server tool functions."""
import xml.etree.ElementTree as ET
from unittest.mock import patch

import pytest

from badgen.config import set_style
from badgen.mcp_server import list_styles, measure_text, render_badge


@pytest.fixture(autouse=True)
def config_path(tmp_path):
    path = tmp_path / "config.json"
    with patch("badgen.config.DEFAULT_CONFIG_PATH", path):
        yield path


class TestRenderBadge:
    def test_renders_svg(self):
        result = render_badge("12", label="downloads")
        ET.fromstring(result["svg"])
        assert result["style"] == "classic"
        assert result["height"] == 20
        assert result["width"] > 40

    def test_flat_style(self):
        result = render_badge("4.2 KB", label="minzipped size", style="flat")
        assert result["style"] == "flat"
        assert "<mask" not in result["svg"]

    def test_options_applied(self):
        result = render_badge("ok", options={"value_color": "green"})
        assert 'fill="#3C1"' in result["svg"]

    def test_invalid_option_returns_error(self):
        result = render_badge("ok", options={"horizontal_padding": -1})
        assert "error" in result
        assert "horizontal_padding" in result["error"]

    def test_unknown_style_returns_error(self):
        result = render_badge("ok", style="nope")
        assert "error" in result

    def test_configured_style(self, config_path):
        set_style("release", {"base": "flat", "value_color": "red"}, config_path)
        result = render_badge("v2", label="release", style="release")
        assert result["style"] == "flat"
        assert 'fill="#E43"' in result["svg"]

    def test_empty_value_without_label(self):
        result = render_badge("")
        assert result["width"] == 20


class TestMeasureText:
    def test_width(self):
        result = measure_text("I", font_size=20)
        assert result["width"] == 6.14
        assert result["font"] == "Lato"
        assert result["fallback_chars"] == []

    def test_fallback_chars(self):
        result = measure_text("a中")
        assert result["fallback_chars"] == ["中"]

    def test_rejects_bad_font_size(self):
        assert "error" in measure_text("x", font_size=0)

    def test_rejects_negative_font_size(self):
        assert "font_size" in measure_text("x", font_size=-11)["error"]


class TestListStyles:
    def test_builtin_only(self):
        result = list_styles()
        assert result["count"] == 2
        assert [s["name"] for s in result["styles"]] == ["classic", "flat"]
        assert result["styles"][1]["base"] == "flat"

    def test_includes_configured(self, config_path):
        set_style("mine", {"min_width": 30}, config_path)
        result = list_styles()
        names = [s["name"] for s in result["styles"]]
        assert names == ["classic", "flat", "mine"]
        assert result["styles"][2]["min_width"] == 30

    def test_broken_entry_reported(self, config_path):
        config_path.write_text('{"styles": {"broken": {"font_size": -1}}}', encoding="utf-8")
        result = list_styles()
        broken = next(s for s in result["styles"] if s["name"] == "broken")
        assert "error" in broken
