"""Tests for the embedded font metrics table and glyph outlines."""
import pytest
from fontTools.pens.basePen import BasePen
from fontTools.pens.recordingPen import RecordingPen

from badgen import lato
from badgen.errors import ConfigurationError
from badgen.font import (
    BUNDLED_FONT,
    FontMetrics,
    GlyphSource,
    PathWriter,
    draw_contours,
    font_licenses,
    format_fixed,
    parse_outline,
)


class TestBundledTable:
    def test_printable_ascii_covered(self):
        for code in range(0x20, 0x7F):
            assert code in BUNDLED_FONT

    def test_latin1_supplement_covered(self):
        for code in range(0xA0, 0x100):
            assert code in BUNDLED_FONT

    def test_design_units(self):
        assert BUNDLED_FONT.units_per_em == lato.UNITS_PER_EM == 2000
        assert BUNDLED_FONT.descender < 0 < BUNDLED_FONT.ascender

    def test_advances_non_negative(self):
        assert all(glyph.advance >= 0 for glyph in BUNDLED_FONT.glyphs.values())

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BUNDLED_FONT.glyphs[0x41] = BUNDLED_FONT.notdef

    def test_space_has_no_ink(self):
        assert not BUNDLED_FONT.lookup(ord(" ")).glyph.has_ink

    def test_licenses_listed(self):
        licenses = font_licenses()
        assert len(licenses) == 1
        assert "Lato" in licenses[0]
        assert "Open Font License" in licenses[0]


class TestLookup:
    def test_found(self):
        result = BUNDLED_FONT.lookup(ord("A"))
        assert result.source is GlyphSource.FOUND
        assert result.found
        assert result.glyph.code == ord("A")
        assert result.glyph.advance == 1360

    def test_fallback_for_cjk(self):
        result = BUNDLED_FONT.lookup(ord("中"))
        assert result.source is GlyphSource.FALLBACK
        assert not result.found
        assert result.glyph is BUNDLED_FONT.notdef

    def test_fallback_for_control_character(self):
        assert BUNDLED_FONT.lookup(0x07).source is GlyphSource.FALLBACK

    def test_fallback_glyph_has_ink(self):
        assert BUNDLED_FONT.notdef.has_ink
        assert BUNDLED_FONT.notdef.advance > 0


class TestAdvanceWidth:
    def test_scales_linearly(self):
        assert BUNDLED_FONT.advance_width(ord("I"), 20) == 6.14
        assert BUNDLED_FONT.advance_width(ord("I"), 10) == 3.07

    def test_unsupported_uses_fallback_advance(self):
        assert BUNDLED_FONT.advance_width(0x1F600, 20) == 10.63

    def test_text_height(self):
        assert BUNDLED_FONT.text_height(20) == 15.74

    @pytest.mark.parametrize("font_size", [0, -11, float("nan"), float("inf")])
    def test_rejects_non_positive_font_size(self, font_size):
        with pytest.raises(ConfigurationError, match="font_size"):
            BUNDLED_FONT.advance_width(ord("a"), font_size)


class TestParseOutline:
    def test_empty(self):
        assert parse_outline("") == ()

    def test_on_and_off_curve_points(self):
        assert parse_outline("0,0 5:-5 10,0") == (((0, 0, True), (5, -5, False), (10, 0, True)),)

    def test_multiple_contours(self):
        contours = parse_outline("0,0 1,0 1,1;2,2 3,2 3,3")
        assert len(contours) == 2
        assert contours[1][0] == (2, 2, True)


class TestDrawContours:
    def _record(self, contours):
        pen = RecordingPen()
        draw_contours(contours, pen)
        return pen.value

    def test_polygon(self):
        contour = ((0, 0, True), (10, 0, True), (10, 10, True))
        assert self._record((contour,)) == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("lineTo", ((10, 10),)),
            ("closePath", ()),
        ]

    def test_quadratic(self):
        contour = ((0, 0, True), (5, 10, False), (10, 0, True))
        assert self._record((contour,)) == [
            ("moveTo", ((0, 0),)),
            ("qCurveTo", ((5, 10), (10, 0))),
            ("closePath", ()),
        ]

    def test_consecutive_off_curve_points_share_a_segment(self):
        contour = ((0, 0, True), (0, 10, False), (10, 10, False), (10, 0, True))
        assert self._record((contour,)) == [
            ("moveTo", ((0, 0),)),
            ("qCurveTo", ((0, 10), (10, 10), (10, 0))),
            ("closePath", ()),
        ]

    def test_starts_off_curve(self):
        contour = ((5, 10, False), (10, 0, True), (0, 0, True))
        recorded = self._record((contour,))
        assert recorded[0] == ("moveTo", ((10, 0),))
        assert ("qCurveTo", ((5, 10), (10, 0))) in recorded
        assert recorded[-1] == ("closePath", ())

    def test_one_path_per_contour(self):
        contours = (
            ((0, 0, True), (1, 0, True), (1, 1, True)),
            ((2, 2, True), (3, 2, True), (3, 3, True)),
        )
        ops = [op for op, _ in self._record(contours)]
        assert ops.count("moveTo") == 2
        assert ops.count("closePath") == 2


class TestFormatFixed:
    def test_integer_precision(self):
        assert format_fixed(-42, 0) == "-42"

    def test_decimals(self):
        assert format_fixed(1234, 2) == "12.34"
        assert format_fixed(1230, 2) == "12.3"
        assert format_fixed(1200, 2) == "12"

    def test_negative_fraction(self):
        assert format_fixed(-50, 2) == "-0.5"


class TestGlyphPath:
    def test_rectangle_glyph(self):
        # "I" is a single rectangle: 404,0 210,0 210,1433 404,1433
        assert BUNDLED_FONT.glyph_path(ord("I"), 1.0) == "m404 0l-194 0l0-1433l194 0z"

    def test_y_axis_flipped(self):
        # "_" sits below the baseline, so its SVG y is positive.
        assert BUNDLED_FONT.glyph_path(ord("_"), 1.0) == "m788 165l0 120l-788 0l0-120z"

    def test_rounds_half_up(self):
        assert BUNDLED_FONT.glyph_path(ord("I"), 0.5) == "m202 0l-97 0l0-716l97 0z"

    def test_precision(self):
        assert BUNDLED_FONT.glyph_path(ord("I"), 0.5, precision=1) == "m202 0l-97 0l0-716.5l97 0z"

    def test_rejects_negative_precision(self):
        with pytest.raises(ConfigurationError, match="precision"):
            BUNDLED_FONT.glyph_path(ord(" "), 1.0, precision=-1)

    def test_no_ink_is_empty(self):
        assert BUNDLED_FONT.glyph_path(ord(" "), 0.55) == ""

    def test_fallback_draws_notdef(self):
        path = BUNDLED_FONT.glyph_path(ord("中"), 0.55)
        assert path == BUNDLED_FONT.glyph_path(0x1F600, 0.55)
        assert path.startswith("m")

    def test_multiple_contours_closed(self):
        path = BUNDLED_FONT.glyph_path(ord("B"), 0.55)
        assert path.count("m") == 3
        assert path.count("z") == 3

    def test_deterministic(self):
        assert BUNDLED_FONT.glyph_path(ord("g"), 0.55) == BUNDLED_FONT.glyph_path(ord("g"), 0.55)


class TestPathWriter:
    def _write(self, contours, scale=1.0, precision=0):
        writer = PathWriter(scale, precision)
        draw_contours(contours, writer)
        return writer.getvalue()

    def test_moves_relative_to_subpath_start_after_close(self):
        assert self._write((
            ((0, 0, True), (10, 0, True), (10, 10, True)),
            ((20, 0, True), (30, 0, True), (30, 10, True)),
        )) == "m0 0l10 0l0-10zm20 0l10 0l0-10z"

    def test_quadratic_is_relative_to_segment_start(self):
        assert self._write((((0, 0, True), (5, 10, False), (10, 0, True)),)) == "m0 0q5-10 10 0z"

    def test_implied_on_curve_point(self):
        contour = ((0, 0, True), (0, 10, False), (10, 10, False), (10, 0, True))
        assert self._write((contour,)) == "m0 0q0-10 5-10q5 0 5 10z"

    def test_all_off_curve_contour(self):
        path = self._write((((0, 10, False), (10, 10, False)),))
        assert path.startswith("m5-10q")
        assert path.endswith("z")

    def test_is_a_fonttools_pen(self):
        assert isinstance(PathWriter(1.0), BasePen)

    def test_rejects_negative_precision(self):
        with pytest.raises(ConfigurationError, match="precision"):
            PathWriter(1.0, -1)


class TestCustomFont:
    def test_from_table_module(self):
        class Table:
            UNITS_PER_EM = 1000
            ASCENDER = 800
            DESCENDER = -200
            NOTDEF = (500, "0,0 500,0 500,700 0,700")
            GLYPHS = {0x41: (600, "0,0 600,0 300,700")}

        font = FontMetrics.from_table(Table)
        assert font.advance_width(0x41, 10) == 6.0
        assert font.advance_width(0x42, 10) == 5.0
        assert font.family == ""
        assert font.glyph_path(0x41, 1.0) == "m0 0l600 0l-300-700z"
