"""Font metrics table and glyph outline rendering for badge text.

The bundled font is an immutable table built once at import from the data in
``badgen.lato``. Lookups never fail: a character outside the table resolves
to the font's missing-glyph box, tagged as a fallback so callers can see it.

Glyph outlines are TrueType quadratic contours, decoded by fontTools pens
and emitted as compact relative SVG path commands in viewbox units. Every
coordinate is rounded half-up on its absolute position, so rounding error
never accumulates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType, ModuleType
from typing import Mapping

from fontTools.pens.basePen import BasePen
from fontTools.pens.pointPen import PointToSegmentPen

from badgen import lato
from badgen.errors import ConfigurationError

# Glyph paths kept per font, keyed by (code, scale, precision).
GLYPH_CACHE_SIZE = 256


class GlyphSource(str, Enum):
    FOUND = "found"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class GlyphMetric:
    code: int | None  # None for the missing-glyph box
    advance: int  # design units
    contours: tuple[tuple[tuple[int, int, bool], ...], ...]

    @property
    def has_ink(self) -> bool:
        return bool(self.contours)


@dataclass(frozen=True)
class GlyphLookup:
    glyph: GlyphMetric
    source: GlyphSource

    @property
    def found(self) -> bool:
        return self.source is GlyphSource.FOUND


def parse_outline(outline: str) -> tuple[tuple[tuple[int, int, bool], ...], ...]:
    """Decode the compact outline notation used by the embedded tables.

    Contours are separated by ``;`` and points by whitespace. ``x,y`` is an
    on-curve point, ``x:y`` an off-curve control point.
    """
    contours = []
    for contour in outline.split(";") if outline else ():
        points = []
        for token in contour.split():
            on_curve = "," in token
            x, y = token.split("," if on_curve else ":")
            points.append((int(x), int(y), on_curve))
        if points:
            contours.append(tuple(points))
    return tuple(contours)


def draw_contours(contours, pen) -> None:
    """Draw TrueType contours into a fontTools segment pen.

    The points go through PointToSegmentPen, which applies the TrueType
    rules: consecutive off-curve points imply an on-curve point halfway
    between them, and a contour may start off-curve.
    """
    point_pen = PointToSegmentPen(pen)
    for contour in contours:
        point_pen.beginPath()
        previous_on_curve = contour[-1][2]
        for x, y, on_curve in contour:
            if on_curve:
                point_pen.addPoint((x, y), "line" if previous_on_curve else "qcurve")
            else:
                point_pen.addPoint((x, y))
            previous_on_curve = on_curve
        point_pen.endPath()


def check_font_size(font_size: float) -> float:
    if isinstance(font_size, bool) or not isinstance(font_size, (int, float)):
        raise ConfigurationError(f"font_size must be a number, got {font_size!r}")
    if not 0 < font_size < math.inf:
        raise ConfigurationError(f"font_size must be a finite number greater than 0, got {font_size!r}")
    return font_size


def check_precision(precision: int) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConfigurationError(f"precision must be a non-negative integer, got {precision!r}")
    return precision


def format_fixed(ticks: int, precision: int) -> str:
    """Format an integer count of 10**-precision units without float noise.

    format_fixed(1234, 2) -> "12.34", format_fixed(-50, 2) -> "-0.5"
    """
    if precision == 0:
        return str(ticks)
    sign = "-" if ticks < 0 else ""
    whole, frac = divmod(abs(ticks), 10 ** precision)
    frac_str = f"{frac:0{precision}d}".rstrip("0")
    if not frac_str:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac_str}"


class PathWriter(BasePen):
    """fontTools pen that writes relative SVG path commands for scaled outlines."""

    def __init__(self, scale: float, precision: int = 0) -> None:
        super().__init__()
        self.scale = scale
        self.precision = check_precision(precision)
        self._factor = 10 ** precision
        self._parts: list[str] = []
        self._last = (0, 0)
        self._subpath_start = (0, 0)

    def _to_ticks(self, x: float, y: float) -> tuple[int, int]:
        # Font y grows upwards, SVG y grows downwards.
        return (
            math.floor(x * self.scale * self._factor + 0.5),
            math.floor(-y * self.scale * self._factor + 0.5),
        )

    def _number(self, ticks: int, first: bool) -> None:
        # A leading minus sign doubles as the separator.
        if not first and ticks >= 0:
            self._parts.append(" ")
        self._parts.append(format_fixed(ticks, self.precision))

    def _command(self, letter: str, *points: tuple[float, float]) -> None:
        self._parts.append(letter)
        targets = [self._to_ticks(x, y) for x, y in points]
        first = True
        for tx, ty in targets:
            self._number(tx - self._last[0], first)
            self._number(ty - self._last[1], False)
            first = False
        self._last = targets[-1]

    def _moveTo(self, pt):
        self._command("m", pt)
        self._subpath_start = self._last

    def _lineTo(self, pt):
        self._command("l", pt)

    def _qCurveToOne(self, pt1, pt2):
        self._command("q", pt1, pt2)

    def _curveToOne(self, pt1, pt2, pt3):
        self._command("c", pt1, pt2, pt3)

    def _closePath(self):
        self._parts.append("z")
        self._last = self._subpath_start

    def getvalue(self) -> str:
        return "".join(self._parts)


class FontMetrics:
    """Read-only per-glyph advances and outlines for one font."""

    def __init__(
        self,
        glyphs: Mapping[int, GlyphMetric],
        notdef: GlyphMetric,
        units_per_em: int,
        ascender: int,
        descender: int,
        family: str = "",
        license: str = "",
    ) -> None:
        self.glyphs = MappingProxyType(dict(glyphs))
        self.notdef = notdef
        self.units_per_em = units_per_em
        self.ascender = ascender
        self.descender = descender
        self.family = family
        self.license = license
        self._paths = lru_cache(maxsize=GLYPH_CACHE_SIZE)(self._render_glyph_path)

    @classmethod
    def from_table(cls, table: ModuleType) -> FontMetrics:
        """Build metrics from a data module shaped like ``badgen.lato``."""
        glyphs = {
            code: GlyphMetric(code, advance, parse_outline(outline))
            for code, (advance, outline) in table.GLYPHS.items()
        }
        notdef_advance, notdef_outline = table.NOTDEF
        return cls(
            glyphs,
            GlyphMetric(None, notdef_advance, parse_outline(notdef_outline)),
            units_per_em=table.UNITS_PER_EM,
            ascender=table.ASCENDER,
            descender=table.DESCENDER,
            family=getattr(table, "FAMILY", ""),
            license=getattr(table, "LICENSE", ""),
        )

    def __contains__(self, code: int) -> bool:
        return code in self.glyphs

    def lookup(self, code: int) -> GlyphLookup:
        glyph = self.glyphs.get(code)
        if glyph is None:
            return GlyphLookup(self.notdef, GlyphSource.FALLBACK)
        return GlyphLookup(glyph, GlyphSource.FOUND)

    def advance_width(self, code: int, font_size: float) -> float:
        """Horizontal advance of one character in pixels at font_size."""
        check_font_size(font_size)
        return self.lookup(code).glyph.advance * font_size / self.units_per_em

    def text_height(self, font_size: float) -> float:
        """Height of the em box above the descender line, in pixels."""
        return font_size * (self.units_per_em + self.descender) / self.units_per_em

    def glyph_path(self, code: int, scale: float, precision: int = 0) -> str:
        """Relative path commands for a glyph drawn from the current pen point.

        ``scale`` converts design units to output units. Returns "" for
        glyphs without ink, such as the space.
        """
        check_precision(precision)
        return self._paths(code, scale, precision)

    def _render_glyph_path(self, code: int, scale: float, precision: int) -> str:
        glyph = self.lookup(code).glyph
        if not glyph.has_ink:
            return ""
        writer = PathWriter(scale, precision)
        draw_contours(glyph.contours, writer)
        return writer.getvalue()


BUNDLED_FONT = FontMetrics.from_table(lato)


def font_licenses() -> list[str]:
    """Licenses of the font data embedded in this package."""
    return [f"{BUNDLED_FONT.family}: {BUNDLED_FONT.license}"]
