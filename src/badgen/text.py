"""Text measurement and glyph-run rendering. Pure functions, no side effects.

Widths are the plain sum of per-character advances (no kerning or
ligatures), computed in integer design units and scaled once, so the same
text and size always give the same result.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from html import escape

from badgen.font import BUNDLED_FONT, FontMetrics, check_font_size

logger = logging.getLogger(__name__)

# Characters that may not appear in an XML 1.0 document.
_XML_ILLEGAL_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


@dataclass(frozen=True)
class Measurement:
    text: str
    width: float  # pixels
    fallbacks: tuple[str, ...] = ()  # characters drawn with the missing-glyph box


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _design_width(text: str, font: FontMetrics) -> int:
    return sum(font.lookup(ord(ch)).glyph.advance for ch in text)


def measure(text: str, font_size: float, font: FontMetrics = BUNDLED_FONT) -> float:
    """Rendered width of text in pixels at font_size."""
    check_font_size(font_size)
    return _design_width(text, font) * font_size / font.units_per_em


def measure_text(text: str, font_size: float, font: FontMetrics = BUNDLED_FONT) -> Measurement:
    """Measure text and report which characters fell back to the missing glyph."""
    check_font_size(font_size)
    total = 0
    fallbacks = []
    for ch in text:
        lookup = font.lookup(ord(ch))
        total += lookup.glyph.advance
        if not lookup.found:
            fallbacks.append(ch)
    if fallbacks:
        logger.debug(
            "No %s glyph for %r, drawing the missing-glyph box", font.family, "".join(fallbacks)
        )
    return Measurement(text, total * font_size / font.units_per_em, tuple(fallbacks))


def glyph_scale(font_size: float, units_per_px: int, font: FontMetrics = BUNDLED_FONT) -> float:
    """Output units per design unit for a font size."""
    check_font_size(font_size)
    return font_size * units_per_px / font.units_per_em


def text_width_units(
    text: str,
    font_size: float,
    units_per_px: int,
    font: FontMetrics = BUNDLED_FONT,
) -> int:
    """Width of text in integer output units (units_per_px per pixel)."""
    return _round_half_up(_design_width(text, font) * glyph_scale(font_size, units_per_px, font))


def render_text_path(
    text: str,
    origin: tuple[int, int],
    font_size: float,
    units_per_px: int,
    font: FontMetrics = BUNDLED_FONT,
    precision: int = 0,
) -> tuple[str, int]:
    """Render a run of text as SVG path data.

    ``origin`` is the left end of the baseline in output units. Returns the
    path data and the run's advance width. Each inked glyph starts with an
    absolute move to its integer origin followed by its relative outline.
    """
    scale = glyph_scale(font_size, units_per_px, font)
    origin_x, origin_y = origin
    parts = []
    pen = 0
    for ch in text:
        code = ord(ch)
        outline = font.glyph_path(code, scale, precision)
        if outline:
            parts.append(f"M{origin_x + _round_half_up(pen * scale)} {origin_y}{outline}")
        pen += font.lookup(code).glyph.advance
    return "".join(parts), _round_half_up(pen * scale)


def escape_text(text: str) -> str:
    """Escape text for XML character data and attribute values."""
    return escape(_XML_ILLEGAL_RE.sub("\ufffd", text), quote=True)
