"""SVG badge generation.

Renders a shields.io-style badge, optionally with a label:

    badge(Style.classic(), "12", "downloads")  ->  [downloads | 12]

Pure functions, no side effects. The same inputs always produce the same
bytes.
"""

from __future__ import annotations

import logging
from typing import TextIO

from badgen.font import BUNDLED_FONT, FontMetrics, check_precision
from badgen.layout import compute_layout
from badgen.style import Style, StyleKind
from badgen.svg import render

logger = logging.getLogger(__name__)


def _resolve_style(style: Style | StyleKind | str) -> Style:
    if isinstance(style, Style):
        return style
    return Style.named(style)


def badge(
    style: Style | StyleKind | str,
    value: str,
    label: str | None = None,
    *,
    font: FontMetrics = BUNDLED_FONT,
    precision: int = 0,
) -> str:
    """Render a badge to an SVG string.

    ``style`` is a Style or a canonical style name. ``precision`` is the
    number of decimals kept in glyph path coordinates (viewbox units are
    1/100 px, so 0 is already sub-pixel accurate).
    Raises ConfigurationError for an unknown style name or a negative
    precision.
    """
    check_precision(precision)
    resolved = _resolve_style(style)
    layout = compute_layout(label, value, resolved, font)
    svg = render(layout, resolved, font, precision)
    logger.debug(
        "Rendered %s badge %r/%r: %dx%d units, %d bytes",
        resolved.kind.value,
        label,
        value,
        layout.width,
        layout.height,
        len(svg),
    )
    return svg


def write_badge(
    fp: TextIO,
    style: Style | StyleKind | str,
    value: str,
    label: str | None = None,
    *,
    font: FontMetrics = BUNDLED_FONT,
    precision: int = 0,
) -> int:
    """Render a badge into a text stream. Returns the number of characters written."""
    return fp.write(badge(style, value, label, font=font, precision=precision))
