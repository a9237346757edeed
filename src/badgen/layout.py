"""Badge geometry.

    +-------+--------+
    | LABEL | VALUE  |
    +-------+--------+

All coordinates are integer viewbox units, VIEWBOX_SCALE units per pixel, so
layouts compare exactly and serialize without float noise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from badgen.font import BUNDLED_FONT, FontMetrics
from badgen.style import Style
from badgen.text import text_width_units

VIEWBOX_SCALE = 100


@dataclass(frozen=True)
class Box:
    x: int
    width: int
    color: str


@dataclass(frozen=True)
class TextRun:
    text: str
    x: int  # left end of the baseline
    width: int


@dataclass(frozen=True)
class Layout:
    label: Box | None
    value: Box
    label_text: TextRun | None
    value_text: TextRun
    width: int
    height: int
    baseline: int
    scale: int = VIEWBOX_SCALE

    @property
    def has_label(self) -> bool:
        return self.label is not None


def to_units(pixels: float) -> int:
    return math.floor(pixels * VIEWBOX_SCALE + 0.5)


def compute_layout(
    label: str | None,
    value: str,
    style: Style,
    font: FontMetrics = BUNDLED_FONT,
) -> Layout:
    """Compute box and text placement for a badge.

    A label of None gives a single value box. An empty string is still a
    label and gets a box of min_width.
    """
    padding = to_units(style.horizontal_padding)
    min_width = to_units(style.min_width)
    height = to_units(style.height)
    text_height = int(font.text_height(style.font_size) * VIEWBOX_SCALE)
    baseline = height - (height - text_height) // 2

    def place(text: str, x: int, color: str) -> tuple[Box, TextRun]:
        text_width = text_width_units(text, style.font_size, VIEWBOX_SCALE, font)
        width = max(text_width + 2 * padding, min_width)
        return Box(x, width, color), TextRun(text, x + (width - text_width) // 2, text_width)

    label_box = label_run = None
    value_x = 0
    if label is not None:
        label_box, label_run = place(label, 0, style.label_color)
        value_x = label_box.width
    value_box, value_run = place(value, value_x, style.value_color)

    return Layout(
        label=label_box,
        value=value_box,
        label_text=label_run,
        value_text=value_run,
        width=value_x + value_box.width,
        height=height,
        baseline=baseline,
    )
