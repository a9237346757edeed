"""SVG serialization of a computed badge layout.

Text is drawn from embedded glyph outlines, so the output references no
fonts or external resources and looks the same in every viewer.
"""

from __future__ import annotations

from badgen.font import BUNDLED_FONT, FontMetrics, check_precision, format_fixed
from badgen.layout import Box, Layout, TextRun, to_units
from badgen.style import Style
from badgen.text import escape_text, render_text_path

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

MASK_ID = "m"
GRADIENT_ID = "g"
LABEL_PATH_ID = "l"
VALUE_PATH_ID = "v"


def _pixels(units: int, scale: int) -> str:
    # scale is a power of ten, so this is exact.
    return format_fixed(units, len(str(scale)) - 1)


def _rect_path(x: int, width: int, height: int, fill: str) -> str:
    return f'<path d="M{x} 0h{width}v{height}H{x}z" fill="{fill}"/>'


def _box(box: Box, layout: Layout) -> str:
    return _rect_path(box.x, box.width, layout.height, box.color)


def _text_uses(path_id: str, fill: str, style: Style) -> list[str]:
    uses = []
    if style.text_shadow_opacity != "0":
        offset = to_units(style.text_shadow_offset)
        uses.append(
            f'<use href="#{path_id}" fill="{style.text_shadow_color}" '
            f'opacity="{style.text_shadow_opacity}" transform="translate({offset},{offset})"/>'
        )
    uses.append(f'<use href="#{path_id}" fill="{fill}"/>')
    return uses


def _text_path(run: TextRun, layout: Layout, style: Style, font: FontMetrics, precision: int) -> str:
    path, _ = render_text_path(
        run.text, (run.x, layout.baseline), style.font_size, layout.scale, font, precision
    )
    return path


def accessible_title(layout: Layout) -> str:
    if layout.label_text is not None:
        return f"{layout.label_text.text}: {layout.value_text.text}"
    return layout.value_text.text


def render(
    layout: Layout,
    style: Style,
    font: FontMetrics = BUNDLED_FONT,
    precision: int = 0,
) -> str:
    """Serialize a layout to a standalone SVG document string."""
    check_precision(precision)
    scale = layout.scale
    title = escape_text(accessible_title(layout))
    parts = [
        f'<svg xmlns="{SVG_NAMESPACE}" width="{_pixels(layout.width, scale)}" '
        f'height="{_pixels(layout.height, scale)}" viewBox="0 0 {layout.width} {layout.height}" '
        f'role="img" aria-label="{title}">',
        f"<title>{title}</title>",
        "<defs>",
    ]
    if layout.label_text is not None:
        d = _text_path(layout.label_text, layout, style, font, precision)
        parts.append(f'<path id="{LABEL_PATH_ID}" d="{d}"/>')
    d = _text_path(layout.value_text, layout, style, font, precision)
    parts.append(f'<path id="{VALUE_PATH_ID}" d="{d}"/>')
    parts.append("</defs>")

    gradient = style.gradient
    if gradient is not None:
        end_color = f' stop-color="{gradient.end}"' if gradient.end else ""
        parts.append(
            f'<linearGradient id="{GRADIENT_ID}" x2="0" y2="100%">'
            f'<stop offset="0" stop-opacity="{gradient.opacity}" stop-color="{gradient.start}"/>'
            f'<stop offset="1" stop-opacity="{gradient.opacity}"{end_color}/>'
            "</linearGradient>"
        )

    radius = to_units(style.corner_radius)
    masked = gradient is not None or radius > 0
    if masked:
        rx = f' rx="{radius}"' if radius > 0 else ""
        parts.append(
            f'<mask id="{MASK_ID}">'
            f'<rect width="{layout.width}" height="{layout.height}" fill="#fff"{rx}/>'
            "</mask>"
        )
        parts.append(f'<g mask="url(#{MASK_ID})">')

    if layout.label is not None:
        parts.append(_box(layout.label, layout))
    parts.append(_box(layout.value, layout))
    if gradient is not None:
        parts.append(_rect_path(0, layout.width, layout.height, f"url(#{GRADIENT_ID})"))

    if masked:
        parts.append("</g>")

    if layout.label_text is not None:
        parts.extend(_text_uses(LABEL_PATH_ID, style.label_fill, style))
    parts.extend(_text_uses(VALUE_PATH_ID, style.text_color, style))

    parts.append("</svg>")
    return "".join(parts)
