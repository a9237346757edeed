"""MCP server for badgen.

Exposes badge rendering and text measurement as MCP tools.
Run via: python3 -m badgen.mcp_server
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from badgen.errors import ConfigurationError

mcp = FastMCP(name="badgen")


@mcp.tool()
def render_badge(
    value: str,
    label: str | None = None,
    style: str = "classic",
    options: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Render an SVG badge.

    style: "classic", "flat", or a style name from ~/.badgen/config.json.
    options: style overrides, e.g. {"value_color": "green"}.
    """
    from badgen.config import get_style
    from badgen.layout import VIEWBOX_SCALE, compute_layout
    from badgen.svg import render

    try:
        resolved = get_style(style)
        if options:
            resolved = resolved.with_options(**options)
    except ConfigurationError as exc:
        return {"error": str(exc)}
    layout = compute_layout(label, value, resolved)
    return {
        "svg": render(layout, resolved),
        "width": layout.width / VIEWBOX_SCALE,
        "height": layout.height / VIEWBOX_SCALE,
        "style": resolved.kind.value,
    }


@mcp.tool()
def measure_text(text: str, font_size: float = 11.0) -> dict[str, Any]:
    """Measure the rendered width of text in pixels using the bundled font."""
    from badgen.font import BUNDLED_FONT
    from badgen.text import measure_text as _measure

    try:
        measurement = _measure(text, font_size)
    except ConfigurationError as exc:
        return {"error": str(exc)}
    return {
        "text": measurement.text,
        "width": measurement.width,
        "font": BUNDLED_FONT.family,
        "fallback_chars": list(measurement.fallbacks),
    }


@mcp.tool()
def list_styles() -> dict[str, Any]:
    """List available style names, built-in and configured."""
    from badgen.config import get_style, list_style_names

    styles = []
    for name in list_style_names():
        try:
            styles.append({"name": name, **get_style(name).to_options()})
        except ConfigurationError as exc:
            styles.append({"name": name, "error": str(exc)})
    return {"styles": styles, "count": len(styles)}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
