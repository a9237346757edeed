"""Badge colors and opacities.

Colors are either one of the named shields.io-style colors or an
``RGB``/``RRGGBB`` hex value. Both normalize to a ``#``-prefixed string
usable directly as an SVG paint.
"""

from __future__ import annotations

import re

from badgen.errors import ConfigurationError

NAMED_COLORS: dict[str, str] = {
    "green": "3C1",
    "blue": "08C",
    "red": "E43",
    "yellow": "DB1",
    "orange": "F73",
    "purple": "94E",
    "pink": "E5B",
    "grey": "999",
    "gray": "999",
    "cyan": "1BC",
    "black": "2A2A2A",
}

_HEX_RE = re.compile(r"[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?")


def parse_color(value: str) -> str | None:
    """Return ``#hex`` for a named or hex color, or None if unrecognized."""
    if not isinstance(value, str):
        return None
    # Names match all-lowercase or all-uppercase only ("green", "GREEN").
    if value in (value.lower(), value.upper()):
        named = NAMED_COLORS.get(value.lower())
        if named:
            return f"#{named}"
    raw = value[1:] if value.startswith("#") else value
    if _HEX_RE.fullmatch(raw):
        return f"#{raw}"
    return None


def require_color(value: str, field_name: str = "color") -> str:
    """Like parse_color, but raise ConfigurationError on bad input."""
    color = parse_color(value)
    if color is None:
        raise ConfigurationError(f"{field_name}: invalid color {value!r}")
    return color


def parse_opacity(value: str | float | int) -> str | None:
    """Normalize an opacity to its compact SVG form.

    Accepts 0-1 with at most two decimals: 1 -> "1", 0.0 -> "0",
    "0.10" -> ".1", ".25" -> ".25". Returns None for anything else.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(r"(?:[01](?:\.\d{1,2})?|\.\d{1,2})", text):
            return None
        number = float(text)
    elif isinstance(value, (int, float)):
        number = float(value)
        if round(number, 2) != number:
            return None
    else:
        return None
    if not 0.0 <= number <= 1.0:
        return None
    hundredths = int(round(number * 100))
    if hundredths == 0:
        return "0"
    if hundredths == 100:
        return "1"
    return "." + f"{hundredths:02d}".rstrip("0")


def require_opacity(value: str | float | int, field_name: str = "opacity") -> str:
    opacity = parse_opacity(value)
    if opacity is None:
        raise ConfigurationError(f"{field_name}: invalid opacity {value!r}")
    return opacity
