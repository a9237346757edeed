"""Configuration file management for badgen.

Reads and writes ~/.badgen/config.json, which holds named custom styles:

    {"styles": {"release": {"base": "flat", "value_color": "green"}}}

Each entry is a base style name plus option overrides for Style.custom.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from badgen.errors import ConfigurationError
from badgen.style import Style, StyleKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: Path = Path.home() / ".badgen" / "config.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _configured_styles(config: dict) -> dict[str, Any]:
    styles = config.get("styles")
    return styles if isinstance(styles, dict) else {}


def _build_style(name: str, entry: Any) -> Style:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"style {name!r}: expected an object, got {entry!r}")
    options = dict(entry)
    base = options.pop("base", StyleKind.CLASSIC.value)
    try:
        return Style.custom(base, **options)
    except ConfigurationError as exc:
        raise ConfigurationError(f"style {name!r}: {exc}") from exc


def list_style_names(config_path: Path | None = None) -> list[str]:
    """Canonical style names followed by configured ones, sorted."""
    canonical = [kind.value for kind in StyleKind]
    configured = sorted(n for n in _configured_styles(load_config(config_path)) if n not in canonical)
    return canonical + configured


def get_style(name: str, config_path: Path | None = None) -> Style:
    """Return a canonical style or a named style from the config file."""
    if name.lower() in {kind.value for kind in StyleKind}:
        return Style.named(name)
    styles = _configured_styles(load_config(config_path))
    if name not in styles:
        raise ConfigurationError(f"unknown style {name!r}")
    return _build_style(name, styles[name])


def set_style(name: str, options: dict[str, Any], config_path: Path | None = None) -> Style:
    """Validate and persist a named style. Returns the built Style."""
    if name.lower() in {kind.value for kind in StyleKind}:
        raise ConfigurationError(f"cannot redefine built-in style {name!r}")
    style = _build_style(name, options)
    config = load_config(config_path)
    styles = _configured_styles(config)
    styles[name] = dict(options)
    config["styles"] = styles
    save_config(config, config_path)
    return style
