"""Exceptions raised by badgen."""

from __future__ import annotations


class BadgeError(Exception):
    """Base class for badgen errors."""


class ConfigurationError(BadgeError, ValueError):
    """Invalid style parameters, colors or named-style configuration."""
