"""Badge style catalog.

Two presentation variants exist, classic (rounded corners and a shadow
gradient) and flat (square, no gradient). Both are the same frozen Style
dataclass tagged with a StyleKind; custom styles start from one of them and
override individual options. Everything is validated at construction, so a
Style that exists always renders.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any

from badgen.color import require_color, require_opacity
from badgen.errors import ConfigurationError

# Upper bound for every pixel option.
MAX_PIXELS = 10_000


class StyleKind(str, Enum):
    CLASSIC = "classic"
    FLAT = "flat"


def parse_kind(value: StyleKind | str) -> StyleKind:
    try:
        return StyleKind(value.lower() if isinstance(value, str) else value)
    except ValueError:
        valid = ", ".join(kind.value for kind in StyleKind)
        raise ConfigurationError(f"unknown style {value!r}, expected one of: {valid}") from None


def _check_number(name: str, value: Any, *, positive: bool = False) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
    if positive and value <= 0:
        raise ConfigurationError(f"{name} must be greater than 0, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value!r}")
    if value > MAX_PIXELS:
        raise ConfigurationError(f"{name} must be at most {MAX_PIXELS}px, got {value!r}")


@dataclass(frozen=True)
class Gradient:
    """Vertical shading laid over the whole badge."""

    start: str = "#eee"
    end: str | None = None  # None fades to black
    opacity: str = ".1"

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", require_color(self.start, "gradient.start"))
        if self.end is not None:
            object.__setattr__(self, "end", require_color(self.end, "gradient.end"))
        object.__setattr__(self, "opacity", require_opacity(self.opacity, "gradient.opacity"))


@dataclass(frozen=True)
class Style:
    kind: StyleKind = StyleKind.CLASSIC
    height: float = 20  # px
    font_size: float = 11  # px
    corner_radius: float = 3  # px
    horizontal_padding: float = 5  # px, each side of the text
    vertical_padding: float = 3  # px, minimum clearance above and below the text
    min_width: float = 20  # px, floor for each box
    label_color: str = "#555"
    value_color: str = "blue"
    text_color: str = "#fff"
    label_text_color: str | None = None  # defaults to text_color
    text_shadow_color: str = "#000"
    text_shadow_opacity: str = ".25"
    text_shadow_offset: float = 1  # px
    gradient: Gradient | None = field(default_factory=Gradient)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", parse_kind(self.kind))

        _check_number("height", self.height, positive=True)
        _check_number("font_size", self.font_size, positive=True)
        _check_number("min_width", self.min_width, positive=True)
        for name in (
            "corner_radius",
            "horizontal_padding",
            "vertical_padding",
            "text_shadow_offset",
        ):
            _check_number(name, getattr(self, name))
        if self.font_size + 2 * self.vertical_padding > self.height:
            raise ConfigurationError(
                f"font_size {self.font_size} with vertical_padding {self.vertical_padding} "
                f"does not fit a badge {self.height}px high"
            )

        for name in ("label_color", "value_color", "text_color", "text_shadow_color"):
            object.__setattr__(self, name, require_color(getattr(self, name), name))
        if self.label_text_color is not None:
            object.__setattr__(
                self, "label_text_color", require_color(self.label_text_color, "label_text_color")
            )
        object.__setattr__(
            self,
            "text_shadow_opacity",
            require_opacity(self.text_shadow_opacity, "text_shadow_opacity"),
        )

        if isinstance(self.gradient, dict):
            try:
                object.__setattr__(self, "gradient", Gradient(**self.gradient))
            except TypeError as exc:
                raise ConfigurationError(f"gradient: {exc}") from None
        elif self.gradient is not None and not isinstance(self.gradient, Gradient):
            raise ConfigurationError(f"gradient must be a Gradient or None, got {self.gradient!r}")

        if self.kind is StyleKind.FLAT:
            if self.gradient is not None:
                raise ConfigurationError("flat styles cannot have a gradient")
            if self.corner_radius:
                raise ConfigurationError("flat styles must have a corner_radius of 0")

    @classmethod
    def classic(cls) -> Style:
        return cls()

    @classmethod
    def flat(cls) -> Style:
        return cls(
            kind=StyleKind.FLAT,
            corner_radius=0,
            text_shadow_opacity=".1",
            gradient=None,
        )

    @classmethod
    def named(cls, name: StyleKind | str) -> Style:
        """Return the canonical style for a kind name ("classic" or "flat")."""
        kind = parse_kind(name)
        if kind is StyleKind.FLAT:
            return cls.flat()
        return cls.classic()

    @classmethod
    def custom(cls, base: StyleKind | str = StyleKind.CLASSIC, **options: Any) -> Style:
        """Build a style from a canonical base plus option overrides.

        Example: Style.custom("flat", value_color="green", horizontal_padding=6)
        """
        return cls.named(base).with_options(**options)

    def with_options(self, **options: Any) -> Style:
        unknown = sorted(set(options) - set(OPTION_NAMES))
        if unknown:
            raise ConfigurationError(
                f"unknown style option(s): {', '.join(unknown)}; "
                f"recognized options are: {', '.join(OPTION_NAMES)}"
            )
        return replace(self, **options)

    @property
    def label_fill(self) -> str:
        return self.label_text_color or self.text_color

    def to_options(self) -> dict[str, Any]:
        """Plain-data form of this style, accepted back by Style.custom."""
        data = asdict(self)
        data.pop("kind")
        return {"base": self.kind.value, **data}


OPTION_NAMES: tuple[str, ...] = tuple(f.name for f in fields(Style) if f.name != "kind")
