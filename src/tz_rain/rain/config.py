"""Validated rain-effect configuration and named color themes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rich.color import Color, ColorParseError

from .base import ConfigurationError, Rgb
from .glyphs import ALPHABETS, DEFAULT_ALPHABET, normalize_alphabet


@dataclass(frozen=True)
class RainTheme:
    """Lead/trail/background colors for one named theme."""

    lead_color: str
    trail_color: str
    background_color: str = "#000000"


THEMES: dict[str, RainTheme] = {
    "green": RainTheme(lead_color="rgb(215,255,220)", trail_color="rgb(0,255,110)"),
    "blue": RainTheme(lead_color="rgb(210,240,255)", trail_color="rgb(0,180,255)"),
    "red": RainTheme(lead_color="rgb(255,220,220)", trail_color="rgb(255,75,75)"),
}
DEFAULT_THEME = "green"


@dataclass(frozen=True)
class RainConfig:
    """Effect configuration, validated once at construction.

    Raises `ConfigurationError` for an empty alphabet, non-positive glyph size,
    opacity outside (0, 1], probability outside [0, 1], or unparsable colors.
    """

    alphabet: tuple[str, ...] = tuple(ALPHABETS[DEFAULT_ALPHABET])
    glyph_size: tuple[int, int] = (1, 1)
    fade_opacity: float = 0.12
    reset_probability: float = 0.02
    stagger_rows: int = 12
    lead_color: str = THEMES[DEFAULT_THEME].lead_color
    trail_color: str = THEMES[DEFAULT_THEME].trail_color
    background_color: str = THEMES[DEFAULT_THEME].background_color

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", normalize_alphabet(self.alphabet))
        object.__setattr__(self, "glyph_size", _validate_glyph_size(self.glyph_size))
        if not _is_number(self.fade_opacity) or not 0.0 < self.fade_opacity <= 1.0:
            raise ConfigurationError(
                f"fade_opacity must be in (0, 1]; got {self.fade_opacity!r}"
            )
        if (
            not _is_number(self.reset_probability)
            or not 0.0 <= self.reset_probability <= 1.0
        ):
            raise ConfigurationError(
                f"reset_probability must be in [0, 1]; got {self.reset_probability!r}"
            )
        if (
            isinstance(self.stagger_rows, bool)
            or not isinstance(self.stagger_rows, int)
            or self.stagger_rows < 0
        ):
            raise ConfigurationError(
                f"stagger_rows must be a non-negative integer; got {self.stagger_rows!r}"
            )
        for name in ("lead_color", "trail_color", "background_color"):
            parse_color(getattr(self, name), field=name)

    @property
    def glyph_width(self) -> int:
        return self.glyph_size[0]

    @property
    def glyph_height(self) -> int:
        return self.glyph_size[1]

    @property
    def lead_rgb(self) -> Rgb:
        return parse_color(self.lead_color, field="lead_color")

    @property
    def trail_rgb(self) -> Rgb:
        return parse_color(self.trail_color, field="trail_color")

    @property
    def background_rgb(self) -> Rgb:
        return parse_color(self.background_color, field="background_color")


def theme_config(theme: str, **overrides: object) -> RainConfig:
    """Build a config from a named theme, applying keyword overrides."""
    try:
        palette = THEMES[theme]
    except KeyError:
        raise ConfigurationError(f"Unknown theme: {theme!r}") from None
    options: dict[str, object] = {
        "lead_color": palette.lead_color,
        "trail_color": palette.trail_color,
        "background_color": palette.background_color,
    }
    options.update(overrides)
    return RainConfig(**options)  # type: ignore[arg-type]


def parse_color(value: str, *, field: str = "color") -> Rgb:
    """Parse a rich color string into an RGB triplet."""
    if not isinstance(value, str):
        raise ConfigurationError(f"{field} must be a color string; got {value!r}")
    try:
        triplet = Color.parse(value).get_truecolor()
    except ColorParseError as exc:
        raise ConfigurationError(f"{field} is not a valid color: {value!r}") from exc
    return (triplet.red, triplet.green, triplet.blue)


def _validate_glyph_size(value: object) -> tuple[int, int]:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise ConfigurationError(
            f"glyph_size must be a (width, height) pair; got {value!r}"
        )
    width, height = value
    for part in (width, height):
        if isinstance(part, bool) or not isinstance(part, int) or part <= 0:
            raise ConfigurationError(
                f"glyph_size values must be positive integers; got {value!r}"
            )
    return (width, height)


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
