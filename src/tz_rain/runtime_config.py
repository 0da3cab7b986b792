"""Runtime configuration normalization helpers.

These helpers keep CLI flag interpretation deterministic across entrypoints.
"""

from __future__ import annotations

from .rain.base import ConfigurationError
from .rain.config import DEFAULT_THEME, RainConfig, theme_config
from .rain.glyphs import ALPHABETS, DEFAULT_ALPHABET

RESPONSIVENESS_PROFILES = ("safe", "balanced", "aggressive")
_PROFILE_DEFAULT_FPS = {
    "safe": 10,
    "balanced": 16,
    "aggressive": 22,
}
FPS_MIN = 2
FPS_MAX = 30


def resolve_log_level(*, verbose: bool, quiet: bool) -> str:
    """Resolve effective log level from CLI flags.

    Precedence is deterministic: --quiet overrides --verbose.
    """
    if quiet:
        return "WARNING"
    if verbose:
        return "DEBUG"
    return "INFO"


def normalize_responsiveness_profile(value: str) -> str:
    """Normalize CLI profile value to a supported profile name."""
    normalized = value.strip().lower()
    if normalized in RESPONSIVENESS_PROFILES:
        return normalized
    return "balanced"


def profile_default_fps(profile: str) -> int:
    """Return default FPS for a responsiveness profile."""
    normalized = normalize_responsiveness_profile(profile)
    return _PROFILE_DEFAULT_FPS[normalized]


def clamp_fps(fps: int) -> int:
    return max(FPS_MIN, min(fps, FPS_MAX))


def resolve_fps(*, fps: int | None, profile: str | None) -> int:
    """Explicit --fps wins over the responsiveness profile default."""
    if fps is not None:
        return clamp_fps(fps)
    return profile_default_fps(profile or "balanced")


def build_rain_config(
    *,
    theme: str | None = None,
    alphabet: str | None = None,
    glyphs: str | None = None,
    fade_opacity: float | None = None,
    reset_probability: float | None = None,
    stagger_rows: int | None = None,
    glyph_width: int | None = None,
) -> RainConfig:
    """Map CLI options onto a validated `RainConfig`.

    Custom `glyphs` take precedence over the `alphabet` preset name. Unset
    options keep `RainConfig` defaults. Raises `ConfigurationError`.
    """
    overrides: dict[str, object] = {}
    if glyphs:
        overrides["alphabet"] = tuple(glyphs)
    else:
        preset = (alphabet or DEFAULT_ALPHABET).strip().lower()
        if preset not in ALPHABETS:
            raise ConfigurationError(f"Unknown alphabet preset: {alphabet!r}")
        overrides["alphabet"] = tuple(ALPHABETS[preset])
    if fade_opacity is not None:
        overrides["fade_opacity"] = fade_opacity
    if reset_probability is not None:
        overrides["reset_probability"] = reset_probability
    if stagger_rows is not None:
        overrides["stagger_rows"] = stagger_rows
    if glyph_width is not None:
        overrides["glyph_size"] = (glyph_width, 1)
    return theme_config((theme or DEFAULT_THEME).strip().lower(), **overrides)
