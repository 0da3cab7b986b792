"""Digital rain effect subsystem."""

from .base import (
    ConfigurationError,
    RainError,
    RandomSource,
    Surface,
    SurfaceUnavailable,
    TickSource,
)
from .column import Column
from .config import THEMES, RainConfig, theme_config
from .field import ColumnField
from .glyphs import ALPHABETS, GlyphSource
from .renderer import RainRenderer
from .scheduler import RainScheduler
from .surface import CellSurface
from .ticks import ManualTickSource

__all__ = [
    "ALPHABETS",
    "THEMES",
    "CellSurface",
    "Column",
    "ColumnField",
    "ConfigurationError",
    "GlyphSource",
    "ManualTickSource",
    "RainConfig",
    "RainError",
    "RainRenderer",
    "RainScheduler",
    "RandomSource",
    "Surface",
    "SurfaceUnavailable",
    "TickSource",
    "theme_config",
]
