"""Trail-fade compositing and lead glyph painting."""

from __future__ import annotations

from .base import Surface
from .config import RainConfig
from .field import ColumnField


class RainRenderer:
    """Paints one frame of field state onto a surface."""

    def __init__(self, config: RainConfig) -> None:
        self._config = config
        self._lead_rgb = config.lead_rgb
        self._trail_rgb = config.trail_rgb
        self._background_rgb = config.background_rgb

    def fade(self, surface: Surface) -> None:
        """Composite one translucent background fill over the whole surface."""
        width, height = surface.size
        surface.fill_rect(
            0, 0, width, height, self._background_rgb, self._config.fade_opacity
        )

    def paint(self, field: ColumnField, surface: Surface) -> None:
        """Fade the previous frame, then draw every column's lead glyph."""
        self.fade(surface)
        _, height = surface.size
        glyph_height = self._config.glyph_height
        for column in field.columns:
            if column.trail_y is not None and column.trail_glyph is not None:
                trail_py = column.trail_y * glyph_height
                if 0 <= trail_py < height:
                    surface.draw_glyph(
                        column.x,
                        trail_py,
                        column.trail_glyph,
                        self._trail_rgb,
                        glyph_height,
                    )
        for column in field.columns:
            lead_py = column.y * glyph_height
            if 0 <= lead_py < height:
                surface.draw_glyph(
                    column.x, lead_py, column.glyph, self._lead_rgb, glyph_height
                )
