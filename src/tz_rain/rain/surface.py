"""In-memory terminal-cell surface that renders to rich text.

Every terminal cell is one surface "pixel". Cells keep a float RGB color so
repeated translucent fills converge smoothly instead of stalling on integer
rounding; glyphs are dropped once their color is indistinguishable from the
fill.
"""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from .base import Rgb

_FloatRgb = tuple[float, float, float]


class CellSurface:
    """Fixed-size grid of glyph cells supporting alpha fills."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: Rgb = (0, 0, 0),
        fade_floor: float = 8.0,
    ) -> None:
        self._background = background
        self._fade_floor = max(0.0, fade_floor)
        self._width = 0
        self._height = 0
        self._glyphs: list[list[str | None]] = []
        self._colors: list[list[_FloatRgb]] = []
        self.resize(width, height)

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def background(self) -> Rgb:
        return self._background

    def resize(self, width: int, height: int) -> None:
        """Resize the grid, keeping the overlapping top-left region."""
        width = max(0, int(width))
        height = max(0, int(height))
        blank = _as_float(self._background)
        glyphs: list[list[str | None]] = [[None] * width for _ in range(height)]
        colors: list[list[_FloatRgb]] = [[blank] * width for _ in range(height)]
        for y in range(min(height, self._height)):
            keep = min(width, self._width)
            glyphs[y][:keep] = self._glyphs[y][:keep]
            colors[y][:keep] = self._colors[y][:keep]
        self._width = width
        self._height = height
        self._glyphs = glyphs
        self._colors = colors

    def fill_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Rgb,
        opacity: float,
    ) -> None:
        alpha = min(max(opacity, 0.0), 1.0)
        if alpha <= 0.0:
            return
        target = _as_float(color)
        x0, x1 = max(0, x), min(self._width, x + width)
        y0, y1 = max(0, y), min(self._height, y + height)
        for row in range(y0, y1):
            glyph_row = self._glyphs[row]
            color_row = self._colors[row]
            for col in range(x0, x1):
                if alpha >= 1.0:
                    color_row[col] = target
                    glyph_row[col] = None
                    continue
                r, g, b = color_row[col]
                blended = (
                    r + (target[0] - r) * alpha,
                    g + (target[1] - g) * alpha,
                    b + (target[2] - b) * alpha,
                )
                color_row[col] = blended
                if (
                    glyph_row[col] is not None
                    and _distance(blended, target) <= self._fade_floor
                ):
                    glyph_row[col] = None

    def draw_glyph(self, x: int, y: int, glyph: str, color: Rgb, size: int) -> None:
        # Terminal cells have a fixed height; `size` is ignored here.
        del size
        if not (0 <= x < self._width and 0 <= y < self._height):
            return
        self._glyphs[y][x] = glyph
        self._colors[y][x] = _as_float(color)

    def glyph_at(self, x: int, y: int) -> str | None:
        return self._glyphs[y][x]

    def color_at(self, x: int, y: int) -> Rgb:
        r, g, b = self._colors[y][x]
        return (_channel(r), _channel(g), _channel(b))

    def to_text(self) -> Text:
        """Render the grid as styled text, one line per row."""
        text = Text(no_wrap=True, overflow="crop")
        background = _hex(self._background)
        blank_style = Style(bgcolor=background)
        for y in range(self._height):
            if y:
                text.append("\n")
            blank_run = 0
            for x in range(self._width):
                glyph = self._glyphs[y][x]
                if glyph is None:
                    blank_run += 1
                    continue
                if blank_run:
                    text.append(" " * blank_run, blank_style)
                    blank_run = 0
                text.append(
                    glyph, Style(color=_hex(self.color_at(x, y)), bgcolor=background)
                )
            if blank_run:
                text.append(" " * blank_run, blank_style)
        return text

    def to_plain(self) -> str:
        return "\n".join(
            "".join(glyph or " " for glyph in row) for row in self._glyphs
        )


def _as_float(color: Rgb) -> _FloatRgb:
    return (float(color[0]), float(color[1]), float(color[2]))


def _distance(left: _FloatRgb, right: _FloatRgb) -> float:
    return max(abs(left[0] - right[0]), abs(left[1] - right[1]), abs(left[2] - right[2]))


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _hex(rgb: Rgb) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"
