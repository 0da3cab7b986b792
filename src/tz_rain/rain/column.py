"""Single falling-glyph stream."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import RandomSource
from .glyphs import GlyphSource


def entry_row(rng: RandomSource, stagger_rows: int) -> int:
    """Return a staggered start row at or above the top edge."""
    if stagger_rows <= 0:
        return 0
    return -rng.randrange(stagger_rows + 1)


@dataclass
class Column:
    """One vertical stream with a fixed `x` and a row position `y`.

    `y` counts glyph rows descended and only grows between resets; a reset
    puts it back at `0` or a negative stagger offset. Each column draws from
    its own random source so columns never depend on one another.
    """

    index: int
    x: int
    y: int
    glyph: str
    rng: RandomSource = field(repr=False, compare=False)
    glyphs: GlyphSource = field(repr=False, compare=False)
    trail_y: int | None = None
    trail_glyph: str | None = None

    @classmethod
    def create(
        cls,
        index: int,
        *,
        glyph_width: int,
        rng: RandomSource,
        glyphs: GlyphSource,
        stagger_rows: int,
    ) -> Column:
        column_glyphs = glyphs.bind(rng)
        return cls(
            index=index,
            x=index * glyph_width,
            y=entry_row(rng, stagger_rows),
            glyph=column_glyphs.next(),
            rng=rng,
            glyphs=column_glyphs,
        )

    def advance(
        self,
        *,
        surface_height: int,
        glyph_height: int,
        reset_probability: float,
        stagger_rows: int,
    ) -> bool:
        """Advance one tick; return True when the column reset to the top."""
        self.trail_y = self.y
        self.trail_glyph = self.glyph
        self.y += 1
        reset = (
            self.y * glyph_height > surface_height
            or self.rng.random() < reset_probability
        )
        if reset:
            self.y = entry_row(self.rng, stagger_rows)
        # Lead glyph changes every tick, even without a reset.
        self.glyph = self.glyphs.next()
        return reset
