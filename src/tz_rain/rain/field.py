"""Column field: one column per fixed-width slot across the surface."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import Callable

from .base import RandomSource
from .column import Column
from .config import RainConfig
from .glyphs import GlyphSource

logger = logging.getLogger(__name__)

RngFork = Callable[[RandomSource], RandomSource]


def fork_rng(parent: RandomSource) -> RandomSource:
    """Derive an independent seeded generator from `parent`."""
    return random.Random(parent.randrange(2**32))


class ColumnField:
    """Owns the ordered column sequence and advances it one tick at a time."""

    def __init__(
        self,
        config: RainConfig,
        rng: RandomSource,
        width: int,
        height: int,
        *,
        fork: RngFork = fork_rng,
    ) -> None:
        self._config = config
        self._rng = rng
        self._fork = fork
        self._glyphs = GlyphSource(config.alphabet, rng)
        self._width = 0
        self._height = 0
        self._columns: list[Column] = []
        self.resize(width, height)

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def update(self, update_order: Iterable[int] | None = None) -> None:
        """Advance every column by one tick, in `update_order` if given."""
        config = self._config
        indices = range(len(self._columns)) if update_order is None else update_order
        for index in indices:
            self._columns[index].advance(
                surface_height=self._height,
                glyph_height=config.glyph_height,
                reset_probability=config.reset_probability,
                stagger_rows=config.stagger_rows,
            )

    def resize(self, width: int, height: int) -> None:
        """Re-derive the column sequence for a new surface size.

        Surviving columns keep their state; slots past the new count are
        dropped and new slots get a freshly randomized entry row.
        """
        width = max(0, int(width))
        height = max(0, int(height))
        count = width // self._config.glyph_width
        previous = len(self._columns)
        if count < previous:
            del self._columns[count:]
        for index in range(previous, count):
            self._columns.append(
                Column.create(
                    index,
                    glyph_width=self._config.glyph_width,
                    rng=self._fork(self._rng),
                    glyphs=self._glyphs,
                    stagger_rows=self._config.stagger_rows,
                )
            )
        self._width = width
        self._height = height
        logger.debug(
            "Column field resized to %dx%d (%d -> %d columns)",
            width,
            height,
            previous,
            count,
        )
