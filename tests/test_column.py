"""Tests for single-column advance and reset behavior."""

from __future__ import annotations

from tz_rain.rain.column import Column, entry_row
from tz_rain.rain.glyphs import GlyphSource


def _column(rng, *, alphabet=("a", "b", "c"), stagger_rows: int = 0) -> Column:
    return Column.create(
        3,
        glyph_width=2,
        rng=rng,
        glyphs=GlyphSource(alphabet, rng),
        stagger_rows=stagger_rows,
    )


def _advance(column: Column, *, height: int = 100, probability: float = 0.0, stagger: int = 0) -> bool:
    return column.advance(
        surface_height=height,
        glyph_height=1,
        reset_probability=probability,
        stagger_rows=stagger,
    )


def test_create_places_column_at_slot_offset(fixed_random) -> None:
    column = _column(fixed_random(ints=(1,)))
    assert column.index == 3
    assert column.x == 6
    assert column.y == 0
    assert column.glyph == "b"
    assert column.trail_y is None


def test_entry_row_is_zero_without_stagger(fixed_random) -> None:
    rng = fixed_random(ints=(4,))
    assert entry_row(rng, 0) == 0
    assert rng.randrange_calls == 0
    assert entry_row(rng, 6) == -4


def test_falling_column_advances_one_row_and_records_trail(fixed_random) -> None:
    column = _column(fixed_random(ints=(0, 1, 2)))
    first_glyph = column.glyph

    reset = _advance(column)

    assert reset is False
    assert column.y == 1
    assert column.trail_y == 0
    assert column.trail_glyph == first_glyph


def test_glyph_changes_every_tick_without_reset(fixed_random) -> None:
    column = _column(fixed_random(ints=(0, 1)), alphabet=("a", "b"))
    glyphs = []
    for _ in range(4):
        _advance(column)
        glyphs.append(column.glyph)
    assert glyphs == ["b", "a", "b", "a"]


def test_boundary_reset_after_passing_bottom(fixed_random) -> None:
    column = _column(fixed_random())
    rows = []
    for _ in range(5):
        _advance(column, height=3)
        rows.append(column.y)
    assert rows == [1, 2, 3, 0, 1]


def test_probabilistic_reset_before_bottom_uses_stagger(fixed_random) -> None:
    rng = fixed_random(floats=(0.0,), ints=(2,))
    column = _column(rng, stagger_rows=5)
    assert column.y == -2
    column.y = 7

    reset = _advance(column, probability=0.5, stagger=5)

    assert reset is True
    assert column.y == -2
    assert column.trail_y == 7
    assert column.glyph == "c"


def test_probability_above_draw_does_not_reset(fixed_random) -> None:
    column = _column(fixed_random(floats=(0.75,)))
    assert _advance(column, probability=0.5) is False
    assert column.y == 1
