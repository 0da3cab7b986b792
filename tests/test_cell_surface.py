"""Tests for the in-memory terminal cell surface."""

from __future__ import annotations

from tz_rain.rain.surface import CellSurface


def test_new_surface_is_blank_background() -> None:
    surface = CellSurface(4, 2, background=(1, 2, 3))
    assert surface.size == (4, 2)
    assert surface.to_plain() == "    \n    "
    assert surface.color_at(3, 1) == (1, 2, 3)


def test_draw_glyph_sets_cell_and_clips_outside_bounds() -> None:
    surface = CellSurface(3, 2)
    surface.draw_glyph(1, 1, "Z", (10, 20, 30), 1)
    surface.draw_glyph(5, 0, "Q", (10, 20, 30), 1)
    surface.draw_glyph(0, -1, "Q", (10, 20, 30), 1)

    assert surface.glyph_at(1, 1) == "Z"
    assert surface.color_at(1, 1) == (10, 20, 30)
    assert surface.to_plain() == "   \n Z "


def test_opaque_fill_clears_glyphs() -> None:
    surface = CellSurface(2, 2)
    surface.draw_glyph(0, 0, "A", (255, 255, 255), 1)
    surface.fill_rect(0, 0, 2, 2, (9, 9, 9), 1.0)
    assert surface.glyph_at(0, 0) is None
    assert surface.color_at(0, 0) == (9, 9, 9)


def test_partial_fill_blends_only_inside_rect() -> None:
    surface = CellSurface(2, 1, fade_floor=0.0)
    surface.draw_glyph(0, 0, "A", (100, 100, 100), 1)
    surface.draw_glyph(1, 0, "B", (100, 100, 100), 1)

    surface.fill_rect(0, 0, 1, 1, (0, 0, 0), 0.5)

    assert surface.color_at(0, 0) == (50, 50, 50)
    assert surface.color_at(1, 0) == (100, 100, 100)
    assert surface.glyph_at(0, 0) == "A"


def test_zero_opacity_fill_is_a_no_op() -> None:
    surface = CellSurface(1, 1)
    surface.draw_glyph(0, 0, "A", (100, 100, 100), 1)
    surface.fill_rect(0, 0, 1, 1, (0, 0, 0), 0.0)
    assert surface.color_at(0, 0) == (100, 100, 100)


def test_resize_keeps_overlap_and_blanks_new_cells() -> None:
    surface = CellSurface(3, 2)
    surface.draw_glyph(0, 0, "A", (1, 1, 1), 1)
    surface.draw_glyph(2, 1, "B", (1, 1, 1), 1)

    surface.resize(2, 3)

    assert surface.size == (2, 3)
    assert surface.to_plain() == "A \n  \n  "


def test_to_text_matches_plain_rendering_and_styles_glyphs() -> None:
    surface = CellSurface(3, 2, background=(0, 0, 0))
    surface.draw_glyph(1, 0, "X", (0, 255, 0), 1)

    text = surface.to_text()

    assert text.plain == surface.to_plain()
    styles = [str(span.style) for span in text.spans]
    assert any("#00ff00" in style for style in styles)
    assert all("on #000000" in style for style in styles)


def test_zero_sized_surface_renders_empty() -> None:
    surface = CellSurface(0, 0)
    assert surface.size == (0, 0)
    assert surface.to_plain() == ""
    assert surface.to_text().plain == ""
