"""Tests for glyph alphabets and uniform glyph draws."""

from __future__ import annotations

import random

import pytest

from tz_rain.rain.base import ConfigurationError
from tz_rain.rain.glyphs import ALPHABETS, GlyphSource, normalize_alphabet


def test_next_indexes_alphabet_with_one_draw_per_call(fixed_random) -> None:
    rng = fixed_random(ints=(2, 0, 1))
    source = GlyphSource(("a", "b", "c"), rng)

    assert [source.next() for _ in range(3)] == ["c", "a", "b"]
    assert rng.randrange_calls == 3
    assert rng.random_calls == 0


def test_empty_alphabet_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="at least one glyph"):
        GlyphSource((), random.Random(0))


def test_multi_character_entries_are_rejected() -> None:
    with pytest.raises(ConfigurationError):
        normalize_alphabet(("ab", "c"))
    with pytest.raises(ConfigurationError):
        normalize_alphabet(("\n",))


def test_set_alphabet_is_sorted_and_deduplicated() -> None:
    assert normalize_alphabet({"1", "0"}) == ("0", "1")
    assert normalize_alphabet("abca") == ("a", "b", "c")


def test_bind_keeps_alphabet_and_uses_new_rng(fixed_random) -> None:
    source = GlyphSource("xyz", fixed_random(ints=(0,)))
    bound = source.bind(fixed_random(ints=(2,)))

    assert bound.alphabet == source.alphabet
    assert source.next() == "x"
    assert bound.next() == "z"


def test_draws_stay_within_alphabet_for_every_preset() -> None:
    rng = random.Random(11)
    for name, glyphs in ALPHABETS.items():
        source = GlyphSource(glyphs, rng)
        drawn = {source.next() for _ in range(200)}
        assert drawn <= set(glyphs), name
