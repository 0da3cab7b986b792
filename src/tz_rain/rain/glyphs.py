"""Glyph alphabets and the uniform glyph source."""

from __future__ import annotations

from collections.abc import Iterable

from .base import ConfigurationError, RandomSource

_KATAKANA = "".join(chr(code) for code in range(0xFF66, 0xFF9E))

ALPHABETS: dict[str, str] = {
    "hex": "0123456789ABCDEF$#@%&*+=-",
    "binary": "01",
    "katakana": _KATAKANA + "0123456789",
    "ascii": (
        "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz@#$%&*+-/\\|"
    ),
}
DEFAULT_ALPHABET = "hex"


def normalize_alphabet(glyphs: Iterable[str]) -> tuple[str, ...]:
    """Return a de-duplicated glyph tuple, rejecting empty or multi-char entries.

    Unordered inputs (sets) are sorted so seeded runs stay reproducible.
    """
    if isinstance(glyphs, (set, frozenset)):
        glyphs = sorted(glyphs)
    alphabet = tuple(dict.fromkeys(glyphs))
    if not alphabet:
        raise ConfigurationError("Alphabet must contain at least one glyph.")
    for glyph in alphabet:
        if not isinstance(glyph, str) or len(glyph) != 1 or not glyph.isprintable():
            raise ConfigurationError(
                f"Alphabet entries must be single printable characters: {glyph!r}"
            )
    return alphabet


class GlyphSource:
    """Draw glyphs uniformly at random from a fixed alphabet."""

    def __init__(self, alphabet: Iterable[str], rng: RandomSource) -> None:
        self._alphabet = normalize_alphabet(alphabet)
        self._rng = rng

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    def next(self) -> str:
        return self._alphabet[self._rng.randrange(len(self._alphabet))]

    def bind(self, rng: RandomSource) -> GlyphSource:
        """Return a source over the same alphabet drawing from `rng`."""
        return GlyphSource(self._alphabet, rng)
