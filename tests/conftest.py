"""Test configuration."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FixedRandom:
    """Fixed-sequence random source; values cycle when exhausted."""

    def __init__(
        self, *, floats: Iterable[float] = (0.5,), ints: Iterable[int] = (0,)
    ) -> None:
        self._floats = itertools.cycle(tuple(floats))
        self._ints = itertools.cycle(tuple(ints))
        self.random_calls = 0
        self.randrange_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        return next(self._floats)

    def randrange(self, stop: int) -> int:
        self.randrange_calls += 1
        return next(self._ints) % stop


@pytest.fixture
def fixed_random():
    """Factory for fixed-sequence random sources."""
    return FixedRandom
