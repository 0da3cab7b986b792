"""Core rain-effect contracts: errors and the host collaborator protocols.

These protocols define the boundary between the effect and whatever hosts it
(a Textual widget, a headless snapshot run, or a test double).
"""

from __future__ import annotations

from typing import Callable, Protocol

Rgb = tuple[int, int, int]


class RainError(Exception):
    """Base class for rain-effect failures."""


class ConfigurationError(RainError, ValueError):
    """Raised once at initialization when effect configuration is invalid."""


class SurfaceUnavailable(RainError, RuntimeError):
    """Raised by `start()` when the drawing target cannot be acquired."""


class RandomSource(Protocol):
    """Injectable randomness; `random.Random` satisfies this protocol."""

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...


class Surface(Protocol):
    """Drawing target the renderer paints into."""

    @property
    def size(self) -> tuple[int, int]: ...

    def fill_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Rgb,
        opacity: float,
    ) -> None: ...

    def draw_glyph(self, x: int, y: int, glyph: str, color: Rgb, size: int) -> None: ...


class TickSource(Protocol):
    """Host refresh signal that invokes a callback once per display tick."""

    def subscribe(self, callback: Callable[[], None]) -> object: ...
    def cancel(self, handle: object) -> None: ...
