"""Synchronous tick source for headless runs and tests."""

from __future__ import annotations

import itertools
from typing import Callable


class ManualTickSource:
    """Tick source whose ticks are fired explicitly by the caller."""

    def __init__(self) -> None:
        self._callbacks: dict[int, Callable[[], None]] = {}
        self._ids = itertools.count(1)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callable[[], None]) -> object:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle: object) -> None:
        if isinstance(handle, int):
            self._callbacks.pop(handle, None)

    def fire(self, count: int = 1) -> int:
        """Invoke every subscriber `count` times; return ticks delivered."""
        delivered = 0
        for _ in range(max(0, count)):
            if not self._callbacks:
                break
            for callback in list(self._callbacks.values()):
                callback()
            delivered += 1
        return delivered
