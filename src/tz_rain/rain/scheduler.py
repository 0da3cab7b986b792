"""Tick/paint controller with start, stop, resize and frame-budget policies."""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import Callable

from .base import RandomSource, Surface, SurfaceUnavailable, TickSource
from .config import RainConfig
from .field import ColumnField, RngFork, fork_rng
from .renderer import RainRenderer

logger = logging.getLogger(__name__)

_OVERRUN_STREAK_LIMIT = 3


class RainScheduler:
    """Drives `update()` then `paint()` once per host tick until stopped.

    Rows advance once per tick, never per unit of time, so irregular host
    cadence changes speed but not step semantics. Resize notifications are
    queued and applied at the start of the next tick.
    """

    def __init__(
        self,
        config: RainConfig,
        tick_source: TickSource,
        *,
        rng: RandomSource | None = None,
        fork: RngFork = fork_rng,
        frame_budget_s: float = 1.0 / 16,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._tick_source = tick_source
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._fork = fork
        self._renderer = RainRenderer(config)
        self._budget_s = max(0.0, frame_budget_s)
        self._clock = clock
        self._running = False
        self._handle: object | None = None
        self._surface: Surface | None = None
        self._field: ColumnField | None = None
        self._pending_size: tuple[int, int] | None = None
        self._resize_lock = threading.Lock()
        self._tick_index = 0
        self._overrun_streak = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def handle(self) -> object | None:
        return self._handle

    @property
    def field(self) -> ColumnField | None:
        return self._field

    @property
    def tick_index(self) -> int:
        return self._tick_index

    def start(self, surface: Surface | None) -> None:
        """Acquire `surface`, build the field and subscribe to ticks once."""
        if self._running:
            logger.debug("Rain scheduler already running; start ignored")
            return
        if surface is None:
            raise SurfaceUnavailable("No drawing surface was provided.")
        try:
            width, height = surface.size
        except Exception as exc:
            raise SurfaceUnavailable("Drawing surface did not report a size.") from exc
        if width <= 0 or height <= 0:
            raise SurfaceUnavailable(
                f"Drawing surface has unusable size {width}x{height}."
            )
        with self._resize_lock:
            self._pending_size = None
        self._surface = surface
        self._field = ColumnField(
            self._config, self._rng, width, height, fork=self._fork
        )
        self._tick_index = 0
        self._overrun_streak = 0
        self._handle = self._tick_source.subscribe(self.tick)
        self._running = True
        logger.info(
            "Rain effect started",
            extra={
                "event": "rain_started",
                "width": width,
                "height": height,
                "column_count": self._field.column_count,
            },
        )

    def stop(self) -> None:
        """Cancel pending ticks and tear the field down; safe to repeat."""
        if not self._running:
            return
        handle = self._handle
        self._running = False
        self._handle = None
        self._field = None
        self._surface = None
        if handle is not None:
            self._tick_source.cancel(handle)
        logger.info(
            "Rain effect stopped",
            extra={"event": "rain_stopped", "ticks": self._tick_index},
        )

    def on_resize(self, width: int, height: int) -> None:
        """Record a new surface size to apply before the next update."""
        with self._resize_lock:
            self._pending_size = (int(width), int(height))

    def tick(self) -> None:
        """Run one update+paint step."""
        if not self._running:
            return
        field = self._field
        surface = self._surface
        assert field is not None and surface is not None
        start = self._clock()
        self._apply_pending_resize(field)
        field.update()
        self._renderer.paint(field, surface)
        self._tick_index += 1
        self._check_budget(self._clock() - start)

    def _apply_pending_resize(self, field: ColumnField) -> None:
        with self._resize_lock:
            size = self._pending_size
            self._pending_size = None
        if size is None:
            return
        previous = field.column_count
        field.resize(*size)
        logger.info(
            "Rain field resized",
            extra={
                "event": "rain_resized",
                "width": field.width,
                "height": field.height,
                "previous_column_count": previous,
                "column_count": field.column_count,
            },
        )

    def _check_budget(self, elapsed: float) -> None:
        if self._budget_s <= 0 or elapsed <= self._budget_s:
            self._overrun_streak = 0
            return
        self._overrun_streak += 1
        if self._overrun_streak >= _OVERRUN_STREAK_LIMIT:
            logger.warning(
                "Rain tick overrun %.3fs > %.3fs",
                elapsed,
                self._budget_s,
                extra={
                    "event": "rain_tick_overrun",
                    "elapsed_s": elapsed,
                    "frame_budget_s": self._budget_s,
                },
            )
            self._overrun_streak = 0
