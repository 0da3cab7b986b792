"""Textual widget hosting the rain effect."""

from __future__ import annotations

import logging
from typing import Callable

from rich.console import RenderableType
from textual.events import Resize
from textual.timer import Timer
from textual.widget import Widget

from ..rain.base import RandomSource
from ..rain.config import RainConfig
from ..rain.scheduler import RainScheduler
from ..rain.surface import CellSurface
from ..runtime_config import clamp_fps

logger = logging.getLogger(__name__)


class TextualTickSource:
    """Tick source backed by a widget interval timer.

    Each tick runs the subscriber, then asks the widget to repaint.
    """

    def __init__(self, widget: Widget, fps: int) -> None:
        self._widget = widget
        self._interval_s = 1.0 / clamp_fps(fps)

    @property
    def interval_s(self) -> float:
        return self._interval_s

    def subscribe(self, callback: Callable[[], None]) -> object:
        def _on_interval() -> None:
            callback()
            self._widget.refresh()

        return self._widget.set_interval(self._interval_s, _on_interval)

    def cancel(self, handle: object) -> None:
        if isinstance(handle, Timer):
            handle.stop()


class RainView(Widget):
    """Full-size view that paints the rain effect into a cell surface."""

    DEFAULT_CSS = """
    RainView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(
        self,
        config: RainConfig,
        *,
        fps: int = 16,
        rng: RandomSource | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.rain_config = config
        self.tick_fps = clamp_fps(fps)
        self.surface = CellSurface(0, 0, background=config.background_rgb)
        self.scheduler = RainScheduler(
            config,
            TextualTickSource(self, self.tick_fps),
            rng=rng,
            frame_budget_s=1.0 / self.tick_fps,
        )

    def on_mount(self) -> None:
        self._apply_surface_size(self.size.width, self.size.height)

    def on_unmount(self) -> None:
        self.scheduler.stop()

    def on_resize(self, event: Resize) -> None:
        self._apply_surface_size(event.size.width, event.size.height)

    def render(self) -> RenderableType:
        return self.surface.to_text()

    def _apply_surface_size(self, width: int, height: int) -> None:
        # Runs on the app thread between timer callbacks, never mid-tick.
        if (width, height) == self.surface.size:
            return
        self.surface.resize(width, height)
        if self.scheduler.running:
            self.scheduler.on_resize(width, height)
        elif width > 0 and height > 0:
            self.scheduler.start(self.surface)
        logger.debug("Rain view sized to %dx%d", width, height)
