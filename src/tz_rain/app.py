"""Textual TUI app for tz-rain."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult

from .rain.base import RandomSource
from .rain.config import RainConfig
from .ui.rain_view import RainView

logger = logging.getLogger(__name__)


class RainApp(App):
    TITLE = "tz-rain"
    CSS = """
    Screen {
        layout: vertical;
        background: black;
    }
    """
    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: RainConfig | None = None,
        fps: int = 16,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__()
        self.rain_config = config if config is not None else RainConfig()
        self.tick_fps = fps
        self._rng = rng

    def compose(self) -> ComposeResult:
        yield RainView(self.rain_config, fps=self.tick_fps, rng=self._rng, id="rain")

    def on_mount(self) -> None:
        logger.info(
            "Rain app mounted",
            extra={"event": "app_mounted", "fps": self.tick_fps},
        )
