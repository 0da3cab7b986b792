"""Headless snapshot entrypoint: run N ticks and print the final frame."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from rich.console import Console

from . import __version__
from .gui import add_effect_arguments, config_from_args
from .logging_utils import setup_logging
from .paths import log_dir
from .rain.base import ConfigurationError, SurfaceUnavailable
from .rain.config import RainConfig
from .rain.scheduler import RainScheduler
from .rain.surface import CellSurface
from .rain.ticks import ManualTickSource
from .runtime_config import resolve_log_level
from .version import build_help_epilog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tz-rain-snapshot",
        description="Render digital rain headlessly and print the last frame.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=build_help_epilog(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--quiet", action="store_true", help="Only show warnings and errors"
    )
    parser.add_argument("--log-file", help="Write logs to a file path")
    parser.add_argument("--width", type=int, default=80, help="Surface width in cells.")
    parser.add_argument("--height", type=int, default=24, help="Surface height in rows.")
    parser.add_argument("--frames", type=int, default=40, help="Ticks to run.")
    parser.add_argument(
        "--plain", action="store_true", help="Print glyphs without color."
    )
    add_effect_arguments(parser)
    return parser


def render_snapshot(
    config: RainConfig,
    *,
    width: int,
    height: int,
    frames: int,
    rng: random.Random | None = None,
) -> CellSurface:
    """Run `frames` synchronous ticks and return the painted surface."""
    surface = CellSurface(width, height, background=config.background_rgb)
    ticks = ManualTickSource()
    scheduler = RainScheduler(config, ticks, rng=rng, frame_budget_s=0.0)
    scheduler.start(surface)
    try:
        ticks.fire(frames)
    finally:
        scheduler.stop()
    return surface


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    logger = logging.getLogger(__name__)
    try:
        level = resolve_log_level(verbose=args.verbose, quiet=args.quiet)
        setup_logging(
            log_dir=log_dir(),
            level=level,
            log_file=Path(args.log_file) if args.log_file else None,
            console=False,
        )
        logger.info("Starting tz-rain snapshot")
        config = config_from_args(args)
        seed = getattr(args, "seed", None)
        surface = render_snapshot(
            config,
            width=args.width,
            height=args.height,
            frames=args.frames,
            rng=random.Random(seed) if seed is not None else None,
        )
        if args.plain:
            print(surface.to_plain())
        else:
            Console(highlight=False).print(surface.to_text(), crop=False)
        return 0
    except (ConfigurationError, SurfaceUnavailable) as exc:
        logger.error("Snapshot failed: %s", exc)
        print(f"Snapshot failed: {exc}", file=sys.stderr)
        return 2
    except Exception as exc:  # pragma: no cover - top-level safety net
        logger.exception("Unhandled error: %s", exc)
        print("Unexpected error. Re-run with --verbose for details.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
