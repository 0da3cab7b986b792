"""GUI process entrypoint for the Textual application.

Responsibilities here are intentionally narrow: parse runtime options, set up
logging, build a validated effect config, instantiate `RainApp`, and return an
exit-code contract that distinguishes success from fatal initialization
failure.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from . import __version__
from .app import RainApp
from .logging_utils import setup_logging
from .paths import log_dir
from .rain.base import ConfigurationError
from .rain.config import THEMES, RainConfig
from .rain.glyphs import ALPHABETS
from .runtime_config import (
    RESPONSIVENESS_PROFILES,
    build_rain_config,
    resolve_fps,
    resolve_log_level,
)
from .version import build_help_epilog


def add_effect_arguments(parser: argparse.ArgumentParser) -> None:
    """Register rain-effect options shared by the GUI and snapshot entrypoints."""
    parser.add_argument(
        "--theme", choices=tuple(THEMES), help="Color theme (default: green)."
    )
    parser.add_argument(
        "--alphabet",
        choices=tuple(ALPHABETS),
        help="Glyph alphabet preset (default: hex).",
    )
    parser.add_argument(
        "--glyphs", help="Custom glyph characters; overrides --alphabet."
    )
    parser.add_argument(
        "--fade-opacity",
        type=float,
        help="Background fade opacity per frame, in (0, 1]. Higher is shorter trails.",
    )
    parser.add_argument(
        "--reset-probability",
        type=float,
        help="Per-tick chance a column restarts at the top, in [0, 1].",
    )
    parser.add_argument(
        "--stagger-rows",
        type=int,
        help="Maximum rows a restarting column waits above the top edge.",
    )
    parser.add_argument(
        "--glyph-width",
        type=int,
        help="Cells per column slot (use 2 for wide glyphs).",
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible rain.")


def build_parser() -> argparse.ArgumentParser:
    """Build parser for GUI launch and effect overrides."""
    parser = argparse.ArgumentParser(
        prog="tz-rain",
        description="TaggedZ's terminal digital rain.",
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
    parser.add_argument(
        "--fps",
        type=int,
        help="Tick cadence (clamped to 2-30 FPS).",
    )
    parser.add_argument(
        "--responsiveness",
        choices=RESPONSIVENESS_PROFILES,
        help="Responsiveness profile (safe|balanced|aggressive).",
    )
    add_effect_arguments(parser)
    return parser


def config_from_args(args: argparse.Namespace) -> RainConfig:
    """Build a `RainConfig` from parsed CLI args."""
    return build_rain_config(
        theme=getattr(args, "theme", None),
        alphabet=getattr(args, "alphabet", None),
        glyphs=getattr(args, "glyphs", None),
        fade_opacity=getattr(args, "fade_opacity", None),
        reset_probability=getattr(args, "reset_probability", None),
        stagger_rows=getattr(args, "stagger_rows", None),
        glyph_width=getattr(args, "glyph_width", None),
    )


def main() -> int:
    """Run GUI entrypoint and translate startup outcome to exit code."""
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
        logger.info("Starting tz-rain GUI")
        config = config_from_args(args)
        fps = resolve_fps(
            fps=getattr(args, "fps", None),
            profile=getattr(args, "responsiveness", None),
        )
        seed = getattr(args, "seed", None)
        rng = random.Random(seed) if seed is not None else None
        app = RainApp(config=config, fps=fps, rng=rng)
        app.run()
        return 1 if getattr(app, "return_code", 0) else 0
    except ConfigurationError as exc:
        logger.error("Invalid effect configuration: %s", exc)
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    except Exception as exc:  # pragma: no cover - top-level safety net
        logger.exception("Fatal GUI startup error: %s", exc)
        print(
            "GUI startup failed. Verify log configuration and re-run with --verbose.",
            file=sys.stderr,
        )
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
