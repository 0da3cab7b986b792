"""Tests for the headless snapshot entrypoint."""

from __future__ import annotations

import random

import tz_rain.cli as cli_module
from tz_rain.cli import build_parser, render_snapshot
from tz_rain.rain.config import RainConfig
from tz_rain.version import PROJECT_URL, __version__


def test_snapshot_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert (args.width, args.height, args.frames) == (80, 24, 40)
    assert args.plain is False
    assert args.seed is None


def test_snapshot_help_includes_project_metadata() -> None:
    help_text = build_parser().format_help()
    assert f"Project URL: {PROJECT_URL}" in help_text
    assert "Platform: " in help_text
    assert f"Version: {__version__}" in help_text


def test_render_snapshot_is_reproducible_for_seed() -> None:
    config = RainConfig(stagger_rows=3, reset_probability=0.1)
    first = render_snapshot(
        config, width=20, height=8, frames=15, rng=random.Random(7)
    )
    second = render_snapshot(
        config, width=20, height=8, frames=15, rng=random.Random(7)
    )
    assert first.size == (20, 8)
    assert first.to_plain() == second.to_plain()


def test_render_snapshot_paints_leads_and_trails() -> None:
    config = RainConfig(alphabet=("@",), stagger_rows=0, reset_probability=0.0)
    surface = render_snapshot(config, width=5, height=10, frames=3)
    lines = surface.to_plain().splitlines()
    assert lines[3] == "@@@@@"
    assert lines[2] == "@@@@@"
    assert lines[9] == "     "


def test_main_prints_plain_frame(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(
        "sys.argv",
        [
            "tz-rain-snapshot",
            "--plain",
            "--seed",
            "3",
            "--width",
            "12",
            "--height",
            "4",
            "--frames",
            "6",
            "--alphabet",
            "binary",
        ],
    )
    monkeypatch.setattr(cli_module, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_module, "log_dir", lambda: tmp_path / "logs")

    rc = cli_module.main()
    out = capsys.readouterr().out

    assert rc == 0
    lines = out.rstrip("\n").split("\n")
    assert len(lines) == 4
    assert all(len(line) == 12 for line in lines)
    assert set("".join(lines)) <= {"0", "1", " "}


def test_main_rejects_invalid_probability(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(
        "sys.argv", ["tz-rain-snapshot", "--reset-probability", "1.5"]
    )
    monkeypatch.setattr(cli_module, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_module, "log_dir", lambda: tmp_path / "logs")

    rc = cli_module.main()

    assert rc == 2
    assert "reset_probability" in capsys.readouterr().err


def test_main_rejects_empty_surface(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr("sys.argv", ["tz-rain-snapshot", "--width", "0"])
    monkeypatch.setattr(cli_module, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_module, "log_dir", lambda: tmp_path / "logs")

    rc = cli_module.main()

    assert rc == 2
    assert "Snapshot failed" in capsys.readouterr().err
