from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Sequence

FPS = 15
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
CELL_SIZE = 20
FONT_SIZE = 18
MIN_GRID_CELLS = 8
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SettingsError(ValueError):
    """Raised when the game cannot start with the requested settings."""


class SettingsParser(argparse.ArgumentParser):
    """Reports bad flags as SettingsError instead of exiting with status 2."""

    def error(self, message):
        raise SettingsError(message)


@dataclass(frozen=True)
class GameSettings:
    fps: int = FPS
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    cell_size: int = CELL_SIZE
    font_path: Optional[str] = None  # None = pygame default (freesansbold)
    font_size: int = FONT_SIZE
    data_dir: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def cell_width(self) -> int:
        return self.window_width // self.cell_size

    @property
    def cell_height(self) -> int:
        return self.window_height // self.cell_size

    def validate(self) -> "GameSettings":
        if self.fps <= 0:
            raise SettingsError("FPS must be positive.")
        if self.cell_size <= 0:
            raise SettingsError("Cell size must be positive.")
        if self.window_width % self.cell_size != 0:
            raise SettingsError("Window width must be a multiple of cell size.")
        if self.window_height % self.cell_size != 0:
            raise SettingsError("Window height must be a multiple of cell size.")
        if self.cell_width < MIN_GRID_CELLS or self.cell_height < MIN_GRID_CELLS:
            raise SettingsError(f"The grid needs at least {MIN_GRID_CELLS}x{MIN_GRID_CELLS} cells.")
        if self.log_level.upper() not in LOG_LEVELS:
            raise SettingsError(f"Unknown log level: {self.log_level}")
        return self


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise SettingsError(f"{key} must be an integer, got {raw!r}") from e


def from_env(environ: Optional[Mapping[str, str]] = None) -> GameSettings:
    """Build settings from SNAKE_* environment variables."""
    env = os.environ if environ is None else environ
    return GameSettings(
        fps=_env_int(env, "SNAKE_FPS", FPS),
        window_width=_env_int(env, "SNAKE_WIDTH", WINDOW_WIDTH),
        window_height=_env_int(env, "SNAKE_HEIGHT", WINDOW_HEIGHT),
        cell_size=_env_int(env, "SNAKE_CELL_SIZE", CELL_SIZE),
        font_path=env.get("SNAKE_FONT", "").strip() or None,
        font_size=_env_int(env, "SNAKE_FONT_SIZE", FONT_SIZE),
        data_dir=env.get("SNAKE_DATA_DIR", "").strip() or None,
        log_level=env.get("SNAKE_LOG_LEVEL", "").strip().upper() or "WARNING",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = SettingsParser(prog="snake", description="Classic Snake arcade game")
    parser.add_argument("--fps", type=int, help="simulation ticks per second")
    parser.add_argument("--width", type=int, help="window width in pixels")
    parser.add_argument("--height", type=int, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, help="grid cell size in pixels")
    parser.add_argument("--font", help="path to a .ttf font file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, base: Optional[GameSettings] = None) -> GameSettings:
    """Apply command line flags on top of base (the environment by default)."""
    settings = base if base is not None else from_env()
    args = build_parser().parse_args(argv)
    overrides = {
        "fps": args.fps,
        "window_width": args.width,
        "window_height": args.height,
        "cell_size": args.cell_size,
        "font_path": args.font,
        "log_level": args.log_level,
    }
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})
