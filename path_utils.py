"""
Path helpers that also work inside a PyInstaller bundle.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

DATA_DIR_ENV = "SNAKE_DATA_DIR"


def get_base_path() -> Path:
    """
    Return the directory the game's files are resolved against.
    A PyInstaller build unpacks into sys._MEIPASS; a plain checkout uses
    the directory this module lives in.
    """
    if getattr(sys, 'frozen', False):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parent


def get_data_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """Return a writable directory for saved data, creating it if needed."""
    raw = override or os.getenv(DATA_DIR_ENV, "").strip()
    if raw:
        path = Path(raw).expanduser()
    elif getattr(sys, 'frozen', False):
        # The bundle dir is temporary, keep scores next to the executable.
        path = Path(sys.executable).resolve().parent
    else:
        path = get_base_path()
    path.mkdir(parents=True, exist_ok=True)
    return path
