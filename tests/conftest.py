"""Test bootstrap: headless SDL and the flat module layout on sys.path."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Must be set before pygame opens a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def _prepend_sys_path(path: Path) -> None:
    p = str(path)
    if p and p not in sys.path:
        sys.path.insert(0, p)


PROJECT_ROOT = Path(__file__).resolve().parents[1]
_prepend_sys_path(PROJECT_ROOT)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Keep the developer's SNAKE_* settings and score file out of the tests.
    for key in list(os.environ):
        if key.startswith("SNAKE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("SNAKE_DATA_DIR", str(tmp_path))
