from __future__ import annotations

import sys
from pathlib import Path

import path_utils
from path_utils import get_base_path, get_data_dir


def test_base_path_is_source_dir() -> None:
    assert get_base_path() == Path(path_utils.__file__).resolve().parent


def test_base_path_uses_bundle_dir_when_frozen(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "_MEIPASS", str(tmp_path), raising=False)
    assert get_base_path() == tmp_path


def test_data_dir_override_is_created(tmp_path) -> None:
    target = tmp_path / "scores" / "snake"
    assert get_data_dir(target) == target
    assert target.is_dir()


def test_data_dir_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SNAKE_DATA_DIR", str(tmp_path / "env"))
    assert get_data_dir() == tmp_path / "env"


def test_data_dir_defaults_to_base_path(monkeypatch) -> None:
    monkeypatch.delenv("SNAKE_DATA_DIR", raising=False)
    assert get_data_dir() == get_base_path()
