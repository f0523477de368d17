from __future__ import annotations

from build_exe import APP_NAME, ENTRY_SCRIPT, build_command


def test_default_build_command() -> None:
    cmd = build_command()
    assert cmd[0] == "pyinstaller"
    assert f"--name={APP_NAME}" in cmd
    assert {"--onefile", "--windowed", "--clean"} <= set(cmd)
    assert cmd[-1] == ENTRY_SCRIPT == "snake_game.py"


def test_custom_entry_and_name() -> None:
    cmd = build_command("other.py", name="Worm")
    assert "--name=Worm" in cmd
    assert cmd[-1] == "other.py"
