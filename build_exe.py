"""
Build script: packs snake_game.py into a single executable with PyInstaller.
"""
import subprocess
import sys
import os
from pathlib import Path
from typing import List

APP_NAME = "Snake"
ENTRY_SCRIPT = "snake_game.py"


def build_command(entry: str = ENTRY_SCRIPT, name: str = APP_NAME) -> List[str]:
    return [
        "pyinstaller",
        f"--name={name}",
        "--onefile",  # single executable
        "--windowed",  # no console window
        "--clean",  # drop cached build data first
        entry,
    ]


def main():
    script_dir = Path(__file__).parent
    os.chdir(script_dir)

    try:
        import PyInstaller  # noqa: F401
        print("PyInstaller is already installed.")
    except ImportError:
        print("Installing PyInstaller...")
        subprocess.check_call([sys.executable, "-m", "pip", "install", "pyinstaller"])
        print("PyInstaller installed.")

    cmd = build_command()
    print("Starting build...")
    print(f"Command: {' '.join(cmd)}")

    try:
        subprocess.check_call(cmd)
        print("\nBuild finished!")
        print(f"Executable: {script_dir / 'dist' / APP_NAME}")
    except subprocess.CalledProcessError as e:
        print(f"\nBuild failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
