"""
Crash hook: uncaught exceptions are saved to error_log.txt so players of the
windowed build (no console) can send the report.
"""
from __future__ import annotations

import sys
import traceback
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

ERROR_LOG_NAME = "error_log.txt"
RULE = "=" * 60


def format_crash_report(
    exc_type: Type[BaseException],
    exc_value: BaseException,
    exc_traceback: Optional[TracebackType],
) -> str:
    lines = [
        RULE,
        "Snake crashed!",
        RULE,
        "",
        f"Error type: {exc_type.__name__}",
        f"Message: {exc_value}",
        "",
        "Traceback:",
        "-" * 60,
        "".join(traceback.format_exception(exc_type, exc_value, exc_traceback)).rstrip(),
        RULE,
    ]
    return "\n".join(lines) + "\n"


def install_excepthook(log_dir: Path) -> Path:
    """Route uncaught exceptions to a log file in log_dir. Returns the log path."""
    error_log = Path(log_dir) / ERROR_LOG_NAME

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        report = format_crash_report(exc_type, exc_value, exc_traceback)
        try:
            error_log.write_text(report, encoding="utf-8")
            saved = True
        except OSError:
            saved = False

        print(report, file=sys.stderr)
        if saved:
            print(f"Error log saved to: {error_log}", file=sys.stderr)

    sys.excepthook = handle_exception
    return error_log
