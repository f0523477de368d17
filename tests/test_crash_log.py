from __future__ import annotations

import sys

from crash_log import ERROR_LOG_NAME, format_crash_report, install_excepthook


def _raise_and_capture(exc: BaseException):
    try:
        raise exc
    except BaseException:
        return sys.exc_info()


def test_report_contains_type_message_and_traceback() -> None:
    report = format_crash_report(*_raise_and_capture(RuntimeError("font missing")))
    assert "Error type: RuntimeError" in report
    assert "Message: font missing" in report
    assert "Traceback (most recent call last)" in report
    assert "_raise_and_capture" in report


def test_hook_writes_error_log(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    log_path = install_excepthook(tmp_path)
    assert log_path == tmp_path / ERROR_LOG_NAME

    sys.excepthook(*_raise_and_capture(ValueError("boom")))

    assert "Message: boom" in log_path.read_text(encoding="utf-8")
    err = capsys.readouterr().err
    assert "Snake crashed!" in err
    assert str(log_path) in err


def test_keyboard_interrupt_goes_to_default_hook(monkeypatch, tmp_path) -> None:
    seen = []
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: seen.append(args[0]))
    log_path = install_excepthook(tmp_path)

    sys.excepthook(*_raise_and_capture(KeyboardInterrupt()))

    assert seen == [KeyboardInterrupt]
    assert not log_path.exists()
