from __future__ import annotations

import sys
import threading


def test_install_crash_reporting_respects_disable_flag(monkeypatch, tmp_path):
    monkeypatch.setenv("CLEARDIR_ERROR_DIR", str(tmp_path))
    monkeypatch.setenv("CLEARDIR_DISABLE_CRASH_HOOKS", "1")
    original_sys_hook = sys.excepthook
    original_thread_hook = threading.excepthook

    from cleardir.shared.error_reporting import install_crash_reporting

    install_crash_reporting()

    assert sys.excepthook is original_sys_hook
    assert threading.excepthook is original_thread_hook


def test_install_crash_reporting_is_skipped_under_pytest(monkeypatch, tmp_path):
    monkeypatch.setenv("CLEARDIR_ERROR_DIR", str(tmp_path))
    monkeypatch.delenv("CLEARDIR_DISABLE_CRASH_HOOKS", raising=False)
    monkeypatch.delenv("CLEARDIR_ENABLE_CRASH_HOOKS", raising=False)
    original_sys_hook = sys.excepthook

    from cleardir.shared.error_reporting import install_crash_reporting

    install_crash_reporting()

    assert sys.excepthook is original_sys_hook
    assert list(tmp_path.iterdir()) == []
