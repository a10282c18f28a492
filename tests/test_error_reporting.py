from __future__ import annotations

import os
from pathlib import Path

import pytest


def test_write_error_report_creates_file(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("CLEARDIR_ERROR_DIR", str(tmp_path))

    from cleardir.shared.error_reporting import write_error_report

    try:
        raise ValueError("boom")
    except ValueError as exc:
        report = write_error_report(exc, where="test", context={"root": "/data"})

    assert report.path.exists()
    assert report.path.parent == tmp_path
    text = report.path.read_text(encoding="utf-8", errors="replace")

    assert "boom" in text
    assert "ValueError" in text
    assert "/data" in text
    assert "Traceback" in text


def test_error_reports_dir_defaults_to_home(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("CLEARDIR_ERROR_DIR", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    if os.name == "nt":
        pytest.skip("POSIX default location")

    from cleardir.shared.error_reporting import get_error_reports_dir

    assert get_error_reports_dir() == tmp_path / ".cleardir" / "error_reports"
