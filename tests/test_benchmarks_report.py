"""Tests for benchmark report generation."""

from __future__ import annotations

import json
from unittest.mock import patch

from cleardir.benchmarks.cli import main
from cleardir.benchmarks.runner import run_benchmark, write_report


def test_benchmark_report_writes_json_and_markdown(tmp_path) -> None:
    report = run_benchmark(depth=2, fanout=3, refresh_interval=0.005, work_dir=tmp_path)
    written = write_report(report, output_dir=tmp_path / "out", stem="report", formats=("json", "md"))

    paths = {p.name: p for p in written}
    assert set(paths) == {"report.json", "report.md"}

    payload = json.loads(paths["report.json"].read_text(encoding="utf-8"))
    assert "created_at" in payload
    assert payload["name"] == "directory_scan"
    assert payload["parameters"]["fanout"] == 3
    assert payload["metrics"]["directories"] == 12.0
    assert 0 < payload["metrics"]["coalescing_ratio"] <= 1

    md = paths["report.md"].read_text(encoding="utf-8")
    assert md.startswith("# directory_scan")
    assert "## Parameters" in md
    assert "## Metrics" in md
    assert "| directories | 12.0000 |" in md


def test_benchmark_cli_reports_failure_with_exit_code(tmp_path) -> None:
    out_dir = tmp_path / "out"

    with patch("cleardir.benchmarks.cli.configure_logging"), patch(
        "cleardir.benchmarks.runner.run_scan_benchmark",
        side_effect=RuntimeError("Scan found 0 directories, expected 12"),
    ):
        code = main(["--output-dir", str(out_dir), "--work-dir", str(tmp_path)])

    assert code == 1
    assert not out_dir.exists()


def test_benchmark_cli_writes_requested_formats(tmp_path, capsys) -> None:
    out_dir = tmp_path / "out"

    with patch("cleardir.benchmarks.cli.configure_logging"):
        code = main(
            [
                "--output-dir", str(out_dir),
                "--work-dir", str(tmp_path),
                "--depth", "1",
                "--fanout", "2",
                "--format", "json",
            ]
        )

    assert code == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["benchmark_report.json"]
    assert str(out_dir / "benchmark_report.json") in capsys.readouterr().out
