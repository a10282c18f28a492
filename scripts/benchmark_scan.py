"""Convenience wrapper for the benchmark module.

Prefer running:
- `cleardir-benchmark`
"""

from __future__ import annotations

from pathlib import Path

from cleardir.benchmarks.runner import run_benchmark, write_report


def main() -> int:
    report = run_benchmark()
    written = write_report(report, output_dir=Path("benchmark_reports"), formats=("json", "md"))
    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
