"""Benchmark utilities and runners.

This package provides:
- deterministic synthetic directory trees,
- an end-to-end scan benchmark,
- report generation (JSON/Markdown).
"""

from .runner import BenchmarkReport, run_benchmark

__all__ = ["BenchmarkReport", "run_benchmark"]
