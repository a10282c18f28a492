"""Uruchomienie benchmarku skanowania i zapis raportu (JSON / Markdown)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .scanning import ScanBenchmarkResult, run_scan_benchmark


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    created_at: str
    result: ScanBenchmarkResult

    def to_json(self) -> str:
        return json.dumps({"created_at": self.created_at, **self.result.to_dict()}, indent=2)

    def to_markdown(self) -> str:
        lines = [f"# {self.result.name}", "", f"Generated: {self.created_at}", ""]
        for title, values in (("Parameters", self.result.parameters), ("Metrics", self.result.metrics)):
            lines += [f"## {title}", "", "| Name | Value |", "|---|---|"]
            lines += [f"| {key} | {_format_value(values[key])} |" for key in sorted(values)]
            lines.append("")
        return "\n".join(lines)


def _format_value(value: float) -> str:
    return f"{value:.4f}" if isinstance(value, float) else str(value)


def run_benchmark(
    *,
    depth: int = 3,
    fanout: int = 8,
    refresh_interval: float = 0.01,
    work_dir: Path | None = None,
) -> BenchmarkReport:
    """Mierzy skanowanie syntetycznego drzewa; błąd pomiaru jest przekazywany dalej."""

    result = run_scan_benchmark(
        depth=depth,
        fanout=fanout,
        refresh_interval=refresh_interval,
        work_dir=work_dir,
    )
    return BenchmarkReport(created_at=datetime.now(timezone.utc).isoformat(), result=result)


_RENDERERS = {"json": BenchmarkReport.to_json, "md": BenchmarkReport.to_markdown}


def write_report(
    report: BenchmarkReport,
    *,
    output_dir: Path,
    stem: str = "benchmark_report",
    formats: tuple[str, ...] = ("json", "md"),
) -> list[Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for fmt in formats:
        path = output_dir / f"{stem}.{fmt}"
        path.write_text(_RENDERERS[fmt](report), encoding="utf-8")
        written.append(path)
    return written
