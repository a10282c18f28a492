"""End-to-end benchmark of the scan, coalescing and rendering pipeline."""

from __future__ import annotations

import io
import tempfile
import time
from dataclasses import asdict, dataclass
from pathlib import Path

from cleardir.core import CancellationSignals, DirectorySearchService
from cleardir.panel import PanelUpdateQueue, RenderLoop, build_default_panel
from cleardir.scanning import FileSystemDirectoryScanner

from .synthetic import build_tree, expected_directory_count


@dataclass(frozen=True, slots=True)
class ScanBenchmarkResult:
    name: str
    parameters: dict[str, float]
    metrics: dict[str, float]

    def to_dict(self) -> dict:
        return asdict(self)


def run_scan_benchmark(
    *,
    depth: int = 3,
    fanout: int = 8,
    refresh_interval: float = 0.01,
    work_dir: Path | None = None,
) -> ScanBenchmarkResult:
    with tempfile.TemporaryDirectory(dir=work_dir) as tmp:
        root = Path(tmp) / "tree"
        build_tree(root, depth=depth, fanout=fanout)

        stream = io.StringIO()
        panel = build_default_panel("benchmark", stream)
        queue = PanelUpdateQueue()
        service = DirectorySearchService(
            scanner=FileSystemDirectoryScanner(),
            panel=panel,
            queue=queue,
            render_loop=RenderLoop(queue, panel, interval=refresh_interval),
            signals=CancellationSignals(),
        )

        started = time.perf_counter()
        found = service.run(root)
        elapsed = time.perf_counter() - started

    expected = expected_directory_count(depth=depth, fanout=fanout)
    if len(found) != expected:
        raise RuntimeError(f"Scan found {len(found)} directories, expected {expected}")

    stats = queue.stats
    return ScanBenchmarkResult(
        name="directory_scan",
        parameters={"depth": depth, "fanout": fanout, "refresh_interval": refresh_interval},
        metrics={
            "directories": float(len(found)),
            "elapsed_seconds": elapsed,
            "directories_per_second": len(found) / elapsed if elapsed > 0 else 0.0,
            "staged_updates": float(stats.staged),
            "applied_updates": float(stats.applied),
            "render_batches": float(stats.batches),
            "coalescing_ratio": stats.applied / stats.staged if stats.staged else 0.0,
        },
    )
