"""CLI entrypoint for running benchmarks and writing a report."""

from __future__ import annotations

from argparse import ArgumentParser
from pathlib import Path
from typing import Sequence

import structlog

from cleardir.shared import configure_logging

from .runner import run_benchmark, write_report


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="cleardir-benchmark",
        description="Run ClearDir scan benchmarks and generate a report.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("benchmark_reports"),
        help="Directory for generated reports (default: benchmark_reports)",
    )
    parser.add_argument(
        "--stem",
        type=str,
        default="benchmark_report",
        help="Output filename stem (default: benchmark_report)",
    )
    parser.add_argument(
        "--format",
        action="append",
        dest="formats",
        choices=["json", "md"],
        help="Report format (can be provided multiple times). Default: json+md",
    )
    parser.add_argument("--depth", type=int, default=3, help="Synthetic tree depth (default: 3)")
    parser.add_argument("--fanout", type=int, default=8, help="Subdirectories per directory (default: 8)")
    parser.add_argument(
        "--refresh-ms",
        type=int,
        default=10,
        help="Render loop interval in milliseconds (default: 10)",
    )
    parser.add_argument(
        "--work-dir",
        type=Path,
        help="Where to create the temporary tree (default: system temp dir)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    formats = tuple(args.formats) if args.formats else ("json", "md")

    try:
        report = run_benchmark(
            depth=args.depth,
            fanout=args.fanout,
            refresh_interval=args.refresh_ms / 1000,
            work_dir=args.work_dir,
        )
    except RuntimeError as exc:
        structlog.get_logger(__name__).error("benchmark-failed", error=str(exc))
        return 1
    written = write_report(report, output_dir=args.output_dir, stem=args.stem, formats=formats)

    for path in written:
        print(path)

    return 0
