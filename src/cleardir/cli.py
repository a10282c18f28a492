"""Interfejs wiersza poleceń do wyszukiwania katalogów."""

from __future__ import annotations

import logging
import signal
import sys
import threading
from argparse import ArgumentParser, Namespace
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence, TextIO

import structlog

from cleardir.core import ApplicationManager, CancellationSignals, DirectorySearchService
from cleardir.core.models import PanelLabel
from cleardir.panel import ConsoleStatusPanel, PanelUpdateQueue, RenderLoop, build_default_panel, printable_text
from cleardir.scanning import DirectoryAccessError, FileSystemDirectoryScanner, ScanCancelled
from cleardir.shared import AppConfig, ConfigError, configure_logging, install_crash_reporting, load_config

USAGE_MESSAGE = "Usage: cleardir [start-directory]"


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="cleardir",
        description="Rekurencyjnie wyszukuje podkatalogi, pokazując postęp w terminalu.",
    )
    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        help="Katalog startowy wyszukiwania",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maksymalna głębokość skanowania katalogów (domyślnie: bez limitu)",
    )
    parser.add_argument(
        "--refresh-ms",
        type=int,
        help="Interwał odświeżania panelu w milisekundach (domyślnie: 100)",
    )
    parser.add_argument(
        "--print",
        dest="print_results",
        action="store_true",
        help="Wypisuje znalezione katalogi pod panelem po zakończeniu",
    )
    parser.add_argument(
        "--error-report",
        action="store_true",
        help="Zapisuje raport błędu przy błędzie krytycznym",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Wyświetla szczegółowe logi",
    )
    return parser


def _resolve_config(args: Namespace) -> AppConfig:
    config = load_config()
    return config.with_overrides(
        max_depth=args.max_depth,
        refresh_interval=args.refresh_ms / 1000 if args.refresh_ms is not None else None,
        write_error_reports=True if args.error_report else None,
    )


@contextmanager
def _interrupt_cancels(signals: CancellationSignals, interrupted: threading.Event) -> Iterator[None]:
    """Na czas wyszukiwania SIGINT anuluje wszystkie prace zamiast przerywać wątek."""

    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(_signum, _frame) -> None:  # type: ignore[no-untyped-def]
        interrupted.set()
        signals.cancel_all()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def _report_on_panel(panel: ConsoleStatusPanel, message: str) -> None:
    panel.set_text(PanelLabel.RESULT, message)
    panel.finalize()


def _run_search(args: Namespace, *, stream: TextIO | None = None) -> int:
    logger = structlog.get_logger(__name__)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        logger.error("invalid-configuration", error=str(exc))
        return 1

    panel = build_default_panel(config.header, stream)

    if args.root is None:
        _report_on_panel(panel, USAGE_MESSAGE)
        logger.error("root-not-provided")
        return 1

    root: Path = args.root
    if not root.is_dir():
        _report_on_panel(panel, f"The provided directory does not exist: {root}")
        logger.error("root-not-found", path=str(root))
        return 1

    if config.write_error_reports:
        install_crash_reporting()

    signals = CancellationSignals()
    queue = PanelUpdateQueue()
    app_manager = ApplicationManager(signals, panel, write_error_reports=config.write_error_reports)
    service = DirectorySearchService(
        scanner=FileSystemDirectoryScanner(max_depth=config.max_depth),
        panel=panel,
        queue=queue,
        render_loop=RenderLoop(queue, panel, interval=config.refresh_interval),
        signals=signals,
    )

    interrupted = threading.Event()
    try:
        with _interrupt_cancels(signals, interrupted):
            found = service.run(root)
    except ScanCancelled:
        if interrupted.is_set():
            logger.info("search-interrupted", root=str(root))
            return 0
        logger.error("search-cancelled", root=str(root))
        return 1
    except DirectoryAccessError as exc:
        return app_manager.halt(f"An error occurred while accessing '{exc.path}'.", exc)
    except Exception as exc:
        return app_manager.halt("Search failed unexpectedly.", exc)

    if args.print_results:
        out = stream if stream is not None else sys.stdout
        encoding = getattr(out, "encoding", None)
        for path in found:
            out.write(printable_text(path, encoding) + "\n")
        out.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    return _run_search(args)


if __name__ == "__main__":
    sys.exit(main())
