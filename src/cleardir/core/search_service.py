"""Orkiestracja wyszukiwania katalogów z postępem na panelu statusu."""

from __future__ import annotations

import threading
from os import PathLike
from typing import List

import structlog

from cleardir.core.models import PanelLabel, ScanStatus
from cleardir.panel.render_loop import RenderLoop
from cleardir.panel.status_panel import ConsoleStatusPanel
from cleardir.panel.update_queue import PanelUpdateQueue
from cleardir.scanning.scanner import DirectoryAccessError, DirectoryScanner, ScanCancelled
from .cancellation import CancellationKind, CancellationSignals

_RENDER_JOIN_TIMEOUT = 5.0


class DirectorySearchService:
    """Uruchamia pętlę renderowania, skaner i końcowe opróżnienie kolejki.

    Skaner działa synchronicznie w wątku wywołującym, pętla renderowania w
    wątku tła. Niezależnie od wyniku panel jest na końcu zamykany.
    """

    def __init__(
        self,
        *,
        scanner: DirectoryScanner,
        panel: ConsoleStatusPanel,
        queue: PanelUpdateQueue,
        render_loop: RenderLoop,
        signals: CancellationSignals,
    ) -> None:
        self._scanner = scanner
        self._panel = panel
        self._queue = queue
        self._render_loop = render_loop
        self._signals = signals
        self._logger = structlog.get_logger(__name__)

    def run(self, root: str | PathLike[str]) -> List[str]:
        """Skanuje `root` i zwraca listę znalezionych katalogów.

        `ScanCancelled`, `DirectoryAccessError` i każdy inny wyjątek są
        przekazywane dalej po pokazaniu statusu i zamknięciu panelu; częściowe
        wyniki są wtedy porzucane.
        """

        render_thread = self._render_loop.start(self._signals[CancellationKind.RENDER])
        self._logger.info("search-started", root=str(root))

        try:
            found = self._scanner.scan(
                root,
                progress=self._on_progress,
                cancel_event=self._signals[CancellationKind.SEARCH],
            )
        except ScanCancelled:
            self._logger.info("search-cancelled", root=str(root))
            self._queue.stage(PanelLabel.RESULT, "Search cancelled.")
            self._finish(render_thread)
            raise
        except DirectoryAccessError as exc:
            self._signals.cancel_all()
            self._queue.stage(PanelLabel.RESULT, f"Error accessing {exc.path}")
            self._finish(render_thread)
            raise
        except BaseException:
            self._logger.warning("search-failed", root=str(root))
            self._signals.cancel_all()
            self._queue.stage(PanelLabel.RESULT, "Search failed.")
            self._finish(render_thread)
            raise

        self._queue.stage(PanelLabel.FOUND_COUNT, str(len(found)))
        self._queue.stage(PanelLabel.RESULT, f"Done. Found {len(found)} directories.")
        self._finish(render_thread)
        self._logger.info("search-finished", root=str(root), directories=len(found))
        return found

    def _on_progress(self, status: ScanStatus) -> None:
        self._queue.stage(PanelLabel.SCANNING, status.current_directory)
        self._queue.stage(PanelLabel.FOUND_COUNT, str(status.directory_count))
        self._queue.stage(PanelLabel.RESULT, "Searching")

    def _finish(self, render_thread: threading.Thread) -> None:
        self._signals.cancel(CancellationKind.RENDER)
        render_thread.join(_RENDER_JOIN_TIMEOUT)
        if render_thread.is_alive():
            self._logger.warning("render-loop-still-running")
        try:
            self._queue.flush(self._panel)
        finally:
            self._panel.finalize()
