"""Okresowe przenoszenie oczekujących aktualizacji na panel."""

from __future__ import annotations

import threading
from threading import Event

import structlog

from .update_queue import BatchTarget, PanelUpdateQueue


class RenderLoop:
    """Wątek tła wywołujący `PanelUpdateQueue.flush` co zadany interwał.

    Nieoczekiwany błąd w pojedynczej iteracji jest logowany i kończy pętlę;
    końcowe opróżnienie kolejki należy do wywołującego.
    """

    def __init__(self, queue: PanelUpdateQueue, panel: BatchTarget, *, interval: float) -> None:
        if interval <= 0:
            raise ValueError("Interwał odświeżania musi być dodatni")
        self._queue = queue
        self._panel = panel
        self._interval = interval
        self._logger = structlog.get_logger(__name__)
        self.failed = False

    @property
    def interval(self) -> float:
        return self._interval

    def run(self, cancel_event: Event) -> None:
        while not cancel_event.is_set():
            try:
                self._queue.flush(self._panel)
            except Exception as exc:
                self.failed = True
                self._logger.exception("render-loop-failed", error=str(exc))
                return
            if cancel_event.wait(self._interval):
                break
        self._logger.debug("render-loop-stopped")

    def start(self, cancel_event: Event) -> threading.Thread:
        """Uruchamia pętlę w wątku demona i zwraca ten wątek."""

        thread = threading.Thread(
            target=self.run,
            args=(cancel_event,),
            name="cleardir-render-loop",
            daemon=True,
        )
        thread.start()
        return thread


__all__ = ["RenderLoop"]
