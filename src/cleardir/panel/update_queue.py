"""Kolejka aktualizacji panelu zachowująca tylko najnowszy tekst komórki."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Dict, Protocol

from cleardir.core.models import PanelLabel


class BatchTarget(Protocol):
    """Odbiorca paczek aktualizacji (w praktyce `ConsoleStatusPanel`)."""

    def apply_batch(self, updates: Dict[PanelLabel, str]) -> None:
        """Stosuje wszystkie aktualizacje naraz."""


@dataclass(frozen=True, slots=True)
class QueueStats:
    """Liczniki pozwalające ocenić stopień koalescencji."""

    staged: int
    applied: int
    batches: int


class PanelUpdateQueue:
    """Bezpieczne wątkowo odwzorowanie etykieta -> najnowszy oczekujący tekst.

    Kolejne `stage` dla tej samej etykiety nadpisują poprzednią wartość.
    `flush` atomowo zabiera i czyści mapę, a panel aktualizuje już poza blokadą,
    więc renderowanie nigdy nie blokuje producentów.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._updates: Dict[PanelLabel, str] = {}
        self._staged = 0
        self._applied = 0
        self._batches = 0

    def stage(self, label: PanelLabel, text: str) -> None:
        with self._lock:
            self._updates[label] = text
            self._staged += 1

    def drain(self) -> Dict[PanelLabel, str]:
        """Zwraca oczekujące aktualizacje i czyści kolejkę."""

        with self._lock:
            updates = self._updates
            self._updates = {}
        return updates

    def flush(self, panel: BatchTarget) -> int:
        """Stosuje oczekujące aktualizacje jako jedną paczkę.

        Zwraca liczbę zastosowanych etykiet; pusta kolejka nie renderuje panelu.
        """

        updates = self.drain()
        if not updates:
            return 0
        panel.apply_batch(updates)
        with self._lock:
            self._applied += len(updates)
            self._batches += 1
        return len(updates)

    @property
    def stats(self) -> QueueStats:
        with self._lock:
            return QueueStats(staged=self._staged, applied=self._applied, batches=self._batches)


__all__ = ["BatchTarget", "PanelUpdateQueue", "QueueStats"]
