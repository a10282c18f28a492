"""Sygnały anulowania, po jednym na niezależny obszar pracy."""

from __future__ import annotations

from enum import Enum
from threading import Event


class CancellationKind(str, Enum):
    """Obszary, które można zatrzymać niezależnie."""

    SEARCH = "search"
    RENDER = "render"


class CancellationSignals:
    """Zestaw jednorazowych flag `threading.Event` indeksowanych rodzajem.

    Ustawienie flagi jest idempotentne i widoczne dla dowolnej liczby
    czytelników; flag nigdy się nie resetuje.
    """

    def __init__(self) -> None:
        self._events = {kind: Event() for kind in CancellationKind}

    def __getitem__(self, kind: CancellationKind) -> Event:
        return self._events[kind]

    def cancel(self, kind: CancellationKind) -> None:
        self._events[kind].set()

    def cancel_all(self) -> None:
        """Zatrzymuje wszystkie obszary naraz."""

        for event in self._events.values():
            event.set()

    def is_cancelled(self, kind: CancellationKind) -> bool:
        return self._events[kind].is_set()
