"""Interfejs skanera katalogów."""

from __future__ import annotations

from os import PathLike
from threading import Event
from typing import Callable, List, Protocol

from cleardir.core.models import ScanStatus


ProgressCallback = Callable[[ScanStatus], None]
CancelEvent = Event


class ScanError(RuntimeError):
    """Bazowy błąd skanowania."""


class ScanCancelled(ScanError):
    """Sygnalizuje, że skanowanie zostało anulowane."""


class DirectoryAccessError(ScanError):
    """Nie udało się odczytać katalogu; błąd krytyczny dla całego skanu."""

    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"An error occurred while accessing '{path}': {error}")
        self.path = path
        self.error = error


class DirectoryScanner(Protocol):
    """Interfejs dla komponentów wyliczających podkatalogi."""

    def scan(
        self,
        root: str | PathLike[str],
        *,
        progress: ProgressCallback | None = None,
        cancel_event: CancelEvent | None = None,
    ) -> List[str]:
        """Zwraca listę znalezionych katalogów w kolejności pre-order."""
