"""Rekurencyjne wyliczanie podkatalogów lokalnego systemu plików."""

from __future__ import annotations

import errno
import os
from os import PathLike
from threading import Event
from typing import Callable, Iterator, List, Tuple

from structlog import get_logger

from cleardir.core.models import ScanStatus
from .scanner import (
    DirectoryAccessError,
    DirectoryScanner,
    ProgressCallback,
    ScanCancelled,
)


DirectoryLister = Callable[[str], List[str]]


def list_subdirectories(path: str) -> List[str]:
    """Zwraca bezpośrednie podkatalogi `path` w kolejności systemu plików.

    Dowiązania symboliczne do katalogów są pomijane.
    """

    with os.scandir(path) as entries:
        return [entry.path for entry in entries if entry.is_dir(follow_symlinks=False)]


class _ProgressTracker:
    """Liczy znalezione katalogi i przekazuje migawki do callbacku."""

    def __init__(self, callback: ProgressCallback | None) -> None:
        self._callback = callback
        self.count = 0

    def found(self) -> None:
        self.count += 1

    def announce(self, path: str) -> None:
        if self._callback is not None:
            self._callback(ScanStatus(current_directory=path, directory_count=self.count))


class FileSystemDirectoryScanner(DirectoryScanner):
    """Skaner przechodzący drzewo katalogów w głąb (pre-order).

    Przejście używa jawnego stosu iteratorów zamiast rekurencji, więc głębokość
    drzewa nie jest ograniczona limitem rekurencji interpretera.
    """

    def __init__(
        self,
        *,
        max_depth: int | None = None,
        list_directories: DirectoryLister = list_subdirectories,
    ) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth nie może być ujemne")
        self._max_depth = max_depth
        self._list_directories = list_directories
        self._logger = get_logger(__name__)

    def scan(
        self,
        root: str | PathLike[str],
        *,
        progress: ProgressCallback | None = None,
        cancel_event: Event | None = None,
    ) -> List[str]:
        root_path = os.path.abspath(os.fspath(root))
        if not os.path.isdir(root_path):
            raise DirectoryAccessError(
                root_path,
                FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), root_path),
            )

        self._logger.debug("scan-started", root=root_path, max_depth=self._max_depth)
        found: List[str] = []
        tracker = _ProgressTracker(progress)
        stack: List[Tuple[int, Iterator[str]]] = []

        stack.append(self._enter(root_path, 0, tracker, cancel_event))
        while stack:
            depth, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                continue

            self._check_cancel(cancel_event)
            found.append(child)
            tracker.found()
            tracker.announce(child)
            stack.append(self._enter(child, depth + 1, tracker, cancel_event))

        self._logger.debug("scan-finished", root=root_path, directories=len(found))
        return found

    def _enter(
        self,
        path: str,
        depth: int,
        tracker: _ProgressTracker,
        cancel_event: Event | None,
    ) -> Tuple[int, Iterator[str]]:
        self._check_cancel(cancel_event)
        tracker.announce(path)

        if self._max_depth is not None and depth >= self._max_depth:
            return depth, iter(())

        try:
            children = self._list_directories(path)
        except OSError as exc:
            self._logger.debug("directory-list-failed", path=path, error=str(exc))
            raise DirectoryAccessError(path, exc) from exc
        return depth, iter(children)

    @staticmethod
    def _check_cancel(cancel_event: Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise ScanCancelled()


__all__ = ["FileSystemDirectoryScanner", "list_subdirectories"]
