"""Wspólne fikstury testów: drzewa katalogów i panel piszący do bufora."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, List

import pytest

from cleardir.panel import ConsoleStatusPanel, build_default_panel
from cleardir.scanning import list_subdirectories


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Tworzy katalogi podane jako ścieżki względne w `tmp_path / "root"`."""

    def _make(*relative: str) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for rel in relative:
            (root / rel).mkdir(parents=True, exist_ok=True)
        return root

    return _make


@pytest.fixture
def sorted_lister() -> Callable[[str], List[str]]:
    """Lister o deterministycznej kolejności, niezależnej od systemu plików."""

    return lambda path: sorted(list_subdirectories(path))


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def panel(stream: io.StringIO) -> ConsoleStatusPanel:
    return build_default_panel("ClearDir test", stream)
