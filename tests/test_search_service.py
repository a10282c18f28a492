"""Testy orkiestratora wyszukiwania."""

from __future__ import annotations

import io
from typing import List

import pytest

from cleardir.core import CancellationKind, CancellationSignals, DirectorySearchService
from cleardir.core.models import PanelLabel, ScanStatus
from cleardir.panel import ConsoleStatusPanel, PanelState, PanelUpdateQueue, RenderLoop
from cleardir.scanning import DirectoryAccessError, FileSystemDirectoryScanner, ScanCancelled


def _service(scanner, panel: ConsoleStatusPanel, signals: CancellationSignals) -> DirectorySearchService:
    queue = PanelUpdateQueue()
    return DirectorySearchService(
        scanner=scanner,
        panel=panel,
        queue=queue,
        render_loop=RenderLoop(queue, panel, interval=0.01),
        signals=signals,
    )


def test_run_returns_found_directories_and_reports_done(make_tree, sorted_lister, panel) -> None:
    root = make_tree("a/b", "c")
    signals = CancellationSignals()
    service = _service(FileSystemDirectoryScanner(list_directories=sorted_lister), panel, signals)

    found = service.run(root)

    assert found == [str(root / "a"), str(root / "a" / "b"), str(root / "c")]
    assert panel.state is PanelState.FINALIZED
    assert "3" in panel.text(PanelLabel.RESULT)
    assert panel.text(PanelLabel.RESULT).startswith("Done")
    assert panel.text(PanelLabel.FOUND_COUNT) == "3"
    assert signals.is_cancelled(CancellationKind.RENDER)
    assert not signals.is_cancelled(CancellationKind.SEARCH)


def test_progress_is_staged_for_the_panel(make_tree, panel) -> None:
    root = make_tree()

    class OneStepScanner:
        def scan(self, root, *, progress=None, cancel_event=None) -> List[str]:
            progress(ScanStatus(current_directory="/virtual/dir", directory_count=0))
            return []

    _service(OneStepScanner(), panel, CancellationSignals()).run(root)

    assert panel.text(PanelLabel.SCANNING) == "/virtual/dir"
    assert panel.text(PanelLabel.RESULT) == "Done. Found 0 directories."


def test_cancelled_search_reports_and_propagates(make_tree, panel) -> None:
    root = make_tree("a", "b")
    signals = CancellationSignals()
    signals.cancel(CancellationKind.SEARCH)

    with pytest.raises(ScanCancelled):
        _service(FileSystemDirectoryScanner(), panel, signals).run(root)

    assert panel.text(PanelLabel.RESULT) == "Search cancelled."
    assert panel.text(PanelLabel.FOUND_COUNT) == ""
    assert panel.state is PanelState.FINALIZED


def test_access_error_cancels_everything_and_propagates(make_tree, sorted_lister, panel) -> None:
    root = make_tree("a/b", "c")
    blocked = str(root / "a")

    def _lister(path: str) -> List[str]:
        if path == blocked:
            raise PermissionError(13, "Permission denied", path)
        return sorted_lister(path)

    signals = CancellationSignals()
    with pytest.raises(DirectoryAccessError) as excinfo:
        _service(FileSystemDirectoryScanner(list_directories=_lister), panel, signals).run(root)

    assert excinfo.value.path == blocked
    assert all(signals.is_cancelled(kind) for kind in CancellationKind)
    assert panel.state is PanelState.FINALIZED
    assert panel.text(PanelLabel.RESULT) == f"Error accessing {blocked}"


def test_unexpected_error_still_finalizes_panel_and_stops_rendering(make_tree, panel) -> None:
    root = make_tree("a")
    signals = CancellationSignals()

    class BrokenScanner:
        def scan(self, root, *, progress=None, cancel_event=None) -> List[str]:
            progress(ScanStatus(current_directory="/virtual/dir", directory_count=0))
            raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        _service(BrokenScanner(), panel, signals).run(root)

    assert panel.state is PanelState.FINALIZED
    assert signals.is_cancelled(CancellationKind.RENDER)
    assert signals.is_cancelled(CancellationKind.SEARCH)
    assert panel.text(PanelLabel.RESULT) == "Search failed."
    assert panel.text(PanelLabel.SCANNING) == "/virtual/dir"


def test_panel_is_finalized_even_if_final_flush_fails(make_tree) -> None:
    root = make_tree()

    class FailingPanel(ConsoleStatusPanel):
        def apply_batch(self, updates) -> None:
            raise OSError("terminal closed")

    failing = FailingPanel(io.StringIO())
    signals = CancellationSignals()

    class EmptyScanner:
        def scan(self, root, *, progress=None, cancel_event=None) -> List[str]:
            return []

    queue = PanelUpdateQueue()
    service = DirectorySearchService(
        scanner=EmptyScanner(),
        panel=failing,
        queue=queue,
        render_loop=RenderLoop(queue, failing, interval=60.0),
        signals=signals,
    )

    with pytest.raises(OSError):
        service.run(root)

    assert failing.state is PanelState.FINALIZED
