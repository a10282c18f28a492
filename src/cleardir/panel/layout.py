"""Domyślny układ komórek panelu ClearDir."""

from __future__ import annotations

from typing import List, TextIO

from cleardir.core.models import PanelCell, PanelLabel, TextAlignment
from .status_panel import ConsoleStatusPanel

PANEL_WIDTH = 80
FOUND_COUNT_WIDTH = 5
RESULT_WIDTH = 75


def default_cells(header: str) -> List[PanelCell]:
    """Nagłówek, bieżący katalog oraz wiersz wyniku z licznikiem."""

    return [
        PanelCell(PanelLabel.HEADER, header, row=0, column=0, width=PANEL_WIDTH, alignment=TextAlignment.CENTER),
        PanelCell(PanelLabel.SCANNING, "", row=1, column=0, width=PANEL_WIDTH),
        PanelCell(PanelLabel.RESULT, "Initializing", row=2, column=0, width=RESULT_WIDTH),
        PanelCell(
            PanelLabel.FOUND_COUNT,
            "",
            row=2,
            column=RESULT_WIDTH - 1,
            width=FOUND_COUNT_WIDTH,
            alignment=TextAlignment.RIGHT,
        ),
    ]


def build_default_panel(header: str, stream: TextIO | None = None) -> ConsoleStatusPanel:
    """Tworzy i inicjalizuje panel z domyślnym układem."""

    panel = ConsoleStatusPanel(stream)
    for cell in default_cells(header):
        panel.register(cell)
    panel.initialize()
    return panel
