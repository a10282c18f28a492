"""Panel statusu w terminalu: stałe komórki nadpisywane w miejscu.

Komórki są rejestrowane przed pierwszym renderowaniem i od tej pory zmienia się
wyłącznie ich tekst. Każde renderowanie przesuwa kursor na pierwszą linię panelu
i nadpisuje wszystkie wiersze, więc panel zajmuje stałą liczbę linii.
"""

from __future__ import annotations

import sys
from enum import Enum
from itertools import groupby
from threading import Lock
from typing import Dict, List, Mapping, TextIO

from cleardir.core.models import PanelCell, PanelLabel, TextAlignment


class PanelState(str, Enum):
    """Etapy cyklu życia panelu."""

    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    INITIALIZED = "initialized"
    FINALIZED = "finalized"


def printable_text(text: str, encoding: str | None = None) -> str:
    """Zamienia znaki niemożliwe do wypisania na znak zastępczy.

    Nazwy plików spoza UTF-8 docierają z `os.scandir` jako surogaty
    (`surrogateescape`); są dekodowane z powrotem do bajtów i zastępowane
    U+FFFD. Z podanym `encoding` tekst jest dodatkowo zawężany do znaków,
    które ten strumień potrafi zakodować.
    """

    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    text = raw.decode("utf-8", "replace")
    if encoding:
        text = text.encode(encoding, "replace").decode(encoding)
    return text


def format_cell(text: str, width: int, alignment: TextAlignment) -> str:
    """Dopasowuje tekst do stałej szerokości.

    Dłuższy tekst jest obcinany, krótszy uzupełniany spacjami zgodnie z
    wyrównaniem; przy centrowaniu nieparzysta spacja trafia na prawo.
    """

    if width <= 0:
        raise ValueError("Szerokość komórki musi być dodatnia")

    text = printable_text(text).replace("\r", " ").replace("\n", " ")[:width]
    padding = width - len(text)
    if alignment is TextAlignment.RIGHT:
        return " " * padding + text
    if alignment is TextAlignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding


class ConsoleStatusPanel:
    """Renderuje zarejestrowane komórki jako wiersze zwykłego tekstu."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._cells: Dict[PanelLabel, PanelCell] = {}
        self._lock = Lock()
        self._state = PanelState.UNREGISTERED
        self._rendered_lines = 0

    @property
    def state(self) -> PanelState:
        return self._state

    def register(self, cell: PanelCell) -> None:
        """Dodaje komórkę; możliwe tylko przed inicjalizacją."""

        with self._lock:
            if self._state not in (PanelState.UNREGISTERED, PanelState.REGISTERED):
                raise RuntimeError("Nie można dodawać komórek do zainicjalizowanego panelu")
            self._cells[cell.label] = cell
            self._state = PanelState.REGISTERED

    def initialize(self) -> None:
        """Rezerwuje miejsce w terminalu i wykonuje pierwsze renderowanie."""

        with self._lock:
            if self._state is not PanelState.REGISTERED:
                raise RuntimeError(f"Nie można zainicjalizować panelu w stanie {self._state.value}")
            self._render()
            self._state = PanelState.INITIALIZED

    def apply_batch(self, updates: Mapping[PanelLabel, str]) -> None:
        """Ustawia tekst pasujących komórek i renderuje panel jeden raz.

        Po finalizacji wywołanie niczego nie zmienia.
        """

        with self._lock:
            if self._state is PanelState.FINALIZED:
                return
            if self._state is not PanelState.INITIALIZED:
                raise RuntimeError("Panel nie został zainicjalizowany")

            for label, text in updates.items():
                cell = self._cells.get(label)
                if cell is not None:
                    cell.text = text
            self._render()

    def set_text(self, label: PanelLabel, text: str) -> None:
        self.apply_batch({label: text})

    def finalize(self) -> None:
        """Blokuje dalsze zmiany i zostawia kursor tuż pod panelem."""

        with self._lock:
            if self._state is PanelState.FINALIZED:
                return
            self._state = PanelState.FINALIZED
            # Każde renderowanie kończy się pod ostatnią linią panelu.
            self._stream.flush()

    def text(self, label: PanelLabel) -> str:
        with self._lock:
            return self._cells[label].text

    def lines(self) -> List[str]:
        with self._lock:
            return self._build_lines()

    # ------------------------------------------------------------------
    # Renderowanie
    # ------------------------------------------------------------------

    def _build_lines(self) -> List[str]:
        cells = sorted(self._cells.values(), key=lambda cell: (cell.row, cell.column))
        lines: List[str] = []
        for _row, row_cells in groupby(cells, key=lambda cell: cell.row):
            lines.append(" ".join(format_cell(cell.text, cell.width, cell.alignment) for cell in row_cells))
        return lines

    def _render(self) -> None:
        encoding = getattr(self._stream, "encoding", None)
        lines = [printable_text(line, encoding) for line in self._build_lines()]
        if self._rendered_lines:
            self._stream.write(f"\r\x1b[{self._rendered_lines}A")
        for line in lines:
            self._stream.write(line + "\n")
        self._stream.flush()
        self._rendered_lines = len(lines)


__all__ = ["ConsoleStatusPanel", "PanelState", "format_cell", "printable_text"]
