"""Modele danych współdzielone przez skaner, panel i orkiestrator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PanelLabel(str, Enum):
    """Zamknięty zbiór komórek panelu statusu."""

    HEADER = "header"
    SCANNING = "scanning"
    FOUND_COUNT = "found_count"
    RESULT = "result"


class TextAlignment(str, Enum):
    """Wyrównanie tekstu w komórce o stałej szerokości."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class ScanStatus:
    """Migawka postępu skanowania."""

    current_directory: str
    directory_count: int


@dataclass(slots=True)
class PanelCell:
    """Komórka panelu: stała geometria, zmienny tylko tekst."""

    label: PanelLabel
    text: str
    row: int
    column: int
    width: int
    alignment: TextAlignment = TextAlignment.LEFT

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Szerokość komórki {self.label.value} musi być dodatnia")
