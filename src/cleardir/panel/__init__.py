"""Panel statusu w terminalu i potok jego aktualizacji."""

from .layout import build_default_panel, default_cells
from .render_loop import RenderLoop
from .status_panel import ConsoleStatusPanel, PanelState, format_cell, printable_text
from .update_queue import PanelUpdateQueue, QueueStats

__all__ = [
    "ConsoleStatusPanel",
    "PanelState",
    "PanelUpdateQueue",
    "QueueStats",
    "RenderLoop",
    "build_default_panel",
    "default_cells",
    "format_cell",
    "printable_text",
]
