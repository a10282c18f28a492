"""Obsługa błędów krytycznych: zatrzymanie wszystkich prac i kod wyjścia."""

from __future__ import annotations

import structlog
from structlog.stdlib import BoundLogger

from cleardir.panel.status_panel import ConsoleStatusPanel
from cleardir.shared.error_reporting import write_error_report
from .cancellation import CancellationSignals


class ApplicationManager:
    """Zarządza zatrzymaniem aplikacji po błędzie krytycznym."""

    def __init__(
        self,
        signals: CancellationSignals,
        panel: ConsoleStatusPanel,
        *,
        write_error_reports: bool = False,
        logger: BoundLogger | None = None,
    ) -> None:
        self._signals = signals
        self._panel = panel
        self._write_error_reports = write_error_reports
        self._logger = logger or structlog.get_logger(__name__)
        self._halted = False

    @property
    def halted(self) -> bool:
        return self._halted

    def halt(self, message: str, error: BaseException | None = None) -> int:
        """Anuluje wszystkie prace, zamyka panel, loguje błąd i zwraca kod wyjścia 1.

        Kolejne wywołania nie mają efektów ubocznych.
        """

        if self._halted:
            return 1
        self._halted = True

        self._signals.cancel_all()
        self._panel.finalize()
        self._logger.error("scan-halted", message=message, exc_info=error)

        if self._write_error_reports and error is not None:
            try:
                report = write_error_report(error, where="halt", context={"message": message})
            except OSError as exc:
                self._logger.warning("error-report-failed", error=str(exc))
            else:
                self._logger.info("error-report-written", path=str(report.path))
        return 1
