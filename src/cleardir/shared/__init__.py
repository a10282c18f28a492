"""Moduły współdzielone: konfiguracja, logowanie, raporty błędów."""

from .config import AppConfig, ConfigError, load_config
from .error_reporting import ErrorReport, get_error_reports_dir, install_crash_reporting, write_error_report
from .logging import configure_logging

__all__ = [
	"AppConfig",
	"ConfigError",
	"configure_logging",
	"ErrorReport",
	"get_error_reports_dir",
	"install_crash_reporting",
	"load_config",
	"write_error_report",
]
