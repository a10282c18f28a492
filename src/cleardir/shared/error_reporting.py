from __future__ import annotations

import faulthandler
import json
import os
import platform
import sys
import threading
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO
from uuid import uuid4

from cleardir import __version__


@dataclass(frozen=True, slots=True)
class ErrorReport:
    path: Path
    created_at: datetime


_ORIGINAL_SYS_EXCEPTHOOK = None
_FAULTHANDLER_FILE: TextIO | None = None


def _flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def get_error_reports_dir() -> Path:
    """Returns a writable directory for error reports.

    Priority:
    1) `CLEARDIR_ERROR_DIR` env var
    2) Windows: `%LOCALAPPDATA%/ClearDir/error_reports`
    3) Other OS: `~/.cleardir/error_reports`
    """

    override = (os.getenv("CLEARDIR_ERROR_DIR") or "").strip()
    if override:
        base = Path(override)
    elif os.name == "nt":
        root = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA") or str(Path.home())
        base = Path(root) / "ClearDir" / "error_reports"
    else:
        base = Path.home() / ".cleardir" / "error_reports"

    base.mkdir(parents=True, exist_ok=True)
    return base


def write_error_report(
    error: BaseException,
    *,
    where: str,
    context: dict[str, Any] | None = None,
) -> ErrorReport:
    """Writes a timestamped error report and returns its path."""

    reports_dir = get_error_reports_dir()
    created_at = datetime.now(timezone.utc)
    stamp = created_at.strftime("%Y%m%d_%H%M%S")
    path = reports_dir / f"error_{stamp}_{uuid4().hex[:8]}.txt"

    header = {
        "created_at": created_at.isoformat(),
        "where": where,
        "app_version": __version__,
        "python": sys.version.replace("\n", " "),
        "platform": platform.platform(),
        "cwd": str(Path.cwd()),
        "context": context or {},
        "error_type": type(error).__name__,
        "error_message": str(error),
    }

    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))

    content = (
        "ClearDir Error Report\n"
        "=====================\n\n"
        + json.dumps(header, ensure_ascii=False, indent=2, default=str)
        + "\n\nTraceback\n---------\n"
        + tb
    )

    path.write_text(content, encoding="utf-8", errors="replace")
    return ErrorReport(path=path, created_at=created_at)


def install_crash_reporting(*, enable_faulthandler: bool = True) -> None:
    """Installs best-effort crash reporting.

    Covers unhandled exceptions in the main thread (`sys.excepthook`), in the
    render thread and other background threads (`threading.excepthook`), and
    native crashes via `faulthandler`.

    Never raises. Disabled with `CLEARDIR_DISABLE_CRASH_HOOKS=1`, and under
    pytest unless `CLEARDIR_ENABLE_CRASH_HOOKS=1`.
    """

    if _flag("CLEARDIR_DISABLE_CRASH_HOOKS"):
        return
    if os.getenv("PYTEST_CURRENT_TEST") and not _flag("CLEARDIR_ENABLE_CRASH_HOOKS"):
        return

    global _ORIGINAL_SYS_EXCEPTHOOK, _FAULTHANDLER_FILE
    if _ORIGINAL_SYS_EXCEPTHOOK is None:
        _ORIGINAL_SYS_EXCEPTHOOK = sys.excepthook

    def _sys_excepthook(exc_type, exc, tb):  # type: ignore[no-untyped-def]
        try:
            write_error_report(exc, where="sys.excepthook", context={"exc_type": exc_type.__name__})
        except Exception:
            pass
        if _ORIGINAL_SYS_EXCEPTHOOK is not None:
            _ORIGINAL_SYS_EXCEPTHOOK(exc_type, exc, tb)

    sys.excepthook = _sys_excepthook

    original_threading_hook = threading.excepthook

    def _threading_excepthook(args):  # type: ignore[no-untyped-def]
        try:
            write_error_report(
                args.exc_value if args.exc_value is not None else RuntimeError(str(args.exc_type)),
                where="threading.excepthook",
                context={"thread": getattr(args.thread, "name", None), "exc_type": args.exc_type.__name__},
            )
        except Exception:
            pass
        original_threading_hook(args)

    threading.excepthook = _threading_excepthook

    if enable_faulthandler and _FAULTHANDLER_FILE is None:
        try:
            stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            path = get_error_reports_dir() / f"fatal_{stamp}_{uuid4().hex[:8]}.log"
            _FAULTHANDLER_FILE = open(path, "w", encoding="utf-8", errors="replace")
            faulthandler.enable(file=_FAULTHANDLER_FILE, all_threads=True)
        except OSError:
            pass
