"""Konfiguracja aplikacji."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from cleardir import __version__

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Nieprawidłowa wartość konfiguracji."""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Konfiguracja ogólna aplikacji."""

    refresh_interval: float = 0.1
    max_depth: int | None = None
    header: str = f"ClearDir v{__version__}"
    write_error_reports: bool = False

    def __post_init__(self) -> None:
        if self.refresh_interval <= 0:
            raise ConfigError("refresh_interval musi być dodatni")
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigError("max_depth nie może być ujemne")

    @classmethod
    def default(cls) -> "AppConfig":
        """Tworzy domyślną konfigurację."""

        return cls()

    def with_overrides(self, **changes: object) -> "AppConfig":
        """Zwraca kopię z podmienionymi polami; wartości `None` są pomijane."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def _parse_int(env: Mapping[str, str], key: str, *, minimum: int) -> int | None:
    raw = (env.get(key) or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} musi być liczbą całkowitą, otrzymano {raw!r}") from exc
    if value < minimum:
        raise ConfigError(f"{key} musi być >= {minimum}, otrzymano {value}")
    return value


def load_config(env: Mapping[str, str] | None = None) -> AppConfig:
    """Wczytuje konfigurację ze zmiennych środowiskowych.

    Obsługiwane zmienne:
    - `CLEARDIR_REFRESH_MS`: interwał odświeżania panelu w milisekundach (> 0),
    - `CLEARDIR_MAX_DEPTH`: maksymalna głębokość skanowania (>= 0),
    - `CLEARDIR_ERROR_REPORTS`: `1/true/yes/on` włącza zapis raportów błędów.
    """

    env = os.environ if env is None else env

    refresh_ms = _parse_int(env, "CLEARDIR_REFRESH_MS", minimum=1)
    max_depth = _parse_int(env, "CLEARDIR_MAX_DEPTH", minimum=0)
    error_reports = (env.get("CLEARDIR_ERROR_REPORTS") or "").strip().lower() in _TRUTHY

    return AppConfig.default().with_overrides(
        refresh_interval=refresh_ms / 1000 if refresh_ms is not None else None,
        max_depth=max_depth,
        write_error_reports=error_reports or None,
    )
