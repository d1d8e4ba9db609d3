"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

TIE_BREAK_FIRST_SEEN = "first_seen"
TIE_BREAK_LEXICOGRAPHIC = "lexicographic"
ALLOWED_TIE_BREAKS = (TIE_BREAK_FIRST_SEEN, TIE_BREAK_LEXICOGRAPHIC)


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_choice_env(name: str, default: str, allowed: tuple[str, ...]) -> str:
    """
    Read a string restricted to *allowed*; anything else falls back to *default*.
    """

    value = _get_str_env(name, default).lower()
    return value if value in allowed else default


@dataclass(frozen=True)
class SalesAnalysisSettings:
    """
    Runtime settings for sales file parsing and analysis.
    """

    default_file: str = "data/sales.csv"
    delimiter: str = ","
    encoding: str = "utf-8-sig"
    max_validation_errors: int = 500
    log_validation_errors: bool = True
    tie_break: str = TIE_BREAK_FIRST_SEEN


@dataclass(frozen=True)
class LoggingSettings:
    """
    Root logger settings for CLI processes.
    """

    level: str = "INFO"


@lru_cache(maxsize=1)
def get_sales_analysis_settings() -> SalesAnalysisSettings:
    """
    Return cached sales analysis settings from environment variables.
    """

    delimiter = _get_str_env("SALES_CSV_DELIMITER", ",")
    return SalesAnalysisSettings(
        default_file=_get_str_env("SALES_ANALYSIS_FILE", "data/sales.csv"),
        # csv requires a one-character delimiter.
        delimiter=delimiter if len(delimiter) == 1 else ",",
        encoding=_get_str_env("SALES_CSV_ENCODING", "utf-8-sig"),
        max_validation_errors=max(1, _get_int_env("SALES_MAX_VALIDATION_ERRORS", 500)),
        log_validation_errors=_get_bool_env("SALES_LOG_VALIDATION_ERRORS", True),
        tie_break=_get_choice_env("SALES_TIE_BREAK", TIE_BREAK_FIRST_SEEN, ALLOWED_TIE_BREAKS),
    )


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """
    Return cached logging settings.
    """

    return LoggingSettings(level=_get_str_env("LOG_LEVEL", "INFO").upper())
