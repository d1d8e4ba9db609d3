from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from app.config import get_logging_settings, get_sales_analysis_settings
from app.services.sales_csv_parser import get_sales_csv_parser


@pytest.fixture(autouse=True)
def _reset_cached_settings() -> Iterator[None]:
    """Settings and the configured parser are cached per process."""
    for cached in (get_sales_analysis_settings, get_logging_settings, get_sales_csv_parser):
        cached.cache_clear()
    yield
    for cached in (get_sales_analysis_settings, get_logging_settings, get_sales_csv_parser):
        cached.cache_clear()


@pytest.fixture()
def write_csv(tmp_path: Path):
    """Write *content* to a temporary CSV file and return its path."""

    def _write(content: str, filename: str = "sales.csv") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
