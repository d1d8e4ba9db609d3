"""
app/domain/sales.py

Domain models shared by the sales parser and analysis service.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaleRecord:
    """
    One validated sales transaction.

    ``date`` is passed through as opaque text. ``price`` may be ``nan`` or
    ``inf`` when the source spells it that way.
    """

    date: str
    product: str
    quantity: int
    price: float


@dataclass(frozen=True)
class AnalysisResult:
    """
    Aggregate metrics over a sequence of :class:`SaleRecord`.
    """

    total_transactions: int = 0
    total_revenue: float = 0.0
    most_popular_product: str = ""
    max_quantity_sold_units: int = 0


@dataclass(frozen=True)
class RowValidationError:
    """
    One CSV row validation error detail.
    """

    row_number: int
    message: str
    column: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class ParseSummary:
    """
    End-of-run parse summary.

    ``validation_errors`` holds at most the configured number of captured
    diagnostics; ``rows_skipped`` always counts every skipped row.
    """

    records: tuple[SaleRecord, ...] = ()
    rows_skipped: int = 0
    validation_errors: tuple[RowValidationError, ...] = ()
