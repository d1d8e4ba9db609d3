"""
app/services/sales_analysis_service.py

Deterministic sales aggregation engine.

Formulas
--------
Total Transactions   = number of records
Total Revenue        = Σ quantity × price, summed in input order
Most Popular Product = product with the greatest Σ quantity

Tie-break
---------
A product only replaces the current leader when its summed quantity is
strictly greater, so among equal totals the first product visited wins.

``first_seen``     products are visited in order of first appearance
                   (dict insertion order), so the earliest-seen product wins.
``lexicographic``  products are visited sorted by name, so the smallest
                   name wins.

The leader starts as ``("", 0)``; a product whose summed quantity is not
positive never becomes the leader.
"""

from __future__ import annotations

import logging
from typing import Iterable

from app.config import (
    ALLOWED_TIE_BREAKS,
    TIE_BREAK_FIRST_SEEN,
    TIE_BREAK_LEXICOGRAPHIC,
    get_sales_analysis_settings,
)
from app.domain.sales import AnalysisResult, SaleRecord

logger = logging.getLogger(__name__)


class SalesAnalysisService:
    """
    Stateless aggregation over validated sales records.

    No I/O is performed inside this class.

    Usage::

        service = SalesAnalysisService()
        result = service.analyze(records)
        print(result.most_popular_product)
    """

    def __init__(self, *, tie_break: str = TIE_BREAK_FIRST_SEEN) -> None:
        if tie_break not in ALLOWED_TIE_BREAKS:
            raise ValueError(
                f"Unsupported tie_break '{tie_break}'. "
                f"Allowed values: {', '.join(ALLOWED_TIE_BREAKS)}."
            )
        self._tie_break = tie_break

    @property
    def tie_break(self) -> str:
        return self._tie_break

    def analyze(self, records: Iterable[SaleRecord]) -> AnalysisResult:
        """
        Compute transaction count, revenue and the best-selling product.

        Empty input is a valid case and yields ``AnalysisResult()``.
        """

        total_transactions = 0
        total_revenue = 0.0
        quantity_by_product: dict[str, int] = {}

        for record in records:
            total_transactions += 1
            total_revenue += record.quantity * record.price
            quantity_by_product[record.product] = (
                quantity_by_product.get(record.product, 0) + record.quantity
            )

        most_popular_product, max_quantity = self._select_leader(quantity_by_product)

        logger.debug(
            "Sales analyzed transactions=%d products=%d leader=%r units=%d",
            total_transactions,
            len(quantity_by_product),
            most_popular_product,
            max_quantity,
        )
        return AnalysisResult(
            total_transactions=total_transactions,
            total_revenue=total_revenue,
            most_popular_product=most_popular_product,
            max_quantity_sold_units=max_quantity,
        )

    def _select_leader(self, quantity_by_product: dict[str, int]) -> tuple[str, int]:
        products: Iterable[str] = quantity_by_product
        if self._tie_break == TIE_BREAK_LEXICOGRAPHIC:
            products = sorted(quantity_by_product)

        leader = ""
        max_quantity = 0
        for product in products:
            total = quantity_by_product[product]
            if total > max_quantity:
                leader = product
                max_quantity = total
        return leader, max_quantity


def get_sales_analysis_service() -> SalesAnalysisService:
    """
    Build the analysis service with the configured tie-break policy.
    """

    return SalesAnalysisService(tie_break=get_sales_analysis_settings().tie_break)


def analyze_sales(records: Iterable[SaleRecord]) -> AnalysisResult:
    """
    Analyze *records* with the configured service.
    """

    return get_sales_analysis_service().analyze(records)
