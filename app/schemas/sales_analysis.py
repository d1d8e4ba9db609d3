"""
app/schemas/sales_analysis.py

Machine-readable report schemas for sales analysis runs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SalesValidationErrorResponse(BaseModel):
    """
    Report model for one skipped-row diagnostic.
    """

    model_config = ConfigDict(extra="forbid")

    row_number: int = Field(..., ge=1)
    message: str
    column: str | None = None
    value: str | None = None


class SalesAnalysisReportResponse(BaseModel):
    """
    Report model for one analyzed sales file.
    """

    model_config = ConfigDict(extra="forbid")

    file: str
    total_transactions: int = Field(..., ge=0)
    total_revenue: float
    most_popular_product: str
    max_quantity_sold_units: int
    rows_skipped: int = Field(0, ge=0)
    validation_errors: list[SalesValidationErrorResponse] = Field(default_factory=list)
