"""
app/services/report_service.py

Rendering of analysis results for the command line.
"""

from __future__ import annotations

from app.domain.sales import AnalysisResult, ParseSummary
from app.schemas.sales_analysis import (
    SalesAnalysisReportResponse,
    SalesValidationErrorResponse,
)

REPORT_HEADER = "--- Sales Record Analysis Report ---"
REPORT_FOOTER = "------------------------------------"


def render_text_report(file_path: str, result: AnalysisResult) -> str:
    """
    Render *result* as the human-readable report block.
    """

    lines = [
        REPORT_HEADER,
        f"File Processed: {file_path}",
        f"Total Valid Transactions: {result.total_transactions}",
        f"Total Revenue: {result.total_revenue:.2f} $",
        (
            f"Most Popular Product: {result.most_popular_product} "
            f"(sold {result.max_quantity_sold_units} units)"
        ),
        REPORT_FOOTER,
    ]
    return "\n".join(lines)


def render_empty_report(file_path: str) -> str:
    return (
        f"File '{file_path}' read successfully, "
        "but no valid records were found for analysis."
    )


def build_report_response(
    file_path: str,
    summary: ParseSummary,
    result: AnalysisResult,
) -> SalesAnalysisReportResponse:
    """
    Build the JSON report payload from a parse summary and its analysis.
    """

    return SalesAnalysisReportResponse(
        file=file_path,
        total_transactions=result.total_transactions,
        total_revenue=result.total_revenue,
        most_popular_product=result.most_popular_product,
        max_quantity_sold_units=result.max_quantity_sold_units,
        rows_skipped=summary.rows_skipped,
        validation_errors=[
            SalesValidationErrorResponse(
                row_number=error.row_number,
                message=error.message,
                column=error.column,
                value=error.value,
            )
            for error in summary.validation_errors
        ],
    )
