import json

import pytest
from pydantic import ValidationError

from app.domain.sales import AnalysisResult, ParseSummary, RowValidationError, SaleRecord
from app.schemas.sales_analysis import SalesAnalysisReportResponse
from app.services.report_service import (
    build_report_response,
    render_empty_report,
    render_text_report,
)


def _result() -> AnalysisResult:
    return AnalysisResult(
        total_transactions=2,
        total_revenue=2660.9,
        most_popular_product="Mouse",
        max_quantity_sold_units=10,
    )


def test_text_report_layout() -> None:
    report = render_text_report("data/sales.csv", _result())

    assert report.splitlines() == [
        "--- Sales Record Analysis Report ---",
        "File Processed: data/sales.csv",
        "Total Valid Transactions: 2",
        "Total Revenue: 2660.90 $",
        "Most Popular Product: Mouse (sold 10 units)",
        "------------------------------------",
    ]


def test_empty_report_message() -> None:
    assert render_empty_report("x.csv") == (
        "File 'x.csv' read successfully, but no valid records were found for analysis."
    )


def test_report_response_contract() -> None:
    summary = ParseSummary(
        records=(SaleRecord(date="2023", product="Mouse", quantity=10, price=25.99),),
        rows_skipped=1,
        validation_errors=(
            RowValidationError(row_number=3, message="Price is not a number", column="price", value="x"),
        ),
    )

    response = build_report_response("data/sales.csv", summary, _result())

    parsed = json.loads(response.model_dump_json())
    assert set(parsed) == {
        "file",
        "total_transactions",
        "total_revenue",
        "most_popular_product",
        "max_quantity_sold_units",
        "rows_skipped",
        "validation_errors",
    }
    assert parsed["rows_skipped"] == 1
    assert parsed["validation_errors"][0]["row_number"] == 3
    assert parsed["most_popular_product"] == "Mouse"


def test_report_response_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        SalesAnalysisReportResponse(
            file="a.csv",
            total_transactions=0,
            total_revenue=0.0,
            most_popular_product="",
            max_quantity_sold_units=0,
            unexpected=True,
        )


def test_report_response_rejects_negative_counts() -> None:
    with pytest.raises(ValidationError):
        SalesAnalysisReportResponse(
            file="a.csv",
            total_transactions=-1,
            total_revenue=0.0,
            most_popular_product="",
            max_quantity_sold_units=0,
        )
