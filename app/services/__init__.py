"""
app/services package marker.
"""

from app.services.sales_analysis_service import (
    SalesAnalysisService,
    analyze_sales,
    get_sales_analysis_service,
)
from app.services.sales_csv_parser import (
    DiagnosticSink,
    LoggingDiagnosticSink,
    SalesCSVParser,
    SalesCSVReadError,
    SalesFileOpenError,
    SalesParseError,
    build_sales_csv_parser,
    get_sales_csv_parser,
    parse_sales_csv,
)

__all__ = [
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "SalesAnalysisService",
    "SalesCSVParser",
    "SalesCSVReadError",
    "SalesFileOpenError",
    "SalesParseError",
    "analyze_sales",
    "build_sales_csv_parser",
    "get_sales_analysis_service",
    "get_sales_csv_parser",
    "parse_sales_csv",
]
