"""
app/schemas package marker.
"""

from app.schemas.sales_analysis import SalesAnalysisReportResponse, SalesValidationErrorResponse

__all__ = [
    "SalesAnalysisReportResponse",
    "SalesValidationErrorResponse",
]
