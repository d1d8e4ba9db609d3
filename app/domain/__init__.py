"""
app/domain package marker.
"""

from app.domain.sales import AnalysisResult, ParseSummary, RowValidationError, SaleRecord

__all__ = [
    "AnalysisResult",
    "ParseSummary",
    "RowValidationError",
    "SaleRecord",
]
