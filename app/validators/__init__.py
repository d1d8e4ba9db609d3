"""
app/validators package marker.
"""

from app.validators.sales_row_validator import SalesRowValidator

__all__ = [
    "SalesRowValidator",
]
