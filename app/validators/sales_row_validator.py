"""
app/validators/sales_row_validator.py

Row-level validation and type parsing for sales CSV files.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from app.domain.sales import RowValidationError, SaleRecord

EXPECTED_FIELD_COUNT = 4

# Optional sign and ASCII digits only; no padding or "_" separators.
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class SalesRowValidator:
    """
    Validates and parses one raw ``date,product,quantity,price`` row.

    Checks run in a fixed order (field count, quantity, price) and stop at
    the first failure, so each skipped row yields exactly one error.
    """

    def is_completely_empty_row(self, fields: Sequence[Any]) -> bool:
        """
        Return True when the row has no fields or all fields are whitespace.
        """

        return all(self._is_blank(value) for value in fields)

    def validate_row(
        self,
        *,
        fields: Sequence[str],
        row_number: int,
    ) -> tuple[SaleRecord | None, list[RowValidationError]]:
        """
        Validate and parse one raw row into a :class:`SaleRecord`.
        """

        if len(fields) != EXPECTED_FIELD_COUNT:
            return None, [
                RowValidationError(
                    row_number=row_number,
                    message=(
                        f"Expected {EXPECTED_FIELD_COUNT} fields, "
                        f"found {len(fields)}."
                    ),
                    value=str(len(fields)),
                )
            ]

        date, product, raw_quantity, raw_price = fields

        errors: list[RowValidationError] = []
        quantity = self._parse_quantity(
            value=raw_quantity,
            row_number=row_number,
            errors=errors,
        )
        if errors:
            return None, errors

        price = self._parse_price(
            value=raw_price,
            row_number=row_number,
            errors=errors,
        )
        if errors:
            return None, errors

        return SaleRecord(date=date, product=product, quantity=quantity, price=price), []

    def _parse_quantity(
        self,
        *,
        value: str,
        row_number: int,
        errors: list[RowValidationError],
    ) -> int:
        message = f"Quantity is not an integer literal: {value!r}"
        if INTEGER_LITERAL.fullmatch(value) is not None:
            try:
                return int(value)
            except ValueError as exc:
                message = f"Quantity is not an integer: {exc}"

        errors.append(
            RowValidationError(
                row_number=row_number,
                column="quantity",
                message=message,
                value=self._stringify_value(value),
            )
        )
        return 0

    def _parse_price(
        self,
        *,
        value: str,
        row_number: int,
        errors: list[RowValidationError],
    ) -> float:
        # float() accepts "nan" and "inf"; those are kept as parsed values.
        try:
            return float(value)
        except ValueError as exc:
            errors.append(
                RowValidationError(
                    row_number=row_number,
                    column="price",
                    message=f"Price is not a number: {exc}",
                    value=self._stringify_value(value),
                )
            )
            return 0.0

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        return str(value).strip() == ""

    @staticmethod
    def _stringify_value(value: Any) -> str | None:
        if value is None:
            return None
        return str(value)
