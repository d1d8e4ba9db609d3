from __future__ import annotations

import unittest

from app.domain.sales import SaleRecord
from app.validators.sales_row_validator import SalesRowValidator


class TestSalesRowValidator(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = SalesRowValidator()

    def test_valid_row_becomes_record(self) -> None:
        record, errors = self.validator.validate_row(
            fields=["2023-10-01", "Laptop", "2", "1200.50"],
            row_number=2,
        )

        self.assertEqual(errors, [])
        self.assertEqual(
            record,
            SaleRecord(date="2023-10-01", product="Laptop", quantity=2, price=1200.50),
        )

    def test_date_is_passed_through_unvalidated(self) -> None:
        record, _ = self.validator.validate_row(
            fields=["not a date", "Pen", "1", "1"],
            row_number=2,
        )
        self.assertEqual(record.date, "not a date")

    def test_wrong_field_count_reports_count(self) -> None:
        record, errors = self.validator.validate_row(fields=["a", "b"], row_number=7)

        self.assertIsNone(record)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].row_number, 7)
        self.assertEqual(errors[0].value, "2")

    def test_bad_quantity_stops_before_price(self) -> None:
        record, errors = self.validator.validate_row(
            fields=["2023", "Laptop", "Two", "also bad"],
            row_number=3,
        )

        self.assertIsNone(record)
        self.assertEqual([error.column for error in errors], ["quantity"])
        self.assertEqual(errors[0].value, "Two")

    def test_bad_price_is_reported(self) -> None:
        record, errors = self.validator.validate_row(
            fields=["2023", "Keyboard", "5", "INVALID_PRICE"],
            row_number=4,
        )

        self.assertIsNone(record)
        self.assertEqual(errors[0].column, "price")
        self.assertIn("INVALID_PRICE", errors[0].message)

    def test_empty_row_detection(self) -> None:
        self.assertTrue(self.validator.is_completely_empty_row([]))
        self.assertTrue(self.validator.is_completely_empty_row(["  ", ""]))
        self.assertFalse(self.validator.is_completely_empty_row(["", "x"]))


if __name__ == "__main__":
    unittest.main()
