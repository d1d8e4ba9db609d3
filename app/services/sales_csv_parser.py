"""
app/services/sales_csv_parser.py

Tolerant parser for ``date,product,quantity,price`` sales files.

The first row is a header and is discarded without validation. Every
following row is validated on its own: rows with the wrong field count or
an unparsable quantity/price are skipped and reported to the diagnostic
sink, and parsing continues.

Two failures are fatal and return no records:

    SalesFileOpenError  — the path cannot be opened.
    SalesCSVReadError   — the CSV reader fails mid-file (bad quoting,
                          undecodable bytes, I/O error).
"""

from __future__ import annotations

import csv
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterator, Protocol, TextIO

from app.config import get_sales_analysis_settings
from app.domain.sales import ParseSummary, RowValidationError, SaleRecord
from app.logging_utils import log_event
from app.validators.sales_row_validator import SalesRowValidator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SalesParseError(RuntimeError):
    """
    Base class for failures that abort the whole parse.
    """


class SalesFileOpenError(SalesParseError):
    """
    Raised when the sales file cannot be opened.
    """

    def __init__(self, *, path: str, cause: OSError) -> None:
        super().__init__(f"Failed to open file '{path}': {cause}")
        self.path = path


class SalesCSVReadError(SalesParseError):
    """
    Raised when the CSV reader fails for a reason other than end of input.
    """

    def __init__(self, *, line_number: int, cause: Exception) -> None:
        super().__init__(f"Critical error reading CSV at line {line_number}: {cause}")
        self.line_number = line_number


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class DiagnosticSink(Protocol):
    """
    Receives one notification per skipped row.
    """

    def row_skipped(self, error: RowValidationError) -> None:
        ...


class LoggingDiagnosticSink:
    """
    Reports skipped rows as structured WARNING log lines.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def row_skipped(self, error: RowValidationError) -> None:
        log_event(
            self._logger,
            logging.WARNING,
            "sales_row_skipped",
            row_number=error.row_number,
            column=error.column,
            message=error.message,
            value=error.value,
        )


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class SalesCSVParser:
    """
    Reads a sales CSV source into validated :class:`SaleRecord` values.
    """

    def __init__(
        self,
        *,
        delimiter: str = ",",
        encoding: str = "utf-8-sig",
        max_validation_errors: int = 500,
        sink: DiagnosticSink | None = None,
        validator: SalesRowValidator | None = None,
    ) -> None:
        self._delimiter = delimiter
        self._encoding = encoding
        self._max_validation_errors = max(1, max_validation_errors)
        self._sink = sink
        self._validator = validator or SalesRowValidator()

    def parse(self, source: str | Path | TextIO) -> list[SaleRecord]:
        """
        Parse a path or an open text stream and return the accepted records.
        """

        if isinstance(source, (str, Path)):
            return list(self.parse_file(source).records)
        return list(self.parse_stream(source).records)

    def parse_file(self, path: str | Path) -> ParseSummary:
        """
        Open *path* and parse it. The file is closed on every exit path.
        """

        try:
            handle = open(path, encoding=self._encoding, newline="")
        except OSError as exc:
            raise SalesFileOpenError(path=str(path), cause=exc) from exc

        with handle:
            summary = self.parse_stream(handle)

        logger.info(
            "Parsed sales file path=%s records=%d rows_skipped=%d",
            path,
            len(summary.records),
            summary.rows_skipped,
        )
        return summary

    def parse_stream(self, stream: TextIO) -> ParseSummary:
        """
        Parse an already-open text stream. The caller owns the stream.
        """

        reader = csv.reader(stream, delimiter=self._delimiter, strict=True)
        rows = _numbered_rows(reader)

        records: list[SaleRecord] = []
        captured_errors: list[RowValidationError] = []
        rows_skipped = 0

        # Header row; its content is never validated.
        if next(rows, None) is None:
            return ParseSummary()

        for row_number, fields in rows:
            if self._validator.is_completely_empty_row(fields):
                rows_skipped += 1
                self._record_error(
                    captured_errors,
                    RowValidationError(
                        row_number=row_number,
                        message="Completely empty rows are not allowed.",
                    ),
                )
                continue

            record, row_errors = self._validator.validate_row(
                fields=fields,
                row_number=row_number,
            )
            if record is None:
                rows_skipped += 1
                for error in row_errors:
                    self._record_error(captured_errors, error)
                continue

            records.append(record)

        return ParseSummary(
            records=tuple(records),
            rows_skipped=rows_skipped,
            validation_errors=tuple(captured_errors),
        )

    def _record_error(
        self,
        captured_errors: list[RowValidationError],
        error: RowValidationError,
    ) -> None:
        if self._sink is not None:
            self._sink.row_skipped(error)

        if len(captured_errors) < self._max_validation_errors:
            captured_errors.append(error)


def _numbered_rows(reader: Iterator[list[str]]) -> Iterator[tuple[int, list[str]]]:
    """
    Yield ``(line_number, fields)`` starting at 1 for the header.

    Reader failures surface as :class:`SalesCSVReadError` tagged with the
    number of the row being read.
    """

    line_number = 0
    while True:
        line_number += 1
        try:
            fields = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError, OSError) as exc:
            raise SalesCSVReadError(line_number=line_number, cause=exc) from exc
        yield line_number, fields


def build_sales_csv_parser(*, sink: DiagnosticSink | None) -> SalesCSVParser:
    """
    Build a parser with env-driven settings that reports skipped rows to *sink*.
    """

    settings = get_sales_analysis_settings()
    return SalesCSVParser(
        delimiter=settings.delimiter,
        encoding=settings.encoding,
        max_validation_errors=settings.max_validation_errors,
        sink=sink,
    )


@lru_cache(maxsize=1)
def get_sales_csv_parser() -> SalesCSVParser:
    """
    Build and cache the parser with env-driven settings.
    """

    settings = get_sales_analysis_settings()
    return build_sales_csv_parser(
        sink=LoggingDiagnosticSink() if settings.log_validation_errors else None,
    )


def parse_sales_csv(
    source: str | Path | TextIO,
    *,
    sink: DiagnosticSink | None = None,
    parser: SalesCSVParser | None = None,
) -> list[SaleRecord]:
    """
    Parse *source* and return the accepted records.

    An explicit *parser* wins. Otherwise a given *sink* gets a parser built
    from the configured settings, and ``sink=None`` uses the cached
    configured parser with its default diagnostics.
    """

    if parser is None:
        parser = get_sales_csv_parser() if sink is None else build_sales_csv_parser(sink=sink)
    return parser.parse(source)
