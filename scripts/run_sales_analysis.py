"""
Run sales file analysis from CLI.
"""

from __future__ import annotations

import argparse
import sys

from app.config import ALLOWED_TIE_BREAKS, get_logging_settings, get_sales_analysis_settings
from app.logging_utils import configure_logging
from app.services.report_service import (
    build_report_response,
    render_empty_report,
    render_text_report,
)
from app.services.sales_analysis_service import SalesAnalysisService
from app.services.sales_csv_parser import SalesParseError, get_sales_csv_parser


def _build_parser() -> argparse.ArgumentParser:
    settings = get_sales_analysis_settings()
    parser = argparse.ArgumentParser(description="Analyze a sales CSV file.")
    parser.add_argument(
        "--file",
        dest="file",
        default=settings.default_file,
        help="Path to the CSV sales data file.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "json"),
        default="text",
        help="Report output format.",
    )
    parser.add_argument(
        "--tie-break",
        dest="tie_break",
        choices=ALLOWED_TIE_BREAKS,
        default=settings.tie_break,
        help="How to choose between products with equal unit totals.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(get_logging_settings().level)

    file_path = args.file.strip()
    if not file_path:
        print("Error: File path is required.", file=sys.stderr)
        print("Usage: run_sales_analysis.py --file=<path/to/file.csv>", file=sys.stderr)
        return 1

    try:
        summary = get_sales_csv_parser().parse_file(file_path)
    except SalesParseError as exc:
        print(f"Critical parsing error: {exc}", file=sys.stderr)
        return 1

    result = SalesAnalysisService(tie_break=args.tie_break).analyze(summary.records)

    if args.output_format == "json":
        print(build_report_response(file_path, summary, result).model_dump_json(indent=2))
        return 0

    if not summary.records:
        print(render_empty_report(file_path))
        return 0

    print(render_text_report(file_path, result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
