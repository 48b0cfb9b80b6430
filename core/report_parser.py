"""Top-level stock report extraction from an email body."""

from typing import Optional

from .config import DEFAULT_CONTENT_TYPE, MARKUP_CONTENT_TYPES
from .html_table import html_to_text, parse_html_table
from .models import ExtractionFailure, ExtractionResult, ParsedReport, TableParse
from .report_date import find_report_date, resolve_report_date
from .text_table import parse_text_table


def is_markup(body: str, content_type: Optional[str] = DEFAULT_CONTENT_TYPE) -> bool:
    """Whether the body should go through the HTML walker first."""
    if content_type and content_type.strip().lower() in MARKUP_CONTENT_TYPES:
        return True
    return "<table" in body.lower()


def parse_report_body(body: Optional[str], content_type: Optional[str] = DEFAULT_CONTENT_TYPE) -> ExtractionResult:
    """
    Extract a stock report from an email body.

    Markup bodies go through the HTML walker first; if that finds no table or
    no valid rows, the plain-text walker runs on the same raw body. The report
    date is required: without it the extraction fails even if rows parsed.

    This function has no side effects, so repeated calls on the same input
    give equal results.

    Args:
        body: Raw email body
        content_type: Body type hint, e.g. "html" or "text"

    Returns:
        ExtractionResult with either a report or a failure reason
    """
    body = body or ""
    markup = is_markup(body, content_type)

    html_parse: Optional[TableParse] = None
    table = None
    source = None

    if markup:
        html_parse = parse_html_table(body)
        if html_parse.has_rows:
            table, source = html_parse, "html"

    if table is None:
        text_parse = parse_text_table(body)
        if text_parse.has_rows:
            table, source = text_parse, "text"
        else:
            table_found = text_parse.found or (html_parse is not None and html_parse.found)
            warnings = [*(html_parse.warnings if html_parse else []), *text_parse.warnings]
            return ExtractionResult(
                failure=ExtractionFailure.EMPTY_TABLE if table_found else ExtractionFailure.NO_TABLE_FOUND,
                skipped_rows=(html_parse.skipped_rows if html_parse else 0) + text_parse.skipped_rows,
                warnings=warnings,
            )

    warnings = list(table.warnings)

    date_str = find_report_date(body)
    if date_str is None and markup:
        # Marker may be split across tags in the raw HTML
        date_str = find_report_date(html_to_text(body))
    if date_str is None:
        return ExtractionResult(
            failure=ExtractionFailure.MISSING_DATE,
            source=source,
            skipped_rows=table.skipped_rows,
            defaulted_cells=table.defaulted_cells,
            warnings=warnings,
        )

    try:
        report_date = resolve_report_date(date_str)
    except ValueError:
        report_date = None
        warnings.append(f"Report date {date_str} is not a valid calendar date")

    report = ParsedReport(
        date_str=date_str,
        report_date=report_date,
        rows=tuple(table.rows),
        grand_totals=table.grand_totals,
    )
    return ExtractionResult(
        report=report,
        source=source,
        skipped_rows=table.skipped_rows,
        defaulted_cells=table.defaulted_cells,
        warnings=warnings,
    )
