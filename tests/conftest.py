"""Shared fixtures and sample email bodies for stock report tests."""

import pytest

from core.models import GrandTotals, ParsedReport, StockRow
from core.report_date import resolve_report_date

DATE_LINE = "Major Customer Stock Report as on - 23.02.2026"

HEADER_CELLS = [
    "Sl No", "Customer Name", "Wp",
    "Annaram", "Kothur", "Narkhuda", "P2", "P4", "P5", "P6", "Prime Pack",
    "Grand Total",
]

# Single-customer data row and its footer, as cell lists
ACME_CELLS = ["1", "Acme Co", "5", "10", "0", "0", "0", "0", "0", "0", "0", "10"]
ACME_TOTAL_VALUES = ["10", "0", "0", "0", "0", "0", "0", "0", "10"]

# Second customer spread over several warehouses
BETA_CELLS = ["2", "Beta Industries", "7", "1,200", "300", "-", "0", " ", "50", "0", "25", "1,575"]


def create_text_body(
    rows: list[list[str]],
    grand_totals: list[list[str]] = None,
    date_line: str = DATE_LINE,
    preamble: list[str] = None,
    trailer: list[str] = None,
) -> str:
    """Build a plain-text report body with tab-separated fields.

    Args:
        rows: Data rows as cell lists
        grand_totals: Value lists for "Grand Total" lines (marker added here)
        date_line: Date marker line; None to leave it out
        preamble: Extra lines between the date line and the header
        trailer: Extra lines after the table
    """
    lines = ["Dear Team,", ""]
    if date_line:
        lines.append(date_line)
    lines.extend(preamble or [])
    lines.append("\t".join(HEADER_CELLS))
    lines.extend("\t".join(cells) for cells in rows)
    for values in grand_totals or []:
        lines.append("\t".join(["Grand Total", *values]))
    lines.extend(trailer or [])
    lines.extend(["", "Regards,", "Stores Team"])
    return "\n".join(lines)


def create_html_row(cells: list[str], tag: str = "td") -> str:
    """Build one <tr> from cell texts."""
    return "<tr>" + "".join(f"<{tag}>{cell}</{tag}>" for cell in cells) + "</tr>"


def create_html_body(
    rows: list[list[str]],
    grand_totals: list[list[str]] = None,
    date_line: str = DATE_LINE,
    leading_rows: list[str] = None,
    trailing_rows: list[str] = None,
    total_in_second_cell: bool = False,
    after_table: str = "",
) -> str:
    """Build an HTML report body with the stock table inside layout markup.

    Args:
        rows: Data rows as cell lists
        grand_totals: Value lists for footer rows
        date_line: Date marker paragraph text; None to leave it out
        leading_rows: Raw <tr> markup placed before the header row
        trailing_rows: Raw <tr> markup placed after the footer rows
        total_in_second_cell: Put "Grand Total" in cell 1 after an empty cell 0
        after_table: Raw markup placed after the stock table
    """
    parts = ["<html><body>", "<table><tr><td>Premier logo</td></tr></table>", "<p>Dear Team,</p>"]
    if date_line:
        parts.append(f"<p><b>{date_line}</b></p>")
    parts.append('<table border="1">')
    parts.extend(leading_rows or [])
    parts.append(create_html_row(HEADER_CELLS, tag="th"))
    parts.extend(create_html_row(cells) for cells in rows)
    for values in grand_totals or []:
        marker = ["", "Grand Total"] if total_in_second_cell else ["Grand Total"]
        parts.append(create_html_row([*marker, *values]))
    parts.extend(trailing_rows or [])
    parts.append("</table>")
    parts.append(after_table)
    parts.append("<p>Regards,<br>Stores Team</p></body></html>")
    return "\n".join(parts)


@pytest.fixture
def acme_row():
    """StockRow expected from ACME_CELLS."""
    return StockRow(
        sl_no=1, customer_name="Acme Co", wp=5,
        annaram=10, grand_total=10,
    )


@pytest.fixture
def sample_report():
    """Parsed report with three customers and a footer row."""
    rows = (
        StockRow(sl_no=1, customer_name="Acme Co", wp=5, annaram=30, kothur=10, grand_total=40),
        StockRow(sl_no=2, customer_name="Beta Industries", wp=7, kothur=0, grand_total=0),
        StockRow(sl_no=3, customer_name="Gamma Solar", wp=9, annaram=60, grand_total=60),
    )
    return ParsedReport(
        date_str="23.02.2026",
        report_date=resolve_report_date("23.02.2026"),
        rows=rows,
        grand_totals=GrandTotals(annaram=90, kothur=10, overall=100),
    )
