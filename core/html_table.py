"""HTML stock table walker.

Finds the stock table inside an HTML email body and reads its rows. Email
bodies wrap the table in arbitrary layout markup, so the table is located by
content ("Sl No" and "Customer Name" in its text) rather than by position.
"""

from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .cells import clean_text, parse_sl_no
from .config import CUSTOMER_NAME_MARKER, GRAND_TOTAL_MIN_VALUES, HEADER_MARKER, HTML_MIN_ROW_CELLS
from .models import TableParse
from .rows import build_grand_totals, build_stock_row, is_grand_total_cell, is_header_cell

HTML_PARSER = "html.parser"


def html_to_text(html: str) -> str:
    """Rendered text of an HTML document, cells separated by spaces."""
    soup = BeautifulSoup(html, HTML_PARSER)
    return soup.get_text(" ")


def find_stock_table(soup: BeautifulSoup) -> Optional[Tag]:
    """
    Find the first table whose text contains both the "Sl No" and the
    "Customer Name" header markers.

    Returns:
        Table element or None if the document has no stock table
    """
    for table in soup.find_all("table"):
        text = table.get_text(" ")
        if HEADER_MARKER.search(text) and CUSTOMER_NAME_MARKER.search(text):
            return table
    return None


def _row_cells(tr: Tag) -> list[str]:
    return [clean_text(cell.get_text(" ")) for cell in tr.find_all(["td", "th"], recursive=False)]


def parse_html_table(html: str) -> TableParse:
    """
    Parse the stock table out of an HTML email body.

    Rows up to and including the "Sl No" header row are ignored, as are later
    rows that repeat the header. After the header:
    - A row with "Grand Total" in cell 0 or 1 is the footer; the 9 cells
      after the marker are the 8 warehouse totals and the overall total.
      Only the first footer is kept.
    - Any other row is a data row if cell 0 is a sequence number and the row
      has at least 11 cells. Other rows are skipped.

    Args:
        html: Raw HTML body

    Returns:
        TableParse; found is False when no stock table exists
    """
    soup = BeautifulSoup(html, HTML_PARSER)
    table = find_stock_table(soup)
    if table is None:
        return TableParse(found=False)

    result = TableParse(found=True)
    header_found = False

    for row_number, tr in enumerate(table.find_all("tr"), start=1):
        cells = _row_cells(tr)

        if not header_found:
            if cells and is_header_cell(cells[0]):
                header_found = True
            continue

        if len(cells) < 2:
            # Empty or single-cell layout rows
            continue

        first = cells[0]
        second = cells[1]
        if is_header_cell(first):
            # Repeated header, or the real header of a table nested in a layout cell
            continue
        if is_grand_total_cell(first) or is_grand_total_cell(second):
            offset = 1 if is_grand_total_cell(first) else 2
            if result.grand_totals is not None:
                result.warnings.append(f"Table row {row_number}: extra 'Grand Total' row ignored")
                continue
            values = cells[offset:offset + GRAND_TOTAL_MIN_VALUES]
            result.grand_totals, defaulted = build_grand_totals(values)
            result.defaulted_cells += defaulted
            continue

        sl_no = parse_sl_no(first)
        if sl_no is None or len(cells) < HTML_MIN_ROW_CELLS:
            result.skipped_rows += 1
            result.warnings.append(
                f"Table row {row_number} skipped: {len(cells)} cell(s), first cell {first!r}"
            )
            continue

        row, defaulted = build_stock_row(cells, sl_no)
        result.defaulted_cells += defaulted
        if row is None:
            result.skipped_rows += 1
            result.warnings.append(f"Table row {row_number} skipped: blank customer name")
            continue
        result.rows.append(row)

    return result
