"""Row classification and positional row building.

Both table walkers produce flat lists of cell strings. The helpers here turn
such a list into a StockRow or GrandTotals using the shared layout tables in
config, so the HTML and plain-text paths cannot drift apart.
"""

from typing import Optional

from .cells import clean_text, parse_count
from .config import GRAND_TOTAL_FIELDS, GRAND_TOTAL_MARKER, HEADER_MARKER, STOCK_ROW_FIELDS
from .models import GrandTotals, StockRow


def is_header_cell(text: Optional[str]) -> bool:
    """Whether a cell (or line) holds the "Sl No" header marker."""
    return bool(text) and HEADER_MARKER.search(text) is not None


def is_grand_total_cell(text: Optional[str]) -> bool:
    """Whether a cell (or line) starts with the "Grand Total" marker."""
    return bool(text) and GRAND_TOTAL_MARKER.match(text) is not None


def build_stock_row(cells: list[str], sl_no: int) -> tuple[Optional[StockRow], int]:
    """
    Map a data row's cells onto StockRow fields by position.

    Cells past the end of the list read as 0, which lets HTML rows omit the
    trailing grand total column.

    Args:
        cells: Cell texts, cell 0 being the sequence number
        sl_no: Already validated sequence number

    Returns:
        Tuple of (row, defaulted_cell_count)
        - row is None if the customer name is blank
    """
    values: dict = {"sl_no": sl_no}
    defaulted = 0

    for idx, name in enumerate(STOCK_ROW_FIELDS):
        if name == "sl_no":
            continue
        raw = cells[idx] if idx < len(cells) else None
        if name == "customer_name":
            values[name] = clean_text(raw)
            continue
        count, was_defaulted = parse_count(raw)
        values[name] = count
        defaulted += was_defaulted

    if not values["customer_name"]:
        return None, defaulted
    return StockRow(**values), defaulted


def build_grand_totals(values: list[str]) -> tuple[GrandTotals, int]:
    """
    Map the values following a "Grand Total" marker onto GrandTotals.

    Args:
        values: Cell texts after the marker cell; missing trailing values read as 0

    Returns:
        Tuple of (grand_totals, defaulted_cell_count)
    """
    totals: dict = {}
    defaulted = 0
    for idx, name in enumerate(GRAND_TOTAL_FIELDS):
        raw = values[idx] if idx < len(values) else None
        count, was_defaulted = parse_count(raw)
        totals[name] = count
        defaulted += was_defaulted
    return GrandTotals(**totals), defaulted
