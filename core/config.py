"""Fixed configuration for stock report extraction."""

import re
from enum import Enum


class Warehouse(Enum):
    """Storage locations in the column order used by every stock report."""
    ANNARAM = "annaram"
    KOTHUR = "kothur"
    NARKUDA = "narkuda"
    P2 = "p2"
    P4 = "p4"
    P5 = "p5"
    P6 = "p6"
    PRIME_PACK = "prime_pack"

    @property
    def label(self) -> str:
        return WAREHOUSE_LABELS[self]


WAREHOUSE_LABELS = {
    Warehouse.ANNARAM: "Annaram",
    Warehouse.KOTHUR: "Kothur",
    Warehouse.NARKUDA: "Narkhuda",
    Warehouse.P2: "P2",
    Warehouse.P4: "P4",
    Warehouse.P5: "P5",
    Warehouse.P6: "P6",
    Warehouse.PRIME_PACK: "Prime Pack",
}

# Ordered tuple; iteration over Warehouse gives the same order
WAREHOUSES: tuple[Warehouse, ...] = tuple(Warehouse)

# Positional layout of a data row: index -> field name.
# Both the HTML and the plain-text walker map cells through this table.
STOCK_ROW_FIELDS: tuple[str, ...] = (
    "sl_no",
    "customer_name",
    "wp",
    *(w.value for w in WAREHOUSES),
    "grand_total",
)

# Positional layout of the values following the "Grand Total" marker
GRAND_TOTAL_FIELDS: tuple[str, ...] = (
    *(w.value for w in WAREHOUSES),
    "overall",
)

# Field-count gates
HTML_MIN_ROW_CELLS = 11        # grand total cell may be missing in HTML rows
TEXT_MIN_ROW_FIELDS = 12       # sl no .. grand total
GRAND_TOTAL_MIN_VALUES = 9     # 8 warehouses + overall

# Marker patterns (all case-insensitive)
REPORT_DATE_PATTERN = re.compile(
    r"Major\s+Customer\s+Stock(?:\s+Report)?\s+as\s+on\s*[-–]\s*(\d{2}\.\d{2}\.\d{4})",
    re.IGNORECASE,
)
HEADER_MARKER = re.compile(r"Sl\.?\s*No", re.IGNORECASE)
HEADER_LINE_MARKER = re.compile(r"^Sl\.?\s*No", re.IGNORECASE)
CUSTOMER_NAME_MARKER = re.compile(r"Customer\s*Name", re.IGNORECASE)
GRAND_TOTAL_MARKER = re.compile(r"^Grand\s*Total", re.IGNORECASE)

# Plain-text fields are separated by runs of tabs
TEXT_FIELD_SEPARATOR = re.compile(r"\t+")

# Content type hints that select the HTML walker
MARKUP_CONTENT_TYPES = {"html", "text/html", "markup"}
DEFAULT_CONTENT_TYPE = "html"

# Export column headers (same order as STOCK_ROW_FIELDS)
EXPORT_COLUMNS = [
    "Sl No",
    "Customer Name",
    "WP",
    *(WAREHOUSE_LABELS[w] for w in WAREHOUSES),
    "Grand Total",
]

# Number of customers listed in report summaries
DEFAULT_TOP_CUSTOMERS = 5
