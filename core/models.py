"""Data models for parsed stock reports."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .config import WAREHOUSES, Warehouse


@dataclass(frozen=True)
class StockRow:
    """One customer's stock line in a report."""
    sl_no: int             # Sequence number from the report (not checked for gaps)
    customer_name: str
    wp: int
    annaram: int = 0
    kothur: int = 0
    narkuda: int = 0
    p2: int = 0
    p4: int = 0
    p5: int = 0
    p6: int = 0
    prime_pack: int = 0
    grand_total: int = 0

    def count(self, warehouse: Warehouse) -> int:
        """Stock count for a single warehouse."""
        return getattr(self, warehouse.value)

    @property
    def warehouse_counts(self) -> dict[Warehouse, int]:
        """Counts keyed by warehouse, in report column order."""
        return {w: self.count(w) for w in WAREHOUSES}

    @property
    def is_active(self) -> bool:
        """Whether the customer holds any stock at all."""
        return self.grand_total > 0

    def to_dict(self) -> dict:
        return {
            "sl_no": self.sl_no,
            "customer_name": self.customer_name,
            "wp": self.wp,
            **{w.value: self.count(w) for w in WAREHOUSES},
            "grand_total": self.grand_total,
        }


@dataclass(frozen=True)
class GrandTotals:
    """Report-wide footer row: one total per warehouse plus the overall total."""
    annaram: int = 0
    kothur: int = 0
    narkuda: int = 0
    p2: int = 0
    p4: int = 0
    p5: int = 0
    p6: int = 0
    prime_pack: int = 0
    overall: int = 0

    def count(self, warehouse: Warehouse) -> int:
        """Total for a single warehouse."""
        return getattr(self, warehouse.value)

    @property
    def warehouse_counts(self) -> dict[Warehouse, int]:
        return {w: self.count(w) for w in WAREHOUSES}

    def to_dict(self) -> dict:
        return {
            **{w.value: self.count(w) for w in WAREHOUSES},
            "overall": self.overall,
        }


@dataclass(frozen=True)
class ParsedReport:
    """Successfully extracted stock report."""
    date_str: str                       # "DD.MM.YYYY" as written in the report
    report_date: Optional[datetime]     # UTC midnight; None if not a real calendar date
    rows: tuple[StockRow, ...]
    grand_totals: Optional[GrandTotals] = None

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def has_grand_totals(self) -> bool:
        return self.grand_totals is not None

    def to_dict(self) -> dict:
        """Convert report to a plain dictionary for storage or JSON export."""
        return {
            "report_date_str": self.date_str,
            "report_date": self.report_date.isoformat() if self.report_date else None,
            "grand_totals": self.grand_totals.to_dict() if self.grand_totals else None,
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass
class TableParse:
    """Outcome of walking one table, HTML or plain text."""
    found: bool                         # Header/table located at all
    rows: list[StockRow] = field(default_factory=list)
    grand_totals: Optional[GrandTotals] = None
    skipped_rows: int = 0               # Rows dropped as malformed
    defaulted_cells: int = 0            # Non-numeric cells read as 0
    warnings: list[str] = field(default_factory=list)

    @property
    def has_rows(self) -> bool:
        """Whether at least one data row survived validation."""
        return len(self.rows) > 0


class ExtractionFailure(Enum):
    """Reasons a document is not a parseable stock report."""
    MISSING_DATE = "missing_date"
    NO_TABLE_FOUND = "no_table_found"
    EMPTY_TABLE = "empty_table"


@dataclass
class ExtractionResult:
    """Result of extracting a report from one email body.

    Exactly one of `report` and `failure` is set.
    """
    report: Optional[ParsedReport] = None
    failure: Optional[ExtractionFailure] = None
    source: Optional[str] = None        # "html" or "text": walker that produced the rows
    skipped_rows: int = 0
    defaulted_cells: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.report is not None

    @property
    def failure_message(self) -> Optional[str]:
        """Human-readable description of the failure, if any."""
        if self.failure is None:
            return None
        return FAILURE_MESSAGES[self.failure]


FAILURE_MESSAGES = {
    ExtractionFailure.MISSING_DATE: "No 'Major Customer Stock as on - DD.MM.YYYY' marker found",
    ExtractionFailure.NO_TABLE_FOUND: "No stock table with an 'Sl No' header found",
    ExtractionFailure.EMPTY_TABLE: "Stock table found but no valid rows",
}
