"""Summaries and cross-report views of parsed stock reports."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from .config import DEFAULT_TOP_CUSTOMERS, WAREHOUSES, Warehouse
from .models import ParsedReport, StockRow

SERIES_FIELDS = ("grand_total", *(w.value for w in WAREHOUSES))


@dataclass
class WarehouseShare:
    """One warehouse's total and its share of the overall stock."""
    warehouse: Warehouse
    total: int
    percent: int           # Rounded share of overall, 0 when overall is 0

    @property
    def label(self) -> str:
        return self.warehouse.label


@dataclass
class ReportSummary:
    """Headline numbers for one report."""
    date_str: str
    overall: int
    customer_count: int
    active_customers: int  # Customers with grand total > 0
    top_customers: list[StockRow] = field(default_factory=list)
    warehouse_shares: list[WarehouseShare] = field(default_factory=list)


def warehouse_totals(report: ParsedReport) -> dict[Warehouse, int]:
    """
    Per-warehouse totals for a report.

    Uses the report's Grand Total row when present, otherwise sums the rows.
    """
    if report.grand_totals is not None:
        return report.grand_totals.warehouse_counts
    return {w: sum(row.count(w) for row in report.rows) for w in WAREHOUSES}


def overall_total(report: ParsedReport) -> int:
    """Overall stock: footer overall if present, else sum of row grand totals."""
    if report.grand_totals is not None:
        return report.grand_totals.overall
    return sum(row.grand_total for row in report.rows)


def top_customers(report: ParsedReport, limit: int = DEFAULT_TOP_CUSTOMERS) -> list[StockRow]:
    """Rows with the largest grand totals, report order kept for ties."""
    return sorted(report.rows, key=lambda row: -row.grand_total)[:limit]


def summarize_report(report: ParsedReport, top_n: int = DEFAULT_TOP_CUSTOMERS) -> ReportSummary:
    """
    Build the headline summary of a report.

    Warehouses with a zero total are left out of warehouse_shares. Percentages
    round half up (12.5 -> 13).
    """
    overall = overall_total(report)
    shares = []
    for warehouse, total in warehouse_totals(report).items():
        if total <= 0:
            continue
        percent = int(total * 100 / overall + 0.5) if overall > 0 else 0
        shares.append(WarehouseShare(warehouse=warehouse, total=total, percent=percent))

    return ReportSummary(
        date_str=report.date_str,
        overall=overall,
        customer_count=report.row_count,
        active_customers=sum(1 for row in report.rows if row.is_active),
        top_customers=top_customers(report, top_n),
        warehouse_shares=shares,
    )


def find_customer_rows(report: ParsedReport, customer_name: str) -> list[StockRow]:
    """Rows for a customer, matched case-insensitively on the trimmed name."""
    wanted = customer_name.strip().casefold()
    return [row for row in report.rows if row.customer_name.casefold() == wanted]


@dataclass
class SeriesPoint:
    date_str: str
    report_date: Optional[datetime]
    value: int


@dataclass
class CustomerSeries:
    """Stock of one (customer, wp) pair across reports."""
    customer_name: str
    wp: int
    points: list[SeriesPoint] = field(default_factory=list)


def _report_sort_key(report: ParsedReport) -> tuple:
    # Reports without a usable calendar date go last, in input order
    if report.report_date is None:
        return (1, 0.0)
    return (0, report.report_date.timestamp())


def _as_utc(value: datetime) -> datetime:
    # Naive bounds are taken as UTC, like resolved report dates
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _in_window(report: ParsedReport, date_from: Optional[datetime], date_to: Optional[datetime]) -> bool:
    if date_from is None and date_to is None:
        return True
    if report.report_date is None:
        return False
    if date_from is not None and report.report_date < _as_utc(date_from):
        return False
    if date_to is not None and report.report_date > _as_utc(date_to):
        return False
    return True


def build_customer_timeseries(
    reports: Iterable[ParsedReport],
    customers: Optional[list[str]] = None,
    field_name: str = "grand_total",
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> list[CustomerSeries]:
    """
    Build per-customer series over several reports, oldest report first.

    Args:
        reports: Parsed reports in any order
        customers: Customer names to include (case-insensitive); None for all
        field_name: "grand_total" or a warehouse value such as "annaram"
        date_from: Earliest report date to include (inclusive); None for no lower bound
        date_to: Latest report date to include (inclusive); None for no upper bound.
            When either bound is set, reports without a resolved date are left out

    Returns:
        One CustomerSeries per (customer name, wp), in order of first appearance

    Raises:
        ValueError: If field_name is not a known stock field
    """
    if field_name not in SERIES_FIELDS:
        raise ValueError(f"Unsupported series field: {field_name}")

    wanted = {name.strip().casefold() for name in customers} if customers else None
    series: dict[tuple[str, int], CustomerSeries] = {}

    window = [r for r in reports if _in_window(r, date_from, date_to)]
    for report in sorted(window, key=_report_sort_key):
        for row in report.rows:
            if wanted is not None and row.customer_name.casefold() not in wanted:
                continue
            key = (row.customer_name, row.wp)
            if key not in series:
                series[key] = CustomerSeries(customer_name=row.customer_name, wp=row.wp)
            series[key].points.append(
                SeriesPoint(
                    date_str=report.date_str,
                    report_date=report.report_date,
                    value=getattr(row, field_name),
                )
            )

    return list(series.values())
