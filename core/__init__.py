"""Core module for stock report extraction."""

from .config import Warehouse, WAREHOUSES
from .models import (
    StockRow,
    GrandTotals,
    ParsedReport,
    TableParse,
    ExtractionFailure,
    ExtractionResult,
)
from .cells import parse_count, to_count, parse_sl_no
from .report_date import find_report_date, resolve_report_date
from .html_table import parse_html_table, find_stock_table
from .text_table import parse_text_table
from .report_parser import parse_report_body
from .exporter import (
    export_filename,
    report_to_dataframe,
    grand_totals_to_dataframe,
    report_to_excel,
    report_to_csv,
)
from .summary import (
    ReportSummary,
    WarehouseShare,
    CustomerSeries,
    summarize_report,
    find_customer_rows,
    build_customer_timeseries,
)

__all__ = [
    # Config
    "Warehouse",
    "WAREHOUSES",
    # Models
    "StockRow",
    "GrandTotals",
    "ParsedReport",
    "TableParse",
    "ExtractionFailure",
    "ExtractionResult",
    # Cells and dates
    "parse_count",
    "to_count",
    "parse_sl_no",
    "find_report_date",
    "resolve_report_date",
    # Table walkers
    "parse_html_table",
    "find_stock_table",
    "parse_text_table",
    # Extraction
    "parse_report_body",
    # Export
    "export_filename",
    "report_to_dataframe",
    "grand_totals_to_dataframe",
    "report_to_excel",
    "report_to_csv",
    # Summary
    "ReportSummary",
    "WarehouseShare",
    "CustomerSeries",
    "summarize_report",
    "find_customer_rows",
    "build_customer_timeseries",
]
