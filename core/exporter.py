"""Export of parsed reports to DataFrame, Excel and CSV."""

import io

import pandas as pd

from .config import EXPORT_COLUMNS, STOCK_ROW_FIELDS, WAREHOUSE_LABELS, WAREHOUSES
from .models import ParsedReport

EXCEL_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIME = "text/csv"

STOCK_SHEET = "Stock"
TOTALS_SHEET = "Warehouse Totals"


def export_filename(report: ParsedReport, extension: str) -> str:
    """File name for an exported report, e.g. "stock_23.02.2026.xlsx"."""
    return f"stock_{report.date_str}.{extension.lstrip('.')}"


def report_to_dataframe(report: ParsedReport) -> pd.DataFrame:
    """
    Build a DataFrame with one row per customer.

    Columns follow the report layout: Sl No, Customer Name, WP, the 8
    warehouses, Grand Total.
    """
    records = []
    for row in report.rows:
        values = row.to_dict()
        records.append([values[name] for name in STOCK_ROW_FIELDS])
    return pd.DataFrame(records, columns=EXPORT_COLUMNS)


def grand_totals_to_dataframe(report: ParsedReport) -> pd.DataFrame:
    """
    Build a two-column DataFrame (Warehouse, Total) from the footer row.

    The last line is the overall total. Empty if the report has no footer.
    """
    if report.grand_totals is None:
        return pd.DataFrame(columns=["Warehouse", "Total"])

    totals = report.grand_totals
    records = [(WAREHOUSE_LABELS[w], totals.count(w)) for w in WAREHOUSES]
    records.append(("Overall", totals.overall))
    return pd.DataFrame(records, columns=["Warehouse", "Total"])


def report_to_excel(report: ParsedReport) -> bytes:
    """Excel workbook bytes: stock rows sheet plus a totals sheet when available."""
    excel_buffer = io.BytesIO()
    with pd.ExcelWriter(excel_buffer, engine="openpyxl") as writer:
        report_to_dataframe(report).to_excel(writer, index=False, sheet_name=STOCK_SHEET)
        if report.grand_totals is not None:
            grand_totals_to_dataframe(report).to_excel(writer, index=False, sheet_name=TOTALS_SHEET)
    return excel_buffer.getvalue()


def report_to_csv(report: ParsedReport) -> str:
    """CSV text of the stock rows (no footer)."""
    return report_to_dataframe(report).to_csv(index=False)
