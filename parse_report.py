#!/usr/bin/env python3
"""
Parse a saved "Major Customer Stock Report" email body

- Reads an HTML or plain-text body from a file
- Extracts the report date, customer rows and Grand Total row
- Prints a short summary and any skipped rows
- Writes the report to an Excel file in the output directory
"""

from pathlib import Path

from config import DEFAULT_CONTENT_TYPE, HTML_EXTENSIONS, INPUT_ENCODING, TOP_CUSTOMERS, OUTPUT_DIR
from core import parse_report_body, summarize_report, report_to_excel, export_filename


def detect_content_type(input_file: str) -> str:
    """Pick the body type hint from the file extension"""
    suffix = Path(input_file).suffix.lower()
    if suffix in HTML_EXTENSIONS:
        return "html"
    if suffix == ".txt":
        return "text"
    return DEFAULT_CONTENT_TYPE


def parse_report_file(input_file: str, content_type: str = None):
    """
    Main parse function

    Args:
        input_file: Path to saved email body
        content_type: "html" or "text"; detected from the extension if omitted

    Returns:
        Path of the Excel file written, or None if the body held no report
    """
    content_type = content_type or detect_content_type(input_file)

    print(f"Loading {input_file}...")
    try:
        body = Path(input_file).read_text(encoding=INPUT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading file: {e}")
        return None

    result = parse_report_body(body, content_type)

    for warning in result.warnings:
        print(f"  Warning: {warning}")

    if not result.ok:
        print(f"Skipped: {result.failure_message}")
        return None

    report = result.report
    summary = summarize_report(report, TOP_CUSTOMERS)

    print(f"\n=== Report {report.date_str} ({result.source}) ===")
    print(f"Customers: {summary.customer_count} ({summary.active_customers} with stock)")
    print(f"Overall stock: {summary.overall}")
    if not report.has_grand_totals:
        print("No Grand Total row; totals computed from rows")
    if result.skipped_rows:
        print(f"Skipped rows: {result.skipped_rows}")
    if result.defaulted_cells:
        print(f"Non-numeric cells read as 0: {result.defaulted_cells}")

    print(f"\nTop {len(summary.top_customers)} customers:")
    for row in summary.top_customers:
        print(f"  {row.sl_no:>3}. {row.customer_name}: {row.grand_total}")

    print("\nWarehouses:")
    for share in summary.warehouse_shares:
        print(f"  {share.label}: {share.total} ({share.percent}%)")

    # Create output directory
    output_path = Path(OUTPUT_DIR)
    output_path.mkdir(exist_ok=True)

    filepath = output_path / export_filename(report, "xlsx")
    filepath.write_bytes(report_to_excel(report))
    print(f"\nCreated: {filepath}")

    return filepath

if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python parse_report.py <email_body_file> [html|text]")
        print("  html = parse as HTML body (default for .html/.htm)")
        print("  text = parse as plain-text body (default for .txt)")
        sys.exit(1)

    input_file = sys.argv[1]
    content_type = sys.argv[2] if len(sys.argv) > 2 else None

    if content_type not in [None, "html", "text"]:
        print("Error: content type must be 'html' or 'text'")
        sys.exit(1)

    filepath = parse_report_file(input_file, content_type)
    sys.exit(0 if filepath else 2)
