"""Download UI components.

This module provides Streamlit components for downloading a parsed report.
"""

import json

import streamlit as st

from core.exporter import CSV_MIME, EXCEL_MIME, export_filename, report_to_csv, report_to_excel
from core.models import ParsedReport


def render_downloads(report: ParsedReport):
    """Render Excel, CSV and JSON download buttons for a report.

    Args:
        report: Parsed report to export
    """
    st.divider()
    st.subheader("Downloads")

    col1, col2, col3 = st.columns(3)
    col1.download_button(
        label="Download Excel",
        data=report_to_excel(report),
        file_name=export_filename(report, "xlsx"),
        mime=EXCEL_MIME,
        type="primary",
        key="download_excel",
    )
    col2.download_button(
        label="Download CSV",
        data=report_to_csv(report),
        file_name=export_filename(report, "csv"),
        mime=CSV_MIME,
        key="download_csv",
    )
    col3.download_button(
        label="Download JSON",
        data=json.dumps(report.to_dict(), indent=2),
        file_name=export_filename(report, "json"),
        mime="application/json",
        key="download_json",
    )
