"""Report preview UI components.

This module provides Streamlit components for rendering a parsed stock report.
"""

import streamlit as st
import pandas as pd

from core.exporter import report_to_dataframe, grand_totals_to_dataframe
from core.models import ExtractionResult
from core.summary import summarize_report


def render_extraction_status(result: ExtractionResult, source_name: str):
    """Render success/failure banner and row-level warnings.

    Args:
        result: Extraction result to describe
        source_name: Name shown to the user for the parsed body
    """
    if result.ok:
        st.success(
            f"Report {result.report.date_str} parsed from {source_name} "
            f"({result.report.row_count} rows, {result.source} table)"
        )
    else:
        st.error(f"{source_name}: not a parseable stock report. {result.failure_message}")

    if result.warnings:
        with st.expander(f"Warnings ({len(result.warnings)})"):
            for warning in result.warnings:
                st.warning(warning)


def render_report(result: ExtractionResult, top_n: int):
    """Render metrics, warehouse breakdown and the customer table.

    Args:
        result: Successful extraction result
        top_n: Number of top customers to list
    """
    report = result.report
    summary = summarize_report(report, top_n)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Customers", summary.customer_count)
    col2.metric("With stock", summary.active_customers)
    col3.metric("Overall stock", f"{summary.overall:,}")
    col4.metric("Skipped rows", result.skipped_rows)

    if not report.has_grand_totals:
        st.info("No Grand Total row in this report; warehouse totals are summed from rows.")
    if result.defaulted_cells:
        st.caption(f"{result.defaulted_cells} non-numeric cell(s) were read as 0.")

    left, right = st.columns(2)
    with left:
        st.subheader("Warehouses")
        if summary.warehouse_shares:
            shares_df = pd.DataFrame(
                {
                    "Warehouse": [s.label for s in summary.warehouse_shares],
                    "Total": [s.total for s in summary.warehouse_shares],
                    "Share %": [s.percent for s in summary.warehouse_shares],
                }
            )
            st.bar_chart(shares_df, x="Warehouse", y="Total")
            st.dataframe(shares_df, hide_index=True, use_container_width=True)
        else:
            st.info("All warehouses are empty.")

    with right:
        st.subheader(f"Top {len(summary.top_customers)} customers")
        top_df = pd.DataFrame(
            {
                "Customer": [r.customer_name for r in summary.top_customers],
                "WP": [r.wp for r in summary.top_customers],
                "Grand Total": [r.grand_total for r in summary.top_customers],
            }
        )
        st.dataframe(top_df, hide_index=True, use_container_width=True)

    st.subheader("All customers")
    search = st.text_input("Filter by customer name", key="customer_filter")
    table_df = report_to_dataframe(report)
    if search.strip():
        table_df = table_df[
            table_df["Customer Name"].str.casefold().str.contains(search.strip().casefold(), regex=False)
        ]
    st.dataframe(table_df, hide_index=True, use_container_width=True)

    if report.has_grand_totals:
        with st.expander("Grand Total row"):
            st.dataframe(grand_totals_to_dataframe(report), hide_index=True, use_container_width=True)
