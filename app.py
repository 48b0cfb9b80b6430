"""
Stock Report Streamlit App

A web interface for checking "Major Customer Stock Report" email bodies:
paste or upload a body, preview the extracted table, download it.
"""

import streamlit as st

from core import parse_report_body
from ui import (
    init_session_state,
    store_result,
    clear_result,
    render_extraction_status,
    render_report,
    render_downloads,
)

# Page config
st.set_page_config(
    page_title="Stock Report Parser",
    page_icon="📦",
    layout="wide",
)

init_session_state()

CONTENT_TYPE_OPTIONS = {
    "html": "HTML body",
    "text": "Plain-text body",
}


def read_uploaded_body(uploaded_file) -> tuple[str | None, str | None]:
    """Decode an uploaded email body.

    Returns:
        Tuple of (body, error_message)
    """
    try:
        return uploaded_file.getvalue().decode("utf-8"), None
    except UnicodeDecodeError as e:
        return None, f"File is not UTF-8 text: {e}"


# Sidebar settings
with st.sidebar:
    st.header("Settings")
    st.session_state.content_type = st.radio(
        "Body type",
        options=list(CONTENT_TYPE_OPTIONS),
        format_func=CONTENT_TYPE_OPTIONS.get,
        index=list(CONTENT_TYPE_OPTIONS).index(st.session_state.content_type),
        help="HTML bodies fall back to plain-text parsing if no table is found",
    )
    st.session_state.top_customers = st.number_input(
        "Top customers",
        min_value=1,
        max_value=50,
        value=st.session_state.top_customers,
    )

st.title("📦 Major Customer Stock Report")

tab_upload, tab_paste = st.tabs(["Upload body", "Paste body"])

with tab_upload:
    uploaded_file = st.file_uploader(
        "Email body (.html, .htm, .txt)",
        type=["html", "htm", "txt"],
        key="body_upload",
    )
    if uploaded_file is not None and st.button("Parse file", type="primary", key="parse_file"):
        body, error = read_uploaded_body(uploaded_file)
        if error:
            clear_result()
            st.error(error)
        else:
            store_result(parse_report_body(body, st.session_state.content_type), uploaded_file.name)

with tab_paste:
    pasted = st.text_area("Email body", height=250, key="body_paste")
    if st.button("Parse text", type="primary", key="parse_text", disabled=not pasted.strip()):
        store_result(parse_report_body(pasted, st.session_state.content_type), "pasted text")

result = st.session_state.extraction_result
if result is not None:
    st.divider()
    render_extraction_status(result, st.session_state.source_name)
    if result.ok:
        render_report(result, st.session_state.top_customers)
        render_downloads(result.report)
