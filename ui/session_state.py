"""Session state initialization and management.

This module provides functions for initializing and managing Streamlit session state.
"""

import streamlit as st

from core.config import DEFAULT_CONTENT_TYPE, DEFAULT_TOP_CUSTOMERS


def init_session_state():
    """Initialize all session state variables with defaults."""
    # Input settings
    if "content_type" not in st.session_state:
        st.session_state.content_type = DEFAULT_CONTENT_TYPE
    if "top_customers" not in st.session_state:
        st.session_state.top_customers = DEFAULT_TOP_CUSTOMERS

    # Last extraction
    if "extraction_result" not in st.session_state:
        st.session_state.extraction_result = None
    if "source_name" not in st.session_state:
        st.session_state.source_name = None


def store_result(result, source_name: str):
    """Remember the latest extraction and where its body came from.

    Args:
        result: ExtractionResult from core.parse_report_body
        source_name: Uploaded file name or "pasted text"
    """
    st.session_state.extraction_result = result
    st.session_state.source_name = source_name


def clear_result():
    """Forget the latest extraction."""
    st.session_state.extraction_result = None
    st.session_state.source_name = None
