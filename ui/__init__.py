"""UI module for Streamlit components.

This package contains all Streamlit-specific UI components.
The components are separated from extraction logic (in core/) to allow:
- Testing of extraction logic without Streamlit
- The command-line script to share the same core
"""

from .session_state import init_session_state, store_result, clear_result
from .preview import render_extraction_status, render_report
from .results import render_downloads

__all__ = [
    # Session state
    "init_session_state",
    "store_result",
    "clear_result",
    # Preview
    "render_extraction_status",
    "render_report",
    # Results
    "render_downloads",
]
