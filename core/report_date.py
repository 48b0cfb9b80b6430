"""Report date recognition.

Reports carry their date in a marker line such as
"Major Customer Stock Report as on - 23.02.2026".
"""

from datetime import datetime, timezone
from typing import Optional

from .config import REPORT_DATE_PATTERN


def find_report_date(text: str) -> Optional[str]:
    """
    Find the report date token in raw document text.

    The token is returned exactly as written ("DD.MM.YYYY"). Day and month
    are not checked here, so "31.02.2026" is returned as-is.

    Args:
        text: Full raw body (HTML or plain text)

    Returns:
        Date token or None if no marker is present
    """
    if not text:
        return None
    match = REPORT_DATE_PATTERN.search(text)
    return match.group(1) if match else None


def resolve_report_date(date_str: str) -> datetime:
    """
    Convert a "DD.MM.YYYY" token to a datetime at UTC midnight.

    Impossible calendar dates are rejected rather than rolled forward.

    Raises:
        ValueError: If the token is malformed or not a real calendar date
    """
    parts = date_str.strip().split(".")
    if len(parts) != 3:
        raise ValueError(f"Invalid report date: {date_str!r}")
    day, month, year = (int(p) for p in parts)
    return datetime(year, month, day, tzinfo=timezone.utc)
