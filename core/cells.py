"""Cell value normalization shared by the HTML and plain-text walkers."""

import re
from typing import Optional

_SEPARATORS = re.compile(r"[,\s]")
_LEADING_DIGITS = re.compile(r"^([0-9]+)")


def clean_text(value: Optional[str]) -> str:
    """Collapse all whitespace runs (including non-breaking spaces) and trim."""
    if not value:
        return ""
    return " ".join(value.split())


def parse_count(value: Optional[str]) -> tuple[int, bool]:
    """
    Parse a stock count cell into a non-negative integer.

    Empty, whitespace-only and "-" cells are zero. Commas and internal
    whitespace are stripped, then the leading run of digits is read
    ("1,234" -> 1234, "1 234" -> 1234, "10.00" -> 10, "10 pcs" -> 10).

    Returns:
        Tuple of (count, was_defaulted)
        - was_defaulted is True when the cell held text that does not start
          with a digit (including negative numbers) and was read as 0
    """
    if value is None:
        return 0, False
    stripped = value.strip()
    if stripped == "" or stripped == "-":
        return 0, False

    match = _LEADING_DIGITS.match(_SEPARATORS.sub("", stripped))
    if not match:
        return 0, True
    return int(match.group(1)), False


def to_count(value: Optional[str]) -> int:
    """Convert cell value to integer, treating blanks and garbage as 0."""
    return parse_count(value)[0]


def parse_sl_no(value: Optional[str]) -> Optional[int]:
    """
    Parse a sequence number cell.

    Reads the leading run of digits, so "7", "7." and "7)" all give 7.
    Returns None when the cell does not start with a digit, or for 0.
    """
    if not value:
        return None
    match = _LEADING_DIGITS.match(value.strip())
    if not match:
        return None
    sl_no = int(match.group(1))
    return sl_no if sl_no > 0 else None
