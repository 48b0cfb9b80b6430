"""Plain-text stock table walker.

Plain-text reports have one row per line with tab-separated fields:

    Sl No   Customer Name   Wp   Annaram ... Prime Pack   Grand Total
    1       Acme Co         5    10      ... 0            10
    Grand Total             10   0       ... 0            10
"""

from .cells import parse_sl_no
from .config import GRAND_TOTAL_MIN_VALUES, HEADER_LINE_MARKER, TEXT_FIELD_SEPARATOR, TEXT_MIN_ROW_FIELDS
from .models import TableParse
from .rows import build_grand_totals, build_stock_row, is_grand_total_cell


def split_fields(line: str) -> list[str]:
    """Split a line on runs of tabs (empty fields collapse)."""
    return TEXT_FIELD_SEPARATOR.split(line)


def _numbered_lines(text: str) -> list[tuple[int, str]]:
    """Non-empty trimmed lines with their 1-based line numbers."""
    numbered = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if line:
            numbered.append((line_number, line))
    return numbered


def parse_text_table(text: str) -> TableParse:
    """
    Parse the stock table out of a plain-text email body.

    Lines before the first line starting with "Sl No" are ignored, and so are later header lines. After it:
    - A line starting with "Grand Total" is the footer and needs at least 9
      values after the marker. Only the first footer is kept.
    - Any other line is a data row if it has at least 12 fields and field 0
      is a sequence number. Other lines are skipped.

    Args:
        text: Raw body text

    Returns:
        TableParse; found is False when no header line exists
    """
    lines = _numbered_lines(text)
    header_idx = next(
        (i for i, (_, line) in enumerate(lines) if HEADER_LINE_MARKER.match(line)),
        None,
    )
    if header_idx is None:
        return TableParse(found=False)

    result = TableParse(found=True)

    for line_number, line in lines[header_idx + 1:]:
        if HEADER_LINE_MARKER.match(line):
            # Header repeated further down the body
            continue
        if is_grand_total_cell(line):
            values = split_fields(line)[1:]
            if len(values) < GRAND_TOTAL_MIN_VALUES:
                result.warnings.append(
                    f"Line {line_number}: 'Grand Total' row has {len(values)} value(s), "
                    f"expected {GRAND_TOTAL_MIN_VALUES}; ignored"
                )
                continue
            if result.grand_totals is not None:
                result.warnings.append(f"Line {line_number}: extra 'Grand Total' row ignored")
                continue
            result.grand_totals, defaulted = build_grand_totals(values)
            result.defaulted_cells += defaulted
            continue

        fields = split_fields(line)
        if len(fields) < 2:
            # Prose such as greetings and signatures
            continue
        if len(fields) < TEXT_MIN_ROW_FIELDS:
            result.skipped_rows += 1
            result.warnings.append(
                f"Line {line_number} skipped: {len(fields)} field(s), expected {TEXT_MIN_ROW_FIELDS}"
            )
            continue

        sl_no = parse_sl_no(fields[0])
        if sl_no is None:
            result.skipped_rows += 1
            result.warnings.append(f"Line {line_number} skipped: invalid Sl No {fields[0]!r}")
            continue

        row, defaulted = build_stock_row(fields, sl_no)
        result.defaulted_cells += defaulted
        if row is None:
            result.skipped_rows += 1
            result.warnings.append(f"Line {line_number} skipped: blank customer name")
            continue
        result.rows.append(row)

    return result
