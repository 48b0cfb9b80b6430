"""Tests for the plain-text table walker."""

from core.models import GrandTotals, StockRow
from core.text_table import parse_text_table, split_fields
from tests.conftest import ACME_CELLS, ACME_TOTAL_VALUES, BETA_CELLS, HEADER_CELLS, create_text_body


class TestSplitFields:
    def test_runs_of_tabs_collapse(self):
        """Consecutive tabs count as one separator."""
        assert split_fields("1\t\tAcme\t5") == ["1", "Acme", "5"]


class TestParseTextTable:
    """Tests for header location and row parsing."""

    def test_single_row_with_footer(self, acme_row):
        """One data row followed by one footer."""
        result = parse_text_table(create_text_body([ACME_CELLS], [ACME_TOTAL_VALUES]))

        assert result.found
        assert result.rows == [acme_row]
        assert result.grand_totals == GrandTotals(annaram=10, overall=10)
        assert result.skipped_rows == 0
        assert result.warnings == []

    def test_no_header_line(self):
        """Without an "Sl No" line the table is not found."""
        result = parse_text_table("Major Customer Stock as on - 23.02.2026\n1\tAcme Co\t5")
        assert not result.found
        assert not result.has_rows

    def test_header_tolerates_spacing_and_case(self):
        body = "SLNO\tCustomer Name\n" + "\t".join(ACME_CELLS)
        result = parse_text_table(body)
        assert result.found
        assert len(result.rows) == 1

    def test_lines_before_header_ignored(self):
        """Data-shaped lines above the header are not parsed."""
        stray = "\t".join(["9", "Stray", *["1"] * 10])
        result = parse_text_table(create_text_body([ACME_CELLS], preamble=[stray]))
        assert [row.customer_name for row in result.rows] == ["Acme Co"]

    def test_numbers_normalized(self):
        """Commas, "-" and empty-looking cells go through the normalizer."""
        result = parse_text_table(create_text_body([BETA_CELLS]))

        row = result.rows[0]
        assert row.annaram == 1200
        assert row.kothur == 300
        assert row.narkuda == 0
        assert row.p5 == 50
        assert row.prime_pack == 25
        assert row.grand_total == 1575

    def test_eleven_fields_dropped(self):
        """A data line one field short is dropped, not defaulted."""
        short = ACME_CELLS[:11]
        result = parse_text_table(create_text_body([short]))

        assert result.found
        assert result.rows == []
        assert result.skipped_rows == 1
        assert "11 field(s)" in result.warnings[0]

    def test_malformed_row_among_valid_rows(self):
        """A 5-field line is skipped, the valid row is kept."""
        result = parse_text_table(create_text_body([ACME_CELLS, ["2", "Broken", "1", "2", "3"]]))

        assert [row.sl_no for row in result.rows] == [1]
        assert result.skipped_rows == 1

    def test_non_numeric_sl_no_dropped(self):
        cells = ["A1", *ACME_CELLS[1:]]
        result = parse_text_table(create_text_body([cells, ACME_CELLS]))
        assert len(result.rows) == 1
        assert result.skipped_rows == 1

    def test_defaulted_cells_counted(self):
        cells = ["1", "Acme Co", "5", "ten", *["0"] * 7, "n/a"]
        result = parse_text_table(create_text_body([cells]))
        assert result.rows[0].annaram == 0
        assert result.rows[0].grand_total == 0
        assert result.defaulted_cells == 2

    def test_decimal_cells_keep_whole_part(self):
        """Counts written with decimals, as some mail clients render them."""
        cells = ["1", "Acme Co", "5", "10.00", *["0.00"] * 7, "10.00"]
        result = parse_text_table(create_text_body([cells], [["10.00", *["0"] * 7, "10.00"]]))

        assert result.rows[0].annaram == 10
        assert result.rows[0].grand_total == 10
        assert result.grand_totals == GrandTotals(annaram=10, overall=10)
        assert result.defaulted_cells == 0

    def test_repeated_header_line_ignored(self):
        """A header repeated between data lines is neither a row nor skipped."""
        header = "\t".join(HEADER_CELLS)
        result = parse_text_table(create_text_body([ACME_CELLS], trailer=[header]))

        assert len(result.rows) == 1
        assert result.skipped_rows == 0
        assert result.warnings == []

    def test_first_grand_total_wins(self):
        """A second footer row is ignored without error."""
        second = ["99", "0", "0", "0", "0", "0", "0", "0", "99"]
        result = parse_text_table(create_text_body([ACME_CELLS], [ACME_TOTAL_VALUES, second]))

        assert result.grand_totals.annaram == 10
        assert result.grand_totals.overall == 10
        assert any("extra 'Grand Total'" in w for w in result.warnings)

    def test_short_grand_total_ignored(self):
        """A footer with fewer than 9 values is not recorded."""
        result = parse_text_table(create_text_body([ACME_CELLS], [["10", "0", "10"]]))
        assert result.grand_totals is None
        assert len(result.rows) == 1

    def test_grand_total_never_a_data_row(self):
        """Footer lines do not count as skipped data rows."""
        result = parse_text_table(create_text_body([ACME_CELLS], [ACME_TOTAL_VALUES]))
        assert result.skipped_rows == 0

    def test_footer_without_rows(self):
        """A table with only a footer is found but has no rows."""
        result = parse_text_table(create_text_body([], [ACME_TOTAL_VALUES]))
        assert result.found
        assert not result.has_rows
        assert result.grand_totals is not None

    def test_row_order_preserved(self):
        rows = [
            ["3", "Gamma", *["1"] * 10],
            ["1", "Alpha", *["1"] * 10],
            ["2", "Beta", *["1"] * 10],
        ]
        result = parse_text_table(create_text_body(rows))
        assert [row.customer_name for row in result.rows] == ["Gamma", "Alpha", "Beta"]

    def test_crlf_line_endings(self):
        body = create_text_body([ACME_CELLS], [ACME_TOTAL_VALUES]).replace("\n", "\r\n")
        result = parse_text_table(body)
        assert result.rows[0] == StockRow(sl_no=1, customer_name="Acme Co", wp=5, annaram=10, grand_total=10)
        assert result.grand_totals.overall == 10
