"""
Tests for parsing of user-entered calculator inputs.
"""

import pytest
from datetime import date

from fintrack.calculations.time_value import DatedCashFlow
from fintrack.parsing import (
    ParseError,
    parse_amount,
    parse_cash_flow_line,
    parse_cash_flow_lines,
    parse_percentage,
)


class TestParsePercentage:
    """Test percentage fields."""

    @pytest.mark.parametrize("text", ["5", "5%", " 5.00 % ", "5.0"])
    def test_parse_percentage(self, text):
        assert parse_percentage(text) == pytest.approx(0.05)

    def test_negative_percentage(self):
        assert parse_percentage("-1.5%") == pytest.approx(-0.015)

    @pytest.mark.parametrize("text", ["", "%", "five", "5%%x"])
    def test_invalid_percentage(self, text):
        with pytest.raises(ParseError):
            parse_percentage(text)


class TestParseAmount:
    """Test money amounts."""

    def test_plain(self):
        assert parse_amount("100") == 100.0

    def test_currency_and_separators(self):
        assert parse_amount("$1,250.50") == 1250.50

    def test_negative(self):
        assert parse_amount("-300") == -300.0

    def test_invalid(self):
        with pytest.raises(ParseError):
            parse_amount("abc")


class TestParseCashFlows:
    """Test "YYYY-MM-DD amount" lines."""

    def test_parse_line(self):
        flow = parse_cash_flow_line("2025-03-01 1500")
        assert flow == DatedCashFlow(date(2025, 3, 1), 1500.0)

    def test_parse_line_comma_separated(self):
        flow = parse_cash_flow_line("2025-03-01, -1,000.00")
        assert flow.date == date(2025, 3, 1)
        assert flow.amount == -1000.0

    def test_parse_line_missing_amount(self):
        with pytest.raises(ParseError):
            parse_cash_flow_line("2025-03-01")

    def test_parse_line_bad_date(self):
        with pytest.raises(ParseError, match="YYYY-MM-DD"):
            parse_cash_flow_line("03/01/2025 100")

    def test_parse_lines_skips_blanks_and_comments(self):
        text = """
        # opening deposit
        2025-01-01 -1000

        2025-07-01 50
        2026-01-01 1050
        """
        flows = parse_cash_flow_lines(text)
        assert [f.amount for f in flows] == [-1000.0, 50.0, 1050.0]
        assert flows[-1].date == date(2026, 1, 1)

    def test_parse_lines_reports_line_number(self):
        text = "2025-01-01 100\n2025-02-30 100\n"
        with pytest.raises(ParseError, match="Line 2"):
            parse_cash_flow_lines(text)

    def test_parse_empty_text(self):
        assert parse_cash_flow_lines("") == []
