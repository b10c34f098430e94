"""
Parsing of user-entered calculator inputs.

Turns text such as "5.25%" or a block of "YYYY-MM-DD amount" lines into
the values the calculation engine expects.
"""

import re
from datetime import date
from typing import List

from fintrack.calculations.time_value import DatedCashFlow

_SEPARATOR = re.compile(r"[\s,;]+")


class ParseError(ValueError):
    """Raised when user input cannot be parsed."""


def parse_amount(text: str) -> float:
    """Parse a money amount like "-1,250.50" or "$300"."""
    cleaned = text.strip().replace("$", "").replace(",", "").replace("_", "")
    if not cleaned:
        raise ParseError("Amount is empty")
    try:
        return float(cleaned)
    except ValueError:
        raise ParseError(f"Invalid amount: {text!r}")


def parse_percentage(text: str) -> float:
    """
    Parse a percentage field into a decimal rate.

    "5", "5%" and " 5.00 % " all return 0.05.
    """
    cleaned = text.strip().rstrip("%").strip()
    if not cleaned:
        raise ParseError("Percentage is empty")
    try:
        return float(cleaned) / 100
    except ValueError:
        raise ParseError(f"Invalid percentage: {text!r}")


def parse_cash_flow_line(line: str) -> DatedCashFlow:
    """Parse a single "YYYY-MM-DD amount" line."""
    parts = _SEPARATOR.split(line.strip(), maxsplit=1)
    if len(parts) != 2:
        raise ParseError(f"Expected 'YYYY-MM-DD amount', got {line.strip()!r}")

    date_text, amount_text = parts
    try:
        flow_date = date.fromisoformat(date_text)
    except ValueError:
        raise ParseError(f"Date must be in YYYY-MM-DD format: {date_text!r}")

    return DatedCashFlow(flow_date, parse_amount(amount_text))


def parse_cash_flow_lines(text: str) -> List[DatedCashFlow]:
    """
    Parse a block of cash flow lines, one flow per line.

    Blank lines and lines starting with '#' are ignored. Errors name the
    offending line number.
    """
    flows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            flows.append(parse_cash_flow_line(stripped))
        except ParseError as e:
            raise ParseError(f"Line {line_number}: {e}")
    return flows
