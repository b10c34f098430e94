"""
Calculation errors.

Both are ValueError subclasses so callers that already catch ValueError
keep working.
"""


class InvalidRateError(ValueError):
    """Raised when a rate would put a zero in a denominator."""


class InvalidFrequencyError(ValueError):
    """Raised when a compounding or payment frequency is not positive."""
