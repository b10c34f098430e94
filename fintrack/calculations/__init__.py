"""
Financial Calculation Engine

Pure calculation modules for personal-finance analysis: time value of
money, bond pricing and mortgage amortization. Nothing here touches the
database or the network.
"""

from fintrack.calculations import bonds, errors, mortgage, time_value

__all__ = ["bonds", "errors", "mortgage", "time_value"]
