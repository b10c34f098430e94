"""
Time Value of Money Calculations

Compounding and discounting of lump sums and of dated, irregular cash
flows. Dated flows use a flat 365-day year, the same convention as
Excel's XNPV.
"""

import enum
from datetime import date
from typing import Iterable, NamedTuple, Tuple, Union

from fintrack.calculations.errors import InvalidFrequencyError, InvalidRateError

DAYS_PER_YEAR = 365.0


class DatedCashFlow(NamedTuple):
    """A signed cash amount on a calendar date."""

    date: date
    amount: float


CashFlowLike = Union[DatedCashFlow, Tuple[date, float]]


class ContributionFrequency(str, enum.Enum):
    """How often a periodic contribution is made."""

    weekly = "weekly"
    biweekly = "biweekly"
    monthly = "monthly"
    quarterly = "quarterly"
    annually = "annually"

    @property
    def periods_per_year(self) -> int:
        return _CONTRIBUTIONS_PER_YEAR[self]


class CompoundingFrequency(str, enum.Enum):
    """How often interest is compounded."""

    annually = "annually"
    semi_annually = "semi_annually"
    quarterly = "quarterly"
    monthly = "monthly"
    daily = "daily"

    @property
    def periods_per_year(self) -> int:
        return _COMPOUNDINGS_PER_YEAR[self]


_CONTRIBUTIONS_PER_YEAR = {
    ContributionFrequency.weekly: 52,
    ContributionFrequency.biweekly: 26,
    ContributionFrequency.monthly: 12,
    ContributionFrequency.quarterly: 4,
    ContributionFrequency.annually: 1,
}

_COMPOUNDINGS_PER_YEAR = {
    CompoundingFrequency.annually: 1,
    CompoundingFrequency.semi_annually: 2,
    CompoundingFrequency.quarterly: 4,
    CompoundingFrequency.monthly: 12,
    CompoundingFrequency.daily: 365,
}


def real_rate(nominal_rate: float, inflation_rate: float) -> float:
    """
    Inflation-adjusted rate using the Fisher equation.

    Args:
        nominal_rate: Nominal annual rate as decimal (e.g., 0.05 for 5%)
        inflation_rate: Annual inflation rate as decimal

    Returns:
        Real annual rate as decimal

    Raises:
        InvalidRateError: If inflation_rate is -1 (100% deflation)
    """
    if inflation_rate == -1:
        raise InvalidRateError("Inflation rate of -100% has no real rate")
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def _growth_factor(annual_rate: float, years: float, compounding_per_year: int) -> float:
    if compounding_per_year <= 0:
        raise InvalidFrequencyError("Compounding periods per year must be positive")
    rate_per_period = annual_rate / compounding_per_year
    return (1 + rate_per_period) ** (years * compounding_per_year)


def future_value(
    present_value: float,
    annual_rate: float,
    years: float,
    compounding_per_year: int,
) -> float:
    """
    Compound a present amount forward.

    Args:
        present_value: Amount today
        annual_rate: Nominal annual rate as decimal
        years: Number of years (may be fractional)
        compounding_per_year: Compounding periods per year (e.g., 12)

    Returns:
        Value after `years` years
    """
    return present_value * _growth_factor(annual_rate, years, compounding_per_year)


def present_value(
    future_value: float,
    annual_rate: float,
    years: float,
    compounding_per_year: int,
) -> float:
    """Discount a future amount back to today. Inverse of future_value()."""
    return future_value / _growth_factor(annual_rate, years, compounding_per_year)


def _years_between(start: date, end: date) -> float:
    return (end - start).days / DAYS_PER_YEAR


def present_value_of_dated_cash_flows(
    cash_flows: Iterable[CashFlowLike],
    valuation_date: date,
    real_annual_rate: float,
) -> float:
    """
    Present value of irregular dated cash flows.

    Each flow is discounted by (1 + rate) ** t where t is the signed number
    of years from the valuation date to the flow. Flows dated before the
    valuation date have negative t and are compounded forward instead.

    Args:
        cash_flows: (date, amount) pairs, in any order
        valuation_date: Date the value is measured at
        real_annual_rate: Effective annual discount rate (see real_rate())

    Returns:
        Sum of discounted amounts
    """
    if real_annual_rate == 0.0:
        return sum(amount for _, amount in cash_flows)

    total = 0.0
    for flow_date, amount in cash_flows:
        t_years = _years_between(valuation_date, flow_date)
        total += amount / ((1 + real_annual_rate) ** t_years)
    return total


def future_value_of_dated_cash_flows(
    cash_flows: Iterable[CashFlowLike],
    horizon_date: date,
    real_annual_rate: float,
) -> float:
    """
    Future value of irregular dated cash flows at a horizon date.

    Mirror of present_value_of_dated_cash_flows(): each flow is compounded
    by (1 + rate) ** t where t runs from the flow date to the horizon.
    """
    if real_annual_rate == 0.0:
        return sum(amount for _, amount in cash_flows)

    total = 0.0
    for flow_date, amount in cash_flows:
        t_years = _years_between(flow_date, horizon_date)
        total += amount * ((1 + real_annual_rate) ** t_years)
    return total


def simple_interest_future_value(
    principal: float, annual_rate: float, years: float
) -> float:
    """Future value with simple (non-compounding) interest."""
    return principal * (1 + annual_rate * years)


def compound_interest_future_value_with_contributions(
    initial: float,
    contribution: float,
    contribution_frequency: ContributionFrequency,
    annual_rate: float,
    compounding_frequency: CompoundingFrequency,
    years: float,
) -> float:
    """
    Future value of a starting balance plus regular contributions.

    Contributions are made at the end of each contribution period. When
    contributions and compounding run on different schedules, contributions
    grow at the effective rate per contribution period implied by the
    compounding schedule.

    Args:
        initial: Starting balance
        contribution: Amount added each contribution period
        contribution_frequency: How often contributions are made
        annual_rate: Nominal annual rate as decimal
        compounding_frequency: How often interest compounds
        years: Investment horizon in years

    Returns:
        Balance at the end of the horizon
    """
    contributions_per_year = contribution_frequency.periods_per_year
    compounding_per_year = compounding_frequency.periods_per_year
    n_contributions = round(years * contributions_per_year)

    if annual_rate == 0:
        return initial + contribution * n_contributions

    lump_sum = future_value(initial, annual_rate, years, compounding_per_year)

    # Effective rate per contribution period
    rate_per_contribution = (1 + annual_rate / compounding_per_year) ** (
        compounding_per_year / contributions_per_year
    ) - 1
    annuity = contribution * (
        ((1 + rate_per_contribution) ** n_contributions - 1) / rate_per_contribution
    )

    return lump_sum + annuity
