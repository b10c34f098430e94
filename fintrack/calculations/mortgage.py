"""
Mortgage Payment and Amortization Calculations

Level-payment mortgages paid monthly, bi-weekly, weekly or accelerated
weekly. Accelerated weekly pays 12/52 of the monthly payment every week,
which is more per year than a plain weekly schedule and pays the loan off
sooner.
"""

import enum
from dataclasses import dataclass
from datetime import date
from typing import Dict, List

from dateutil.relativedelta import relativedelta


class PaymentFrequency(str, enum.Enum):
    """Mortgage payment frequency."""

    monthly = "monthly"
    biweekly = "biweekly"
    weekly = "weekly"
    accelerated_weekly = "accelerated_weekly"

    @property
    def payments_per_year(self) -> int:
        if self is PaymentFrequency.monthly:
            return 12
        if self is PaymentFrequency.biweekly:
            return 26
        return 52

    @property
    def period_length(self) -> relativedelta:
        """Calendar distance between two consecutive payments."""
        if self is PaymentFrequency.monthly:
            return relativedelta(months=1)
        if self is PaymentFrequency.biweekly:
            return relativedelta(weeks=2)
        return relativedelta(weeks=1)


@dataclass(frozen=True)
class MortgagePayment:
    """One row of an amortization schedule."""

    period: int  # 1-based
    payment: float
    principal: float
    interest: float
    remaining_balance: float


def mortgage_payment_with_frequency(
    principal: float,
    annual_rate: float,
    years: int,
    frequency: PaymentFrequency,
) -> float:
    """
    Calculate the level payment for a mortgage.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal (e.g., 0.05 for 5%)
        years: Amortization period in years
        frequency: Payment frequency

    Returns:
        Payment per period
    """
    periods_per_year = frequency.payments_per_year
    total_periods = years * periods_per_year

    if annual_rate == 0:
        return principal / total_periods

    # Accelerated weekly is derived from the monthly payment, not from a
    # weekly annuity.
    if frequency is PaymentFrequency.accelerated_weekly:
        monthly = mortgage_monthly_payment(principal, annual_rate, years)
        return monthly * 12 / 52

    rate_per_period = annual_rate / periods_per_year
    return (rate_per_period * principal) / (
        1 - (1 + rate_per_period) ** (-total_periods)
    )


def mortgage_monthly_payment(principal: float, annual_rate: float, years: int) -> float:
    """Monthly level payment. Matches Excel's PMT() with a monthly rate."""
    return mortgage_payment_with_frequency(
        principal, annual_rate, years, PaymentFrequency.monthly
    )


def mortgage_amortization_schedule_with_frequency(
    principal: float,
    annual_rate: float,
    years: int,
    frequency: PaymentFrequency,
) -> List[MortgagePayment]:
    """
    Generate a full amortization schedule.

    The schedule stops early once the balance is paid off, so accelerated
    schedules are shorter than years * payments_per_year.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal
        years: Amortization period in years
        frequency: Payment frequency

    Returns:
        List of schedule rows ordered by period
    """
    payment = mortgage_payment_with_frequency(principal, annual_rate, years, frequency)
    periods_per_year = frequency.payments_per_year
    rate_per_period = 0.0 if annual_rate == 0 else annual_rate / periods_per_year
    total_periods = round(years * periods_per_year)

    schedule = []
    balance = principal

    for period in range(1, total_periods + 1):
        interest = 0.0 if annual_rate == 0 else balance * rate_per_period

        # Never negative, never more than what is owed
        principal_pmt = payment - interest
        principal_pmt = max(0.0, principal_pmt)
        principal_pmt = min(principal_pmt, balance)

        balance -= principal_pmt

        schedule.append(
            MortgagePayment(
                period=period,
                payment=principal_pmt + interest,
                principal=principal_pmt,
                interest=interest,
                remaining_balance=max(balance, 0.0),
            )
        )

        if balance <= 0:
            break

    return schedule


def schedule_totals(schedule: List[MortgagePayment]) -> Dict[str, float]:
    """Summarize a schedule: total paid, interest, principal, payment count."""
    return {
        "total_paid": sum(row.payment for row in schedule),
        "total_interest": sum(row.interest for row in schedule),
        "total_principal": sum(row.principal for row in schedule),
        "number_of_payments": len(schedule),
    }


def payment_dates(
    first_payment_date: date, frequency: PaymentFrequency, count: int
) -> List[date]:
    """Generate the calendar date of each of `count` payments."""
    step = frequency.period_length
    return [first_payment_date + step * i for i in range(count)]
