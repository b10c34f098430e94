"""
Tests for mortgage payment and amortization calculations.
"""

import pytest
from datetime import date

from fintrack.calculations.mortgage import (
    MortgagePayment,
    PaymentFrequency,
    mortgage_amortization_schedule_with_frequency,
    mortgage_monthly_payment,
    mortgage_payment_with_frequency,
    payment_dates,
    schedule_totals,
)


class TestMortgagePayment:
    """Test level payment calculation."""

    def test_monthly_payment(self):
        """Test standard 30-year monthly payment."""
        # $300,000 at 6% for 30 years, approximately $1,798.65
        payment = mortgage_monthly_payment(300000, 0.06, 30)
        assert abs(payment - 1798.65) < 0.01

    def test_monthly_wrapper_matches_frequency_function(self):
        """Test the monthly wrapper is the monthly frequency."""
        assert mortgage_monthly_payment(250000, 0.045, 25) == mortgage_payment_with_frequency(
            250000, 0.045, 25, PaymentFrequency.monthly
        )

    def test_zero_rate_payment(self):
        """Test zero interest spreads principal evenly."""
        payment = mortgage_payment_with_frequency(
            300000, 0.0, 30, PaymentFrequency.biweekly
        )
        assert payment == pytest.approx(300000 / (30 * 26))

    def test_accelerated_weekly_is_monthly_times_12_over_52(self):
        """Test accelerated weekly is derived from the monthly payment."""
        monthly = mortgage_monthly_payment(300000, 0.05, 30)
        accelerated = mortgage_payment_with_frequency(
            300000, 0.05, 30, PaymentFrequency.accelerated_weekly
        )
        assert accelerated == pytest.approx(monthly * 12 / 52)

    def test_accelerated_weekly_pays_more_per_year_than_weekly(self):
        """Test accelerated weekly payment exceeds the plain weekly payment."""
        weekly = mortgage_payment_with_frequency(
            300000, 0.05, 30, PaymentFrequency.weekly
        )
        accelerated = mortgage_payment_with_frequency(
            300000, 0.05, 30, PaymentFrequency.accelerated_weekly
        )
        assert accelerated > weekly

    def test_payments_per_year(self):
        """Test frequency to payments-per-year mapping."""
        assert PaymentFrequency.monthly.payments_per_year == 12
        assert PaymentFrequency.biweekly.payments_per_year == 26
        assert PaymentFrequency.weekly.payments_per_year == 52
        assert PaymentFrequency.accelerated_weekly.payments_per_year == 52


class TestAmortizationSchedule:
    """Test amortization schedules."""

    def test_mortgage_payment_and_schedule(self):
        """Test 30-year monthly schedule pays off the loan."""
        schedule = mortgage_amortization_schedule_with_frequency(
            300000, 0.05, 30, PaymentFrequency.monthly
        )
        assert schedule
        assert len(schedule) <= 360
        assert abs(schedule[-1].remaining_balance) < 1.0

    def test_rows_are_ordered_and_one_based(self):
        """Test periods run 1, 2, 3, ... and balances decline."""
        schedule = mortgage_amortization_schedule_with_frequency(
            100000, 0.06, 5, PaymentFrequency.monthly
        )
        assert [row.period for row in schedule] == list(range(1, len(schedule) + 1))
        balances = [row.remaining_balance for row in schedule]
        assert balances == sorted(balances, reverse=True)
        assert isinstance(schedule[0], MortgagePayment)

    def test_first_period_split(self):
        """Test first period interest is the balance times the periodic rate."""
        schedule = mortgage_amortization_schedule_with_frequency(
            300000, 0.06, 30, PaymentFrequency.monthly
        )
        first = schedule[0]
        assert first.interest == pytest.approx(1500.0)
        assert first.principal == pytest.approx(first.payment - 1500.0)
        assert first.remaining_balance == pytest.approx(300000 - first.principal)

    def test_accelerated_weekly_pays_off_faster_than_standard_weekly(self):
        """Test accelerated weekly costs less in total and finishes sooner."""
        weekly = mortgage_amortization_schedule_with_frequency(
            300000, 0.05, 30, PaymentFrequency.weekly
        )
        accelerated = mortgage_amortization_schedule_with_frequency(
            300000, 0.05, 30, PaymentFrequency.accelerated_weekly
        )
        total_weekly = sum(row.payment for row in weekly)
        total_accelerated = sum(row.payment for row in accelerated)

        assert total_accelerated < total_weekly
        assert len(accelerated) < len(weekly)
        assert accelerated[-1].remaining_balance == 0.0

    def test_final_payment_is_capped(self):
        """Test the last accelerated payment only covers what is owed."""
        accelerated = mortgage_amortization_schedule_with_frequency(
            300000, 0.05, 30, PaymentFrequency.accelerated_weekly
        )
        level = mortgage_payment_with_frequency(
            300000, 0.05, 30, PaymentFrequency.accelerated_weekly
        )
        assert accelerated[-1].payment <= level
        for row in accelerated[:-1]:
            assert row.payment == pytest.approx(level)

    def test_zero_rate_schedule(self):
        """Test zero interest gives constant principal and no interest."""
        schedule = mortgage_amortization_schedule_with_frequency(
            120000, 0.0, 10, PaymentFrequency.monthly
        )
        expected_principal = 120000 / 120

        assert all(row.interest == 0 for row in schedule)
        for row in schedule[:-1]:
            assert row.principal == pytest.approx(expected_principal)
        assert schedule[-1].principal <= expected_principal + 1e-9
        assert schedule[-1].remaining_balance < 1e-6

    @pytest.mark.parametrize(
        "principal,rate,years,frequency",
        [
            (300000, 0.05, 30, PaymentFrequency.monthly),
            (300000, 0.05, 30, PaymentFrequency.biweekly),
            (300000, 0.05, 30, PaymentFrequency.weekly),
            (300000, 0.05, 30, PaymentFrequency.accelerated_weekly),
            (50000, 0.0, 5, PaymentFrequency.weekly),
            (750000, 0.0725, 15, PaymentFrequency.monthly),
            (1000, 0.12, 1, PaymentFrequency.accelerated_weekly),
        ],
    )
    def test_principal_conservation(self, principal, rate, years, frequency):
        """Test the principal portions add back up to the loan amount."""
        schedule = mortgage_amortization_schedule_with_frequency(
            principal, rate, years, frequency
        )
        total_principal = sum(row.principal for row in schedule)
        assert abs(total_principal - principal) < 1e-3

    def test_payment_is_principal_plus_interest(self):
        """Test each row's payment is the sum of its parts."""
        schedule = mortgage_amortization_schedule_with_frequency(
            200000, 0.04, 20, PaymentFrequency.biweekly
        )
        for row in schedule:
            assert row.payment == pytest.approx(row.principal + row.interest)
            assert row.remaining_balance >= 0

    def test_schedule_totals(self):
        """Test summary totals."""
        schedule = mortgage_amortization_schedule_with_frequency(
            100000, 0.06, 5, PaymentFrequency.monthly
        )
        totals = schedule_totals(schedule)
        assert totals["number_of_payments"] == len(schedule)
        assert totals["total_principal"] == pytest.approx(100000, abs=1e-3)
        assert totals["total_paid"] == pytest.approx(
            totals["total_principal"] + totals["total_interest"]
        )

    def test_rows_are_immutable(self):
        """Test schedule rows cannot be modified."""
        row = mortgage_amortization_schedule_with_frequency(
            1000, 0.05, 1, PaymentFrequency.monthly
        )[0]
        with pytest.raises(AttributeError):
            row.payment = 0


class TestPaymentDates:
    """Test payment date generation."""

    def test_monthly_dates_clip_to_month_end(self):
        """Test monthly steps keep the day of month where possible."""
        dates = payment_dates(date(2025, 1, 31), PaymentFrequency.monthly, 3)
        assert dates == [date(2025, 1, 31), date(2025, 2, 28), date(2025, 3, 31)]

    def test_biweekly_dates(self):
        """Test bi-weekly steps are 14 days apart."""
        dates = payment_dates(date(2025, 1, 1), PaymentFrequency.biweekly, 3)
        assert dates == [date(2025, 1, 1), date(2025, 1, 15), date(2025, 1, 29)]

    def test_accelerated_weekly_dates(self):
        """Test accelerated weekly pays every week."""
        dates = payment_dates(date(2025, 1, 1), PaymentFrequency.accelerated_weekly, 2)
        assert dates == [date(2025, 1, 1), date(2025, 1, 8)]
