"""
Calculator request/response schemas and the functions that evaluate them.

Request schemas reject values the calculation engine does not handle
(non-positive principal, face value or term), so the engine is only ever
called with usable inputs. Shared by the HTTP API and saved scenarios.
"""

import datetime
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from fintrack.calculations import bonds, mortgage, time_value
from fintrack.calculations.mortgage import PaymentFrequency
from fintrack.calculations.time_value import (
    CompoundingFrequency,
    ContributionFrequency,
    DatedCashFlow,
)
from fintrack.parsing import parse_cash_flow_lines


class CalculationError(ValueError):
    """Raised when a result cannot be represented as a finite float."""


class CalculationResult(BaseModel):
    """Base for calculator responses. Results must be finite."""

    model_config = ConfigDict(allow_inf_nan=False)


# =============================================================================
# Time value of money
# =============================================================================


class RealRateInput(BaseModel):
    """Input for real rate calculation."""

    nominal_rate: float = Field(..., gt=-1)
    inflation_rate: float = Field(..., gt=-1)


class RealRateResponse(CalculationResult):
    real_rate: float


class FutureValueInput(BaseModel):
    """Input for compounding a present amount forward."""

    present_value: float
    annual_rate: float = Field(..., gt=-1)
    years: float = Field(..., ge=0)
    compounding_per_year: int = Field(default=12, gt=0)


class FutureValueResponse(CalculationResult):
    future_value: float


class PresentValueInput(BaseModel):
    """Input for discounting a future amount back to today."""

    future_value: float
    annual_rate: float = Field(..., gt=-1)
    years: float = Field(..., ge=0)
    compounding_per_year: int = Field(default=12, gt=0)


class PresentValueResponse(CalculationResult):
    present_value: float


class CashFlowItem(BaseModel):
    """A single dated cash flow."""

    date: datetime.date
    amount: float


class DatedCashFlowInput(BaseModel):
    """
    Input for dated cash flow valuation.

    Flows come either as structured items or as "YYYY-MM-DD amount" text
    lines (both are combined when given). The discount rate is either a real
    rate or a nominal rate adjusted for inflation.
    """

    flows: List[CashFlowItem] = []
    flows_text: Optional[str] = None
    valuation_date: date
    horizon_date: Optional[date] = None
    real_annual_rate: Optional[float] = Field(default=None, gt=-1)
    nominal_rate: Optional[float] = Field(default=None, gt=-1)
    inflation_rate: float = Field(default=0.0, gt=-1)

    @model_validator(mode="after")
    def check_rate_given(self):
        if self.real_annual_rate is None and self.nominal_rate is None:
            raise ValueError("Either real_annual_rate or nominal_rate is required")
        return self


class DatedCashFlowResponse(CalculationResult):
    """Present value at the valuation date and future value at the horizon."""

    real_annual_rate: float
    number_of_flows: int
    valuation_date: date
    horizon_date: date
    present_value: float
    future_value: float


class SimpleInterestInput(BaseModel):
    """Input for simple (non-compounding) interest."""

    principal: float
    annual_rate: float
    years: float = Field(..., ge=0)


class CompoundGrowthInput(BaseModel):
    """Input for compound growth with regular contributions."""

    initial: float = 0.0
    contribution: float = 0.0
    contribution_frequency: ContributionFrequency = ContributionFrequency.monthly
    annual_rate: float = Field(..., gt=-1)
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.monthly
    years: float = Field(..., ge=0)


class CompoundGrowthResponse(CalculationResult):
    future_value: float
    total_contributions: float
    total_growth: float


def compute_real_rate(inputs: RealRateInput) -> RealRateResponse:
    return RealRateResponse(
        real_rate=time_value.real_rate(inputs.nominal_rate, inputs.inflation_rate)
    )


def compute_future_value(inputs: FutureValueInput) -> FutureValueResponse:
    return FutureValueResponse(
        future_value=time_value.future_value(
            inputs.present_value,
            inputs.annual_rate,
            inputs.years,
            inputs.compounding_per_year,
        )
    )


def compute_present_value(inputs: PresentValueInput) -> PresentValueResponse:
    return PresentValueResponse(
        present_value=time_value.present_value(
            inputs.future_value,
            inputs.annual_rate,
            inputs.years,
            inputs.compounding_per_year,
        )
    )


def compute_dated_cash_flows(inputs: DatedCashFlowInput) -> DatedCashFlowResponse:
    flows = [DatedCashFlow(item.date, item.amount) for item in inputs.flows]
    if inputs.flows_text:
        flows.extend(parse_cash_flow_lines(inputs.flows_text))

    if inputs.real_annual_rate is not None:
        rate = inputs.real_annual_rate
    else:
        rate = time_value.real_rate(inputs.nominal_rate, inputs.inflation_rate)

    # Default horizon is the last flow date
    horizon = inputs.horizon_date
    if horizon is None:
        horizon = max((flow.date for flow in flows), default=inputs.valuation_date)

    return DatedCashFlowResponse(
        real_annual_rate=rate,
        number_of_flows=len(flows),
        valuation_date=inputs.valuation_date,
        horizon_date=horizon,
        present_value=time_value.present_value_of_dated_cash_flows(
            flows, inputs.valuation_date, rate
        ),
        future_value=time_value.future_value_of_dated_cash_flows(flows, horizon, rate),
    )


def compute_simple_interest(inputs: SimpleInterestInput) -> FutureValueResponse:
    return FutureValueResponse(
        future_value=time_value.simple_interest_future_value(
            inputs.principal, inputs.annual_rate, inputs.years
        )
    )


def compute_compound_growth(inputs: CompoundGrowthInput) -> CompoundGrowthResponse:
    fv = time_value.compound_interest_future_value_with_contributions(
        inputs.initial,
        inputs.contribution,
        inputs.contribution_frequency,
        inputs.annual_rate,
        inputs.compounding_frequency,
        inputs.years,
    )
    n_contributions = round(
        inputs.years * inputs.contribution_frequency.periods_per_year
    )
    total_contributions = inputs.initial + inputs.contribution * n_contributions
    return CompoundGrowthResponse(
        future_value=fv,
        total_contributions=total_contributions,
        total_growth=fv - total_contributions,
    )


# =============================================================================
# Bonds
# =============================================================================


class BondInput(BaseModel):
    """Input for bond pricing."""

    face_value: float = Field(..., gt=0)
    coupon_rate: float = Field(..., ge=0)
    yield_to_maturity: float = Field(..., gt=-1)
    years_to_maturity: float = Field(..., gt=0, le=100)
    payments_per_year: int = Field(default=2, ge=1, le=12)


class BondResponse(CalculationResult):
    price: float
    premium_discount: float


def compute_bond_price(inputs: BondInput) -> BondResponse:
    price = bonds.price_bond(
        inputs.face_value,
        inputs.coupon_rate,
        inputs.yield_to_maturity,
        inputs.years_to_maturity,
        inputs.payments_per_year,
    )
    return BondResponse(
        price=price,
        premium_discount=bonds.premium_discount(price, inputs.face_value),
    )


# =============================================================================
# Mortgages
# =============================================================================


class MortgageInput(BaseModel):
    """Input for mortgage payment and amortization."""

    principal: float = Field(..., gt=0)
    annual_rate: float = Field(..., ge=0)
    years: int = Field(..., gt=0, le=50)
    frequency: PaymentFrequency = PaymentFrequency.monthly
    first_payment_date: Optional[date] = None
    include_schedule: bool = True


class ScheduleRow(CalculationResult):
    period: int
    date: Optional[datetime.date] = None
    payment: float
    principal: float
    interest: float
    remaining_balance: float


class MortgageResponse(CalculationResult):
    payment: float
    frequency: PaymentFrequency
    payments_per_year: int
    number_of_payments: int
    total_paid: float
    total_interest: float
    total_principal: float
    schedule: List[ScheduleRow] = []


def compute_mortgage(inputs: MortgageInput) -> MortgageResponse:
    payment = mortgage.mortgage_payment_with_frequency(
        inputs.principal, inputs.annual_rate, inputs.years, inputs.frequency
    )
    schedule = mortgage.mortgage_amortization_schedule_with_frequency(
        inputs.principal, inputs.annual_rate, inputs.years, inputs.frequency
    )
    totals = mortgage.schedule_totals(schedule)

    dates = [None] * len(schedule)
    if inputs.first_payment_date is not None:
        dates = mortgage.payment_dates(
            inputs.first_payment_date, inputs.frequency, len(schedule)
        )

    rows = []
    if inputs.include_schedule:
        rows = [
            ScheduleRow(
                period=row.period,
                date=row_date,
                payment=round(row.payment, 2),
                principal=round(row.principal, 2),
                interest=round(row.interest, 2),
                remaining_balance=round(row.remaining_balance, 2),
            )
            for row, row_date in zip(schedule, dates)
        ]

    return MortgageResponse(
        payment=round(payment, 2),
        frequency=inputs.frequency,
        payments_per_year=inputs.frequency.payments_per_year,
        number_of_payments=totals["number_of_payments"],
        total_paid=round(totals["total_paid"], 2),
        total_interest=round(totals["total_interest"], 2),
        total_principal=round(totals["total_principal"], 2),
        schedule=rows,
    )


# Scenario kinds: input schema and the function that evaluates it
CALCULATORS: Dict[str, Tuple[Type[BaseModel], Callable]] = {
    "future_value": (FutureValueInput, compute_future_value),
    "present_value": (PresentValueInput, compute_present_value),
    "dated_cash_flows": (DatedCashFlowInput, compute_dated_cash_flows),
    "compound_growth": (CompoundGrowthInput, compute_compound_growth),
    "bond": (BondInput, compute_bond_price),
    "mortgage": (MortgageInput, compute_mortgage),
}


def run_calculation(calculation: Callable, inputs: BaseModel) -> CalculationResult:
    """
    Run one of the compute_* functions above.

    Float overflow (an OverflowError from `**`, or an infinite/NaN result
    rejected by the response schema) is reported as CalculationError.
    """
    try:
        return calculation(inputs)
    except (OverflowError, ValidationError):
        raise CalculationError("Result is out of range for these inputs")
