"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results.
"""

import logging
from typing import Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from fintrack.calculators import (
    BondInput,
    BondResponse,
    CompoundGrowthInput,
    CompoundGrowthResponse,
    DatedCashFlowInput,
    DatedCashFlowResponse,
    FutureValueInput,
    FutureValueResponse,
    MortgageInput,
    MortgageResponse,
    PresentValueInput,
    PresentValueResponse,
    RealRateInput,
    RealRateResponse,
    SimpleInterestInput,
    run_calculation,
    compute_bond_price,
    compute_compound_growth,
    compute_dated_cash_flows,
    compute_future_value,
    compute_mortgage,
    compute_present_value,
    compute_real_rate,
    compute_simple_interest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(calculation: Callable, inputs: BaseModel):
    try:
        return run_calculation(calculation, inputs)
    except ValueError as e:
        logger.info(f"Rejected {calculation.__name__} input: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/real-rate", response_model=RealRateResponse)
async def calculate_real_rate(inputs: RealRateInput):
    """Inflation-adjusted (real) rate."""
    return _run(compute_real_rate, inputs)


@router.post("/future-value", response_model=FutureValueResponse)
async def calculate_future_value(inputs: FutureValueInput):
    """Compound a present amount forward."""
    return _run(compute_future_value, inputs)


@router.post("/present-value", response_model=PresentValueResponse)
async def calculate_present_value(inputs: PresentValueInput):
    """Discount a future amount to today."""
    return _run(compute_present_value, inputs)


@router.post("/dated-cash-flows", response_model=DatedCashFlowResponse)
async def calculate_dated_cash_flows(inputs: DatedCashFlowInput):
    """Present and future value of irregular dated cash flows."""
    return _run(compute_dated_cash_flows, inputs)


@router.post("/simple-interest", response_model=FutureValueResponse)
async def calculate_simple_interest(inputs: SimpleInterestInput):
    """Future value with simple interest."""
    return _run(compute_simple_interest, inputs)


@router.post("/compound-growth", response_model=CompoundGrowthResponse)
async def calculate_compound_growth(inputs: CompoundGrowthInput):
    """Future value of a balance plus regular contributions."""
    return _run(compute_compound_growth, inputs)


@router.post("/bond-price", response_model=BondResponse)
async def calculate_bond_price(inputs: BondInput):
    """Price a fixed-coupon bond."""
    return _run(compute_bond_price, inputs)


@router.post("/mortgage", response_model=MortgageResponse)
async def calculate_mortgage(inputs: MortgageInput):
    """Mortgage payment and amortization schedule."""
    return _run(compute_mortgage, inputs)
