"""
Bond Pricing

Prices a plain fixed-coupon bond by discounting its coupons and principal
at the periodic yield. The result is a clean price on a coupon date; no
accrued interest is added.
"""


def price_bond(
    face_value: float,
    coupon_rate: float,
    yield_to_maturity: float,
    years_to_maturity: float,
    payments_per_year: int,
) -> float:
    """
    Calculate the price of a fixed-coupon bond.

    Inputs are not validated here; face value and years to maturity must be
    positive.

    Args:
        face_value: Principal repaid at maturity
        coupon_rate: Annual coupon rate as decimal (e.g., 0.05 for 5%)
        yield_to_maturity: Annual yield as decimal
        years_to_maturity: Years until maturity
        payments_per_year: Coupon payments per year (e.g., 2 for semi-annual)

    Returns:
        Bond price in the same units as face_value
    """
    total_payments = round(years_to_maturity * payments_per_year)
    coupon_per_period = face_value * coupon_rate / payments_per_year
    yield_per_period = yield_to_maturity / payments_per_year

    price = 0.0
    for period in range(1, total_payments + 1):
        price += coupon_per_period / ((1 + yield_per_period) ** period)

    price += face_value / ((1 + yield_per_period) ** total_payments)

    return price


def premium_discount(price: float, face_value: float) -> float:
    """Price minus face value (positive = premium, negative = discount)."""
    return price - face_value
