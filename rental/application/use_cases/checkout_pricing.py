from __future__ import annotations

from rental.application.utils.calendar_dates import days_between
from rental.application.utils.price_converter import round_half_up
from rental.domain.entities.rate_plan import PriceBreakdown, RatePlan

TAX_RATE = 0.11
PROTECTION_FEE_RATE = 0.08  # refundable plan only
NON_REFUNDABLE_DISCOUNT_RATE = 0.05  # of subtotal + taxes


def count_rental_days(start: str | None, end: str | None) -> int:
    """Billable days between start and end. Never less than 1."""
    delta = days_between(start, end)
    if delta is None:
        return 1
    return abs(delta) or 1


def compute_totals(daily_rate: int, days: int, plan: RatePlan) -> PriceBreakdown:
    subtotal = daily_rate * days
    taxes = round_half_up(subtotal * TAX_RATE)

    if plan == RatePlan.REFUNDABLE:
        protection_fee = round_half_up(subtotal * PROTECTION_FEE_RATE)
        discount = 0
    else:
        protection_fee = 0
        discount = round_half_up((subtotal + taxes) * NON_REFUNDABLE_DISCOUNT_RATE)

    return PriceBreakdown(
        subtotal=subtotal,
        taxes=taxes,
        protection_fee=protection_fee,
        discount=discount,
        total=subtotal + taxes + protection_fee - discount,
    )
