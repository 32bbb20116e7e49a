from __future__ import annotations

from rental.application.use_cases.checkout_pricing import compute_totals, count_rental_days
from rental.application.utils.price_converter import convert, format_compact_price, format_price
from rental.domain.entities.rate_plan import PriceBreakdown, RatePlan


def test_non_refundable_totals():
    totals = compute_totals(500_000, 3, RatePlan.NON_REFUNDABLE)
    assert totals == PriceBreakdown(
        subtotal=1_500_000,
        taxes=165_000,
        protection_fee=0,
        discount=83_250,
        total=1_581_750,
    )


def test_refundable_totals():
    totals = compute_totals(500_000, 3, RatePlan.REFUNDABLE)
    assert totals == PriceBreakdown(
        subtotal=1_500_000,
        taxes=165_000,
        protection_fee=120_000,
        discount=0,
        total=1_785_000,
    )


def test_pricing_is_deterministic_and_refundable_costs_more():
    for plan in RatePlan:
        assert compute_totals(100_000, 3, plan) == compute_totals(100_000, 3, plan)
    assert compute_totals(100_000, 3, RatePlan.REFUNDABLE).total > compute_totals(100_000, 3, RatePlan.NON_REFUNDABLE).total


def test_rounding_is_half_up():
    # subtotal 50 -> taxes 5.5 -> 6
    totals = compute_totals(50, 1, RatePlan.REFUNDABLE)
    assert totals.taxes == 6
    assert totals.protection_fee == 4


def test_count_rental_days():
    assert count_rental_days("2025-11-24", "2025-11-27") == 3
    assert count_rental_days("2025-11-24", "2025-11-24") == 1
    assert count_rental_days(None, "2025-11-24") == 1
    assert count_rental_days("garbage", "2025-11-24") == 1


def test_convert_and_fallback_rate():
    assert convert(500_000, "IDR") == 500_000
    assert convert(500_000, "USD") == 32
    assert convert(500_000, "XYZ") == 500_000
    assert convert(1_000, "USD", rates={"USD": 0.5}) == 500


def test_price_formatting():
    assert format_price(1_500_000, "IDR") == "Rp 1,500,000"
    assert format_price(1234, "USD") == "USD 1,234"
    assert format_compact_price(1_500_000, "IDR") == "1.5jt"
    assert format_compact_price(95, "SGD") == "SGD 95"
