from __future__ import annotations

import math

BASE_CURRENCY = "IDR"

# Multipliers relative to IDR.
EXCHANGE_RATES: dict[str, float] = {
    "IDR": 1.0,
    "MYR": 0.00029,
    "SGD": 0.000085,
    "CAD": 0.000087,
    "USD": 0.000064,
}

SUPPORTED_CURRENCIES = tuple(EXCHANGE_RATES)


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves away from zero for positive amounts."""
    return int(math.floor(value + 0.5))


def convert(base_amount: int | float, target_currency: str, rates: dict[str, float] | None = None) -> int:
    rate = (rates if rates is not None else EXCHANGE_RATES).get((target_currency or "").upper(), 1.0)
    return round_half_up(base_amount * rate)


def format_price(amount: int, currency: str) -> str:
    if currency == "IDR":
        return f"Rp {amount:,}"
    return f"{currency} {amount:,}"


def format_compact_price(amount: int, currency: str) -> str:
    """Listing-card form: IDR in millions ("1.5jt"), others like format_price."""
    if currency == "IDR":
        return f"{amount / 1_000_000:.1f}jt"
    return format_price(amount, currency)
