from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RatePlan(str, Enum):
    NON_REFUNDABLE = "non-refundable"
    REFUNDABLE = "refundable"


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: int
    taxes: int
    protection_fee: int
    discount: int
    total: int
