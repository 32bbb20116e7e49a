from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Booking:
    id: str  # 128-bit random hex, internal
    reference_code: str  # short display token, e.g. "TB-4K2P9XQZ"
    car_id: str
    start_date: str  # YYYY-MM-DD
    end_date: str  # YYYY-MM-DD
    total_price: int  # whole units of `currency`
    currency: str
    status: str = "upcoming"  # "upcoming", "completed", "cancelled"
    booked_at: datetime | None = None
