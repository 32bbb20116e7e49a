from __future__ import annotations

from enum import Enum


class FlowState(str, Enum):
    BROWSING = "browsing"
    DETAILS_OPEN = "details_open"
    DATES_SELECTING = "dates_selecting"
    CHECKOUT_OPEN = "checkout_open"
    CONFIRMED = "confirmed"
