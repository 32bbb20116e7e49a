from __future__ import annotations

from rental.application.ports.availability import UnavailableDatesPort

# Blocked days per car id, standing in for a real booking ledger.
MOCK_UNAVAILABLE_DATES: dict[str, frozenset[str]] = {
    "c1": frozenset({"2025-11-28", "2025-11-29"}),
    "c2": frozenset({"2025-12-24", "2025-12-25", "2025-12-26"}),
    "c3": frozenset({"2025-11-15"}),
    "c6": frozenset({"2025-12-31", "2026-01-01"}),
}


class MockUnavailableDates(UnavailableDatesPort):
    def __init__(self, blocked: dict[str, frozenset[str]] | None = None) -> None:
        self._blocked = blocked if blocked is not None else MOCK_UNAVAILABLE_DATES

    def get_unavailable_dates(self, car_id: str) -> frozenset[str]:
        return frozenset(self._blocked.get(car_id, frozenset()))
