from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DateRange:
    start: str | None = None  # YYYY-MM-DD
    end: str | None = None  # YYYY-MM-DD, only set once start is set

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def awaiting_end(self) -> bool:
        return self.start is not None and self.end is None
