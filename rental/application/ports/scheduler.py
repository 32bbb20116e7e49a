from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable


class ScheduledTask(ABC):
    @abstractmethod
    def cancel(self) -> bool:
        """Cancel if still pending. Returns True if the callback will not run."""
        raise NotImplementedError

    @property
    @abstractmethod
    def pending(self) -> bool:
        raise NotImplementedError


class SchedulerPort(ABC):
    @abstractmethod
    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        """Run callback once after delay_seconds. Must not block the caller."""
        raise NotImplementedError
