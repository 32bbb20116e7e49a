from __future__ import annotations

import logging
import threading
import time
import uuid
from collections import OrderedDict
from collections.abc import Callable

from rental.application.use_cases.booking_lifecycle import BookingLifecycleController


class MemorySessionRegistry:
    """
    Live booking sessions by id. Removing a session tears its controller down.

    Sessions untouched for `max_idle_seconds` are swept on every create/get, and
    the least recently used session is evicted once `max_sessions` is reached.
    """

    def __init__(
        self,
        max_idle_seconds: float = 1800.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_idle_seconds = max_idle_seconds
        self._max_sessions = max_sessions
        self._clock = clock
        # session_id -> (controller, last access); least recently used first
        self._sessions: OrderedDict[str, tuple[BookingLifecycleController, float]] = OrderedDict()
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create(self, factory: Callable[[str], BookingLifecycleController]) -> tuple[str, BookingLifecycleController]:
        session_id = uuid.uuid4().hex
        controller = factory(session_id)
        with self._lock:
            evicted = self._sweep()
            while len(self._sessions) >= self._max_sessions:
                evicted.append(self._sessions.popitem(last=False))
            self._sessions[session_id] = (controller, self._clock())
        self._teardown(evicted, reason="evicted")
        return session_id, controller

    def get(self, session_id: str) -> BookingLifecycleController | None:
        with self._lock:
            evicted = self._sweep()
            entry = self._sessions.get(session_id)
            if entry is not None:
                self._sessions[session_id] = (entry[0], self._clock())
                self._sessions.move_to_end(session_id)
        self._teardown(evicted, reason="idle")
        return entry[0] if entry is not None else None

    def remove(self, session_id: str) -> bool:
        with self._lock:
            entry = self._sessions.pop(session_id, None)
        if entry is None:
            return False
        entry[0].teardown()
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _sweep(self) -> list[tuple[str, tuple[BookingLifecycleController, float]]]:
        cutoff = self._clock() - self._max_idle_seconds
        expired = []
        while self._sessions:
            _, last_seen = next(iter(self._sessions.values()))
            if last_seen > cutoff:
                break
            expired.append(self._sessions.popitem(last=False))
        return expired

    def _teardown(self, entries: list[tuple[str, tuple[BookingLifecycleController, float]]], reason: str) -> None:
        for session_id, (controller, _) in entries:
            controller.teardown()
            self._logger.info("Session expired", extra={"session_id": session_id, "reason": reason})
