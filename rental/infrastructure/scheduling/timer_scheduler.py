from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from rental.application.ports.scheduler import ScheduledTask, SchedulerPort


class TimerTask(ScheduledTask):
    def __init__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._done = threading.Event()
        self._timer = threading.Timer(delay_seconds, self._run)
        self._timer.daemon = True
        self._logger = logging.getLogger(__name__)

    def start(self) -> None:
        self._timer.start()

    def cancel(self) -> bool:
        if self._done.is_set():
            return False
        self._timer.cancel()
        self._done.set()
        return True

    @property
    def pending(self) -> bool:
        return not self._done.is_set()

    def _run(self) -> None:
        if self._done.is_set():
            return
        self._done.set()
        try:
            self._callback()
        except Exception as e:
            self._logger.exception("Scheduled task failed", extra={"error": str(e)})


class TimerScheduler(SchedulerPort):
    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        task = TimerTask(max(0.0, delay_seconds), callback)
        task.start()
        return task
