from __future__ import annotations

from collections.abc import Callable

from rental.application.ports.scheduler import ScheduledTask, SchedulerPort


class ManualTask(ScheduledTask):
    def __init__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.delay_seconds = delay_seconds
        self._callback = callback
        self._pending = True

    def cancel(self) -> bool:
        if not self._pending:
            return False
        self._pending = False
        return True

    @property
    def pending(self) -> bool:
        return self._pending

    def fire(self) -> None:
        if self._pending:
            self._pending = False
            self._callback()


class ManualScheduler(SchedulerPort):
    """Holds tasks until run_pending() is called. For local runs and tests."""

    def __init__(self) -> None:
        self.tasks: list[ManualTask] = []

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ManualTask(delay_seconds, callback)
        self.tasks.append(task)
        return task

    def run_pending(self) -> int:
        ran = 0
        for task in list(self.tasks):
            if task.pending:
                task.fire()
                ran += 1
        self.tasks = [t for t in self.tasks if t.pending]
        return ran
