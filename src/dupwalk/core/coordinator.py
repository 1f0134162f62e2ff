"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/coordinator.py
Wait-group for a task graph that grows while it runs.

Directory tasks register their children before submitting them, so the count
can only reach zero once every task (including ones spawned late) has finished.
"""
import threading
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class TaskCoordinator:
    """
    Tracks outstanding tasks and the first fatal error.

    register() must be called BEFORE the task is submitted, done() from the
    task's `finally` block. join() blocks until the count returns to zero.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._outstanding = 0
        self._total = 0
        self._error: Optional[BaseException] = None

    def register(self, count: int = 1) -> None:
        with self._cond:
            self._outstanding += count
            self._total += count

    def done(self) -> None:
        with self._cond:
            if self._outstanding <= 0:
                raise RuntimeError("TaskCoordinator.done() called with no outstanding tasks")
            self._outstanding -= 1
            if self._outstanding == 0:
                self._cond.notify_all()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for all tasks. Returns False if the timeout expired first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._outstanding == 0, timeout=timeout)

    def fail(self, error: BaseException) -> None:
        """Record a fatal error. Only the first one is kept."""
        with self._cond:
            if self._error is None:
                self._error = error
                return
        logger.debug(f"Additional error after walk already failed: {error}")

    @property
    def failed(self) -> bool:
        with self._cond:
            return self._error is not None

    @property
    def error(self) -> Optional[BaseException]:
        with self._cond:
            return self._error

    @property
    def outstanding(self) -> int:
        with self._cond:
            return self._outstanding

    @property
    def total(self) -> int:
        """Number of tasks ever registered."""
        with self._cond:
            return self._total
