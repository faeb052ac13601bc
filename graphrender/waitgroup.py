"""A counter that lets one thread wait until a set of tasks has finished."""

from __future__ import annotations

import threading


class WaitGroup:
    """Counts outstanding tasks and wakes waiters when the count drops to zero."""

    def __init__(self) -> None:
        self._count = 0
        self._condition = threading.Condition()

    @property
    def count(self) -> int:
        """Number of tasks still outstanding."""
        with self._condition:
            return self._count

    def add(self, n: int) -> None:
        """Add ``n`` tasks to wait for; ``n`` may be negative."""
        with self._condition:
            new_count = self._count + n
            if new_count < 0:
                raise ValueError("wait group counter would become negative")
            self._count = new_count
            if new_count == 0:
                self._condition.notify_all()

    def done(self) -> None:
        """Mark one task as finished."""
        self.add(-1)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until every task is finished.

        Returns False if ``timeout`` seconds pass first, True otherwise.
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._count == 0, timeout)