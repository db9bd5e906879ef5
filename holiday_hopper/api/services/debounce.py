# holiday_hopper/api/services/debounce.py
"""Single-slot trailing debounce."""

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)


def threading_scheduler(delay: float, func: Callable[..., Any], *args) -> threading.Timer:
    """Run ``func(*args)`` after ``delay`` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, func, args=args)
    timer.daemon = True
    timer.start()
    return timer


class Debouncer:
    """Delay ``func`` until ``wait`` seconds pass without another call.

    At most one timer is outstanding. Each call cancels it and schedules a
    fresh one carrying the latest arguments.
    """

    def __init__(self, func: Callable[..., Any], wait: float,
                 scheduler: Callable[..., Any] = threading_scheduler):
        self.func = func
        self.wait = wait
        self.scheduler = scheduler
        self._lock = threading.Lock()
        self._pending = None
        self._generation = 0

    def __call__(self, *args) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._generation += 1
            self._pending = self.scheduler(self.wait, self._fire, self._generation, args)

    def _fire(self, generation: int, args: tuple) -> None:
        with self._lock:
            # A timer that lost the race with cancel() must not run.
            if generation != self._generation or self._pending is None:
                return
            self._pending = None
        self.func(*args)

    def cancel(self) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
                logger.debug("Debounced call cancelled")

    @property
    def pending(self) -> bool:
        return self._pending is not None
