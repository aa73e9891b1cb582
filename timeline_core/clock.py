# timeline_core/clock.py

from __future__ import annotations
import logging
import threading
from datetime import datetime
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Subscription:
    """Handle for a repeating clock tick. Call dispose() (or leave the
    `with` block) to release the underlying timer; disposing twice is a no-op."""

    def __init__(self, interval_ms: int, callback: Callable[[datetime], None],
                 now: Callable[[], datetime]):
        self.interval_ms = interval_ms
        self._callback = callback
        self._now = now
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._disposed = False

    def _schedule(self):
        with self._lock:
            if self._disposed:
                return
            self._timer = threading.Timer(self.interval_ms / 1000.0, self._tick)
            self._timer.daemon = True
            self._timer.start()

    def _tick(self):
        if self._disposed:
            return
        try:
            self._callback(self._now())
        finally:
            self._schedule()

    @property
    def active(self) -> bool:
        return not self._disposed

    def dispose(self):
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.debug("Clock subscription (%d ms) disposed", self.interval_ms)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False


class SystemClock:
    """Wall clock in naive local time."""

    def now(self) -> datetime:
        return datetime.now()

    def subscribe(self, interval_ms: int, callback: Callable[[datetime], None]) -> Subscription:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        sub = Subscription(interval_ms, callback, self.now)
        sub._schedule()
        logger.debug("Clock subscription started every %d ms", interval_ms)
        return sub


class FixedClock(SystemClock):
    """Clock frozen at a given instant; advance() moves it forward."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime):
        self._instant = instant

    def advance(self, delta):
        self._instant = self._instant + delta
