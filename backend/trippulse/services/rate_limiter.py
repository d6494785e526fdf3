"""Rate limiter — one regeneration per key per cooldown window."""

import threading
import time
from collections.abc import Callable
from typing import Protocol


class RateLimiter(Protocol):
    def allow(self, key: str) -> bool:
        """Return True and start a new window if the key is not cooling down."""
        ...


class InMemoryRateLimiter:
    """
    Process-local fixed cooldown per key.

    Expired keys are evicted on every call, so the store only holds keys
    that triggered within the last window. Nothing is shared across
    processes; a restart clears all cooldowns.
    """

    def __init__(self, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.window_seconds = window_seconds
        self._clock = clock
        self._last_allowed: dict[str, float] = {}
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            self._evict(now)
            if key in self._last_allowed:
                return False
            self._last_allowed[key] = now
            return True

    def reset(self) -> None:
        with self._lock:
            self._last_allowed.clear()

    def __len__(self) -> int:
        return len(self._last_allowed)

    def _evict(self, now: float) -> None:
        expired = [
            k for k, ts in self._last_allowed.items() if now - ts >= self.window_seconds
        ]
        for k in expired:
            del self._last_allowed[k]
