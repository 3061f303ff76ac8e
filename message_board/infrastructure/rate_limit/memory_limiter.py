from __future__ import annotations

import threading
import time
from collections import deque
from typing import Callable

from message_board.application.ports.rate_limiter import RateLimiterPort, RateLimitState


class SlidingWindowRateLimiter(RateLimiterPort):
    """
    Allows at most max_requests per key within any window_seconds span.
    Keys with no hit inside the window are swept once per window.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self._max = max_requests
        self._window = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._next_sweep = clock() + window_seconds

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
            hits = self._prune(key, now)
            if len(hits) >= self._max:
                return False
            hits.append(now)
            self._hits[key] = hits
            return True

    def state(self, key: str) -> RateLimitState:
        now = self._clock()
        with self._lock:
            hits = self._prune(key, now)
            reset_after = (hits[0] + self._window - now) if hits else self._window
            return RateLimitState(
                limit=self._max,
                remaining=max(self._max - len(hits), 0),
                reset_after=reset_after,
            )

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._hits)

    def _sweep(self, now: float) -> None:
        cutoff = now - self._window
        for key in [k for k, hits in self._hits.items() if hits[-1] <= cutoff]:
            del self._hits[key]
        self._next_sweep = now + self._window

    def _prune(self, key: str, now: float) -> deque[float]:
        hits = self._hits.get(key)
        if hits is None:
            return deque()
        cutoff = now - self._window
        while hits and hits[0] <= cutoff:
            hits.popleft()
        if not hits:
            del self._hits[key]
        return hits
