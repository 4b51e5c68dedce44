"""Rate throttling utilities."""

from __future__ import annotations

import threading
import time
from typing import Callable


def interval_from_rate(requests_per_second: int) -> float:
    """Minimum spacing between requests, rounded to whole microseconds."""

    if requests_per_second <= 0:
        raise ValueError("requests_per_second must be > 0")
    return round(1_000_000 / requests_per_second) / 1_000_000


class MinIntervalThrottler:
    """Ensures minimum interval between outbound requests.

    Safe to share between threads: reading the last dispatch time, sleeping
    and recording the new dispatch time happen under one lock.
    """

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._min_interval_seconds = max(0.0, float(min_interval_seconds))
        self._clock = clock or time.monotonic
        self._sleep = sleeper or time.sleep
        self._lock = threading.Lock()
        self._last_request_at: float | None = None

    @classmethod
    def from_rate(
        cls,
        requests_per_second: int,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> "MinIntervalThrottler":
        return cls(interval_from_rate(requests_per_second), clock=clock, sleeper=sleeper)

    @property
    def min_interval_seconds(self) -> float:
        return self._min_interval_seconds

    def wait(self) -> float:
        """Block until the next request may leave; return the time slept."""

        with self._lock:
            now = self._clock()
            slept = 0.0
            if self._last_request_at is not None:
                elapsed = max(0.0, now - self._last_request_at)
                remaining = self._min_interval_seconds - elapsed
                if remaining > 0:
                    self._sleep(remaining)
                    slept = remaining
                    now = self._clock()
            self._last_request_at = now
            return slept

    def reset(self) -> None:
        with self._lock:
            self._last_request_at = None


__all__ = [
    "interval_from_rate",
    "MinIntervalThrottler",
]
