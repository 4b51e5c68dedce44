"""Async rate throttling utilities."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable

from .throttling import interval_from_rate


class AsyncMinIntervalThrottler:
    """Ensures minimum interval between outbound requests (async)."""

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._min_interval_seconds = max(0.0, float(min_interval_seconds))
        self._clock = clock or time.monotonic
        self._sleep = sleeper or asyncio.sleep
        self._lock = asyncio.Lock()
        self._last_request_at: float | None = None

    @classmethod
    def from_rate(
        cls,
        requests_per_second: int,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
    ) -> "AsyncMinIntervalThrottler":
        return cls(interval_from_rate(requests_per_second), clock=clock, sleeper=sleeper)

    @property
    def min_interval_seconds(self) -> float:
        return self._min_interval_seconds

    async def wait(self) -> float:
        async with self._lock:
            now = self._clock()
            slept = 0.0
            if self._last_request_at is not None:
                elapsed = max(0.0, now - self._last_request_at)
                remaining = self._min_interval_seconds - elapsed
                if remaining > 0:
                    await self._sleep(remaining)
                    slept = remaining
                    now = self._clock()
            self._last_request_at = now
            return slept

    async def reset(self) -> None:
        async with self._lock:
            self._last_request_at = None


__all__ = [
    "AsyncMinIntervalThrottler",
]
