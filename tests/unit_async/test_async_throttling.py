from __future__ import annotations

import asyncio

import pytest

from tmdb_api_client.core.async_throttling import AsyncMinIntervalThrottler
from tests.shared.transport import FakeClock


@pytest.mark.asyncio
async def test_async_throttler_first_call_never_waits():
    clock = FakeClock()
    throttler = AsyncMinIntervalThrottler(1.0, clock=clock, sleeper=clock.async_sleep)
    assert await throttler.wait() == 0.0
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_async_throttler_waits_only_remaining_interval():
    clock = FakeClock()
    throttler = AsyncMinIntervalThrottler(1.0, clock=clock, sleeper=clock.async_sleep)
    await throttler.wait()
    clock.now = 0.25
    assert await throttler.wait() == pytest.approx(0.75)
    assert clock.sleeps == [pytest.approx(0.75)]


@pytest.mark.asyncio
async def test_async_throttler_serializes_concurrent_tasks():
    clock = FakeClock()
    throttler = AsyncMinIntervalThrottler.from_rate(50, clock=clock, sleeper=clock.async_sleep)
    dispatched: list[float] = []

    async def call() -> float:
        slept = await throttler.wait()
        dispatched.append(clock())
        return slept

    waits = await asyncio.gather(*(call() for _ in range(5)))

    assert sorted(waits) == [0.0] + [pytest.approx(0.02)] * 4
    assert clock.sleeps == [pytest.approx(0.02)] * 4
    gaps = [later - earlier for earlier, later in zip(dispatched, dispatched[1:])]
    assert all(gap >= 0.02 - 1e-9 for gap in gaps)


@pytest.mark.asyncio
async def test_async_throttler_reset_forgets_last_request():
    clock = FakeClock()
    throttler = AsyncMinIntervalThrottler(1.0, clock=clock, sleeper=clock.async_sleep)
    await throttler.wait()
    await throttler.reset()
    assert await throttler.wait() == 0.0


@pytest.mark.asyncio
async def test_async_throttler_reset_waits_for_in_flight_call():
    clock = FakeClock()
    throttler = AsyncMinIntervalThrottler(1.0, clock=clock, sleeper=clock.async_sleep)
    await throttler.wait()

    in_flight = asyncio.create_task(throttler.wait())
    await asyncio.sleep(0)
    await throttler.reset()
    await in_flight

    assert clock.sleeps == [pytest.approx(1.0)]
    assert await throttler.wait() == 0.0
