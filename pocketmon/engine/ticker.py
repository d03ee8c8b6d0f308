from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class Ticker:
    """Fixed-rate periodic timer.

    Deadlines are anchored at construction (or :meth:`reset`) and advance
    by ``interval``. Ticks missed while the caller was busy are dropped,
    so a slow cycle delays the next tick but never causes a burst.
    """

    def __init__(
        self,
        interval: float,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._next = clock() + interval

    def reset(self) -> None:
        self._next = self._clock() + self.interval

    async def tick(self) -> None:
        now = self._clock()
        if now > self._next:
            missed = int((now - self._next) // self.interval) + 1
            self._next += missed * self.interval
        await self._sleep(self._next - now)
        self._next += self.interval

    @property
    def next_deadline(self) -> float:
        return self._next
