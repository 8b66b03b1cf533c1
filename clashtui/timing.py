"""Fixed-rate ticking, pulse counting and tick-rate measurement."""

from __future__ import annotations

import math
import time
from collections import deque
from datetime import timedelta
from typing import Callable


def _seconds(value) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class Interval:
    """Sleeps so that ticks land on a fixed grid starting one interval after first use."""

    def __init__(
        self,
        interval,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval = _seconds(interval)
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        self._clock = clock
        self._sleep = sleep
        self._deadline: float | None = None

    def next_tick(self) -> float:
        """Seconds until the next tick."""
        now = self._clock()
        if self._deadline is None:
            self._deadline = now + self.interval
        deadline = self._deadline
        if now <= deadline:
            return deadline - now
        missed = math.floor((now - deadline) / self.interval) + 1
        point = deadline + missed * self.interval
        while point <= now:
            point += self.interval
        return point - now

    def tick(self) -> None:
        self._sleep(self.next_tick())


class Pulse:
    """Fires on every ``pulse``-th tick, starting with the first."""

    def __init__(self, pulse: int) -> None:
        if pulse <= 0:
            raise ValueError("pulse must be positive")
        self.pulse = pulse
        self.counter = 0

    def tick(self) -> bool:
        fired = self.is_pulse()
        self.counter += 1
        return fired

    def is_pulse(self) -> bool:
        return self.counter % self.pulse == 0


class TicksCounter:
    """Counts ticks and estimates their rate from recent timestamps."""

    _MAX_SAMPLES = 128
    _KEEP_SAMPLES = 64

    def __init__(
        self,
        start: float | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._start = clock() if start is None else start
        self._ticks = 0
        self._samples: deque[int] = deque()

    @property
    def samples(self) -> tuple[int, ...]:
        """Milliseconds since start of recent ticks, newest first."""
        return tuple(self._samples)

    def new_tick(self) -> None:
        self._ticks += 1
        elapsed_ms = round((self._clock() - self._start) * 1_000_000) // 1000
        self._samples.appendleft(elapsed_ms)
        if len(self._samples) > self._MAX_SAMPLES:
            while len(self._samples) > self._KEEP_SAMPLES:
                self._samples.pop()

    def tick_rate(self) -> float | None:
        """Estimated ticks per second, or None before the first tick."""
        if not self._samples:
            return None
        newest = self._samples[0]
        older = self._samples[20] if len(self._samples) > 20 else self._samples[-1]
        span = newest - older
        return 20_000.0 / span if span else math.inf

    def tick_num(self) -> int:
        return self._ticks