"""Injectable millisecond clocks.

The simulation itself is driven by ``update(dt)`` deltas; the only thing
that reads "now" is the footprint trail, which timestamps entries and
decays them against the clock.  Production code uses MonotonicClock,
tests use ManualClock and step time explicitly.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> float:
        """Current reading in milliseconds (monotonic, arbitrary origin)."""
        ...


class MonotonicClock:
    """Wraps ``time.monotonic()``."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"Cannot move a monotonic clock backwards ({ms} ms)")
        self._now += ms
        return self._now

    def set(self, now_ms: float) -> None:
        if now_ms < self._now:
            raise ValueError(f"Cannot move a monotonic clock backwards ({self._now} -> {now_ms})")
        self._now = float(now_ms)
