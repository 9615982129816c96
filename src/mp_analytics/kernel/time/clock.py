"""Kernel time – MonotonicClock protocol + implementations."""
from __future__ import annotations

import time
from typing import Protocol


class MonotonicClock(Protocol):
    """Port: millisecond clock that never goes backwards."""

    def now_ms(self) -> float: ...


class SystemMonotonicClock:
    """Production clock backed by ``time.perf_counter``."""

    def now_ms(self) -> float:
        return time.perf_counter() * 1000.0


class ManualClock:
    """Test clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        """Move the clock forward by *ms* milliseconds."""
        if ms < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += ms


__all__ = ["ManualClock", "MonotonicClock", "SystemMonotonicClock"]
