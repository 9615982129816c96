"""Kernel time – monotonic clock port + implementations."""
from mp_analytics.kernel.time.clock import ManualClock, MonotonicClock, SystemMonotonicClock

__all__ = ["ManualClock", "MonotonicClock", "SystemMonotonicClock"]
