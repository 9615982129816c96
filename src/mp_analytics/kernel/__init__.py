"""Kernel – framework-agnostic building blocks shared by flags and telemetry."""

from mp_analytics.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidTelemetryEventError,
)
from mp_analytics.kernel.time import ManualClock, MonotonicClock, SystemMonotonicClock

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidTelemetryEventError",
    "ManualClock",
    "MonotonicClock",
    "SystemMonotonicClock",
]
