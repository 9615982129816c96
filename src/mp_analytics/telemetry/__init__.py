"""Telemetry – event funnel in front of an external analytics sink."""
from mp_analytics.telemetry.event import TelemetryEvent
from mp_analytics.telemetry.funnel import TelemetryFunnel
from mp_analytics.telemetry.sink import (
    AnalyticsSink,
    LoggingAnalyticsSink,
    SinkState,
    init_analytics,
)
from mp_analytics.telemetry.timing import InteractionTimer, NavigationTiming, PageHost

__all__ = [
    "AnalyticsSink",
    "InteractionTimer",
    "LoggingAnalyticsSink",
    "NavigationTiming",
    "PageHost",
    "SinkState",
    "TelemetryEvent",
    "TelemetryFunnel",
    "init_analytics",
]
