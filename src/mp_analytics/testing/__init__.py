"""Testing support – in-memory doubles for the analytics ports."""

from mp_analytics.testing.fakes import FakePageHost, ManualClock, RecordingAnalyticsSink, SentEvent

__all__ = ["FakePageHost", "ManualClock", "RecordingAnalyticsSink", "SentEvent"]
