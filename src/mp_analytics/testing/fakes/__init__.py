"""Testing fakes – in-memory doubles for sink, clock and page host."""
from mp_analytics.kernel.time import ManualClock
from mp_analytics.testing.fakes.page_host import FakePageHost
from mp_analytics.testing.fakes.sink import RecordingAnalyticsSink, SentEvent

__all__ = ["FakePageHost", "ManualClock", "RecordingAnalyticsSink", "SentEvent"]
