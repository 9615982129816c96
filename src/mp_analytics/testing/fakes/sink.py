"""Testing fakes – RecordingAnalyticsSink."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class SentEvent:
    event_name: str
    properties: dict[str, Any]


class RecordingAnalyticsSink:
    """:class:`~mp_analytics.telemetry.AnalyticsSink` that records every call.

    Usage::

        sink = RecordingAnalyticsSink()
        funnel = TelemetryFunnel(sink, init_analytics(settings, sink))
        funnel.track_market_view("NASDAQ")

        assert sink.events[0].properties["event_label"] == "NASDAQ"
    """

    def __init__(self, *, fail_with: BaseException | None = None) -> None:
        self.configured_ids: list[str] = []
        self.events: list[SentEvent] = []
        self._fail_with = fail_with

    def configure(self, tracking_id: str) -> None:
        self.configured_ids.append(tracking_id)

    def send_event(self, event_name: str, properties: dict[str, Any]) -> None:
        if self._fail_with is not None:
            raise self._fail_with
        self.events.append(SentEvent(event_name, dict(properties)))

    @property
    def touched(self) -> bool:
        """``True`` once the sink has been configured or sent anything."""
        return bool(self.configured_ids or self.events)

    def reset(self) -> None:
        self.configured_ids.clear()
        self.events.clear()


__all__ = ["RecordingAnalyticsSink", "SentEvent"]
