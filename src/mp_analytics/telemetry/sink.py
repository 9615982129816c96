"""Telemetry – analytics sink port, sink state and initialisation."""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol

from mp_analytics.config.settings import PLACEHOLDER_TRACKING_ID, AnalyticsSettings
from mp_analytics.observability.logging import Logger, get_logger

_log = get_logger(__name__)


class AnalyticsSink(Protocol):
    """Port: the external analytics backend (gtag-style)."""

    def configure(self, tracking_id: str) -> None: ...

    def send_event(self, event_name: str, properties: dict[str, Any]) -> None: ...


@dataclasses.dataclass
class SinkState:
    """Whether the sink is configured (tracking id) and loaded (initialised)."""

    tracking_id: str = ""
    loaded: bool = False

    @property
    def configured(self) -> bool:
        tracking_id = self.tracking_id.strip()
        return bool(tracking_id) and tracking_id != PLACEHOLDER_TRACKING_ID

    @property
    def armed(self) -> bool:
        return self.configured and self.loaded

    def mark_loaded(self) -> None:
        self.loaded = True


def init_analytics(settings: AnalyticsSettings, sink: AnalyticsSink) -> SinkState:
    """Activate *sink* for the configured tracking id.

    Without a usable tracking id the sink is never touched and the returned
    state stays unarmed, turning every later telemetry call into a no-op.
    """
    state = SinkState(tracking_id=settings.ga_tracking_id)
    if not state.configured:
        _log.info("analytics.disabled", reason="tracking id not configured")
        return state

    sink.configure(state.tracking_id.strip())
    state.mark_loaded()
    _log.info("analytics.initialized", tracking_id=state.tracking_id.strip())
    return state


class LoggingAnalyticsSink:
    """Writes events to the structured log; handy for local development."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._log = logger or get_logger("mp_analytics.sink")
        self.tracking_id: str | None = None

    def configure(self, tracking_id: str) -> None:
        self.tracking_id = tracking_id
        self._log.info("sink.configured", tracking_id=tracking_id)

    def send_event(self, event_name: str, properties: dict[str, Any]) -> None:
        self._log.info("sink.event", event_name=event_name, tracking_id=self.tracking_id, properties=properties)


__all__ = ["AnalyticsSink", "LoggingAnalyticsSink", "SinkState", "init_analytics"]
