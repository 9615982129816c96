"""Telemetry – TelemetryFunnel, the single entry point for instrumentation."""
from __future__ import annotations

from mp_analytics.kernel.errors import InvalidTelemetryEventError
from mp_analytics.kernel.time import MonotonicClock, SystemMonotonicClock
from mp_analytics.observability.logging import get_logger
from mp_analytics.telemetry.event import TelemetryEvent
from mp_analytics.telemetry.sink import AnalyticsSink, SinkState
from mp_analytics.telemetry.timing import InteractionTimer, PageHost

_log = get_logger(__name__)


class TelemetryFunnel:
    """Normalise instrumentation calls and forward them to an analytics sink.

    Forwarding is fire-and-forget: no retries, no queueing, no
    acknowledgement.  While *state* is not armed every call is a silent
    no-op.  Errors raised by the sink itself are not caught here.

    Parameters
    ----------
    sink:
        The external analytics backend.
    state:
        Whether *sink* is configured and loaded; checked on every call.
    clock:
        Monotonic millisecond clock used by :meth:`measure_interaction`.
    """

    def __init__(
        self,
        sink: AnalyticsSink,
        state: SinkState,
        clock: MonotonicClock | None = None,
    ) -> None:
        self._sink = sink
        self._state = state
        self._clock = clock or SystemMonotonicClock()

    @property
    def sink(self) -> AnalyticsSink:
        return self._sink

    @property
    def state(self) -> SinkState:
        return self._state

    @property
    def clock(self) -> MonotonicClock:
        return self._clock

    @property
    def armed(self) -> bool:
        return self._state.armed

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def track_event(
        self,
        category: str,
        action: str,
        label: str | None = None,
        value: int | float | None = None,
    ) -> None:
        if not self._state.armed:
            _log.debug("telemetry.skipped", category=category, action=action)
            return

        try:
            event = TelemetryEvent(category, action, label, value)
        except InvalidTelemetryEventError as exc:
            _log.warning("telemetry.invalid_event", error=exc.to_dict())
            return

        self._sink.send_event(event.name, event.to_properties())
        _log.debug("telemetry.forwarded", category=category, action=action, label=label)

    def track_service_interaction(self, service_name: str, interaction_type: str) -> None:
        self.track_event("Service", interaction_type, service_name)

    def track_market_view(self, market_name: str) -> None:
        self.track_event("Market Intelligence", "View", market_name)

    def track_page_view(self, page_path: str) -> None:
        if not self._state.armed:
            _log.debug("telemetry.skipped", event_name="page_view", page_path=page_path)
            return
        self._sink.send_event("page_view", {"page_path": page_path})

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------

    def measure_interaction(self, name: str) -> InteractionTimer:
        """Start timing *name*; call ``finish()`` on the result to report it."""
        return InteractionTimer(name=name, started_at=self._clock.now_ms(), _funnel=self)

    def measure_page_load(self, host: PageHost) -> None:
        """Report ``load_event_end - navigation_start`` once the page has loaded."""
        fired = False

        def _on_load() -> None:
            nonlocal fired
            if fired:
                return
            fired = True
            load_time = host.navigation_timing().load_time
            self.track_event("Performance", "page_load", "Page Load Time", load_time)

        host.on_load(_on_load)


__all__ = ["TelemetryFunnel"]
