"""Telemetry – interaction timers and page-load timing.

:class:`InteractionTimer` is deliberately unguarded: every call to
:meth:`InteractionTimer.finish` measures from the same ``started_at`` and
forwards another event, so repeated calls report non-decreasing durations.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mp_analytics.telemetry.funnel import TelemetryFunnel


@dataclasses.dataclass(frozen=True)
class NavigationTiming:
    """Host navigation timestamps, in milliseconds."""

    navigation_start: float
    load_event_end: float

    @property
    def load_time(self) -> float:
        return self.load_event_end - self.navigation_start


class PageHost(Protocol):
    """Port: the page lifecycle and timing facility of the host environment."""

    def on_load(self, handler: Callable[[], None]) -> None: ...

    def navigation_timing(self) -> NavigationTiming: ...


def round_ms(ms: float) -> int:
    """Round half up to a whole millisecond."""
    return math.floor(ms + 0.5)


@dataclasses.dataclass(frozen=True)
class InteractionTimer:
    """Start timestamp of one interaction, bound to the funnel that reports it."""

    name: str
    started_at: float
    _funnel: "TelemetryFunnel" = dataclasses.field(repr=False, compare=False)

    def elapsed_ms(self) -> int:
        return round_ms(self._funnel.clock.now_ms() - self.started_at)

    def finish(self) -> int:
        """Report the elapsed time since ``started_at`` and return it."""
        duration = self.elapsed_ms()
        self._funnel.track_event("Performance", "interaction", self.name, duration)
        return duration

    def __call__(self) -> int:
        return self.finish()


__all__ = ["InteractionTimer", "NavigationTiming", "PageHost", "round_ms"]
