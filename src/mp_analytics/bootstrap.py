"""Startup composition root.

Resolves configuration once, builds the flag snapshot and arms the
telemetry funnel::

    ctx = bootstrap(sink=my_sink)
    if ctx.flags.is_enabled(FeatureName.LIVE_CHAT):
        ...
    ctx.telemetry.track_page_view("/markets")
"""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping

from mp_analytics.config import AnalyticsSettings, ConfigError, load_analytics_settings
from mp_analytics.feature_flags import FlagRegistry
from mp_analytics.kernel.time import MonotonicClock
from mp_analytics.observability.logging import JsonLoggerFactory, get_logger
from mp_analytics.telemetry import AnalyticsSink, LoggingAnalyticsSink, TelemetryFunnel, init_analytics

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class AnalyticsContext:
    settings: AnalyticsSettings
    flags: FlagRegistry
    telemetry: TelemetryFunnel


def bootstrap(
    config: Mapping[str, str] | None = None,
    *,
    sink: AnalyticsSink | None = None,
    clock: MonotonicClock | None = None,
    configure_logging: bool = False,
) -> AnalyticsContext:
    """Build the process-wide :class:`AnalyticsContext`.

    *config* defaults to a copy of ``os.environ`` taken at call time.
    """
    resolved = dict(os.environ if config is None else config)
    try:
        settings = load_analytics_settings(resolved)
    except ConfigError as exc:
        _log.error("analytics.config_invalid", error=exc.to_dict())
        raise
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level_number, service=settings.service_name)

    flags = FlagRegistry.from_config(resolved)
    sink = sink if sink is not None else LoggingAnalyticsSink()
    state = init_analytics(settings, sink)
    _log.info(
        "analytics.bootstrapped",
        service=settings.service_name,
        telemetry_armed=state.armed,
        enabled_features=[name.value for name in flags.enabled_features()],
    )
    return AnalyticsContext(settings=settings, flags=flags, telemetry=TelemetryFunnel(sink, state, clock))


__all__ = ["AnalyticsContext", "bootstrap"]
