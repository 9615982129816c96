"""Config settings – AnalyticsSettings."""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping

from mp_analytics.config.settings.base import Settings
from mp_analytics.config.settings.loaders import EnvSettingsLoader
from mp_analytics.observability.logging import get_logger

PLACEHOLDER_TRACKING_ID = "G-XXXXXXXXXX"
DEFAULT_LOG_LEVEL = "INFO"

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class AnalyticsSettings(Settings):
    """Process-wide analytics configuration.

    Keys are read without a prefix: ``GA_TRACKING_ID``, ``SERVICE_NAME``,
    ``LOG_LEVEL``.  Feature switches (``ENABLE_*``) are not settings fields;
    they are resolved by :func:`mp_analytics.feature_flags.build_snapshot`.
    """

    ga_tracking_id: str = ""
    service_name: str = "web"
    log_level: str = DEFAULT_LOG_LEVEL

    def _validate(self) -> None:
        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            _log.warning("settings.log_level_unknown", value=self.log_level, fallback=DEFAULT_LOG_LEVEL)
            level = DEFAULT_LOG_LEVEL
        object.__setattr__(self, "log_level", level)

    @property
    def tracking_configured(self) -> bool:
        """``True`` when a real (non-empty, non-placeholder) tracking id is set."""
        tracking_id = self.ga_tracking_id.strip()
        return bool(tracking_id) and tracking_id != PLACEHOLDER_TRACKING_ID

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_analytics_settings(config: Mapping[str, str] | None = None) -> AnalyticsSettings:
    """Resolve :class:`AnalyticsSettings` from *config* (defaults to ``os.environ``)."""
    return EnvSettingsLoader(config).load(AnalyticsSettings)


__all__ = ["DEFAULT_LOG_LEVEL", "PLACEHOLDER_TRACKING_ID", "AnalyticsSettings", "load_analytics_settings"]
