"""Config settings – 12-factor env-based configuration."""
from mp_analytics.config.settings.analytics import (
    DEFAULT_LOG_LEVEL,
    PLACEHOLDER_TRACKING_ID,
    AnalyticsSettings,
    load_analytics_settings,
)
from mp_analytics.config.settings.base import Settings
from mp_analytics.config.settings.loaders import EnvSettingsLoader, MappingSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "PLACEHOLDER_TRACKING_ID",
    "AnalyticsSettings",
    "EnvSettingsLoader",
    "MappingSettingsLoader",
    "Settings",
    "SettingsLoader",
    "load_analytics_settings",
]
