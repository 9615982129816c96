"""Config – 12-factor settings and loaders."""

from mp_analytics.config.settings import (
    AnalyticsSettings,
    EnvSettingsLoader,
    MappingSettingsLoader,
    Settings,
    SettingsLoader,
    load_analytics_settings,
)
from mp_analytics.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "AnalyticsSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MappingSettingsLoader",
    "Settings",
    "SettingsLoader",
    "load_analytics_settings",
]
