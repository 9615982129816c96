"""
mp_analytics – feature flags and analytics telemetry for the web frontend.

Import path convention::

    from mp_analytics.bootstrap import bootstrap
    from mp_analytics.feature_flags import FeatureName, FlagRegistry
    from mp_analytics.telemetry import TelemetryFunnel
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
