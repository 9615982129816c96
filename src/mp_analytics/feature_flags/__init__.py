"""Feature flags – static boolean switches resolved once at startup."""
from mp_analytics.feature_flags.feature_flag import FEATURES, FeatureFlag, FeatureName
from mp_analytics.feature_flags.gate import Absent, Gated, Present, compose, gate
from mp_analytics.feature_flags.registry import FlagRegistry
from mp_analytics.feature_flags.snapshot import FlagSnapshot, build_snapshot, is_enabled

__all__ = [
    "FEATURES",
    "Absent",
    "FeatureFlag",
    "FeatureName",
    "FlagRegistry",
    "FlagSnapshot",
    "Gated",
    "Present",
    "build_snapshot",
    "compose",
    "gate",
    "is_enabled",
]
