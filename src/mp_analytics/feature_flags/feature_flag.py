"""Feature flags – FeatureName enum and FeatureFlag value object."""
from __future__ import annotations

import dataclasses
import re
from enum import Enum


class FeatureName(str, Enum):
    """Closed set of optional features known at build time."""

    MARKET_INTELLIGENCE = "marketIntelligence"
    LIVE_CHAT = "liveChat"
    INVESTMENT_CALCULATOR = "investmentCalculator"

    @property
    def env_key(self) -> str:
        """``liveChat`` -> ``ENABLE_LIVE_CHAT``."""
        return "ENABLE_" + re.sub(r"(?<!^)(?=[A-Z])", "_", self.value).upper()

    @classmethod
    def parse(cls, name: FeatureName | str) -> FeatureName | None:
        """Return the member for *name*, or ``None`` if it is not a known feature."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """Describes a feature flag with metadata."""
    name: FeatureName
    description: str = ""

    @property
    def env_key(self) -> str:
        return self.name.env_key


FEATURES: tuple[FeatureFlag, ...] = (
    FeatureFlag(FeatureName.MARKET_INTELLIGENCE, "Market intelligence dashboard"),
    FeatureFlag(FeatureName.LIVE_CHAT, "Live chat widget"),
    FeatureFlag(FeatureName.INVESTMENT_CALCULATOR, "Investment calculator"),
)


__all__ = ["FEATURES", "FeatureFlag", "FeatureName"]
