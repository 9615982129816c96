"""Feature flags – FlagSnapshot and the pure lookup functions."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from mp_analytics.feature_flags.feature_flag import FEATURES, FeatureName

_ENABLED = "true"


@dataclasses.dataclass(frozen=True, eq=False)
class FlagSnapshot(Mapping[FeatureName, bool]):
    """Immutable ``FeatureName -> bool`` mapping, built once per process."""

    _flags: Mapping[FeatureName, bool]

    def __post_init__(self) -> None:
        object.__setattr__(self, "_flags", MappingProxyType(dict(self._flags)))

    def __getitem__(self, name: FeatureName) -> bool:
        return self._flags[name]

    def __iter__(self) -> Iterator[FeatureName]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        flags = ", ".join(f"{name.value}={enabled}" for name, enabled in self._flags.items())
        return f"FlagSnapshot({flags})"


def build_snapshot(config: Mapping[str, str]) -> FlagSnapshot:
    """Resolve every known feature from ``ENABLE_*`` keys in *config*.

    Only the exact string ``"true"`` enables a feature; anything else,
    including a missing key, leaves it disabled.
    """
    return FlagSnapshot({flag.name: config.get(flag.env_key) == _ENABLED for flag in FEATURES})


def is_enabled(snapshot: Mapping[FeatureName, bool], name: FeatureName | str) -> bool:
    """Total lookup: unknown or absent names are disabled."""
    feature = FeatureName.parse(name)
    if feature is None:
        return False
    return snapshot.get(feature, False)


__all__ = ["FlagSnapshot", "build_snapshot", "is_enabled"]
