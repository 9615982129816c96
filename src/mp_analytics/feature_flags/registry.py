"""Feature flags – FlagRegistry."""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from mp_analytics.feature_flags.feature_flag import FeatureName
from mp_analytics.feature_flags.gate import Gated, gate
from mp_analytics.feature_flags.snapshot import FlagSnapshot, build_snapshot, is_enabled

C = TypeVar("C", bound=Callable[..., Any])


class FlagRegistry:
    """Read-only view over a :class:`FlagSnapshot`.

    Usage::

        flags = FlagRegistry.from_config(os.environ)

        @flags.feature(FeatureName.LIVE_CHAT)
        def live_chat(user):
            ...

        live_chat.render(user)   # None when ENABLE_LIVE_CHAT != "true"
    """

    def __init__(self, snapshot: FlagSnapshot) -> None:
        self._snapshot = snapshot

    @classmethod
    def from_config(cls, config: Mapping[str, str]) -> FlagRegistry:
        return cls(build_snapshot(config))

    @property
    def snapshot(self) -> FlagSnapshot:
        return self._snapshot

    def is_enabled(self, name: FeatureName | str) -> bool:
        return is_enabled(self._snapshot, name)

    def enabled_features(self) -> list[FeatureName]:
        return [name for name, enabled in self._snapshot.items() if enabled]

    def gate(self, component: C, name: FeatureName | str) -> Gated[C]:
        return gate(component, name, self._snapshot)

    def feature(self, name: FeatureName | str) -> Callable[[C], Gated[C]]:
        """Decorator form of :meth:`gate`."""

        def decorator(component: C) -> Gated[C]:
            return self.gate(component, name)

        return decorator

    def __repr__(self) -> str:
        return f"FlagRegistry({self._snapshot!r})"


__all__ = ["FlagRegistry"]
