"""Telemetry – TelemetryEvent value object."""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_analytics.kernel.errors import InvalidTelemetryEventError


@dataclasses.dataclass(frozen=True)
class TelemetryEvent:
    """Canonical instrumentation event.

    ``category`` and ``action`` are required and non-empty; ``label`` and
    ``value`` are optional and forwarded exactly as given.
    """

    category: str
    action: str
    label: str | None = None
    value: int | float | None = None

    def __post_init__(self) -> None:
        invalid = [
            field for field in ("category", "action")
            if not isinstance(getattr(self, field), str) or not getattr(self, field)
        ]
        if invalid:
            raise InvalidTelemetryEventError(invalid)

    @property
    def name(self) -> str:
        """Event name as seen by the sink (GA4 uses the action)."""
        return self.action

    def to_properties(self) -> dict[str, Any]:
        return {
            "event_category": self.category,
            "event_label": self.label,
            "value": self.value,
        }


__all__ = ["TelemetryEvent"]
