"""Domain errors — value-object invariant violations."""

from __future__ import annotations

from mp_analytics.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain invariant is violated."""

    default_code = "domain_error"


class InvalidTelemetryEventError(DomainError):
    """A telemetry event was built without a category or action.

    ``detail["fields"]`` names every offending field, in declaration order.
    """

    default_code = "invalid_telemetry_event"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            f"Telemetry events need a non-empty {' and '.join(fields)}",
            detail={"fields": list(fields)},
        )

    @property
    def fields(self) -> list[str]:
        return self.detail["fields"]


__all__ = ["DomainError", "InvalidTelemetryEventError"]
