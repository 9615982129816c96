"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   └── InvalidTelemetryEventError
    └── ApplicationError                 (application.py)
        └── ConfigError                  (mp_analytics.config.validation)

Neither a missing tracking id nor an unknown feature name is an error;
both resolve to "off" without raising.
"""

from mp_analytics.kernel.errors.application import ApplicationError
from mp_analytics.kernel.errors.base import BaseError
from mp_analytics.kernel.errors.domain import DomainError, InvalidTelemetryEventError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidTelemetryEventError",
]
