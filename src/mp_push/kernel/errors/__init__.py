"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (mp_push.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── ExternalServiceError
            └── GatewayTransportError
"""

from mp_push.kernel.errors.application import ApplicationError
from mp_push.kernel.errors.base import BaseError
from mp_push.kernel.errors.infrastructure import (
    ExternalServiceError,
    GatewayTransportError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "GatewayTransportError",
    "InfrastructureError",
]
