"""Kernel – framework-agnostic building blocks."""

from mp_push.kernel.errors import (
    ApplicationError,
    BaseError,
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
