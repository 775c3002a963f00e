"""Infrastructure errors – push gateway and other I/O failures."""

from __future__ import annotations

from typing import Any

from mp_push.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a usage error."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """An external service failed or returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class GatewayTransportError(ExternalServiceError):
    """A push gateway call failed as a whole (network, auth, malformed batch).

    ``batch_size`` records how many tokens the failed call carried.
    """

    default_code = "gateway_transport_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        batch_size: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(service, message, **kwargs)
        self.batch_size = batch_size
        if batch_size is not None:
            self.detail.setdefault("batch_size", batch_size)


__all__ = [
    "ExternalServiceError",
    "GatewayTransportError",
    "InfrastructureError",
]
