"""Application-layer errors."""

from __future__ import annotations

from mp_push.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (configuration, usage)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
