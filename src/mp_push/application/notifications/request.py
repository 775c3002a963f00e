"""Application notifications – NotificationRequest."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["NotificationRequest"]


@dataclass(frozen=True)
class NotificationRequest:
    """A push request as the host API hands it over.

    ``expiration_time`` is absolute Unix-epoch milliseconds; relative
    expirations must be resolved by the caller.
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    expiration_time: int | float | None = None

    @classmethod
    def from_mapping(cls, body: Mapping[str, Any]) -> NotificationRequest:
        return cls(
            data=body.get("data") or {},
            expiration_time=body.get("expiration_time") or None,
        )

    @classmethod
    def coerce(cls, value: NotificationRequest | Mapping[str, Any] | None) -> NotificationRequest:
        if isinstance(value, NotificationRequest):
            return value
        return cls.from_mapping(value or {})
