"""Application notifications – gateway delivery options."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

__all__ = ["FCM_TIME_TO_LIVE_MAX", "GatewayOptions", "generate_options", "time_to_live"]

# FCM keeps undelivered messages for at most four weeks
FCM_TIME_TO_LIVE_MAX = 4 * 7 * 24 * 60 * 60

_FLAG_VALUES = (1, "1")


@dataclass(frozen=True)
class GatewayOptions:
    """Delivery options; ``None`` fields are left out of the wire form."""

    priority: str = "high"
    content_available: int | None = None
    mutable_content: int | None = None
    collapse_key: str | None = None
    time_to_live: int | None = None

    def to_dict(self) -> dict[str, Any]:
        options: dict[str, Any] = {"priority": self.priority}
        if self.content_available is not None:
            options["contentAvailable"] = self.content_available
        if self.mutable_content is not None:
            options["mutableContent"] = self.mutable_content
        if self.collapse_key is not None:
            options["collapseKey"] = self.collapse_key
        if self.time_to_live is not None:
            options["timeToLive"] = self.time_to_live
        return options


def _flag_set(value: Any) -> bool:
    return value in _FLAG_VALUES


def time_to_live(timestamp_ms: int | float, expiration_time_ms: int | float) -> int:
    """Seconds between *timestamp_ms* and *expiration_time_ms*, clamped to FCM's range."""
    ttl = math.floor((expiration_time_ms - timestamp_ms) / 1000)
    return max(0, min(ttl, FCM_TIME_TO_LIVE_MAX))


def generate_options(
    data: Mapping[str, Any] | None,
    timestamp_ms: int | float,
    expiration_time_ms: int | float | None = None,
) -> GatewayOptions:
    """Build :class:`GatewayOptions` from notification ``data`` and the send time.

    ``time_to_live`` is only set when an expiration time is given.
    """
    data = data or {}
    return GatewayOptions(
        content_available=1 if _flag_set(data.get("content-available")) else None,
        mutable_content=1 if _flag_set(data.get("mutable-content")) else None,
        collapse_key=data.get("collapseKey") or None,
        time_to_live=(
            time_to_live(timestamp_ms, expiration_time_ms) if expiration_time_ms else None
        ),
    )
