"""Application notifications – gateway payload translation.

Maps the application-level ``data`` keys onto the notification / data
payload the gateway expects.  Keys that are not display fields are passed
through untouched as custom data.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["BADGE_INCREMENT", "GatewayPayload", "PAYLOAD_KEYS", "generate_payload"]

BADGE_INCREMENT = "Increment"

PAYLOAD_KEYS: frozenset[str] = frozenset(
    {"badge", "alert", "sound", "title", "body", "uri", "icon", "color", "topic"}
)

# data key -> notification field, applied in this order (body after alert)
_NOTIFICATION_FIELDS: tuple[tuple[str, str], ...] = (
    ("alert", "body"),
    ("title", "title"),
    ("body", "body"),
    ("uri", "link"),
    ("sound", "sound"),
    ("icon", "icon"),
    ("color", "color"),
)


@dataclass
class GatewayPayload:
    """Wire-level payload: display fields, optional topic, optional custom data."""

    notification: dict[str, Any] = field(default_factory=dict)
    topic: str | None = None
    data: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"notification": dict(self.notification)}
        if self.topic:
            payload["topic"] = self.topic
        if self.data:
            payload["data"] = dict(self.data)
        return payload


def _format_badge(badge: Any) -> str:
    if badge == BADGE_INCREMENT:
        return "+1"
    if isinstance(badge, bool):
        return str(badge).lower()
    if isinstance(badge, float) and badge.is_integer():
        return str(int(badge))
    return str(badge)


def generate_payload(data: Mapping[str, Any] | None) -> GatewayPayload:
    """Translate notification ``data`` into a :class:`GatewayPayload`."""
    data = data or {}
    notification: dict[str, Any] = {}

    badge = data.get("badge")
    if badge is not None:
        notification["badge"] = _format_badge(badge)

    for source, target in _NOTIFICATION_FIELDS:
        value = data.get(source)
        if value:
            notification[target] = value

    custom = {k: v for k, v in data.items() if k not in PAYLOAD_KEYS}

    return GatewayPayload(
        notification=notification,
        topic=data.get("topic") or None,
        data=custom or None,
    )
