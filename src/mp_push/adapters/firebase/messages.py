"""Firebase adapter – GatewayPayload/GatewayOptions to ``messaging.MulticastMessage``."""
from __future__ import annotations

import json
import re
from typing import Any, Sequence

from firebase_admin import messaging

from mp_push.application.notifications.options import GatewayOptions
from mp_push.application.notifications.payload import GatewayPayload

__all__ = ["MULTICAST_LIMIT", "build_multicast_message"]

# firebase-admin rejects multicast messages with more tokens than this
MULTICAST_LIMIT = 500

# AndroidNotification.color only accepts #RRGGBB
_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _int_badge(badge: Any) -> int | None:
    """APNs badges are absolute counts; the ``+1`` increment has no v1 equivalent."""
    if isinstance(badge, str) and badge.isdigit():
        return int(badge)
    return None


def _text(notification: dict[str, Any], key: str) -> str | None:
    """Display fields are encoded as strings; other values are left off the message."""
    value = notification.get(key)
    return value if isinstance(value, str) else None


def _color(notification: dict[str, Any]) -> str | None:
    color = _text(notification, "color")
    return color if color and _COLOR_PATTERN.match(color) else None


def _android_config(notification: dict[str, Any], options: GatewayOptions) -> messaging.AndroidConfig:
    return messaging.AndroidConfig(
        priority=options.priority,
        ttl=options.time_to_live,
        collapse_key=str(options.collapse_key) if options.collapse_key else None,
        notification=messaging.AndroidNotification(
            sound=_text(notification, "sound"),
            icon=_text(notification, "icon"),
            color=_color(notification),
            click_action=_text(notification, "link"),
            notification_count=_int_badge(notification.get("badge")),
        ),
    )


def _apns_config(
    payload: GatewayPayload,
    options: GatewayOptions,
    sent_at: int,
) -> messaging.APNSConfig:
    notification = payload.notification
    silent = not any(notification.get(k) for k in ("title", "body"))
    # Apple rejects priority 10 for background-only (content-available) pushes
    headers = {"apns-priority": "5" if silent and options.content_available else "10"}
    if payload.topic:
        headers["apns-topic"] = str(payload.topic)
    if options.collapse_key:
        headers["apns-collapse-id"] = str(options.collapse_key)
    if options.time_to_live is not None:
        headers["apns-expiration"] = str(sent_at + options.time_to_live if options.time_to_live else 0)
    return messaging.APNSConfig(
        headers=headers,
        payload=messaging.APNSPayload(
            aps=messaging.Aps(
                badge=_int_badge(notification.get("badge")),
                sound=_text(notification, "sound"),
                content_available=True if options.content_available else None,
                mutable_content=True if options.mutable_content else None,
            ),
        ),
    )


def _webpush_config(notification: dict[str, Any], options: GatewayOptions) -> messaging.WebpushConfig:
    headers = {"Urgency": options.priority}
    if options.time_to_live is not None:
        headers["TTL"] = str(options.time_to_live)
    link = _text(notification, "link")
    return messaging.WebpushConfig(
        headers=headers,
        notification=messaging.WebpushNotification(icon=_text(notification, "icon")),
        fcm_options=(
            messaging.WebpushFCMOptions(link=link)
            if link and link.startswith("https://")
            else None
        ),
    )


def build_multicast_message(
    tokens: Sequence[str],
    payload: GatewayPayload,
    options: GatewayOptions,
    *,
    sent_at: int,
) -> messaging.MulticastMessage:
    """Build the multicast message for one gateway sub-request.

    *sent_at* is the Unix time in seconds used to derive ``apns-expiration``.
    """
    notification = payload.notification
    title, body = _text(notification, "title"), _text(notification, "body")
    return messaging.MulticastMessage(
        tokens=list(tokens),
        notification=messaging.Notification(title=title, body=body) if title or body else None,
        data={k: _stringify(v) for k, v in payload.data.items()} if payload.data else None,
        android=_android_config(notification, options),
        apns=_apns_config(payload, options, sent_at),
        webpush=_webpush_config(notification, options),
    )
