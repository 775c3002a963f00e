"""Application notifications – Firebase push adapter, gateway port and translators."""
from mp_push.application.notifications.adapter import FirebasePushAdapter
from mp_push.application.notifications.batching import Batch, partition
from mp_push.application.notifications.gateway import GatewayCall, InMemoryPushGateway, PushGateway
from mp_push.application.notifications.installation import VALID_PUSH_TYPES, DeviceType, Installation
from mp_push.application.notifications.options import (
    FCM_TIME_TO_LIVE_MAX,
    GatewayOptions,
    generate_options,
)
from mp_push.application.notifications.payload import GatewayPayload, generate_payload
from mp_push.application.notifications.recipients import valid_installations, valid_tokens
from mp_push.application.notifications.request import NotificationRequest
from mp_push.application.notifications.resolution import (
    GatewayResponse,
    Resolution,
    TokenResult,
    reduce_response,
)

__all__ = [
    "FCM_TIME_TO_LIVE_MAX",
    "VALID_PUSH_TYPES",
    "Batch",
    "DeviceType",
    "FirebasePushAdapter",
    "GatewayCall",
    "GatewayOptions",
    "GatewayPayload",
    "GatewayResponse",
    "InMemoryPushGateway",
    "Installation",
    "NotificationRequest",
    "PushGateway",
    "Resolution",
    "TokenResult",
    "generate_options",
    "generate_payload",
    "partition",
    "reduce_response",
    "valid_installations",
    "valid_tokens",
]
