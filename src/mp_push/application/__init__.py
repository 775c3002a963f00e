"""Application – push notification use cases (framework-agnostic)."""

from mp_push.application.notifications import (
    FirebasePushAdapter,
    InMemoryPushGateway,
    Installation,
    NotificationRequest,
    PushGateway,
    Resolution,
)

__all__ = [
    "FirebasePushAdapter",
    "InMemoryPushGateway",
    "Installation",
    "NotificationRequest",
    "PushGateway",
    "Resolution",
]
