"""Firebase adapter – firebase-admin backed push gateway."""
from mp_push.adapters.firebase.gateway import FirebaseAdminGateway
from mp_push.adapters.firebase.messages import MULTICAST_LIMIT, build_multicast_message

__all__ = ["FirebaseAdminGateway", "MULTICAST_LIMIT", "build_multicast_message"]
