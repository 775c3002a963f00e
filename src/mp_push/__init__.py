"""
mp_push – Firebase push notification adapter.

Import path convention::

    from mp_push.application.notifications import FirebasePushAdapter, Installation
    from mp_push.config.settings import PushAdapterSettings
    from mp_push.adapters.firebase import FirebaseAdminGateway
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
