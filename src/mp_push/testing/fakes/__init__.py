"""Testing fakes – in-memory doubles for the push adapter's ports."""
from mp_push.testing.fakes.clock import FakeClock
from mp_push.testing.fakes.installations import make_installations
from mp_push.application.notifications.gateway import InMemoryPushGateway
from mp_push.kernel.time import FrozenClock

__all__ = ["FakeClock", "FrozenClock", "InMemoryPushGateway", "make_installations"]
