"""Testing support – fakes for the push adapter's ports."""

from mp_push.testing.fakes import FakeClock, FrozenClock, InMemoryPushGateway, make_installations

__all__ = ["FakeClock", "FrozenClock", "InMemoryPushGateway", "make_installations"]
