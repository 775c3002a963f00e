"""Kernel time – Clock port + implementations."""
from mp_push.kernel.time.clock import Clock, FrozenClock, SystemClock, epoch_millis, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_millis", "utc_now"]
