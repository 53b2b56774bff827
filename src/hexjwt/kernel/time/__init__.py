"""Kernel time – Clock port + implementations."""
from hexjwt.kernel.time.clock import Clock, FrozenClock, SystemClock, unix_time

__all__ = ["Clock", "FrozenClock", "SystemClock", "unix_time"]
