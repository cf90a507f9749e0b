"""Injectable collaborators used by the policy registry: time, ids and caller identity."""

from __future__ import annotations

import threading
import time
import uuid
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Return the current time in nanoseconds."""
        ...


class IdGenerator(Protocol):
    def new_id(self) -> str: ...


class IdentityProvider(Protocol):
    def current_principal(self) -> str: ...


class SystemClock:
    """Wall clock in nanoseconds that never goes backwards."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            # Wall time may step back (NTP); hold the last value instead.
            self._last = max(self._last, time.time_ns())
            return self._last


class UuidGenerator:
    def new_id(self) -> str:
        return str(uuid.uuid4())


class StaticIdentityProvider:
    """Identity of a caller already verified by the host (e.g. from a bearer token)."""

    def __init__(self, principal: str) -> None:
        self._principal = principal

    def current_principal(self) -> str:
        return self._principal


system_clock = SystemClock()
uuid_generator = UuidGenerator()
