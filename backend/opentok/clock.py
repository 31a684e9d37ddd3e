"""Time and randomness inputs shared by the token builders."""

from __future__ import annotations

import secrets
import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Current time in whole seconds since the epoch."""

    def nonce(self) -> int:
        """A fresh unsigned 64-bit random value."""


class SystemClock:
    """Wall clock plus the OS CSPRNG."""

    def now(self) -> int:
        return int(time.time())

    def nonce(self) -> int:
        return secrets.randbits(64)


class FixedClock:
    """Clock returning preset values; used to make token output reproducible."""

    def __init__(self, now: int, nonce: int = 0) -> None:
        if not 0 <= nonce < 2**64:
            raise ValueError("nonce must fit in an unsigned 64-bit integer")
        self._now = now
        self._nonce = nonce

    def now(self) -> int:
        return self._now

    def nonce(self) -> int:
        return self._nonce


system_clock = SystemClock()
