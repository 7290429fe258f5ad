"""Revoked bearer tokens, kept only until the token would have expired anyway.

The cache is an explicit dependency of the authentication path. The
in-memory implementation is process local: with several application
instances each keeps its own list, so a shared store (Redis or similar)
has to implement :class:`RevocationCache` for such deployments.
"""

import threading
import time
from collections.abc import Callable
from typing import Protocol


class RevocationCache(Protocol):
    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str, ttl: float) -> None: ...


class InMemoryRevocationCache:
    """Dictionary of ``key -> (value, expires_at)``; expired entries are evicted on access."""

    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def _now(self) -> float:
        return self._clock() if self._clock is not None else time.time()

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at <= self._now():
                del self._entries[key]
                return None
            return value

    def put(self, key: str, value: str, ttl: float) -> None:
        if ttl <= 0:
            return
        with self._lock:
            self._evict_expired()
            self._entries[key] = (value, self._now() + ttl)

    def _evict_expired(self) -> None:
        now = self._now()
        for key in [k for k, (_, expires_at) in self._entries.items() if expires_at <= now]:
            del self._entries[key]

    def __len__(self) -> int:
        with self._lock:
            self._evict_expired()
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
