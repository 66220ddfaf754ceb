# This file implements the keyed query cache shared by every portal page.
# It exists so pages that depend on the same endpoint reuse one snapshot until it goes stale or is invalidated.
# Keys are tuples whose first element is the endpoint path, which makes prefix invalidation cheap.
# The cache is a process-wide resource in Streamlit, so reads and writes are guarded by a lock.

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any, TypeVar

LOGGER = logging.getLogger("portal")

T = TypeVar("T")

CacheKey = tuple[Any, ...]


class QueryCache:
    def __init__(
        self,
        *,
        stale_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.stale_seconds = stale_seconds
        self._clock = clock
        self._store: dict[CacheKey, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Any | None:
        with self._lock:
            cached = self._store.get(key)
            if not cached:
                return None
            expires_at, value = cached
            if self._clock() > expires_at:
                self._store.pop(key, None)
                return None
            return value

    def set(self, key: CacheKey, value: Any) -> None:
        with self._lock:
            self._store[key] = (self._clock() + self.stale_seconds, value)

    def fetch(self, key: CacheKey, loader: Callable[[], T]) -> T:
        cached = self.get(key)
        if cached is not None:
            return cached
        # Loader errors propagate so failures are never stored.
        value = loader()
        self.set(key, value)
        return value

    def invalidate(self, prefix: CacheKey | None = None) -> int:
        with self._lock:
            if prefix is None:
                dropped = len(self._store)
                self._store.clear()
            else:
                matching = [key for key in self._store if key[: len(prefix)] == prefix]
                for key in matching:
                    del self._store[key]
                dropped = len(matching)
        LOGGER.info("query cache invalidated prefix=%s dropped=%d", prefix, dropped)
        return dropped

    def keys(self) -> list[CacheKey]:
        with self._lock:
            return list(self._store)
