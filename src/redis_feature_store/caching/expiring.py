"""
Thread-safe mapping with optional per-entry expiry.

Used for every region of the caching store wrapper. A ``ttl_seconds`` of
None means entries never expire.
"""

import threading
import time
from typing import Callable, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class ExpiringMapping(Generic[K, V]):
    """
    Dict-like cache whose entries expire ``ttl_seconds`` after being written.
    
    Expired entries are dropped lazily on lookup. Loaders run outside the
    lock, so a slow backing store never blocks readers of other keys. A
    loaded value is only cached if no write (put, invalidate, clear) happened
    while it was loading; otherwise it is returned uncached so it cannot
    overwrite fresher data.
    """
    
    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[K, tuple[V, Optional[float]]] = {}
        self._generation = 0
        self._lock = threading.Lock()
    
    def _lookup(self, key: K):
        entry = self._entries.get(key)
        if entry is None:
            return _MISSING
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return _MISSING
        return value
    
    def _store(self, key: K, value: V) -> None:
        expires_at = None
        if self.ttl_seconds is not None:
            expires_at = self._clock() + self.ttl_seconds
        self._entries[key] = (value, expires_at)
    
    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            value = self._lookup(key)
        return default if value is _MISSING else value
    
    def __contains__(self, key: K) -> bool:
        with self._lock:
            return self._lookup(key) is not _MISSING
    
    def get_or_load(self, key: K, loader: Callable[[], V]) -> tuple[V, bool]:
        """
        Return the cached value, loading and caching it on a miss.
        
        If the loader raises, nothing is cached and the exception propagates.
        
        Returns:
            Tuple of (value, hit) where hit is False if the loader ran
        """
        with self._lock:
            value = self._lookup(key)
            generation = self._generation
        if value is not _MISSING:
            return value, True
        
        value = loader()
        with self._lock:
            if self._generation == generation:
                self._store(key, value)
        return value, False
    
    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._generation += 1
            self._store(key, value)
    
    def invalidate(self, key: K) -> None:
        with self._lock:
            self._generation += 1
            self._entries.pop(key, None)
    
    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            self._entries.clear()
    
    def __len__(self) -> int:
        with self._lock:
            return sum(1 for key in list(self._entries) if self._lookup(key) is not _MISSING)
