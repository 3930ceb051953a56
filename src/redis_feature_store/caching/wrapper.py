"""
Read-through / write-through cache in front of a persistent store core.

Consistency contract:
- Reads are served from cache while unexpired and loaded from the core on a
  miss. Absent items are cached as absent; failures are never cached.
- Writes always go to the core first. The cache is then updated with what
  the core reports as stored, never with what the caller asked to write,
  so a lost version race leaves the winning item in the cache.
- The cache is process-local; writes made by other processes become
  visible once the affected entries expire.
"""

import time
from typing import Callable, Optional

import structlog

from redis_feature_store.caching.cache_config import DEFAULT_CACHE_CONFIG, CacheConfig
from redis_feature_store.caching.expiring import ExpiringMapping
from redis_feature_store.models.items import VersionedItem
from redis_feature_store.models.kinds import CollectionKind
from redis_feature_store.monitoring.metrics import store_cache_requests_total
from redis_feature_store.persistence.base_store import AllData, PersistentStoreCore

logger = structlog.get_logger(__name__)

_INITED_CACHE_KEY = "$inited"


def _record_lookup(region: str, hit: bool) -> None:
    store_cache_requests_total.labels(region=region, result="hit" if hit else "miss").inc()


class CachingStoreWrapper:
    """
    Feature store facade combining a store core with an in-process cache.
    
    Regions:
    - item: (kind, key) -> item or None
    - all: kind -> {key: item}
    - initialized: single flag (TTL mode only; once True it is latched)
    """
    
    def __init__(
        self,
        core: PersistentStoreCore,
        cache_config: CacheConfig = DEFAULT_CACHE_CONFIG,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize caching wrapper.
        
        Args:
            core: Store core doing the actual persistence
            cache_config: Expiration policy for every cache region
            clock: Monotonic time source (injectable for tests)
        """
        self.core = core  # exposed for testing
        self.cache_config = cache_config
        self._inited = False
        
        self._item_cache: Optional[ExpiringMapping[tuple[CollectionKind, str], Optional[VersionedItem]]] = None
        self._all_cache: Optional[ExpiringMapping[CollectionKind, dict[str, VersionedItem]]] = None
        self._init_cache: Optional[ExpiringMapping[str, bool]] = None
        
        if cache_config.enabled:
            ttl = cache_config.ttl_seconds
            self._item_cache = ExpiringMapping(ttl, clock)
            self._all_cache = ExpiringMapping(ttl, clock)
            if not cache_config.is_forever:
                # A cached False must expire, otherwise another process's init is never seen
                self._init_cache = ExpiringMapping(ttl, clock)
        
        logger.info(
            "Initialized caching store wrapper",
            core_class=core.__class__.__name__,
            cache_mode=cache_config.mode.value,
            ttl_seconds=cache_config.ttl_seconds,
        )
    
    def get(self, kind: CollectionKind, key: str) -> Optional[VersionedItem]:
        """
        Fetch one item, tombstones included.
        
        Returns:
            Item, or None if the store has no item for ``key``
        """
        if self._item_cache is None:
            return self.core.get(kind, key)
        
        item, hit = self._item_cache.get_or_load((kind, key), lambda: self.core.get(kind, key))
        _record_lookup("item", hit)
        return item
    
    def all(self, kind: CollectionKind) -> dict[str, VersionedItem]:
        """Fetch every item of a kind, tombstones included."""
        if self._all_cache is None:
            return self.core.get_all(kind)
        
        items, hit = self._all_cache.get_or_load(kind, lambda: self.core.get_all(kind))
        _record_lookup("all", hit)
        return dict(items)
    
    def init(self, all_data: AllData) -> None:
        """
        Replace the full data set.
        
        On success both item regions are rebuilt from ``all_data`` and the
        store is known to be initialized without asking the core again.
        """
        self.core.init(all_data)
        
        if self._item_cache is not None and self._all_cache is not None:
            self._item_cache.clear()
            self._all_cache.clear()
            for kind, items in all_data.items():
                by_key = {item.key: item for item in items.values()}
                self._all_cache.put(kind, by_key)
                for item_key, item in by_key.items():
                    self._item_cache.put((kind, item_key), item)
        
        if self._init_cache is not None:
            self._init_cache.put(_INITED_CACHE_KEY, True)
        self._inited = True
    
    def upsert(self, kind: CollectionKind, item: VersionedItem) -> VersionedItem:
        """
        Apply a versioned write and cache the authoritative result.
        
        Returns:
            The stored item, which is the newer existing item if ``item``
            lost the version comparison
        """
        stored = self.core.upsert(kind, item)
        
        if self._item_cache is not None and self._all_cache is not None:
            self._item_cache.put((kind, item.key), stored)
            
            if self.cache_config.is_forever:
                # Nothing will ever reload the collection, so patch it in place
                cached = self._all_cache.get(kind)
                if cached is not None:
                    updated = dict(cached)
                    updated[stored.key] = stored
                    self._all_cache.put(kind, updated)
            else:
                self._all_cache.invalidate(kind)
        
        if stored is not item:
            logger.debug(
                "Write superseded by stored version",
                namespace=kind.namespace,
                key=item.key,
                requested_version=item.version,
                stored_version=stored.version,
            )
        return stored
    
    def delete(self, kind: CollectionKind, key: str, version: int) -> VersionedItem:
        """Store a tombstone for ``key`` at ``version``."""
        return self.upsert(kind, VersionedItem.tombstone(key, version))
    
    def initialized(self) -> bool:
        """Whether the store holds a full data set (latched once True)."""
        if self._inited:
            return True
        
        if self._init_cache is None:
            result = self.core.initialized()
        else:
            result, hit = self._init_cache.get_or_load(_INITED_CACHE_KEY, self.core.initialized)
            _record_lookup("initialized", hit)
        
        if result:
            self._inited = True
        return result
    
    def close(self) -> None:
        self.core.close()
        if self._item_cache is not None:
            self._item_cache.clear()
        if self._all_cache is not None:
            self._all_cache.clear()
        if self._init_cache is not None:
            self._init_cache.clear()
        self._inited = False
