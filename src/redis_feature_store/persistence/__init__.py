"""
Redis persistence layer.

- keys.py: Namespaced key scheme shared with other SDKs using the same Redis
- base_store.py: Abstract PersistentStoreCore / BigSegmentStore interfaces
- store_core.py: Versioned feature store with optimistic upserts
- big_segment_store.py: Read-only Big Segment membership lookups
- redis_client.py: Connection pool construction from Settings
- exceptions.py: StoreError hierarchy

Storage Strategy:
- One hash per collection kind, items stored as JSON
- "$inited" sentinel written by every successful init
- WATCH/MULTI/EXEC retry loop, no locks
"""

from redis_feature_store.persistence.base_store import BigSegmentStore, PersistentStoreCore
from redis_feature_store.persistence.big_segment_store import RedisBigSegmentStore
from redis_feature_store.persistence.exceptions import (
    StoreDeserializationError,
    StoreError,
    StoreUnavailableError,
)
from redis_feature_store.persistence.keys import RedisKeys
from redis_feature_store.persistence.redis_client import (
    create_connection_pool,
    create_redis_client,
    resolve_redis_url,
)
from redis_feature_store.persistence.store_core import RedisFeatureStoreCore

__all__ = [
    "PersistentStoreCore",
    "BigSegmentStore",
    "RedisFeatureStoreCore",
    "RedisBigSegmentStore",
    "RedisKeys",
    "StoreError",
    "StoreUnavailableError",
    "StoreDeserializationError",
    "create_connection_pool",
    "create_redis_client",
    "resolve_redis_url",
]
