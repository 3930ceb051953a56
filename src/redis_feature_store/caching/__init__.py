"""
In-process caching for the feature store.

- cache_config.py: CacheConfig policy (disabled / TTL / forever)
- expiring.py: ExpiringMapping used for every cache region
- wrapper.py: CachingStoreWrapper, the read-through / write-through facade
"""

from redis_feature_store.caching.cache_config import (
    DEFAULT_CACHE_CONFIG,
    CacheConfig,
    CacheMode,
)
from redis_feature_store.caching.expiring import ExpiringMapping
from redis_feature_store.caching.wrapper import CachingStoreWrapper

__all__ = [
    "CacheConfig",
    "CacheMode",
    "DEFAULT_CACHE_CONFIG",
    "ExpiringMapping",
    "CachingStoreWrapper",
]
