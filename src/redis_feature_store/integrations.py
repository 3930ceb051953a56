"""
Factory functions wiring settings, connection pool, store core and cache.

Usage:
    >>> from redis_feature_store.integrations import new_feature_store
    >>> store = new_feature_store()
    >>> store.init({FEATURES: {"flag-a": VersionedItem(key="flag-a", version=1)}})
    >>> store.get(FEATURES, "flag-a")

The feature store and the Big Segment store may point at different Redis
instances; build them from different Settings.
"""

from typing import Optional

import structlog

from redis_feature_store.caching.cache_config import CacheConfig
from redis_feature_store.caching.wrapper import CachingStoreWrapper
from redis_feature_store.config import Settings
from redis_feature_store.persistence.big_segment_store import RedisBigSegmentStore
from redis_feature_store.persistence.redis_client import create_redis_client
from redis_feature_store.persistence.store_core import RedisFeatureStoreCore

logger = structlog.get_logger(__name__)


def describe_configuration() -> str:
    """Name reported in SDK diagnostics for this store implementation."""
    return "Redis"


def new_feature_store_core(settings: Optional[Settings] = None) -> RedisFeatureStoreCore:
    """
    Create an uncached Redis store core.
    
    Args:
        settings: Store settings (environment defaults if None)
    
    Returns:
        RedisFeatureStoreCore owning a fresh connection pool
    """
    settings = settings or Settings()
    return RedisFeatureStoreCore(create_redis_client(settings), settings.REDIS_PREFIX)


def new_feature_store(
    settings: Optional[Settings] = None,
    cache_config: Optional[CacheConfig] = None,
) -> CachingStoreWrapper:
    """
    Create a cached Redis feature store.
    
    Args:
        settings: Store settings (environment defaults if None)
        cache_config: Cache policy; defaults to settings.cache_config()
    
    Returns:
        CachingStoreWrapper around a RedisFeatureStoreCore
    """
    settings = settings or Settings()
    cache_config = cache_config or settings.cache_config()
    
    logger.info(
        "Creating Redis feature store",
        prefix=settings.REDIS_PREFIX,
        cache_mode=cache_config.mode.value,
    )
    return CachingStoreWrapper(new_feature_store_core(settings), cache_config)


def new_big_segment_store(settings: Optional[Settings] = None) -> RedisBigSegmentStore:
    """
    Create a Redis Big Segment store.
    
    Args:
        settings: Store settings (environment defaults if None)
    
    Returns:
        RedisBigSegmentStore owning a fresh connection pool
    """
    settings = settings or Settings()
    
    logger.info("Creating Redis Big Segment store", prefix=settings.REDIS_PREFIX)
    return RedisBigSegmentStore(create_redis_client(settings), settings.REDIS_PREFIX)
