"""
Redis implementation of the persistent feature store core.

Storage Strategy:
- Items of a kind live in one hash, key = "{prefix}:{namespace}",
  field = item key, value = item JSON
- "{prefix}:$inited" marks that a complete data set has been stored
- Upserts use optimistic concurrency (WATCH/MULTI/EXEC) on the collection
  hash and retry until they either commit or find a same-or-newer version
- Init replaces each given collection inside one MULTI transaction. It only
  deletes the collections it rewrites, so transaction size stays bounded by
  the data being written. A concurrent upsert from another process can be
  lost to an init; that process normally receives the same update again and
  re-applies it shortly after.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError, WatchError
from redis.exceptions import TimeoutError as RedisTimeoutError

from redis_feature_store.models.items import VersionedItem
from redis_feature_store.models.kinds import CollectionKind
from redis_feature_store.monitoring.metrics import (
    store_errors_total,
    store_stale_writes_total,
    store_upsert_conflicts_total,
)
from redis_feature_store.persistence.base_store import AllData, PersistentStoreCore
from redis_feature_store.persistence.exceptions import (
    StoreDeserializationError,
    StoreUnavailableError,
)
from redis_feature_store.persistence.keys import RedisKeys

logger = structlog.get_logger(__name__)

# Called as listener(base_key, item_key) after WATCH, before the version read
UpdateListener = Callable[[str, str], None]


@contextmanager
def translate_redis_errors(operation: str, **context) -> Iterator[None]:
    """Re-raise redis-py failures as StoreUnavailableError."""
    try:
        yield
    except RedisError as e:
        store_errors_total.labels(operation=operation).inc()
        logger.error(
            "Redis operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            **context,
        )
        raise StoreUnavailableError(
            f"Redis {operation} failed: {e}",
            details={"operation": operation, **context},
        ) from e


def decode_item(kind: CollectionKind, raw: str | bytes) -> VersionedItem:
    """
    Deserialize a stored item with the kind's model.
    
    Raises:
        StoreDeserializationError: If the JSON is malformed or invalid
    """
    try:
        return kind.item_model.model_validate_json(raw)
    except PydanticValidationError as e:
        raise StoreDeserializationError(
            f"Malformed item in {kind.namespace!r}",
            details={"namespace": kind.namespace, "errors": e.error_count()},
        ) from e


def encode_item(item: VersionedItem) -> str:
    return item.model_dump_json()


class RedisFeatureStoreCore(PersistentStoreCore):
    """
    Persistent store core backed by Redis hashes.
    
    Thread-safe as far as redis-py is: each call borrows a connection from
    the client's pool. Coordination between writers (threads or processes)
    is done only through WATCH on the collection hash.
    """
    
    def __init__(self, client: Redis, prefix: str):
        """
        Initialize store core.
        
        Args:
            client: Redis client (owns the connection pool)
            prefix: Namespace prefix for every key
        """
        self.client = client
        self.keys = RedisKeys(prefix)
        self._update_listener: Optional[UpdateListener] = None
    
    def set_update_listener(self, listener: Optional[UpdateListener]) -> None:
        """Install a hook run inside each upsert attempt (testing only)."""
        self._update_listener = listener
    
    def get(self, kind: CollectionKind, key: str) -> Optional[VersionedItem]:
        with translate_redis_errors("get", namespace=kind.namespace, key=key):
            raw = self.client.hget(self.keys.items_key(kind), key)
        
        if raw is None:
            logger.debug("Item not found", namespace=kind.namespace, key=key)
            return None
        
        item = decode_item(kind, raw)
        logger.debug("Item found", namespace=kind.namespace, key=key, version=item.version)
        return item
    
    def get_all(self, kind: CollectionKind) -> dict[str, VersionedItem]:
        with translate_redis_errors("get_all", namespace=kind.namespace):
            raw_items = self.client.hgetall(self.keys.items_key(kind))
        
        return {key: decode_item(kind, raw) for key, raw in raw_items.items()}
    
    def init(self, all_data: AllData) -> None:
        with translate_redis_errors("init"):
            with self.client.pipeline(transaction=True) as pipe:
                for kind, items in all_data.items():
                    base_key = self.keys.items_key(kind)
                    pipe.delete(base_key)
                    if items:
                        pipe.hset(
                            base_key,
                            mapping={item.key: encode_item(item) for item in items.values()},
                        )
                pipe.set(self.keys.inited_key(), "")
                pipe.execute()
        
        logger.info(
            "Initialized store",
            prefix=self.keys.prefix,
            counts={kind.namespace: len(items) for kind, items in all_data.items()},
        )
    
    def upsert(self, kind: CollectionKind, item: VersionedItem) -> VersionedItem:
        base_key = self.keys.items_key(kind)
        
        with translate_redis_errors("upsert", namespace=kind.namespace, key=item.key):
            with self.client.pipeline(transaction=True) as pipe:
                while True:
                    try:
                        pipe.watch(base_key)
                        
                        if self._update_listener is not None:
                            self._update_listener(base_key, item.key)
                        
                        raw = pipe.hget(base_key, item.key)
                        old_item = decode_item(kind, raw) if raw is not None else None
                        
                        if old_item is not None and old_item.version >= item.version:
                            store_stale_writes_total.labels(namespace=kind.namespace).inc()
                            logger.debug(
                                "Ignoring write with same or older version",
                                action="delete" if item.deleted else "update",
                                namespace=kind.namespace,
                                key=item.key,
                                stored_version=old_item.version,
                                new_version=item.version,
                            )
                            return old_item
                        
                        pipe.multi()
                        pipe.hset(base_key, item.key, encode_item(item))
                        pipe.execute()
                        return item
                    
                    except WatchError as e:
                        # redis-py also raises WatchError when the connection drops while watching
                        if isinstance(e.__context__, (RedisConnectionError, RedisTimeoutError)):
                            raise e.__context__ from None

                        # Another writer touched the collection; read again
                        store_upsert_conflicts_total.labels(namespace=kind.namespace).inc()
                        logger.debug(
                            "Concurrent modification detected, retrying",
                            namespace=kind.namespace,
                            key=item.key,
                        )
                        continue
    
    def initialized(self) -> bool:
        with translate_redis_errors("initialized"):
            return bool(self.client.exists(self.keys.inited_key()))
    
    def close(self) -> None:
        logger.info("Closing Redis feature store", prefix=self.keys.prefix)
        self.client.close()
        self.client.connection_pool.disconnect()
