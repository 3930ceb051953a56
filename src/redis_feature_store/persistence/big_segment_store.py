"""
Redis implementation of the read-only Big Segment store.

The sets and the sync timestamp are written by an external synchronization
process; this module only reads them.
"""

from typing import Optional

import structlog
from redis import Redis

from redis_feature_store.models.big_segments import Membership, StoreMetadata
from redis_feature_store.persistence.base_store import BigSegmentStore
from redis_feature_store.persistence.exceptions import StoreDeserializationError
from redis_feature_store.persistence.keys import RedisKeys
from redis_feature_store.persistence.store_core import translate_redis_errors

logger = structlog.get_logger(__name__)


class RedisBigSegmentStore(BigSegmentStore):
    """Big Segment membership lookups against Redis sets."""
    
    def __init__(self, client: Redis, prefix: str):
        """
        Initialize Big Segment store.
        
        Args:
            client: Redis client (owns the connection pool)
            prefix: Namespace prefix for every key
        """
        self.client = client
        self.keys = RedisKeys(prefix)
    
    def get_membership(self, user_hash: str) -> Optional[Membership]:
        with translate_redis_errors("get_membership", user_hash=user_hash):
            included = self.client.smembers(self.keys.big_segment_include_key(user_hash))
            excluded = self.client.smembers(self.keys.big_segment_exclude_key(user_hash))
        
        membership = Membership.from_segment_refs(included, excluded)
        logger.debug(
            "Queried Big Segment membership",
            user_hash=user_hash,
            included=len(included),
            excluded=len(excluded),
        )
        return membership
    
    def get_metadata(self) -> Optional[StoreMetadata]:
        with translate_redis_errors("get_metadata"):
            value = self.client.get(self.keys.big_segments_synced_on_key())
        
        if value is None or value == "":
            logger.debug("Big Segment data has never been synchronized")
            return None
        
        try:
            return StoreMetadata(last_up_to_date=int(value))
        except ValueError as e:
            raise StoreDeserializationError(
                "Malformed Big Segment sync timestamp",
                details={"value": value},
            ) from e
    
    def close(self) -> None:
        logger.info("Closing Redis Big Segment store", prefix=self.keys.prefix)
        self.client.close()
        self.client.connection_pool.disconnect()
