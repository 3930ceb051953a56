"""
Data models for the Redis feature store.

Includes:
- VersionedItem (pydantic model, keyed/versioned/tombstoned record)
- CollectionKind (frozen dataclass naming a storage namespace) and the
  predefined FEATURES / SEGMENTS kinds
- Big Segment models (Membership, StoreMetadata)
"""

from redis_feature_store.models.items import VersionedItem
from redis_feature_store.models.kinds import FEATURES, SEGMENTS, CollectionKind
from redis_feature_store.models.big_segments import Membership, StoreMetadata

__all__ = [
    "VersionedItem",
    "CollectionKind",
    "FEATURES",
    "SEGMENTS",
    "Membership",
    "StoreMetadata",
]
