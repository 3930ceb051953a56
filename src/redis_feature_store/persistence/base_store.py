"""
Abstract store interfaces.

Defines the contracts the SDK plugs into its generic "persistent data store"
and "big segment store" extension points. Redis is one implementation; the
caching wrapper only ever talks to these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from redis_feature_store.models.big_segments import Membership, StoreMetadata
from redis_feature_store.models.items import VersionedItem
from redis_feature_store.models.kinds import CollectionKind

AllData = Mapping[CollectionKind, Mapping[str, VersionedItem]]


class PersistentStoreCore(ABC):
    """
    Abstract base class for persistent feature stores.
    
    Responsibilities:
    - Read single items and whole collections
    - Replace the full data set and mark the store initialized
    - Apply versioned upserts so a stored version never goes backwards
    
    Does NOT handle:
    - Caching (that's CachingStoreWrapper's job)
    - Filtering tombstones (callers see deleted items as stored)
    
    Every method may block on network I/O.
    """
    
    @abstractmethod
    def get(self, kind: CollectionKind, key: str) -> Optional[VersionedItem]:
        """
        Fetch one item.
        
        Returns:
            Stored item (possibly a tombstone), or None if absent
        
        Raises:
            StoreUnavailableError: If the backing store fails
            StoreDeserializationError: If the stored record is malformed
        """
        pass
    
    @abstractmethod
    def get_all(self, kind: CollectionKind) -> dict[str, VersionedItem]:
        """
        Fetch every item of a kind.
        
        Returns:
            Mapping of item key to item; empty if the collection is absent
        """
        pass
    
    @abstractmethod
    def init(self, all_data: AllData) -> None:
        """Replace the stored data set and mark the store initialized."""
        pass
    
    @abstractmethod
    def upsert(self, kind: CollectionKind, item: VersionedItem) -> VersionedItem:
        """
        Store ``item`` unless an item with the same or newer version exists.
        
        Returns:
            The effective stored item: ``item`` if written, otherwise the
            newer item already in the store
        """
        pass
    
    @abstractmethod
    def initialized(self) -> bool:
        """Whether a full data set has ever been stored."""
        pass
    
    @abstractmethod
    def close(self) -> None:
        """Release backing-store resources."""
        pass


class BigSegmentStore(ABC):
    """
    Abstract base class for read-only Big Segment stores.
    
    Population of the data is done by an external synchronization process.
    """
    
    @abstractmethod
    def get_membership(self, user_hash: str) -> Optional[Membership]:
        """
        Query segment membership for a hashed user key.
        
        Returns:
            Membership, or None if there is no record for the user
        """
        pass
    
    @abstractmethod
    def get_metadata(self) -> Optional[StoreMetadata]:
        """
        Query synchronization metadata.
        
        Returns:
            StoreMetadata, or None if the data was never synchronized
        """
        pass
    
    @abstractmethod
    def close(self) -> None:
        """Release backing-store resources."""
        pass
