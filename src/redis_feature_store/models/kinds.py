"""
Collection kinds for versioned items.

A collection kind names a category of versioned items (flags, segments) and
fixes the namespace used to build its Redis key. Kinds are defined once by
the surrounding SDK and never change at runtime.
"""

from dataclasses import dataclass

from redis_feature_store.models.items import VersionedItem


@dataclass(frozen=True)
class CollectionKind:
    """
    Immutable identifier for a category of versioned items.
    
    Attributes:
        namespace: Stable string used in key construction (e.g., "features")
        item_model: Pydantic model used to decode stored items of this kind
    """
    
    namespace: str
    item_model: type[VersionedItem] = VersionedItem
    
    def __post_init__(self) -> None:
        """Validate kind invariants."""
        if not self.namespace:
            raise ValueError("namespace must not be empty")
    
    def __str__(self) -> str:
        return self.namespace


FEATURES = CollectionKind(namespace="features")
SEGMENTS = CollectionKind(namespace="segments")
