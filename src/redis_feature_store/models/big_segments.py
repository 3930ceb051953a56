"""
Big Segment data models.

Big Segments are large, externally synchronized segment membership data sets
queried per user hash. These frozen dataclasses are what the read-only
Big Segment store hands back to the SDK.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Membership:
    """
    Segment membership for one user hash.
    
    Both sets are reported exactly as stored. The store does not decide
    which one wins when a reference appears in both; that is up to the
    caller evaluating the segment.
    
    Attributes:
        included: Segment references the user is explicitly included in
        excluded: Segment references the user is explicitly excluded from
    """
    
    included: frozenset[str] = frozenset()
    excluded: frozenset[str] = frozenset()
    
    @classmethod
    def from_segment_refs(
        cls,
        included_refs: Optional[Iterable[str]],
        excluded_refs: Optional[Iterable[str]],
    ) -> Optional["Membership"]:
        """
        Build a membership from raw reference collections.
        
        Returns:
            Membership, or None if the user appears in neither set
        """
        included = frozenset(included_refs or ())
        excluded = frozenset(excluded_refs or ())
        if not included and not excluded:
            return None
        return cls(included=included, excluded=excluded)
    
    def is_included(self, segment_ref: str) -> bool:
        return segment_ref in self.included
    
    def is_excluded(self, segment_ref: str) -> bool:
        return segment_ref in self.excluded


@dataclass(frozen=True)
class StoreMetadata:
    """
    Synchronization metadata for the Big Segment store.
    
    Attributes:
        last_up_to_date: Time of the last successful sync (epoch milliseconds)
    """
    
    last_up_to_date: int
