"""
Namespaced key scheme for the Redis store.

Key layout (shared with every other SDK writing to the same Redis):
- "{prefix}:{namespace}"                      hash of item key -> item JSON
- "{prefix}:$inited"                          sentinel, presence = initialized
- "{prefix}:big_segments_synchronized_on"     epoch millis of last sync
- "{prefix}:big_segment_include:{user_hash}"  set of segment references
- "{prefix}:big_segment_exclude:{user_hash}"  set of segment references
"""

from dataclasses import dataclass

from redis_feature_store.models.kinds import CollectionKind


@dataclass(frozen=True)
class RedisKeys:
    """Builds Redis keys under a single namespace prefix."""
    
    prefix: str
    
    def items_key(self, kind: CollectionKind) -> str:
        return f"{self.prefix}:{kind.namespace}"
    
    def inited_key(self) -> str:
        return f"{self.prefix}:$inited"
    
    def big_segments_synced_on_key(self) -> str:
        return f"{self.prefix}:big_segments_synchronized_on"
    
    def big_segment_include_key(self, user_hash: str) -> str:
        return f"{self.prefix}:big_segment_include:{user_hash}"
    
    def big_segment_exclude_key(self, user_hash: str) -> str:
        return f"{self.prefix}:big_segment_exclude:{user_hash}"
