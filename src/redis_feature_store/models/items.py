"""
Versioned item model.

A VersionedItem is the unit of storage: a keyed, versioned, optionally
tombstoned record. Everything beyond ``key``, ``version`` and ``deleted`` is
an opaque payload that round-trips through JSON untouched.
"""

from pydantic import BaseModel, ConfigDict, Field


class VersionedItem(BaseModel):
    """
    Keyed, versioned record stored in a collection hash.
    
    Items are never mutated in place: a newer item with a higher version
    supersedes the old one. Deletion is represented by a tombstone
    (``deleted=True``) so an out-of-order delete cannot be undone by a
    stale create.
    """
    
    model_config = ConfigDict(extra="allow", frozen=True)
    
    key: str = Field(..., min_length=1, description="Unique key within its collection kind")
    version: int = Field(..., description="Caller-assigned, monotonically increasing version")
    deleted: bool = Field(default=False, description="Tombstone flag")
    
    @classmethod
    def tombstone(cls, key: str, version: int) -> "VersionedItem":
        """Build a deletion marker for ``key`` at ``version``."""
        return cls(key=key, version=version, deleted=True)
    
    @property
    def payload(self) -> dict:
        """Opaque fields carried alongside key/version/deleted."""
        return dict(self.model_extra or {})
