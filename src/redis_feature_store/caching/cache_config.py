"""
Cache policy for the caching store wrapper.

Three modes:
- DISABLED: every call goes straight to the store core
- TTL: entries expire ttl_seconds after they were written
- FOREVER: entries never expire; they are only replaced by writes
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CacheMode(str, Enum):
    """Expiration policy of the in-process cache."""
    
    DISABLED = "disabled"
    TTL = "ttl"
    FOREVER = "forever"


@dataclass(frozen=True)
class CacheConfig:
    """
    Immutable cache policy.
    
    Attributes:
        mode: Expiration policy
        ttl_seconds: Entry lifetime, only set in TTL mode
    """
    
    mode: CacheMode
    ttl_seconds: Optional[float] = None
    
    def __post_init__(self) -> None:
        """Validate policy invariants."""
        if self.mode is CacheMode.TTL:
            if self.ttl_seconds is None or self.ttl_seconds <= 0:
                raise ValueError("ttl_seconds must be > 0 in TTL mode")
        elif self.ttl_seconds is not None:
            raise ValueError(f"ttl_seconds is only valid in TTL mode, not {self.mode.value}")
    
    @classmethod
    def disabled(cls) -> "CacheConfig":
        return cls(mode=CacheMode.DISABLED)
    
    @classmethod
    def ttl(cls, seconds: float) -> "CacheConfig":
        return cls(mode=CacheMode.TTL, ttl_seconds=seconds)
    
    @classmethod
    def forever(cls) -> "CacheConfig":
        return cls(mode=CacheMode.FOREVER)
    
    @classmethod
    def from_seconds(cls, seconds: float) -> "CacheConfig":
        """
        Map a single number to a policy.
        
        0 disables caching, a positive value is a TTL and a negative value
        caches forever.
        """
        if seconds == 0:
            return cls.disabled()
        if seconds < 0:
            return cls.forever()
        return cls.ttl(seconds)
    
    @property
    def enabled(self) -> bool:
        return self.mode is not CacheMode.DISABLED
    
    @property
    def is_forever(self) -> bool:
        return self.mode is CacheMode.FOREVER


DEFAULT_CACHE_CONFIG = CacheConfig.ttl(15.0)
