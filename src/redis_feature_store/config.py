"""
Configuration settings for the Redis feature store.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development. Settings are immutable once built;
derive variants with ``settings.model_copy(update={...})``.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from redis_feature_store.caching.cache_config import CacheConfig

DEFAULT_PREFIX = "launchdarkly"


class Settings(BaseSettings):
    """Store settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )
    
    # === Application ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # "production" switches logs to JSON
    
    # === Redis Connection ===
    REDIS_URL: str = "redis://localhost:6379"
    REDIS_DATABASE: Optional[int] = Field(default=None, ge=0)  # Overrides the URI database
    REDIS_PASSWORD: Optional[str] = None  # Overrides the URI password
    REDIS_TLS: bool = False  # Same as a rediss:// URI
    REDIS_CONNECT_TIMEOUT: float = Field(default=2.0, gt=0)  # seconds
    REDIS_SOCKET_TIMEOUT: float = Field(default=2.0, gt=0)  # seconds
    REDIS_MAX_CONNECTIONS: int = Field(default=16, ge=1)  # Connection pool size
    
    # === Key Layout ===
    REDIS_PREFIX: str = DEFAULT_PREFIX
    
    # === Caching ===
    CACHE_TTL_SECONDS: float = 15.0  # 0 disables caching, negative caches forever
    
    @field_validator("REDIS_PREFIX")
    @classmethod
    def default_blank_prefix(cls, value: str) -> str:
        """Fall back to the default prefix when none is given."""
        if not value or not value.strip():
            return DEFAULT_PREFIX
        return value
    
    def cache_config(self) -> CacheConfig:
        """Cache policy matching CACHE_TTL_SECONDS."""
        return CacheConfig.from_seconds(self.CACHE_TTL_SECONDS)
