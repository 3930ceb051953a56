"""
Redis connection pooling for the persistence layer.

Uses redis-py connection pools built from Settings. Explicit database,
password and TLS settings take precedence over values embedded in the URL.
"""

from typing import TYPE_CHECKING
from urllib.parse import quote, urlsplit, urlunsplit

import structlog
from redis import ConnectionPool, Redis

if TYPE_CHECKING:
    from redis_feature_store.config import Settings

logger = structlog.get_logger(__name__)


def resolve_redis_url(settings: "Settings") -> str:
    """
    Apply explicit overrides to the configured Redis URL.
    
    Args:
        settings: Store settings
    
    Returns:
        Redis URL carrying the effective scheme, password and database
    """
    parts = urlsplit(settings.REDIS_URL)
    
    scheme = "rediss" if settings.REDIS_TLS else parts.scheme
    
    netloc = parts.netloc
    if settings.REDIS_PASSWORD is not None:
        userinfo, _, host_port = netloc.rpartition("@")
        # Username stays exactly as written; urlsplit leaves it percent-encoded
        username = userinfo.split(":", 1)[0]
        netloc = f"{username}:{quote(settings.REDIS_PASSWORD, safe='')}@{host_port}"
    
    path = parts.path
    if settings.REDIS_DATABASE is not None:
        path = f"/{settings.REDIS_DATABASE}"
    
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def create_connection_pool(settings: "Settings") -> ConnectionPool:
    """
    Create a Redis connection pool from settings.
    
    Connection-level retries are disabled: a failure surfaces to the caller
    instead of being retried behind its back.
    
    Args:
        settings: Store settings
    
    Returns:
        ConnectionPool instance
    """
    url = resolve_redis_url(settings)
    pool = ConnectionPool.from_url(
        url,
        max_connections=settings.REDIS_MAX_CONNECTIONS,
        decode_responses=True,  # Auto-decode bytes to str
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=settings.REDIS_CONNECT_TIMEOUT,
        retry=None,
    )
    
    parts = urlsplit(url)
    logger.info(
        "Connecting to Redis feature store",
        host=parts.hostname,
        port=parts.port or 6379,
        database=pool.connection_kwargs.get("db", 0),
        tls=parts.scheme == "rediss",
        with_password=parts.password is not None,
    )
    return pool


def create_redis_client(settings: "Settings") -> Redis:
    """
    Create a Redis client over a fresh connection pool.
    
    Each store owns its pool, so closing one store does not affect another.
    
    Args:
        settings: Store settings
    
    Returns:
        Redis client instance
    """
    return Redis(connection_pool=create_connection_pool(settings))
