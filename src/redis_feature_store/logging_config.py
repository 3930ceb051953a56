"""Structlog setup for applications embedding the Redis feature store.

The store only emits events through ``structlog.get_logger``; nothing is
configured on import. Applications that want the store's events rendered
call ``configure_logging(settings)`` once at startup:

- ENVIRONMENT=production renders one JSON object per line
- anything else renders colored console output
- LOG_LEVEL applies to the store's own loggers; redis-py stays at WARNING
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from redis_feature_store.config import Settings

STORE_LOGGER_NAME = "redis_feature_store"


class StoreContext:
    """Processor stamping every event with the app name and key prefix."""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["app"] = "redis-feature-store"
        event_dict.setdefault("prefix", self.prefix)
        return event_dict


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Route store and redis-py logs through structlog.

    Args:
        settings: Store settings; LOG_LEVEL, ENVIRONMENT and REDIS_PREFIX
            are read (environment defaults if None)
    """
    settings = settings or Settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    json_output = settings.ENVIRONMENT.lower() == "production"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        StoreContext(settings.REDIS_PREFIX),
    ]

    if json_output:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    # Only the store's own logger tree gets a handler; the host app's root logger is left alone
    store_logger = logging.getLogger(STORE_LOGGER_NAME)
    store_logger.handlers[:] = [handler]
    store_logger.setLevel(level)
    store_logger.propagate = False

    redis_logger = logging.getLogger("redis")
    redis_logger.handlers[:] = [handler]
    redis_logger.setLevel(logging.WARNING)
    redis_logger.propagate = False

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=settings.LOG_LEVEL,
        environment=settings.ENVIRONMENT,
        renderer="json" if json_output else "console",
    )
