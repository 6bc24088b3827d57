"""Structured logging configuration with structlog.

Production renders JSON lines, development renders colored console
output. The level comes from the LOG_LEVEL environment variable.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "register_completed",
        "correlation_id": "uuid",
        "service": "CampaignStoreService",
        ...additional context
    }

Usage:
    from campaign_registry.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

import logging
import os
from typing import TextIO, cast

import structlog
from structlog.typing import Processor

from campaign_registry.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(
    environment: str = "production", stream: TextIO | None = None
) -> None:
    """Configure structlog for the process.

    Should be called once at startup, before any registry is created.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
        stream: Where log lines are written. Defaults to stdout.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "registry"
) -> structlog.BoundLogger:
    """Get a logger with service name and component already bound."""
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
