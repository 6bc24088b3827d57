"""Bootstrap wiring for the campaign registry."""

from campaign_registry.bootstrap.logging import configure_structlog
from campaign_registry.bootstrap.registry import create_campaign_registry

__all__ = ["configure_structlog", "create_campaign_registry"]
