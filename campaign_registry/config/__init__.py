"""Configuration for the campaign registry."""

from campaign_registry.config.registry_config import (
    BURN_ADDRESS,
    DEFAULT_REGISTRY_CONFIG,
    STRICT_REGISTRY_CONFIG,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)

__all__ = [
    "BURN_ADDRESS",
    "DEFAULT_REGISTRY_CONFIG",
    "STRICT_REGISTRY_CONFIG",
    "TEST_REGISTRY_CONFIG",
    "RegistryConfig",
]
