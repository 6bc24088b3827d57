"""Campaign registry configuration.

This module defines the process-wide registry settings with environment
variable overrides for deployment tuning. The values seed a fresh
RegistryState; the state, not this config, is what operations mutate.

Environment Variables:
- REGISTRY_MAX_CAMPAIGNS: Ceiling on successful registrations (default: 1000)
- REGISTRY_CREATION_FEE: Initial fee charged per registration (default: 1000)
- REGISTRY_REGION_CAPACITY: Max campaign ids per region bucket (default: 100)
- REGISTRY_BURN_ADDRESS: Principal that can never be the beneficiary
  (default: SP000000000000000000002Q6VF78)
- REGISTRY_ATOMIC_CAPACITY_CHECK: Check destination bucket capacity before
  any mutation (default: false)

With REGISTRY_ATOMIC_CAPACITY_CHECK off, a register that finds its region
bucket full has already charged the fee and stored the campaign, and an
update that finds its destination bucket full has already removed the id
from the old bucket. Turning it on rejects both cases before anything is
written.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BURN_ADDRESS = "SP000000000000000000002Q6VF78"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Unrecognized values fall back to the default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for a campaign registry instance.

    Attributes:
        max_campaigns: Registrations allowed over the registry lifetime.
                       Default: 1000.
        creation_fee: Fee charged per registration until changed.
                      Default: 1000.
        region_capacity: Campaign ids a single region bucket may hold.
                         Default: 100.
        burn_address: Reserved principal rejected as beneficiary.
        atomic_capacity_check: Reject a full destination bucket before any
                               mutation instead of after a partial commit.
                               Default: False.
    """

    max_campaigns: int = 1000
    creation_fee: int = 1000
    region_capacity: int = 100
    burn_address: str = BURN_ADDRESS
    atomic_capacity_check: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_campaigns < 1:
            raise ValueError(f"max_campaigns must be positive, got {self.max_campaigns}")
        if self.creation_fee < 0:
            raise ValueError(
                f"creation_fee must be non-negative, got {self.creation_fee}"
            )
        if self.region_capacity < 1:
            raise ValueError(
                f"region_capacity must be positive, got {self.region_capacity}"
            )
        if not self.burn_address:
            raise ValueError("burn_address must not be empty")

    @classmethod
    def from_environment(cls) -> "RegistryConfig":
        """Create config from environment variables with defaults.

        Returns:
            RegistryConfig with values from environment or defaults.
        """
        return cls(
            max_campaigns=_get_int_env("REGISTRY_MAX_CAMPAIGNS", 1000),
            creation_fee=_get_int_env("REGISTRY_CREATION_FEE", 1000),
            region_capacity=_get_int_env("REGISTRY_REGION_CAPACITY", 100),
            burn_address=os.environ.get("REGISTRY_BURN_ADDRESS", BURN_ADDRESS),
            atomic_capacity_check=_get_bool_env(
                "REGISTRY_ATOMIC_CAPACITY_CHECK", False
            ),
        )


# Pre-defined configurations for common use cases

DEFAULT_REGISTRY_CONFIG = RegistryConfig()

# Small capacities so tests can fill buckets and the registry quickly
TEST_REGISTRY_CONFIG = RegistryConfig(
    max_campaigns=5,
    creation_fee=10,
    region_capacity=2,
)

# All-or-nothing register/update on full buckets
STRICT_REGISTRY_CONFIG = RegistryConfig(atomic_capacity_check=True)
