"""Bootstrap wiring for a campaign registry instance.

Each call builds an independent registry with its own state. Adapters
that are not supplied default to the in-memory stubs.
"""

from __future__ import annotations

from campaign_registry.application.ports.authority_oracle import AuthorityOracle
from campaign_registry.application.ports.fee_ledger import FeeLedger
from campaign_registry.application.ports.logical_clock import LogicalClock
from campaign_registry.application.services.campaign_registry_service import (
    CampaignRegistryService,
)
from campaign_registry.application.services.campaign_store_service import (
    CampaignStoreService,
)
from campaign_registry.config.registry_config import RegistryConfig
from campaign_registry.domain.models.registry_state import RegistryState
from campaign_registry.infrastructure.stubs.authority_oracle_stub import (
    AuthorityOracleStub,
)
from campaign_registry.infrastructure.stubs.fee_ledger_stub import InMemoryFeeLedger
from campaign_registry.infrastructure.stubs.logical_clock_stub import (
    BlockHeightClockStub,
)


def create_campaign_registry(
    config: RegistryConfig | None = None,
    *,
    oracle: AuthorityOracle | None = None,
    ledger: FeeLedger | None = None,
    clock: LogicalClock | None = None,
) -> CampaignRegistryService:
    """Create a registry wired to the given adapters.

    Args:
        config: Registry settings. Loaded from the environment when omitted.
        oracle: Authority oracle. Defaults to an AuthorityOracleStub with
                no verified principals.
        ledger: Fee ledger. Defaults to an InMemoryFeeLedger.
        clock: Logical clock. Defaults to a BlockHeightClockStub at 0.

    Returns:
        A ready CampaignRegistryService.
    """
    if config is None:
        config = RegistryConfig.from_environment()
    if oracle is None:
        oracle = AuthorityOracleStub()
    if ledger is None:
        ledger = InMemoryFeeLedger()
    if clock is None:
        clock = BlockHeightClockStub()

    state = RegistryState.create(
        max_campaigns=config.max_campaigns,
        creation_fee=config.creation_fee,
        region_capacity=config.region_capacity,
    )
    store = CampaignStoreService(
        state,
        oracle,
        ledger,
        burn_address=config.burn_address,
        atomic_capacity_check=config.atomic_capacity_check,
    )
    return CampaignRegistryService(store, oracle, clock)


__all__ = ["create_campaign_registry"]
