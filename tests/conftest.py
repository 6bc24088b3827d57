"""
Pytest configuration and shared fixtures for campaign registry tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Registry fixtures use the in-memory stubs; nothing touches the network
"""

import pytest

from campaign_registry.application.services.campaign_registry_service import (
    CampaignRegistryService,
)
from campaign_registry.bootstrap import create_campaign_registry
from campaign_registry.config.registry_config import RegistryConfig
from campaign_registry.infrastructure.stubs import (
    AuthorityOracleStub,
    BlockHeightClockStub,
    InMemoryFeeLedger,
)

AUTHORITY = "ST1TEST"
BENEFICIARY = "ST2TEST"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from campaign_registry import __version__

    return __version__


@pytest.fixture
def oracle() -> AuthorityOracleStub:
    """Oracle that verifies only ST1TEST."""
    return AuthorityOracleStub([AUTHORITY])


@pytest.fixture
def ledger() -> InMemoryFeeLedger:
    return InMemoryFeeLedger()


@pytest.fixture
def clock() -> BlockHeightClockStub:
    return BlockHeightClockStub()


@pytest.fixture
def registry_config() -> RegistryConfig:
    """Default limits, partial-commit behavior."""
    return RegistryConfig()


@pytest.fixture
def registry(
    registry_config: RegistryConfig,
    oracle: AuthorityOracleStub,
    ledger: InMemoryFeeLedger,
    clock: BlockHeightClockStub,
) -> CampaignRegistryService:
    """Fresh registry with no beneficiary configured."""
    return create_campaign_registry(
        registry_config, oracle=oracle, ledger=ledger, clock=clock
    )


@pytest.fixture
def funded_registry(registry: CampaignRegistryService) -> CampaignRegistryService:
    """Registry with ST2TEST configured as beneficiary."""
    registry.set_beneficiary(BENEFICIARY).unwrap()
    return registry
