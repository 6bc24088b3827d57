"""In-memory adapters for development and testing.

These satisfy the application ports without any external system.
"""

from campaign_registry.infrastructure.stubs.authority_oracle_stub import (
    AuthorityOracleStub,
)
from campaign_registry.infrastructure.stubs.fee_ledger_stub import InMemoryFeeLedger
from campaign_registry.infrastructure.stubs.logical_clock_stub import (
    BlockHeightClockStub,
)

__all__: list[str] = [
    "AuthorityOracleStub",
    "BlockHeightClockStub",
    "InMemoryFeeLedger",
]
