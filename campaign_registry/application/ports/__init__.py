"""Application ports (interfaces) for the campaign registry.

Ports define abstract interfaces to collaborators the registry consumes
but does not implement.
"""

from campaign_registry.application.ports.authority_oracle import AuthorityOracle
from campaign_registry.application.ports.fee_ledger import FeeLedger
from campaign_registry.application.ports.logical_clock import LogicalClock

__all__: list[str] = [
    "AuthorityOracle",
    "FeeLedger",
    "LogicalClock",
]
