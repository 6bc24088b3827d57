"""Shared mutable registry state.

RegistryState is the single object every registry operation reads and
writes: scalar configuration, the campaign records, the region index and
the update log. It is built by an explicit constructor and passed
by reference to the services; there is no module-level state.

Invariants:
- next_campaign_id only grows. It counts committed registrations.
- beneficiary transitions from None to a principal at most once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from campaign_registry.domain.models.campaign import Campaign
from campaign_registry.domain.models.region_index import (
    DEFAULT_REGION_CAPACITY,
    RegionIndex,
)
from campaign_registry.domain.models.update_log import UpdateLog


@dataclass
class RegistryState:
    """All registry state owned by one registry instance.

    Attributes:
        max_campaigns: Registration ceiling.
        creation_fee: Fee charged on the next registration.
        beneficiary: Fee recipient, None until configured.
        next_campaign_id: Committed registrations so far.
        campaigns: Campaign records keyed by id.
        region_index: Region buckets.
        update_log: Last revision per campaign.
    """

    max_campaigns: int = 1000
    creation_fee: int = 1000
    beneficiary: str | None = None
    next_campaign_id: int = 0
    campaigns: dict[str, Campaign] = field(default_factory=dict)
    region_index: RegionIndex = field(
        default_factory=lambda: RegionIndex(DEFAULT_REGION_CAPACITY)
    )
    update_log: UpdateLog = field(default_factory=UpdateLog)

    @classmethod
    def create(
        cls,
        *,
        max_campaigns: int,
        creation_fee: int,
        region_capacity: int = DEFAULT_REGION_CAPACITY,
    ) -> RegistryState:
        """Build an empty state with the given limits."""
        return cls(
            max_campaigns=max_campaigns,
            creation_fee=creation_fee,
            region_index=RegionIndex(region_capacity),
        )

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the persisted state shape."""
        return {
            "config": {
                "next_campaign_id": self.next_campaign_id,
                "max_campaigns": self.max_campaigns,
                "creation_fee": self.creation_fee,
                "beneficiary": self.beneficiary,
            },
            "campaigns": {cid: c.to_dict() for cid, c in self.campaigns.items()},
            "campaigns_by_region": self.region_index.to_dict(),
            "campaign_updates": self.update_log.to_dict(),
        }
