"""Campaign domain models.

A Campaign is created by register and revised by update; it is never
deleted. Its id and creator are fixed at creation. A CampaignUpdate keeps
only the most recent revision of a campaign.

Usage:
    campaign = Campaign(
        campaign_id="camp-001",
        region="New York",
        vaccine_type="Pfizer",
        target_population=100_000,
        creator="ST1TEST",
        created_at=12,
        metadata="Vaccine drive 2025",
    )
    revised = campaign.revise(
        region="California",
        vaccine_type="Moderna",
        target_population=200_000,
        at=15,
    )
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, eq=True)
class Campaign:
    """A registered vaccination campaign.

    Attributes:
        campaign_id: Unique identifier (1..64 chars), immutable.
        region: Region the campaign currently belongs to.
        vaccine_type: Vaccine administered.
        target_population: People targeted, always > 0.
        creator: Principal that registered the campaign, immutable.
        created_at: Logical timestamp of the last register or update.
        status: True while active. Registration always sets it.
        metadata: Free text, at most 256 chars.
    """

    campaign_id: str
    region: str
    vaccine_type: str
    target_population: int
    creator: str
    created_at: int
    status: bool = True
    metadata: str = ""

    def revise(
        self,
        *,
        region: str,
        vaccine_type: str,
        target_population: int,
        at: int,
    ) -> Campaign:
        """Return a copy with the mutable fields replaced.

        ``created_at`` is overwritten with the revision timestamp.
        """
        return replace(
            self,
            region=region,
            vaccine_type=vaccine_type,
            target_population=target_population,
            created_at=at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "campaign_id": self.campaign_id,
            "region": self.region,
            "vaccine_type": self.vaccine_type,
            "target_population": self.target_population,
            "creator": self.creator,
            "created_at": self.created_at,
            "status": self.status,
            "metadata": self.metadata,
        }


@dataclass(frozen=True, eq=True)
class CampaignUpdate:
    """Most recent revision applied to a campaign.

    Attributes:
        campaign_id: Campaign the revision applies to.
        region: Region after the revision.
        vaccine_type: Vaccine type after the revision.
        target_population: Target population after the revision.
        timestamp: Logical timestamp of the revision.
        updater: Principal that applied it.
    """

    campaign_id: str
    region: str
    vaccine_type: str
    target_population: int
    timestamp: int
    updater: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "campaign_id": self.campaign_id,
            "region": self.region,
            "vaccine_type": self.vaccine_type,
            "target_population": self.target_population,
            "timestamp": self.timestamp,
            "updater": self.updater,
        }
