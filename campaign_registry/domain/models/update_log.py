"""Most-recent-revision log keyed by campaign id.

Each update overwrites the previous entry for the same campaign. A
campaign that was never updated has no entry.
"""

from __future__ import annotations

from campaign_registry.domain.models.campaign import CampaignUpdate


class UpdateLog:
    """Last CampaignUpdate per campaign."""

    def __init__(self) -> None:
        self._entries: dict[str, CampaignUpdate] = {}

    def record(self, update: CampaignUpdate) -> None:
        self._entries[update.campaign_id] = update

    def get(self, campaign_id: str) -> CampaignUpdate | None:
        return self._entries.get(campaign_id)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, campaign_id: object) -> bool:
        return campaign_id in self._entries

    def to_dict(self) -> dict[str, dict[str, object]]:
        return {cid: update.to_dict() for cid, update in self._entries.items()}
