"""Domain models for the campaign registry."""

from campaign_registry.domain.models.campaign import Campaign, CampaignUpdate
from campaign_registry.domain.models.fee_transfer import FeeTransfer
from campaign_registry.domain.models.region_index import (
    DEFAULT_REGION_CAPACITY,
    RegionIndex,
)
from campaign_registry.domain.models.registry_result import RegistryResult
from campaign_registry.domain.models.registry_state import RegistryState
from campaign_registry.domain.models.update_log import UpdateLog

__all__: list[str] = [
    "DEFAULT_REGION_CAPACITY",
    "Campaign",
    "CampaignUpdate",
    "FeeTransfer",
    "RegionIndex",
    "RegistryResult",
    "RegistryState",
    "UpdateLog",
]
