"""Application services for the campaign registry."""

from campaign_registry.application.services.base import LoggingMixin
from campaign_registry.application.services.campaign_registry_service import (
    CampaignRegistryService,
)
from campaign_registry.application.services.campaign_store_service import (
    CampaignStoreService,
)

__all__: list[str] = [
    "CampaignRegistryService",
    "CampaignStoreService",
    "LoggingMixin",
]
