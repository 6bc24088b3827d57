"""Campaign registry facade: the public operation surface.

Every call runs under one lock. Mutations are single transactions and
queries read between them, so no caller can observe another call's
intermediate writes. Rejections come back as failed RegistryResult
values; nothing a caller sends can make these methods raise a
CampaignRegistryError.

Usage:
    registry = create_campaign_registry()
    registry.set_beneficiary("ST2TEST")
    result = registry.register_campaign(
        "camp-001", "New York", "Pfizer", 100_000, "Vaccine drive 2025",
        caller="ST1TEST",
    )
    assert result.ok
    registry.get_campaigns_by_region("New York")  # ("camp-001",)
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar

from campaign_registry.application.ports.authority_oracle import AuthorityOracle
from campaign_registry.application.ports.logical_clock import LogicalClock
from campaign_registry.application.services.base import LoggingMixin
from campaign_registry.application.services.campaign_store_service import (
    CampaignStoreService,
)
from campaign_registry.domain.errors.campaign import CampaignRegistryError
from campaign_registry.domain.models.campaign import Campaign, CampaignUpdate
from campaign_registry.domain.models.registry_result import RegistryResult

T = TypeVar("T")


class CampaignRegistryService(LoggingMixin):
    """Public registry operations over a CampaignStoreService."""

    def __init__(
        self,
        store: CampaignStoreService,
        oracle: AuthorityOracle,
        clock: LogicalClock,
    ) -> None:
        self._store = store
        self._oracle = oracle
        self._clock = clock
        self._lock = threading.Lock()
        self._init_logger()

    def register_campaign(
        self,
        campaign_id: str,
        region: str,
        vaccine_type: str,
        target_population: int,
        metadata: str,
        *,
        caller: str,
        now: int | None = None,
    ) -> RegistryResult[str]:
        """Register a campaign. ``now`` defaults to the clock's current height."""
        return self._transact(
            "register_campaign",
            lambda at: self._store.register(
                campaign_id,
                region,
                vaccine_type,
                target_population,
                metadata,
                caller,
                at,
            ),
            now,
        )

    def update_campaign(
        self,
        campaign_id: str,
        region: str,
        vaccine_type: str,
        target_population: int,
        *,
        caller: str,
        now: int | None = None,
    ) -> RegistryResult[bool]:
        """Revise a campaign owned by the caller."""
        return self._transact(
            "update_campaign",
            lambda at: self._store.update(
                campaign_id, region, vaccine_type, target_population, caller, at
            ),
            now,
        )

    def set_beneficiary(self, principal: str) -> RegistryResult[bool]:
        """Configure the fee beneficiary, once."""
        return self._transact(
            "set_beneficiary", lambda _: self._store.set_beneficiary(principal)
        )

    def set_creation_fee(self, amount: int) -> RegistryResult[bool]:
        """Change the creation fee. Requires a configured beneficiary."""
        return self._transact(
            "set_creation_fee", lambda _: self._store.set_creation_fee(amount)
        )

    def get_campaign(self, campaign_id: str) -> Campaign | None:
        with self._lock:
            return self._store.state.campaigns.get(campaign_id)

    def get_campaign_count(self) -> int:
        """Number of committed registrations. Never decreases."""
        with self._lock:
            return self._store.state.next_campaign_id

    def get_campaigns_by_region(self, region: str) -> tuple[str, ...]:
        with self._lock:
            return self._store.state.region_index.get(region)

    def is_campaign_registered(self, campaign_id: str) -> bool:
        with self._lock:
            return campaign_id in self._store.state.campaigns

    def get_campaign_update(self, campaign_id: str) -> CampaignUpdate | None:
        with self._lock:
            return self._store.state.update_log.get(campaign_id)

    def get_creation_fee(self) -> int:
        with self._lock:
            return self._store.state.creation_fee

    def get_beneficiary(self) -> str | None:
        with self._lock:
            return self._store.state.beneficiary

    def is_verified_authority(self, principal: str) -> bool:
        with self._lock:
            return self._oracle.is_verified_authority(principal)

    def snapshot(self) -> dict[str, Any]:
        """Return the full registry state as plain data."""
        with self._lock:
            return self._store.state.to_dict()

    def _transact(
        self,
        operation: str,
        apply: Callable[[int], T],
        now: int | None = None,
    ) -> RegistryResult[T]:
        with self._lock:
            at = self._clock.current() if now is None else now
            try:
                return RegistryResult.success(apply(at))
            except CampaignRegistryError as e:
                self._log_operation(operation, at=at).debug(
                    "transaction_failed", error=e.kind.value
                )
                return RegistryResult.failure(e)
