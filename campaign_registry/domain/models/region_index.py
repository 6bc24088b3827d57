"""Region index: ordered campaign ids grouped by region.

Each region bucket keeps campaign ids in the order they were placed into
it and holds at most ``capacity`` entries. Buckets are created lazily on
first append and are never dropped, so a region that lost all of its
campaigns still reports an empty bucket.

A campaign id belongs to exactly one bucket, the one matching its current
region. Keeping that true is the caller's job: append does not guard
against duplicates.
"""

from __future__ import annotations

from campaign_registry.domain.errors.campaign import MaxCampaignsExceededError

DEFAULT_REGION_CAPACITY: int = 100


class RegionIndex:
    """Mapping of region name to an ordered, bounded list of campaign ids."""

    def __init__(self, capacity: int = DEFAULT_REGION_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._buckets: dict[str, list[str]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, region: str) -> tuple[str, ...]:
        """Return the ids in a region, empty if the region was never seen."""
        return tuple(self._buckets.get(region, ()))

    def size(self, region: str) -> int:
        return len(self._buckets.get(region, ()))

    def has_capacity(self, region: str) -> bool:
        """True if one more id fits into the region bucket."""
        return self.size(region) < self._capacity

    def append(self, region: str, campaign_id: str) -> None:
        """Append an id to the end of a region bucket.

        Raises:
            MaxCampaignsExceededError: If the bucket is already full.
        """
        bucket = self._buckets.get(region, [])
        if len(bucket) >= self._capacity:
            raise MaxCampaignsExceededError(
                scope=region, current=len(bucket), limit=self._capacity
            )
        self._buckets[region] = [*bucket, campaign_id]

    def remove(self, region: str, campaign_id: str) -> None:
        """Drop the first matching id from a region bucket. No-op if absent."""
        bucket = self._buckets.get(region)
        if bucket is not None and campaign_id in bucket:
            bucket.remove(campaign_id)

    def regions(self) -> list[str]:
        return list(self._buckets)

    def to_dict(self) -> dict[str, list[str]]:
        return {region: list(ids) for region, ids in self._buckets.items()}
