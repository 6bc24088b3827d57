"""Typed outcome of a public registry operation.

Registry operations never raise for rejected input. They return a
RegistryResult that is either ok with a value, or failed with the error
that caused the rejection.

Usage:
    result = registry.register_campaign(...)
    if result.ok:
        campaign_id = result.value
    elif result.kind is RegistryErrorKind.CAMPAIGN_EXISTS:
        ...

    # Or, to get exceptions back:
    campaign_id = registry.register_campaign(...).unwrap()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from campaign_registry.domain.errors.campaign import (
    CampaignRegistryError,
    RegistryErrorKind,
)

T = TypeVar("T")


@dataclass(frozen=True)
class RegistryResult(Generic[T]):
    """Result of a registry operation.

    Attributes:
        ok: True when the operation committed.
        value: Operation value when ok, otherwise None.
        error: The rejection when not ok, otherwise None.
    """

    ok: bool
    value: T | None = None
    error: CampaignRegistryError | None = None

    @classmethod
    def success(cls, value: T) -> RegistryResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: CampaignRegistryError) -> RegistryResult[T]:
        return cls(ok=False, error=error)

    @property
    def kind(self) -> RegistryErrorKind | None:
        """Error kind of a failed result."""
        return self.error.kind if self.error is not None else None

    @property
    def code(self) -> int | None:
        """Numeric wire code of a failed result, if the kind has one."""
        return self.error.code if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value or re-raise the rejection.

        Raises:
            CampaignRegistryError: If the result is a failure.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "value": self.value}
        return {
            "ok": False,
            "error": self.kind.value if self.kind else None,
            "code": self.code,
            "message": str(self.error),
        }
