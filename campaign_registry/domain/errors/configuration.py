"""Beneficiary and fee configuration errors.

The beneficiary is a one-time setting. Once configured it can never be
replaced, and the creation fee can only be changed after it exists.
"""

from __future__ import annotations

from campaign_registry.domain.errors.campaign import (
    CampaignRegistryError,
    RegistryErrorKind,
)


class InvalidBeneficiaryError(CampaignRegistryError):
    """Raised when the beneficiary is the reserved burn address."""

    kind = RegistryErrorKind.INVALID_BENEFICIARY

    def __init__(self, principal: str) -> None:
        self.principal = principal
        super().__init__(f"Principal {principal} is reserved and cannot receive fees")


class BeneficiaryAlreadySetError(CampaignRegistryError):
    """Raised on a second attempt to configure the beneficiary."""

    kind = RegistryErrorKind.BENEFICIARY_ALREADY_SET

    def __init__(self, current: str) -> None:
        self.current = current
        super().__init__(f"Beneficiary already configured as {current}")


class BeneficiaryNotSetError(CampaignRegistryError):
    """Raised when changing the fee before a beneficiary exists."""

    kind = RegistryErrorKind.BENEFICIARY_NOT_SET

    def __init__(self) -> None:
        super().__init__("Creation fee cannot change before a beneficiary is configured")
