"""Domain errors for the campaign registry.

Provides specific exception classes for different rejection scenarios.
All exceptions inherit from RegistryError.
"""

from campaign_registry.domain.errors.campaign import (
    ERROR_CODES,
    AuthorityNotVerifiedError,
    CampaignExistsError,
    CampaignRegistryError,
    FieldValidationError,
    InvalidIdError,
    InvalidMetadataError,
    InvalidPopulationError,
    InvalidRegionError,
    InvalidVaccineTypeError,
    MaxCampaignsExceededError,
    RegistryErrorKind,
    UnauthorizedError,
    UpdateRejectedError,
)
from campaign_registry.domain.errors.configuration import (
    BeneficiaryAlreadySetError,
    BeneficiaryNotSetError,
    InvalidBeneficiaryError,
)

__all__: list[str] = [
    "ERROR_CODES",
    "AuthorityNotVerifiedError",
    "BeneficiaryAlreadySetError",
    "BeneficiaryNotSetError",
    "CampaignExistsError",
    "CampaignRegistryError",
    "FieldValidationError",
    "InvalidBeneficiaryError",
    "InvalidIdError",
    "InvalidMetadataError",
    "InvalidPopulationError",
    "InvalidRegionError",
    "InvalidVaccineTypeError",
    "MaxCampaignsExceededError",
    "RegistryErrorKind",
    "UnauthorizedError",
    "UpdateRejectedError",
]
