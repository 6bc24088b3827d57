"""Campaign field validation domain service.

Validation order is part of the contract: a request that breaks several
rules is rejected for the first one it breaks, in the order the
functions below are applied by the registry.

Field Constraints:
- campaign id: 1..64 characters
- region: 1..100 characters
- vaccine type: 1..50 characters
- target population: > 0
- metadata: 0..256 characters
"""

from __future__ import annotations

from campaign_registry.domain.errors.campaign import (
    InvalidIdError,
    InvalidMetadataError,
    InvalidPopulationError,
    InvalidRegionError,
    InvalidVaccineTypeError,
)

MAX_ID_LENGTH: int = 64
MAX_REGION_LENGTH: int = 100
MAX_VACCINE_TYPE_LENGTH: int = 50
MAX_METADATA_LENGTH: int = 256


def validate_campaign_id(campaign_id: str) -> None:
    """Raises InvalidIdError unless 1..64 characters."""
    if not campaign_id or len(campaign_id) > MAX_ID_LENGTH:
        raise InvalidIdError("campaign_id", len(campaign_id), MAX_ID_LENGTH)


def validate_region(region: str) -> None:
    """Raises InvalidRegionError unless 1..100 characters."""
    if not region or len(region) > MAX_REGION_LENGTH:
        raise InvalidRegionError("region", len(region), MAX_REGION_LENGTH)


def validate_vaccine_type(vaccine_type: str) -> None:
    """Raises InvalidVaccineTypeError unless 1..50 characters."""
    if not vaccine_type or len(vaccine_type) > MAX_VACCINE_TYPE_LENGTH:
        raise InvalidVaccineTypeError(
            "vaccine_type", len(vaccine_type), MAX_VACCINE_TYPE_LENGTH
        )


def validate_target_population(target_population: int) -> None:
    """Raises InvalidPopulationError unless strictly positive."""
    if target_population <= 0:
        raise InvalidPopulationError("target_population", target_population, None)


def validate_metadata(metadata: str) -> None:
    """Raises InvalidMetadataError if longer than 256 characters."""
    if len(metadata) > MAX_METADATA_LENGTH:
        raise InvalidMetadataError(
            "metadata", len(metadata), MAX_METADATA_LENGTH, minimum=0
        )


def validate_revision(region: str, vaccine_type: str, target_population: int) -> None:
    """Validate the fields an update may change, in contract order."""
    validate_region(region)
    validate_vaccine_type(vaccine_type)
    validate_target_population(target_population)
