"""Unit tests for campaign field validation.

Covers the boundaries of every field rule.
"""

import pytest

from campaign_registry.domain.errors import (
    InvalidIdError,
    InvalidMetadataError,
    InvalidPopulationError,
    InvalidRegionError,
    InvalidVaccineTypeError,
)
from campaign_registry.domain.services.campaign_validation import (
    MAX_ID_LENGTH,
    MAX_METADATA_LENGTH,
    MAX_REGION_LENGTH,
    MAX_VACCINE_TYPE_LENGTH,
    validate_campaign_id,
    validate_metadata,
    validate_region,
    validate_revision,
    validate_target_population,
    validate_vaccine_type,
)


class TestLimits:
    def test_limits(self) -> None:
        assert MAX_ID_LENGTH == 64
        assert MAX_REGION_LENGTH == 100
        assert MAX_VACCINE_TYPE_LENGTH == 50
        assert MAX_METADATA_LENGTH == 256


class TestCampaignId:
    def test_accepts_max_length(self) -> None:
        validate_campaign_id("a" * 64)

    @pytest.mark.parametrize("value", ["", "a" * 65])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(InvalidIdError):
            validate_campaign_id(value)


class TestRegion:
    def test_accepts_max_length(self) -> None:
        validate_region("a" * 100)

    @pytest.mark.parametrize("value", ["", "a" * 101])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(InvalidRegionError):
            validate_region(value)


class TestVaccineType:
    def test_accepts_max_length(self) -> None:
        validate_vaccine_type("a" * 50)

    @pytest.mark.parametrize("value", ["", "a" * 51])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(InvalidVaccineTypeError):
            validate_vaccine_type(value)


class TestTargetPopulation:
    def test_accepts_one(self) -> None:
        validate_target_population(1)

    @pytest.mark.parametrize("value", [0, -5])
    def test_rejects(self, value: int) -> None:
        with pytest.raises(InvalidPopulationError) as exc_info:
            validate_target_population(value)
        assert exc_info.value.value_length == value


class TestMetadata:
    def test_accepts_empty(self) -> None:
        validate_metadata("")

    def test_accepts_max_length(self) -> None:
        validate_metadata("a" * 256)

    def test_rejects_too_long(self) -> None:
        with pytest.raises(InvalidMetadataError):
            validate_metadata("a" * 257)


class TestValidateRevision:
    def test_first_violation_wins(self) -> None:
        with pytest.raises(InvalidRegionError):
            validate_revision("", "", 0)
        with pytest.raises(InvalidVaccineTypeError):
            validate_revision("CA", "", 0)
        with pytest.raises(InvalidPopulationError):
            validate_revision("CA", "Moderna", 0)

    def test_valid_revision(self) -> None:
        validate_revision("CA", "Moderna", 200_000)
