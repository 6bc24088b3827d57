"""Campaign registration and update errors.

Every rejection the registry can produce is a validation or authorization
failure, never a transient condition. Callers must not retry an operation
that raised one of these errors without changing its inputs or the
registry state.

Numeric codes are stable wire identifiers shared with existing clients.
Kinds without a numeric code were historically reported as a bare failure.
"""

from __future__ import annotations

from enum import Enum

from campaign_registry.domain.exceptions import RegistryError


class RegistryErrorKind(str, Enum):
    """Kinds of registry rejection."""

    CAMPAIGN_EXISTS = "campaign_exists"
    UNAUTHORIZED = "unauthorized"
    INVALID_ID = "invalid_id"
    INVALID_REGION = "invalid_region"
    INVALID_VACCINE_TYPE = "invalid_vaccine_type"
    INVALID_POPULATION = "invalid_population"
    AUTHORITY_NOT_VERIFIED = "authority_not_verified"
    MAX_CAMPAIGNS_EXCEEDED = "max_campaigns_exceeded"
    INVALID_METADATA = "invalid_metadata"
    UPDATE_REJECTED = "update_rejected"
    INVALID_BENEFICIARY = "invalid_beneficiary"
    BENEFICIARY_ALREADY_SET = "beneficiary_already_set"
    BENEFICIARY_NOT_SET = "beneficiary_not_set"

    @property
    def code(self) -> int | None:
        """Numeric wire code, or None for coarse failures."""
        return ERROR_CODES.get(self)


ERROR_CODES: dict[RegistryErrorKind, int] = {
    RegistryErrorKind.CAMPAIGN_EXISTS: 100,
    RegistryErrorKind.UNAUTHORIZED: 101,
    RegistryErrorKind.INVALID_ID: 102,
    RegistryErrorKind.INVALID_REGION: 103,
    RegistryErrorKind.INVALID_VACCINE_TYPE: 104,
    RegistryErrorKind.INVALID_POPULATION: 105,
    RegistryErrorKind.AUTHORITY_NOT_VERIFIED: 107,
    RegistryErrorKind.MAX_CAMPAIGNS_EXCEEDED: 109,
    RegistryErrorKind.INVALID_METADATA: 110,
}


class CampaignRegistryError(RegistryError):
    """Base class for typed registry rejections.

    Subclasses set ``kind``; ``code`` is derived from it.
    """

    kind: RegistryErrorKind

    @property
    def code(self) -> int | None:
        return self.kind.code


class FieldValidationError(CampaignRegistryError):
    """Raised when a campaign field fails its length or range rule.

    Attributes:
        field: Name of the rejected field.
        value_length: Length (or value, for numeric fields) that was rejected.
        limit: Maximum allowed length, or None for numeric lower bounds.
    """

    def __init__(
        self,
        field: str,
        value_length: int,
        limit: int | None,
        minimum: int = 1,
    ) -> None:
        self.field = field
        self.value_length = value_length
        self.limit = limit
        if limit is None:
            detail = f"got {value_length}, must be > 0"
        else:
            detail = f"length {value_length}, must be {minimum}..{limit}"
        super().__init__(f"Invalid {field}: {detail}")


class InvalidIdError(FieldValidationError):
    kind = RegistryErrorKind.INVALID_ID


class InvalidRegionError(FieldValidationError):
    kind = RegistryErrorKind.INVALID_REGION


class InvalidVaccineTypeError(FieldValidationError):
    kind = RegistryErrorKind.INVALID_VACCINE_TYPE


class InvalidPopulationError(FieldValidationError):
    kind = RegistryErrorKind.INVALID_POPULATION


class InvalidMetadataError(FieldValidationError):
    kind = RegistryErrorKind.INVALID_METADATA


class UnauthorizedError(CampaignRegistryError):
    """Raised when the caller is not a verified authority."""

    kind = RegistryErrorKind.UNAUTHORIZED

    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__(f"Caller {caller} is not a verified authority")


class CampaignExistsError(CampaignRegistryError):
    """Raised when registering an id that is already present."""

    kind = RegistryErrorKind.CAMPAIGN_EXISTS

    def __init__(self, campaign_id: str) -> None:
        self.campaign_id = campaign_id
        super().__init__(f"Campaign {campaign_id} already exists")


class AuthorityNotVerifiedError(CampaignRegistryError):
    """Raised when registering before a fee beneficiary is configured."""

    kind = RegistryErrorKind.AUTHORITY_NOT_VERIFIED

    def __init__(self) -> None:
        super().__init__("No fee beneficiary configured")


class MaxCampaignsExceededError(CampaignRegistryError):
    """Raised when the registry or a region bucket is full.

    Attributes:
        scope: "registry" for the global ceiling, otherwise the region name.
        current: Entries already present.
        limit: Configured capacity.
    """

    kind = RegistryErrorKind.MAX_CAMPAIGNS_EXCEEDED

    def __init__(self, scope: str, current: int, limit: int) -> None:
        self.scope = scope
        self.current = current
        self.limit = limit
        super().__init__(f"Capacity exhausted for {scope}: {current}/{limit}")


class UpdateRejectedError(CampaignRegistryError):
    """Raised when an update targets a missing campaign or a foreign one.

    The two causes are deliberately indistinguishable to the caller.
    """

    kind = RegistryErrorKind.UPDATE_REJECTED

    def __init__(self, campaign_id: str) -> None:
        self.campaign_id = campaign_id
        super().__init__(f"Update rejected for campaign {campaign_id}")
