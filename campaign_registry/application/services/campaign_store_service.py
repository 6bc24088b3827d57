"""Campaign store service: registration, update and fee configuration.

This service owns every state transition of the registry. It validates
a request, consults the authority oracle, charges the creation fee and
applies the change to the RegistryState it was given. Rejections are
raised as CampaignRegistryError subclasses; the public facade turns them
into RegistryResult values.

Registration checks, first failure wins:
1. registry ceiling not reached        -> MaxCampaignsExceededError
2. campaign id 1..64 chars             -> InvalidIdError
3. region 1..100 chars                 -> InvalidRegionError
4. vaccine type 1..50 chars            -> InvalidVaccineTypeError
5. target population > 0               -> InvalidPopulationError
6. metadata <= 256 chars               -> InvalidMetadataError
7. caller is a verified authority      -> UnauthorizedError
8. campaign id not already registered  -> CampaignExistsError
9. beneficiary configured              -> AuthorityNotVerifiedError

Update checks:
1. campaign exists and caller created it -> UpdateRejectedError
2. region, vaccine type, population rules as above

Partial commits:
Unless atomic_capacity_check is set, a full destination region bucket is
only discovered after earlier writes. A register has then already
charged the fee and stored the campaign (the counter is not advanced).
An update has already revised the campaign and removed its id from the
old bucket (the update log is not written). Neither is rolled back.
"""

from __future__ import annotations

from campaign_registry.application.ports.authority_oracle import AuthorityOracle
from campaign_registry.application.ports.fee_ledger import FeeLedger
from campaign_registry.application.services.base import LoggingMixin
from campaign_registry.config.registry_config import BURN_ADDRESS
from campaign_registry.domain.errors.campaign import (
    AuthorityNotVerifiedError,
    CampaignExistsError,
    CampaignRegistryError,
    MaxCampaignsExceededError,
    UnauthorizedError,
    UpdateRejectedError,
)
from campaign_registry.domain.errors.configuration import (
    BeneficiaryAlreadySetError,
    BeneficiaryNotSetError,
    InvalidBeneficiaryError,
)
from campaign_registry.domain.models.campaign import Campaign, CampaignUpdate
from campaign_registry.domain.models.registry_state import RegistryState
from campaign_registry.domain.services.campaign_validation import (
    validate_campaign_id,
    validate_metadata,
    validate_region,
    validate_revision,
    validate_target_population,
    validate_vaccine_type,
)


class CampaignStoreService(LoggingMixin):
    """Applies register, update and configuration transitions to a RegistryState.

    Attributes:
        state: The shared registry state this service mutates.
        atomic_capacity_check: Reject full destination buckets before any write.
    """

    def __init__(
        self,
        state: RegistryState,
        oracle: AuthorityOracle,
        ledger: FeeLedger,
        *,
        burn_address: str = BURN_ADDRESS,
        atomic_capacity_check: bool = False,
    ) -> None:
        self.state = state
        self._oracle = oracle
        self._ledger = ledger
        self._burn_address = burn_address
        self.atomic_capacity_check = atomic_capacity_check
        self._init_logger()

    def register(
        self,
        campaign_id: str,
        region: str,
        vaccine_type: str,
        target_population: int,
        metadata: str,
        caller: str,
        now: int,
    ) -> str:
        """Register a new campaign.

        Args:
            campaign_id: Unique id for the campaign.
            region: Region the campaign runs in.
            vaccine_type: Vaccine administered.
            target_population: People targeted.
            metadata: Free text description.
            caller: Principal registering the campaign, charged the fee.
            now: Logical timestamp of the transaction.

        Returns:
            The registered campaign id.

        Raises:
            CampaignRegistryError: On the first failed check, see module docs.
        """
        log = self._log_operation(
            "register", campaign_id=campaign_id, region=region, caller=caller
        )
        log.debug("register_started")

        try:
            self._check_registration(
                campaign_id, region, vaccine_type, target_population, metadata, caller
            )
        except CampaignRegistryError as e:
            log.info("register_rejected", error=e.kind.value, code=e.code)
            raise

        state = self.state
        beneficiary = state.beneficiary
        assert beneficiary is not None

        transfer = self._ledger.transfer(state.creation_fee, caller, beneficiary)
        log.info(
            "creation_fee_charged",
            amount=transfer.amount,
            recipient=transfer.recipient,
        )

        state.campaigns[campaign_id] = Campaign(
            campaign_id=campaign_id,
            region=region,
            vaccine_type=vaccine_type,
            target_population=target_population,
            creator=caller,
            created_at=now,
            status=True,
            metadata=metadata,
        )

        try:
            state.region_index.append(region, campaign_id)
        except MaxCampaignsExceededError as e:
            log.warning(
                "partial_commit_on_capacity_failure",
                fee_charged=transfer.amount,
                campaign_stored=True,
                bucket_size=e.current,
            )
            raise

        state.next_campaign_id += 1
        log.info("register_completed", campaign_count=state.next_campaign_id)
        return campaign_id

    def update(
        self,
        campaign_id: str,
        region: str,
        vaccine_type: str,
        target_population: int,
        caller: str,
        now: int,
    ) -> bool:
        """Revise a campaign's region, vaccine type and target population.

        The id is always removed from its old region bucket and appended to
        the new one, even when the region is unchanged. That moves it to the
        end of the bucket.

        Returns:
            True on success.

        Raises:
            UpdateRejectedError: Campaign missing or caller is not its creator.
            CampaignRegistryError: On a field rule or capacity failure.
        """
        log = self._log_operation(
            "update", campaign_id=campaign_id, region=region, caller=caller
        )
        log.debug("update_started")

        state = self.state
        campaign = state.campaigns.get(campaign_id)
        try:
            if campaign is None or campaign.creator != caller:
                raise UpdateRejectedError(campaign_id)
            validate_revision(region, vaccine_type, target_population)
            if self.atomic_capacity_check:
                self._check_update_capacity(campaign, region)
        except CampaignRegistryError as e:
            log.info("update_rejected", error=e.kind.value, code=e.code)
            raise

        old_region = campaign.region
        state.campaigns[campaign_id] = campaign.revise(
            region=region,
            vaccine_type=vaccine_type,
            target_population=target_population,
            at=now,
        )
        state.region_index.remove(old_region, campaign_id)

        try:
            state.region_index.append(region, campaign_id)
        except MaxCampaignsExceededError as e:
            log.warning(
                "partial_commit_on_capacity_failure",
                removed_from=old_region,
                campaign_revised=True,
                bucket_size=e.current,
            )
            raise

        state.update_log.record(
            CampaignUpdate(
                campaign_id=campaign_id,
                region=region,
                vaccine_type=vaccine_type,
                target_population=target_population,
                timestamp=now,
                updater=caller,
            )
        )
        log.info("update_completed", old_region=old_region)
        return True

    def set_beneficiary(self, principal: str) -> bool:
        """Configure the fee beneficiary. Allowed exactly once.

        Raises:
            InvalidBeneficiaryError: Principal is the burn address.
            BeneficiaryAlreadySetError: A beneficiary is already configured.
        """
        log = self._log_operation("set_beneficiary", principal=principal)
        try:
            if principal == self._burn_address:
                raise InvalidBeneficiaryError(principal)
            if self.state.beneficiary is not None:
                raise BeneficiaryAlreadySetError(self.state.beneficiary)
        except CampaignRegistryError as e:
            log.info("set_beneficiary_rejected", error=e.kind.value)
            raise

        self.state.beneficiary = principal
        log.info("set_beneficiary_completed")
        return True

    def set_creation_fee(self, amount: int) -> bool:
        """Replace the creation fee. No bounds are enforced on the amount.

        Raises:
            BeneficiaryNotSetError: No beneficiary configured yet.
        """
        log = self._log_operation("set_creation_fee", amount=amount)
        if self.state.beneficiary is None:
            error = BeneficiaryNotSetError()
            log.info("set_creation_fee_rejected", error=error.kind.value)
            raise error

        previous = self.state.creation_fee
        self.state.creation_fee = amount
        log.info("set_creation_fee_completed", previous=previous)
        return True

    def _check_registration(
        self,
        campaign_id: str,
        region: str,
        vaccine_type: str,
        target_population: int,
        metadata: str,
        caller: str,
    ) -> None:
        state = self.state
        if state.next_campaign_id >= state.max_campaigns:
            raise MaxCampaignsExceededError(
                scope="registry",
                current=state.next_campaign_id,
                limit=state.max_campaigns,
            )
        validate_campaign_id(campaign_id)
        validate_region(region)
        validate_vaccine_type(vaccine_type)
        validate_target_population(target_population)
        validate_metadata(metadata)
        if not self._oracle.is_verified_authority(caller):
            raise UnauthorizedError(caller)
        if campaign_id in state.campaigns:
            raise CampaignExistsError(campaign_id)
        if state.beneficiary is None:
            raise AuthorityNotVerifiedError()
        if self.atomic_capacity_check and not state.region_index.has_capacity(region):
            index = state.region_index
            raise MaxCampaignsExceededError(
                scope=region, current=index.size(region), limit=index.capacity
            )

    def _check_update_capacity(self, campaign: Campaign, region: str) -> None:
        # The id leaves its old bucket first, freeing a slot when the region is unchanged
        index = self.state.region_index
        occupied = index.size(region)
        if region == campaign.region:
            occupied -= 1
        if occupied >= index.capacity:
            raise MaxCampaignsExceededError(
                scope=region, current=occupied, limit=index.capacity
            )
