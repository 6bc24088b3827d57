"""Fee Ledger port - interface for creation-fee transfers.

The ledger is append-only. The registry writes a transfer on every
registration that passes validation and never reads the ledger back;
the read side exists for auditing.
"""

from abc import ABC, abstractmethod

from campaign_registry.domain.models.fee_transfer import FeeTransfer


class FeeLedger(ABC):
    """Abstract interface for recording fee transfers."""

    @abstractmethod
    def transfer(self, amount: int, sender: str, recipient: str) -> FeeTransfer:
        """Record a transfer of ``amount`` from sender to recipient.

        Transfers are never rolled back, even if the operation that
        emitted them fails afterwards.

        Returns:
            The recorded transfer.
        """
        ...

    @abstractmethod
    def transfers(self) -> list[FeeTransfer]:
        """Return all recorded transfers in order (audit only)."""
        ...
