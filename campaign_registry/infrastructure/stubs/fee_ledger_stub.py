"""In-memory FeeLedger for development and testing.

Records every transfer in order. Nothing is ever removed.

WARNING: Not suitable for production - transfers are lost on restart.
"""

from __future__ import annotations

from campaign_registry.application.ports.fee_ledger import FeeLedger
from campaign_registry.domain.models.fee_transfer import FeeTransfer


class InMemoryFeeLedger(FeeLedger):
    """Append-only list of fee transfers."""

    def __init__(self) -> None:
        self._transfers: list[FeeTransfer] = []

    def transfer(self, amount: int, sender: str, recipient: str) -> FeeTransfer:
        record = FeeTransfer(amount=amount, sender=sender, recipient=recipient)
        self._transfers.append(record)
        return record

    def transfers(self) -> list[FeeTransfer]:
        return list(self._transfers)

    def total_paid_to(self, recipient: str) -> int:
        """Sum of all transfers received by a principal."""
        return sum(t.amount for t in self._transfers if t.recipient == recipient)

    def __len__(self) -> int:
        return len(self._transfers)
