"""Fee transfer record appended to the fee ledger on registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=True)
class FeeTransfer:
    """A single creation-fee payment.

    Attributes:
        amount: Fee charged, the creation fee in effect at the time.
        sender: Principal that paid (the registering caller).
        recipient: Configured beneficiary.
    """

    amount: int
    sender: str
    recipient: str

    def to_dict(self) -> dict[str, Any]:
        return {"amount": self.amount, "sender": self.sender, "recipient": self.recipient}
