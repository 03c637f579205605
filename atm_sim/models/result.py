"""Outcome value returned by money-moving operations."""

from dataclasses import dataclass
from decimal import Decimal

from atm_sim.models.enums import RejectionReason
from atm_sim.models.transaction import Transaction


@dataclass(frozen=True)
class TransactionResult:
    """Success or rejection of a withdraw, deposit or transfer.

    Callers branch on ``success``; ``message`` is ready for display.
    On rejection ``reason`` names the violated rule and nothing was mutated.
    """

    success: bool
    message: str
    reason: RejectionReason | None = None
    balance: Decimal | None = None
    transaction: Transaction | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, message: str, balance: Decimal, transaction: Transaction) -> "TransactionResult":
        return cls(True, message, balance=balance, transaction=transaction)

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> "TransactionResult":
        return cls(False, message, reason=reason)
