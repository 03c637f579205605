"""Transaction record for the ATM ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from atm_sim.exceptions import ValidationError
from atm_sim.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """One completed ledger event.

    ``transaction_type`` is the display label ("WITHDRAWAL", "DEPOSIT",
    "TRANSFER TO <acct>", "PIN CHANGE"); ``kind`` is its machine-readable
    counterpart. ``balance_after`` is the account balance right after the
    event was applied.
    """

    transaction_id: str
    transaction_type: str
    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime
    counterparty: str | None = None  # target account for transfers

    def __post_init__(self) -> None:
        label = (self.transaction_type or "").strip()
        if not label:
            raise ValidationError("Transaction type cannot be empty")
        if self.amount < 0:
            raise ValidationError("Amount cannot be negative")
        if self.balance_after < 0:
            raise ValidationError("Balance cannot be negative")
        object.__setattr__(self, "transaction_type", label)
