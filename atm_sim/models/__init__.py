"""Domain models for the ATM simulation."""

from atm_sim.models.enums import RejectionReason, TransactionKind
from atm_sim.models.result import TransactionResult
from atm_sim.models.transaction import Transaction

__all__ = ["RejectionReason", "Transaction", "TransactionKind", "TransactionResult"]
