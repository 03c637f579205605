"""atm-sim: single-account ATM simulation with an auditable transaction engine."""

from atm_sim.engine import AccountEngine
from atm_sim.exceptions import AtmError, ValidationError
from atm_sim.models import RejectionReason, Transaction, TransactionKind, TransactionResult

__version__ = "0.1.0"

__all__ = [
    "AccountEngine",
    "AtmError",
    "RejectionReason",
    "Transaction",
    "TransactionKind",
    "TransactionResult",
    "ValidationError",
    "__version__",
]
