"""Single-account engine: PIN checks, lockout, money movement and history."""

import itertools
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from atm_sim.audit import base as events
from atm_sim.audit.base import AuditSink, NullAuditSink
from atm_sim.config import SeedAccountConfig, TransactionLimits
from atm_sim.exceptions import ValidationError
from atm_sim.formatting import format_money
from atm_sim.logging import get_logger
from atm_sim.models import RejectionReason, Transaction, TransactionKind, TransactionResult

logger = get_logger(__name__)

PIN_PATTERN = re.compile(r"\d{4}", re.ASCII)
ACCOUNT_NUMBER_PATTERN = re.compile(r"ACC\d{9}", re.ASCII)

_INVALID_AMOUNT = "Invalid amount. Amount cannot be negative"

AmountLike = Decimal | int | float


class AccountEngine:
    """Owns the state of the one account an ATM session acts on.

    Every money operation returns a ``TransactionResult`` instead of raising;
    a rejected request leaves balance and history untouched. Only malformed
    constructor input raises (``ValidationError``).

    Audit events go to the injected ``audit`` sink. A failing sink is
    reported through the module logger and otherwise ignored.

    Parameters
    ----------
    balance : Decimal | int | float
        Opening balance, must be non-negative.
    pin : str
        Four-digit PIN.
    account_number : str
        ``ACC`` followed by nine digits.
    holder_name : str
        Non-blank display name.
    limits : TransactionLimits | None
        Operation ceilings and the failed-attempt threshold.
    audit : AuditSink | None
        Receiver of audit events (defaults to discarding them).
    clock : Callable[[], datetime] | None
        Source of transaction timestamps.
    """

    def __init__(
        self,
        balance: AmountLike,
        pin: str,
        account_number: str,
        holder_name: str,
        *,
        limits: TransactionLimits | None = None,
        audit: AuditSink | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        opening = _to_decimal(balance)
        if opening is None or opening < 0:
            raise ValidationError("Amount cannot be negative")
        self._balance = opening
        self._pin = _validate_pin_format(pin)
        if not isinstance(account_number, str) or not ACCOUNT_NUMBER_PATTERN.fullmatch(
            account_number
        ):
            raise ValidationError("Invalid account number format")
        self._account_number = account_number
        if not isinstance(holder_name, str) or not holder_name.strip():
            raise ValidationError("Account holder name cannot be empty")
        self._holder_name = holder_name.strip()

        self._limits = limits or TransactionLimits()
        self._audit = audit or NullAuditSink()
        self._clock = clock or datetime.now
        self._history: list[Transaction] = []
        self._is_blocked = False
        self._failed_attempts = 0
        self._sequence = itertools.count(1)

        self._emit(events.INITIALIZED, f"ATM initialized for account: {self._account_number}")

    @classmethod
    def seed(
        cls,
        account: SeedAccountConfig | None = None,
        **kwargs: Any,
    ) -> "AccountEngine":
        """Build the fixed starting account (₹50000.00, PIN 1234, ACC123456789)."""
        account = account or SeedAccountConfig()
        return cls(
            account.balance,
            account.pin,
            account.account_number,
            account.holder_name,
            **kwargs,
        )

    # Read-only state
    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def limits(self) -> TransactionLimits:
        return self._limits

    @property
    def is_blocked(self) -> bool:
        return self._is_blocked

    @property
    def failed_attempts(self) -> int:
        return self._failed_attempts

    @property
    def remaining_attempts(self) -> int:
        """PIN attempts left before the account locks."""
        return max(self._limits.max_failed_attempts - self._failed_attempts, 0)

    @property
    def history(self) -> tuple[Transaction, ...]:
        """All transactions, oldest first."""
        return tuple(self._history)

    @property
    def last_transaction(self) -> Transaction | None:
        return self._history[-1] if self._history else None

    def validate_pin(self, entered: str) -> bool:
        """Check a PIN, counting failures towards lockout.

        A blocked account rejects every attempt, including the right PIN,
        without touching the failure counter.
        """
        if self._is_blocked:
            self._emit(
                events.LOGIN_BLOCKED,
                f"Login attempt on blocked account: {self._account_number}",
            )
            return False

        if entered == self._pin:
            self._failed_attempts = 0
            self._emit(events.LOGIN_SUCCESS, f"Successful login for account: {self._account_number}")
            return True

        self._failed_attempts += 1
        self._emit(
            events.LOGIN_FAILED,
            f"Failed login attempt {self._failed_attempts} for account: {self._account_number}",
            failed_attempts=self._failed_attempts,
        )
        if self._failed_attempts >= self._limits.max_failed_attempts:
            self._is_blocked = True
            self._emit(
                events.ACCOUNT_BLOCKED,
                f"Account blocked due to multiple failed attempts: {self._account_number}",
            )
        return False

    def withdraw(self, amount: AmountLike) -> TransactionResult:
        """Take cash out of the account.

        Insufficient funds is reported ahead of the withdrawal limit.
        """
        value = _to_decimal(amount)
        if value is None or value < 0:
            return self._reject("withdraw", RejectionReason.INVALID_AMOUNT, _INVALID_AMOUNT)
        if value > self._balance:
            return self._reject(
                "withdraw",
                RejectionReason.INSUFFICIENT_FUNDS,
                f"Insufficient balance. Current: {format_money(self._balance)}",
            )
        if value > self._limits.max_withdrawal:
            return self._reject(
                "withdraw",
                RejectionReason.LIMIT_EXCEEDED,
                f"Daily limit exceeded. Max: {format_money(self._limits.max_withdrawal)}",
            )

        self._balance -= value
        tx = self._record(TransactionKind.WITHDRAWAL, "WITHDRAWAL", value)
        self._emit(
            events.WITHDRAWAL,
            f"Withdrawal successful: {format_money(value)} from account: {self._account_number}",
            transaction=tx,
        )
        return TransactionResult.ok(f"Successfully withdrawn {format_money(value)}", self._balance, tx)

    def deposit(self, amount: AmountLike) -> TransactionResult:
        value = _to_decimal(amount)
        if value is None or value < 0:
            return self._reject("deposit", RejectionReason.INVALID_AMOUNT, _INVALID_AMOUNT)
        if value > self._limits.max_deposit:
            return self._reject(
                "deposit",
                RejectionReason.LIMIT_EXCEEDED,
                f"Daily limit exceeded. Max: {format_money(self._limits.max_deposit)}",
            )

        self._balance += value
        tx = self._record(TransactionKind.DEPOSIT, "DEPOSIT", value)
        self._emit(
            events.DEPOSIT,
            f"Deposit successful: {format_money(value)} to account: {self._account_number}",
            transaction=tx,
        )
        return TransactionResult.ok(f"Successfully deposited {format_money(value)}", self._balance, tx)

    def transfer(self, amount: AmountLike, target_account: str) -> TransactionResult:
        """Debit the account in favour of ``target_account``.

        The target is not a ledger this engine knows about, so nothing is
        credited anywhere. Checks run in order: amount, target present,
        funds, transfer limit, same account.
        """
        value = _to_decimal(amount)
        if value is None or value < 0:
            return self._reject("transfer", RejectionReason.INVALID_AMOUNT, _INVALID_AMOUNT)
        if not isinstance(target_account, str) or not target_account.strip():
            return self._reject(
                "transfer", RejectionReason.INVALID_INPUT, "Target account cannot be empty"
            )
        if value > self._balance:
            return self._reject(
                "transfer",
                RejectionReason.INSUFFICIENT_FUNDS,
                f"Insufficient balance. Current: {format_money(self._balance)}",
            )
        if value > self._limits.max_transfer:
            return self._reject(
                "transfer",
                RejectionReason.LIMIT_EXCEEDED,
                f"Transfer limit exceeded. Max: {format_money(self._limits.max_transfer)}",
            )
        if target_account == self._account_number:
            return self._reject(
                "transfer", RejectionReason.SAME_ACCOUNT, "Cannot transfer to same account"
            )

        self._balance -= value
        tx = self._record(
            TransactionKind.TRANSFER,
            f"TRANSFER TO {target_account}",
            value,
            counterparty=target_account,
        )
        self._emit(
            events.TRANSFER,
            f"Transfer successful: {format_money(value)} "
            f"from {self._account_number} to {target_account}",
            transaction=tx,
        )
        return TransactionResult.ok(
            f"Successfully transferred {format_money(value)}", self._balance, tx
        )

    def change_pin(self, old_pin: str, new_pin: str) -> bool:
        """Replace the PIN; False when the current PIN is wrong or the new one malformed."""
        if old_pin != self._pin:
            self._emit(
                events.PIN_CHANGE_FAILED,
                f"PIN change rejected, current PIN mismatch for account: {self._account_number}",
            )
            return False
        try:
            new_pin = _validate_pin_format(new_pin)
        except ValidationError as exc:
            self._emit(events.PIN_CHANGE_FAILED, f"PIN change error: {exc}")
            return False

        self._pin = new_pin
        tx = self._record(TransactionKind.PIN_CHANGE, "PIN CHANGE", Decimal("0"))
        self._emit(
            events.PIN_CHANGED,
            f"PIN changed successfully for account: {self._account_number}",
            transaction=tx,
        )
        return True

    def _record(
        self,
        kind: TransactionKind,
        label: str,
        amount: Decimal,
        counterparty: str | None = None,
    ) -> Transaction:
        now = self._clock()
        tx = Transaction(
            transaction_id=f"TXN{int(now.timestamp() * 1000)}-{next(self._sequence):06d}",
            transaction_type=label,
            kind=kind,
            amount=amount,
            balance_after=self._balance,
            timestamp=now,
            counterparty=counterparty,
        )
        self._history.append(tx)
        return tx

    def _reject(self, operation: str, reason: RejectionReason, message: str) -> TransactionResult:
        logger.debug("%s rejected (%s): %s", operation, reason.value, message)
        return TransactionResult.rejected(reason, message)

    def _emit(self, event: str, message: str, **fields: Any) -> None:
        try:
            self._audit.record(event, message, account_number=self._account_number, **fields)
        except Exception:
            # Audit is best-effort; the ledger change already happened.
            logger.warning("Audit sink failed to record %s event", event, exc_info=True)


def _validate_pin_format(pin: str) -> str:
    if not isinstance(pin, str) or not PIN_PATTERN.fullmatch(pin):
        raise ValidationError("PIN must be 4 digits")
    return pin


def _to_decimal(amount: AmountLike) -> Decimal | None:
    """Coerce an amount to Decimal; None when it is not a finite number."""
    if isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, (int, float)):
        value = Decimal(str(amount))
    else:
        return None
    if not value.is_finite():
        return None
    # -0 compares equal to 0 but would render as "-0.00"
    return value.copy_abs() if value.is_zero() else value
