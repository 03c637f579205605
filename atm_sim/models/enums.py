"""Enumeration types for the ATM domain."""

from enum import Enum


class TransactionKind(str, Enum):
    WITHDRAWAL = "WITHDRAWAL"
    DEPOSIT = "DEPOSIT"
    TRANSFER = "TRANSFER"
    PIN_CHANGE = "PIN_CHANGE"


class RejectionReason(str, Enum):
    """Business rule that turned a request down."""

    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    SAME_ACCOUNT = "SAME_ACCOUNT"
    INVALID_INPUT = "INVALID_INPUT"
