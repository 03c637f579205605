"""Display helpers for money, timestamps and transaction history."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from atm_sim.models import Transaction

CURRENCY_SYMBOL = "₹"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
HISTORY_COLUMNS = ("Date/Time", "Type", "Amount", "Balance")

_CENTS = Decimal("0.01")


def format_amount(amount: Decimal | int | float) -> str:
    """Render an amount with two decimals and no currency symbol."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):.2f}"


def format_money(amount: Decimal | int | float) -> str:
    """Render an amount as ``₹1234.50``."""
    return f"{CURRENCY_SYMBOL}{format_amount(amount)}"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_amount(text: str) -> Decimal:
    """Parse user input into a Decimal amount.

    Only the syntax is checked here. Sign and limits are the engine's call.

    Raises
    ------
    ValueError
        If the text is not a finite number.
    """
    cleaned = text.strip().replace(",", "")
    if cleaned.startswith(CURRENCY_SYMBOL):
        cleaned = cleaned[len(CURRENCY_SYMBOL):].strip()
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Not a valid amount: {text!r}") from None
    if not value.is_finite():
        raise ValueError(f"Not a valid amount: {text!r}")
    return value


def render_history(transactions: Iterable[Transaction]) -> str:
    """Render transactions as a fixed-width table, oldest first."""
    rows = [
        (
            format_timestamp(tx.timestamp),
            tx.transaction_type,
            format_money(tx.amount),
            format_money(tx.balance_after),
        )
        for tx in transactions
    ]
    if not rows:
        return "No transactions yet."

    widths = [
        max(len(HISTORY_COLUMNS[i]), *(len(row[i]) for row in rows))
        for i in range(len(HISTORY_COLUMNS))
    ]
    lines = [
        "  ".join(col.ljust(w) for col, w in zip(HISTORY_COLUMNS, widths)),
        "  ".join("-" * w for w in widths),
    ]
    for row in rows:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    return "\n".join(lines)
