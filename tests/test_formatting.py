"""Tests for display formatting helpers."""

from datetime import datetime
from decimal import Decimal

import pytest

from atm_sim.formatting import (
    format_amount,
    format_money,
    format_timestamp,
    parse_amount,
    render_history,
)
from atm_sim.models import Transaction, TransactionKind


class TestFormatMoney:
    """Tests for money rendering."""

    def test_whole_amount(self) -> None:
        assert format_money(Decimal("20000")) == "₹20000.00"

    def test_int_and_float(self) -> None:
        assert format_money(50000) == "₹50000.00"
        assert format_money(0.5) == "₹0.50"

    def test_rounds_half_up(self) -> None:
        assert format_amount(Decimal("0.005")) == "0.01"
        assert format_amount(1234.565) == "1234.57"


class TestFormatTimestamp:
    def test_day_first(self) -> None:
        assert format_timestamp(datetime(2024, 3, 5, 9, 7, 3)) == "05/03/2024 09:07:03"


class TestParseAmount:
    """Tests for amount parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("20000", Decimal("20000")),
            (" 1500.50 ", Decimal("1500.50")),
            ("1,500.50", Decimal("1500.50")),
            ("₹100", Decimal("100")),
            ("-5", Decimal("-5")),
        ],
    )
    def test_valid(self, text: str, expected: Decimal) -> None:
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "12abc", "NaN", "Infinity", "₹"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError, match="Not a valid amount"):
            parse_amount(text)


class TestRenderHistory:
    """Tests for the history table."""

    def test_empty(self) -> None:
        assert render_history([]) == "No transactions yet."

    def test_rows(self) -> None:
        moment = datetime(2024, 3, 5, 9, 7, 3)
        transactions = [
            Transaction("TXN1-1", "DEPOSIT", TransactionKind.DEPOSIT, Decimal("100"), Decimal("50100"), moment),
            Transaction(
                "TXN1-2",
                "TRANSFER TO ACC987654321",
                TransactionKind.TRANSFER,
                Decimal("50.5"),
                Decimal("50049.50"),
                moment,
                counterparty="ACC987654321",
            ),
        ]

        lines = render_history(transactions).splitlines()

        assert lines[0].split() == ["Date/Time", "Type", "Amount", "Balance"]
        assert set(lines[1].replace(" ", "")) == {"-"}
        assert "05/03/2024 09:07:03" in lines[2]
        assert "₹100.00" in lines[2]
        assert "₹50100.00" in lines[2]
        assert "TRANSFER TO ACC987654321" in lines[3]
        assert "₹50049.50" in lines[3]
