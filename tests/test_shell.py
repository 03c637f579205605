"""Tests for the terminal session shell."""

from decimal import Decimal
from typing import Callable

import pytest

from atm_sim.engine import AccountEngine
from atm_sim.shell import AtmSession, Screen


def scripted(inputs: list[str]) -> Callable[[str], str]:
    """Return a read function that replays ``inputs`` then signals EOF."""
    remaining = iter(inputs)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def run_session(engine: AccountEngine, inputs: list[str]) -> list[str]:
    output: list[str] = []
    AtmSession(engine, read=scripted(inputs), write=output.append).run()
    return output


class TestSessionFlow:
    """Tests for navigation between screens."""

    def test_quit_from_welcome(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["q"])

        assert "=== SecureBank ATM ===" in output[0]
        assert output[-1] == "Thank you for banking with SecureBank."

    def test_eof_exits(self, engine: AccountEngine) -> None:
        output = run_session(engine, [])
        assert output[-1] == "Thank you for banking with SecureBank."

    def test_withdraw_then_balance(self, engine: AccountEngine) -> None:
        """Test login, withdrawal and balance inquiry."""
        output = run_session(engine, ["", "1234", "2", "20000", "1", "0", "q"])

        assert "Welcome, John Doe." in output
        assert "Success: Successfully withdrawn ₹20000.00\nNew Balance: ₹30000.00" in output
        assert "Current Balance: ₹30000.00" in output
        assert engine.balance == Decimal("30000.00")

    def test_cancel_pin(self, engine: AccountEngine) -> None:
        session = AtmSession(engine, read=scripted(["", "c"]), write=lambda _: None)

        assert session.step() == Screen.PIN
        session.screen = Screen.PIN
        assert session.step() == Screen.WELCOME

    def test_empty_pin(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "", "c", "q"])

        assert "Error: PIN cannot be empty" in output
        assert engine.failed_attempts == 0

    def test_wrong_pins_lock_account(self, engine: AccountEngine) -> None:
        """Test attempt countdown and lockout messages."""
        output = run_session(engine, ["", "0000", "1111", "2222", "", "1234", "q"])

        assert "Error: Invalid PIN. Attempts left: 2" in output
        assert "Error: Invalid PIN. Attempts left: 1" in output
        assert output.count("Error: Account blocked!") == 2
        assert engine.is_blocked is True

    def test_malformed_pin_reaches_engine(self, engine: AccountEngine) -> None:
        """Test that PIN format is judged by the engine, not the shell."""
        run_session(engine, ["", "12", "c", "q"])
        assert engine.failed_attempts == 1

    def test_unknown_menu_option(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "9"])
        assert "Error: Please choose one of the listed options" in output


class TestOperations:
    """Tests for the operation screens."""

    def test_invalid_amount_text(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "3", "lots"])

        assert "Error: Please enter a valid amount" in output
        assert engine.history == ()

    def test_rejection_message_shown(self, engine: AccountEngine) -> None:
        """Test that engine rejections are rendered verbatim."""
        output = run_session(engine, ["", "1234", "2", "40000", "2", "40000"])

        assert "Error: Insufficient balance. Current: ₹10000.00" in output

    def test_negative_deposit(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "3", "-5"])

        assert "Error: Invalid amount. Amount cannot be negative" in output
        assert engine.balance == Decimal("50000.00")

    def test_transfer(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "4", "ACC987654321", "2,500"])

        assert "Success: Successfully transferred ₹2500.00" in output
        assert engine.history[-1].transaction_type == "TRANSFER TO ACC987654321"

    def test_transfer_same_account(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "4", "ACC123456789", "100"])
        assert "Error: Cannot transfer to same account" in output

    def test_transfer_target_input_is_trimmed(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "4", "  ACC123456789 ", "100"])
        assert "Error: Cannot transfer to same account" in output

    def test_negative_zero_deposit(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "3", "-0", "5"])

        assert "Success: Successfully deposited ₹0.00\nNew Balance: ₹50000.00" in output
        assert not any("-0.00" in line for line in output)

    def test_transfer_bad_amount(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "4", "ACC987654321", "ten"])
        assert "Error: Please enter valid details" in output

    def test_history(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "5", "3", "100", "5"])

        assert output.count("No transactions yet.") == 1
        table = [line for line in output if line.startswith("Date/Time")]
        assert len(table) == 1
        assert "DEPOSIT" in table[0]
        assert "₹50100.00" in table[0]

    def test_change_pin(self, engine: AccountEngine) -> None:
        """Test PIN change followed by logout and login with the new PIN."""
        output = run_session(engine, ["", "1234", "6", "1234", "9876", "0", "", "1234", "9876"])

        assert "Success: PIN changed successfully!" in output
        assert "Error: Invalid PIN. Attempts left: 2" in output
        assert output.count("Welcome, John Doe.") == 2

    @pytest.mark.parametrize(
        "old_pin, new_pin", [("0000", "9876"), ("1234", "98")]
    )
    def test_change_pin_rejected(self, engine: AccountEngine, old_pin: str, new_pin: str) -> None:
        output = run_session(engine, ["", "1234", "6", old_pin, new_pin])

        assert "Error: Invalid current PIN or new PIN format" in output
        assert engine.validate_pin("1234") is True

    def test_change_pin_empty(self, engine: AccountEngine) -> None:
        output = run_session(engine, ["", "1234", "6", "", "9876"])
        assert "Error: PIN cannot be empty" in output
