"""Terminal session walking the ATM screens.

The session only parses and renders: every rule about amounts, limits and
PINs lives in ``AccountEngine``.
"""

from enum import Enum
from typing import Callable

from atm_sim.engine import AccountEngine
from atm_sim.formatting import format_money, parse_amount, render_history
from atm_sim.logging import get_logger
from atm_sim.models import TransactionResult

logger = get_logger(__name__)

BANNER = "SecureBank ATM"
MENU_OPTIONS = (
    ("1", "Balance"),
    ("2", "Withdraw"),
    ("3", "Deposit"),
    ("4", "Transfer"),
    ("5", "History"),
    ("6", "Settings (change PIN)"),
    ("0", "Logout"),
)


class Screen(str, Enum):
    WELCOME = "WELCOME"
    PIN = "PIN"
    MENU = "MENU"
    WITHDRAW = "WITHDRAW"
    DEPOSIT = "DEPOSIT"
    TRANSFER = "TRANSFER"
    HISTORY = "HISTORY"
    SETTINGS = "SETTINGS"
    EXIT = "EXIT"


class AtmSession:
    """Drive one ``AccountEngine`` through the screen flow.

    Parameters
    ----------
    engine : AccountEngine
        The account this session acts on.
    read : Callable[[str], str]
        Prompt-and-read function (``input`` by default).
    write : Callable[[str], None]
        Output function (``print`` by default).
    """

    def __init__(
        self,
        engine: AccountEngine,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.engine = engine
        self.read = read or input
        self.write = write or print
        self.screen = Screen.WELCOME
        self._handlers: dict[Screen, Callable[[], Screen]] = {
            Screen.WELCOME: self._welcome,
            Screen.PIN: self._pin,
            Screen.MENU: self._menu,
            Screen.WITHDRAW: self._withdraw,
            Screen.DEPOSIT: self._deposit,
            Screen.TRANSFER: self._transfer,
            Screen.HISTORY: self._history,
            Screen.SETTINGS: self._settings,
        }

    def run(self) -> None:
        """Loop over screens until the user quits or input runs out."""
        while self.screen is not Screen.EXIT:
            try:
                self.screen = self.step()
            except (EOFError, KeyboardInterrupt):
                self.write("")
                self.screen = Screen.EXIT
        self.write("Thank you for banking with SecureBank.")

    def step(self) -> Screen:
        """Render the current screen once and return the next one."""
        logger.debug("Showing screen %s", self.screen.value)
        return self._handlers[self.screen]()

    def _welcome(self) -> Screen:
        self.write(f"\n=== {BANNER} ===")
        choice = self.read("Press Enter to start banking (q to quit): ").strip().lower()
        return Screen.EXIT if choice == "q" else Screen.PIN

    def _pin(self) -> Screen:
        entered = self.read("Enter 4-digit PIN (c to cancel): ").strip()
        if entered.lower() == "c":
            return Screen.WELCOME
        if not entered:
            self._error("PIN cannot be empty")
            return Screen.PIN

        if self.engine.validate_pin(entered):
            self.write(f"Welcome, {self.engine.holder_name}.")
            return Screen.MENU
        if self.engine.is_blocked:
            self._error("Account blocked!")
            return Screen.WELCOME
        self._error(f"Invalid PIN. Attempts left: {self.engine.remaining_attempts}")
        return Screen.PIN

    def _menu(self) -> Screen:
        self.write("")
        for key, label in MENU_OPTIONS:
            self.write(f"  [{key}] {label}")
        choice = self.read("Select an option: ").strip()

        if choice == "1":
            self._info(f"Current Balance: {format_money(self.engine.balance)}")
            return Screen.MENU
        targets = {
            "2": Screen.WITHDRAW,
            "3": Screen.DEPOSIT,
            "4": Screen.TRANSFER,
            "5": Screen.HISTORY,
            "6": Screen.SETTINGS,
            "0": Screen.WELCOME,
        }
        if choice not in targets:
            self._error("Please choose one of the listed options")
            return Screen.MENU
        return targets[choice]

    def _withdraw(self) -> Screen:
        return self._cash_operation("WITHDRAW", self.engine.withdraw)

    def _deposit(self) -> Screen:
        return self._cash_operation("DEPOSIT", self.engine.deposit)

    def _cash_operation(
        self, title: str, operation: Callable[..., TransactionResult]
    ) -> Screen:
        self.write(f"\n{title} Money")
        try:
            amount = parse_amount(self.read("Enter amount: "))
        except ValueError:
            self._error("Please enter a valid amount")
            return Screen.MENU

        result = operation(amount)
        if result.success:
            self._success(f"{result.message}\nNew Balance: {format_money(self.engine.balance)}")
        else:
            self._error(result.message)
        return Screen.MENU

    def _transfer(self) -> Screen:
        self.write("\nTRANSFER Money")
        target = self.read("Target Account: ").strip()
        try:
            amount = parse_amount(self.read("Amount: "))
        except ValueError:
            self._error("Please enter valid details")
            return Screen.MENU

        result = self.engine.transfer(amount, target)
        if result.success:
            self._success(result.message)
        else:
            self._error(result.message)
        return Screen.MENU

    def _history(self) -> Screen:
        self.write("")
        self.write(render_history(self.engine.history))
        return Screen.MENU

    def _settings(self) -> Screen:
        old_pin = self.read("Current PIN: ").strip()
        new_pin = self.read("New PIN: ").strip()
        if not old_pin or not new_pin:
            self._error("PIN cannot be empty")
            return Screen.MENU

        if self.engine.change_pin(old_pin, new_pin):
            self._success("PIN changed successfully!")
        else:
            self._error("Invalid current PIN or new PIN format")
        return Screen.MENU

    def _error(self, message: str) -> None:
        self.write(f"Error: {message}")

    def _success(self, message: str) -> None:
        self.write(f"Success: {message}")

    def _info(self, message: str) -> None:
        self.write(message)
