"""Synthetic demo accounts for exercising the ATM with non-default data."""

from __future__ import annotations

import random
from decimal import Decimal

from faker import Faker

from atm_sim.config import SeedAccountConfig


class DemoAccountGenerator:
    """Generate plausible starting accounts.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale used for holder names (default ``en_IN``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_IN") -> None:
        self.fake = Faker(locale)
        self._random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def account_number(self) -> str:
        return self.fake.numerify("ACC#########")

    def pin(self) -> str:
        return self.fake.numerify("####")

    def generate(self) -> SeedAccountConfig:
        """Generate a starting account with a balance between ₹1,000 and ₹2,00,000."""
        balance = Decimal(self._random.randint(100_000, 20_000_000)) / 100
        return SeedAccountConfig(
            balance=balance.quantize(Decimal("0.01")),
            pin=self.pin(),
            account_number=self.account_number(),
            holder_name=self.fake.name(),
        )
