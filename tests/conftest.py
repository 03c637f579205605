"""Pytest configuration and fixtures."""

from datetime import datetime
from typing import Any

import pytest
from faker import Faker

from atm_sim.engine import AccountEngine


class RecordingAuditSink:
    """Audit sink that keeps every event in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []
        self.closed = False

    def record(self, event: str, message: str, **fields: Any) -> None:
        self.events.append((event, message, fields))

    def close(self) -> None:
        self.closed = True

    @property
    def names(self) -> list[str]:
        return [event for event, _, _ in self.events]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker instance."""
    faker = Faker("en_IN")
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def audit() -> RecordingAuditSink:
    """In-memory audit sink."""
    return RecordingAuditSink()


@pytest.fixture
def fixed_clock() -> datetime:
    """Frozen wall-clock moment used for transaction timestamps."""
    return datetime(2024, 3, 5, 9, 7, 3)


@pytest.fixture
def engine(audit: RecordingAuditSink, fixed_clock: datetime) -> AccountEngine:
    """Seed account (₹50000.00, PIN 1234, ACC123456789) with a frozen clock."""
    return AccountEngine.seed(audit=audit, clock=lambda: fixed_clock)
