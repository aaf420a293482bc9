"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta

import pytest

from bank_ledger.models import Account, AccountKind, Clock
from bank_ledger.store import AccountDirectory


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def start_time() -> datetime:
    """First timestamp handed out by the test clock."""
    return datetime(2024, 1, 1, 9, 0, 0)


@pytest.fixture
def clock(start_time: datetime) -> Clock:
    """Deterministic clock advancing one second per call."""
    ticks = iter(start_time + timedelta(seconds=i) for i in range(10_000))
    return lambda: next(ticks)


@pytest.fixture
def directory(clock: Clock) -> AccountDirectory:
    """Create a fresh directory for each test."""
    return AccountDirectory(clock=clock)


@pytest.fixture
def savings_account(clock: Clock) -> Account:
    """Savings account at 3.5% interest."""
    return Account.open("ACC-S-001", "Alice", "pw1", AccountKind.SAVINGS, clock=clock)


@pytest.fixture
def current_account(clock: Clock) -> Account:
    """Current account with a 1000 overdraft limit."""
    return Account.open("ACC-C-001", "Bob", "pw2", AccountKind.CURRENT, clock=clock)
