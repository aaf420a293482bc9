"""Transaction record model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.base import Clock, system_clock
from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class TransactionRecord:
    """One balance-affecting event in an account's log."""

    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime

    @classmethod
    def create(
        cls,
        kind: TransactionKind,
        amount: Decimal,
        balance_after: Decimal,
        clock: Clock = system_clock,
    ) -> "TransactionRecord":
        """Build a record stamped with the clock's current time."""
        return cls(kind=kind, amount=amount, balance_after=balance_after, timestamp=clock())
