"""In-memory banking ledger: accounts, credentials and transaction history."""

from bank_ledger.models import (
    Account,
    AccountKind,
    AccountSummary,
    TransactionKind,
    TransactionRecord,
)
from bank_ledger.store import AccountDirectory

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountDirectory",
    "AccountKind",
    "AccountSummary",
    "TransactionKind",
    "TransactionRecord",
]
