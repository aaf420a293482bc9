"""Ledger domain models."""

from bank_ledger.models.account import Account, AccountSummary
from bank_ledger.models.base import Clock, system_clock, to_amount
from bank_ledger.models.enums import AccountKind, TransactionKind
from bank_ledger.models.transaction import TransactionRecord

__all__ = [
    "Account",
    "AccountKind",
    "AccountSummary",
    "Clock",
    "TransactionKind",
    "TransactionRecord",
    "system_clock",
    "to_amount",
]
