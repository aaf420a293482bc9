"""In-memory account directory."""

from bank_ledger.store.directory import AccountDirectory

__all__ = ["AccountDirectory"]
