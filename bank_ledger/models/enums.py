"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    INTEREST = "INTEREST"


class AccountKind(str, Enum):
    """Account variants.

    - SAVINGS: earns interest, balance never negative
    - CURRENT: no interest, may overdraw down to the overdraft limit
    """

    SAVINGS = "SAVINGS"
    CURRENT = "CURRENT"

    @property
    def label(self) -> str:
        """Display name, e.g. ``"SAVINGS ACCOUNT"``."""
        return f"{self.value} ACCOUNT"

    @classmethod
    def from_token(cls, token: "str | AccountKind") -> "AccountKind | None":
        """Match a kind token case-insensitively, or return None."""
        if isinstance(token, cls):
            return token
        try:
            return cls(str(token).strip().upper())
        except ValueError:
            return None
