"""Sample data generators."""

from bank_ledger.generators.account import AccountGenerator, SeededAccount

__all__ = ["AccountGenerator", "SeededAccount"]
