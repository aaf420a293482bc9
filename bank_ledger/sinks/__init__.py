"""Output sinks for exporting ledger state."""

from bank_ledger.sinks.console import ConsoleSink
from bank_ledger.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
