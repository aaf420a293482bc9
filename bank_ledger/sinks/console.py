"""Console sink: prints ledger exports as JSON for inspection."""

import json
import sys
from typing import Any, TextIO

from bank_ledger.sinks.serialization import to_dict
from bank_ledger.store import AccountDirectory

RULE = "=" * 60


class ConsoleSink:
    """Print exported records to a text stream (stdout by default)."""

    def __init__(
        self,
        pretty: bool = True,
        max_records: int | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Indent each JSON object.
        max_records : int | None
            Cap on records printed per batch (None prints all). Counts
            still include the records that were not printed.
        stream : TextIO | None
            Destination; resolved to ``sys.stdout`` at write time when None.
        """
        self.pretty = pretty
        self.max_records = max_records
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Print one heading then one JSON object per record."""
        self._emit(f"\n{RULE}\n{entity_type} ({len(records)} records)\n{RULE}")

        shown = records if self.max_records is None else records[: self.max_records]
        indent = 2 if self.pretty else None
        for record in shown:
            self._emit(json.dumps(to_dict(record), indent=indent, ensure_ascii=False, default=str))

        hidden = len(records) - len(shown)
        if hidden:
            self._emit(f"... and {hidden} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def write_directory(self, directory: AccountDirectory) -> None:
        """Print every account, with its transactions, as the ``accounts`` batch."""
        self.write_batch("accounts", list(directory.accounts.values()))

    def close(self) -> None:
        """Print per-entity record counts."""
        self._emit(f"\n{RULE}\nConsole Sink Summary\n{RULE}")
        for entity_type, count in self._counts.items():
            self._emit(f"  {entity_type}: {count} records")

    def _emit(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout)
