"""Tests for sinks."""

import io
import json
import logging
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from bank_ledger.exceptions import SinkError
from bank_ledger.models import Account
from bank_ledger.sinks.console import ConsoleSink
from bank_ledger.sinks.json_file import JsonFileSink
from bank_ledger.store import AccountDirectory


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_init_default(self) -> None:
        sink = ConsoleSink()

        assert sink.pretty is True
        assert sink.max_records is None
        assert sink._counts == {}

    def test_write_batch_dict(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False)

        sink.write_batch("rows", [{"id": 1}, {"id": 2}])
        captured = capsys.readouterr()

        assert "rows (2 records)" in captured.out
        assert '{"id": 1}' in captured.out
        assert sink._counts["rows"] == 2

    def test_write_batch_transactions(
        self, current_account: Account, capsys: pytest.CaptureFixture
    ) -> None:
        current_account.deposit(10)
        current_account.withdraw(25)
        sink = ConsoleSink(pretty=True)

        sink.write_batch("transactions", current_account.full_history())
        captured = capsys.readouterr()

        assert '"kind": "WITHDRAW"' in captured.out
        assert '"balance_after": "-15"' in captured.out

    def test_write_batch_account_hides_hash(
        self, savings_account: Account, capsys: pytest.CaptureFixture
    ) -> None:
        ConsoleSink().write_batch("accounts", [savings_account])
        captured = capsys.readouterr()

        assert "ACC-S-001" in captured.out
        assert savings_account.credential_hash not in captured.out

    def test_max_records(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False, max_records=2)

        sink.write_batch("rows", [{"id": i} for i in range(5)])
        captured = capsys.readouterr()

        assert '{"id": 1}' in captured.out
        assert '{"id": 2}' not in captured.out
        assert "... and 3 more records" in captured.out
        assert sink._counts["rows"] == 5

    def test_custom_stream(self, capsys: pytest.CaptureFixture) -> None:
        stream = io.StringIO()

        ConsoleSink(pretty=False, stream=stream).write_batch("rows", [{"id": 1}])

        assert '{"id": 1}' in stream.getvalue()
        assert capsys.readouterr().out == ""

    def test_write_directory(self, directory: AccountDirectory) -> None:
        alice = directory.create_account("Alice", "pw1", "savings")
        directory.get_account(alice).deposit(20)
        stream = io.StringIO()
        sink = ConsoleSink(pretty=False, stream=stream)

        sink.write_directory(directory)

        output = stream.getvalue()
        assert "accounts (1 records)" in output
        assert f'"account_number": "{alice}"' in output
        assert directory.get_account(alice).credential_hash not in output
        assert sink._counts == {"accounts": 1}

    def test_counts_accumulate(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleSink(pretty=False)
        sink.write_batch("rows", [{"id": 1}])
        sink.write_batch("rows", [{"id": 2}])

        sink.close()
        captured = capsys.readouterr()

        assert "rows: 2 records" in captured.out


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "out"

        JsonFileSink(target)

        assert target.is_dir()

    def test_write_batch(self, tmp_path: Path, current_account: Account) -> None:
        current_account.deposit(5)
        sink = JsonFileSink(tmp_path)

        sink.write_batch("transactions", list(current_account.transactions))

        data = json.loads((tmp_path / "transactions.json").read_text(encoding="utf-8"))
        assert data == [
            {
                "kind": "DEPOSIT",
                "amount": "5",
                "balance_after": "5",
                "timestamp": "2024-01-01T09:00:00",
            }
        ]
        assert sink._counts["transactions"] == 1

    def test_pretty_output(self, tmp_path: Path) -> None:
        JsonFileSink(tmp_path, pretty=True).write_batch("rows", [{"id": 1}])

        content = (tmp_path / "rows.json").read_text(encoding="utf-8")
        assert "\n  " in content

    def test_write_directory(self, tmp_path: Path, directory: AccountDirectory) -> None:
        alice = directory.create_account("Alice", "pw1", "savings")
        bob = directory.create_account("Bob", "pw2", "current")
        directory.get_account(alice).deposit(100)
        directory.get_account(alice).apply_interest()
        directory.get_account(bob).withdraw(40)

        JsonFileSink(tmp_path).write_directory(directory)

        data = json.loads((tmp_path / "accounts.json").read_text(encoding="utf-8"))
        by_number = {row["account_number"]: row for row in data}
        assert set(by_number) == {alice, bob}
        assert Decimal(by_number[alice]["balance"]) == Decimal("103.5")
        assert [t["kind"] for t in by_number[alice]["transactions"]] == ["DEPOSIT", "INTEREST"]
        assert by_number[bob]["balance"] == "-40"
        assert all("credential_hash" not in row for row in data)

    def test_write_failure_raises_sink_error(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(SinkError):
                sink.write_batch("rows", [{"id": 1}])

    def test_unwritable_output_dir(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(SinkError):
            JsonFileSink(blocker / "out")

    def test_close_logs_summary(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("rows", [{"id": 1}, {"id": 2}])

        with caplog.at_level(logging.INFO, logger="bank_ledger"):
            sink.close()

        assert "rows: 2 records" in caplog.text
