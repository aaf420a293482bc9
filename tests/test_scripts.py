"""Tests for the sample data script."""

import importlib.util
import json
import logging
from pathlib import Path
from types import ModuleType
from typing import Iterator

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "generate_sample_data.py"


@pytest.fixture
def script() -> ModuleType:
    """Load scripts/generate_sample_data.py as a module."""
    spec = importlib.util.spec_from_file_location("generate_sample_data", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    package = logging.getLogger("bank_ledger")
    saved = (root.handlers[:], root.level, package.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.setLevel(saved[2])


class TestGenerateSampleData:
    """Tests for generate_sample_data.main."""

    def test_parse_args_defaults(self, script: ModuleType, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("SEED", "OUTPUT_DIR", "PRETTY_JSON", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        args = script.parse_args([])

        assert args.accounts == 10
        assert args.transactions == 10
        assert args.seed == 42
        assert args.output_dir == Path("output")
        assert args.pretty is False
        assert args.output == "json"
        assert args.write_credentials is False

    def test_credentials_not_written_by_default(self, script: ModuleType, tmp_path: Path) -> None:
        script.main([
            "--accounts", "2",
            "--output-dir", str(tmp_path),
            "--log-level", "WARNING",
        ])

        assert (tmp_path / "accounts.json").exists()
        assert not (tmp_path / "credentials.json").exists()

    def test_writes_accounts_and_credentials(self, script: ModuleType, tmp_path: Path) -> None:
        script.main([
            "--accounts", "4",
            "--transactions", "6",
            "--output-dir", str(tmp_path),
            "--write-credentials",
            "--log-level", "WARNING",
        ])

        accounts = json.loads((tmp_path / "accounts.json").read_text(encoding="utf-8"))
        credentials = json.loads((tmp_path / "credentials.json").read_text(encoding="utf-8"))

        assert len(accounts) == 4
        assert all(len(a["transactions"]) == 6 for a in accounts)
        assert {c["account_number"] for c in credentials} == {a["account_number"] for a in accounts}
        assert all(c["secret"] for c in credentials)

    def test_console_output(
        self, script: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        script.main([
            "--accounts", "3",
            "--transactions", "2",
            "--output", "console",
            "--max-records", "1",
            "--output-dir", str(tmp_path / "unused"),
            "--log-level", "ERROR",
        ])
        out = capsys.readouterr().out

        assert "accounts (3 records)" in out
        assert "... and 2 more records" in out
        assert "accounts: 3 records" in out
        assert "credentials" not in out
        assert not (tmp_path / "unused").exists()
