#!/usr/bin/env python3
"""Generate a sample account directory and export it as JSON.

With ``--output json`` (the default) writes to the output directory:
- accounts.json: every account with its full transaction log
- credentials.json: only with ``--write-credentials``; account number,
  holder and plaintext secret for each seeded login

``--output console`` prints the same batches to stdout instead.

Demo data only. The ledger itself keeps nothing but credential hashes;
the plaintext export exists so seeded accounts can be logged into, and
must never be produced for real customers.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.config import BankConfig
from bank_ledger.generators import AccountGenerator
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.sinks import ConsoleSink, JsonFileSink
from bank_ledger.store import AccountDirectory

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments, defaulting from the environment."""
    config = BankConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Seed an in-memory account directory and export it as JSON"
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=10,
        help="Number of accounts to generate (default: 10)",
    )
    parser.add_argument(
        "--transactions",
        type=int,
        default=10,
        help="Operations applied to each account (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help=f"Directory for JSON files (default: {config.output.json_output_dir})",
    )
    parser.add_argument(
        "--output",
        choices=["json", "console"],
        default="json",
        help="Where to export: JSON files or stdout (default: json)",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Records printed per batch with --output console (default: all)",
    )
    parser.add_argument(
        "--write-credentials",
        action="store_true",
        help="Also export the seeded plaintext secrets (demo logins only)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Seed a directory and export it through the selected sink."""
    args = parse_args(argv)
    config = BankConfig.from_env()
    setup_logging(args.log_level, config.log_format)

    directory = AccountDirectory(
        account_config=config.accounts,
        directory_config=config.directory,
    )
    generator = AccountGenerator(seed=args.seed)
    seeded = generator.populate(directory, args.accounts, args.transactions)

    sink: ConsoleSink | JsonFileSink
    if args.output == "console":
        sink = ConsoleSink(pretty=args.pretty, max_records=args.max_records)
    else:
        sink = JsonFileSink(args.output_dir, pretty=args.pretty)
    sink.write_directory(directory)
    if args.write_credentials:
        logger.warning("Exporting plaintext secrets for %d demo accounts", len(seeded))
        sink.write_batch("credentials", seeded)
    sink.close()

    summary = directory.summary()
    logger.info(
        "Generated %d accounts (%d savings, %d current) with %d transactions",
        summary["accounts"],
        summary["savings"],
        summary["current"],
        summary["transactions"],
    )


if __name__ == "__main__":
    main()
