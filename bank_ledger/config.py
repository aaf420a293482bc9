"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError


@dataclass
class AccountConfig:
    """Per-kind account parameters."""

    savings_interest_rate: Decimal = Decimal("3.5")  # percent
    overdraft_limit: Decimal = Decimal("1000")
    mini_statement_size: int = 5

    def __post_init__(self) -> None:
        self.savings_interest_rate = _as_decimal(
            "savings_interest_rate", self.savings_interest_rate
        )
        self.overdraft_limit = _as_decimal("overdraft_limit", self.overdraft_limit)
        if self.savings_interest_rate < 0:
            raise ConfigurationError(
                f"Savings interest rate must not be negative: {self.savings_interest_rate}"
            )
        if self.overdraft_limit < 0:
            raise ConfigurationError(
                f"Overdraft limit must not be negative: {self.overdraft_limit}"
            )
        if self.mini_statement_size <= 0:
            raise ConfigurationError(
                f"Mini statement size must be positive: {self.mini_statement_size}"
            )


@dataclass
class DirectoryConfig:
    """Account number allocation and account-kind parsing."""

    number_prefix: str = "ACC"
    number_start: int = 1000  # first issued number is number_start + 1
    strict_account_kind: bool = False


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class BankConfig:
    """Main configuration for bank-ledger."""

    accounts: AccountConfig = field(default_factory=AccountConfig)
    directory: DirectoryConfig = field(default_factory=DirectoryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        import os

        accounts = AccountConfig(
            savings_interest_rate=_env_decimal("SAVINGS_INTEREST_RATE", "3.5"),
            overdraft_limit=_env_decimal("OVERDRAFT_LIMIT", "1000"),
            mini_statement_size=_env_int("MINI_STATEMENT_SIZE", "5"),
        )

        directory = DirectoryConfig(
            number_prefix=os.getenv("ACCOUNT_NUMBER_PREFIX", "ACC"),
            number_start=_env_int("ACCOUNT_NUMBER_START", "1000"),
            strict_account_kind=os.getenv("STRICT_ACCOUNT_KIND", "false").lower() == "true",
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            accounts=accounts,
            directory=directory,
            output=output,
            seed=_env_int("SEED", None) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _as_decimal(name: str, value: Decimal | int | float | str) -> Decimal:
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from e
    if not amount.is_finite():
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return amount


def _env_decimal(name: str, default: str) -> Decimal:
    import os

    raw = os.getenv(name, default)
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _env_int(name: str, default: str | None) -> int:
    import os

    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
