"""Account directory: number allocation, storage and login."""

from dataclasses import dataclass, field
from typing import Iterator

from bank_ledger.config import AccountConfig, DirectoryConfig
from bank_ledger.exceptions import (
    AccountNotFoundError,
    InvalidAccountKindError,
    InvalidCredentialError,
)
from bank_ledger.logging import get_logger, ledger_fields
from bank_ledger.models import Account, AccountKind, AccountSummary, Clock, system_clock

logger = get_logger(__name__)


@dataclass
class AccountDirectory:
    """In-memory store of accounts keyed by account number.

    Account numbers are minted from a counter that only moves forward, so a
    number is never issued twice. Accounts are added, never removed.
    """

    account_config: AccountConfig = field(default_factory=AccountConfig)
    directory_config: DirectoryConfig = field(default_factory=DirectoryConfig)
    clock: Clock = field(default=system_clock, repr=False)
    accounts: dict[str, Account] = field(default_factory=dict)
    _counter: int = field(default=-1, init=False)

    def __post_init__(self) -> None:
        self._counter = self.directory_config.number_start

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self.accounts

    def create_account(self, name: str, secret: str, kind: AccountKind | str) -> str:
        """Open a zero-balance account and return its number.

        ``kind`` is matched case-insensitively. Unrecognised tokens open a
        CURRENT account unless ``strict_account_kind`` is configured.

        Raises
        ------
        InvalidAccountKindError
            If strict kind parsing is on and ``kind`` is not recognised.
        """
        account_kind = self._resolve_kind(kind)

        self._counter += 1
        account_number = f"{self.directory_config.number_prefix}{self._counter}"

        if account_kind == AccountKind.SAVINGS:
            params = {"interest_rate": self.account_config.savings_interest_rate}
        else:
            params = {"overdraft_limit": self.account_config.overdraft_limit}

        account = Account.open(
            account_number=account_number,
            holder=name,
            secret=secret,
            kind=account_kind,
            mini_statement_size=self.account_config.mini_statement_size,
            clock=self.clock,
            **params,
        )
        self.accounts[account_number] = account
        logger.info(
            "Created %s %s for %s",
            account_kind.label,
            account_number,
            name,
            extra=ledger_fields(
                account_number=account_number, operation="OPEN", kind=account_kind
            ),
        )
        return account_number

    def login(self, account_number: str, secret: str) -> Account:
        """Return the account if ``secret`` matches its credential.

        Raises
        ------
        AccountNotFoundError
            If no account has this number.
        InvalidCredentialError
            If the secret does not verify.
        """
        account = self.accounts.get(account_number)
        if account is None:
            logger.info(
                "Login failed: account %s not found",
                account_number,
                extra=ledger_fields(
                    account_number=account_number, operation="LOGIN", outcome="not_found"
                ),
            )
            raise AccountNotFoundError(f"Account {account_number} not found")
        if not account.verify_credential(secret):
            logger.info(
                "Login failed: invalid credential for %s",
                account_number,
                extra=ledger_fields(
                    account_number=account_number, operation="LOGIN", outcome="rejected"
                ),
            )
            raise InvalidCredentialError(f"Invalid credential for account {account_number}")
        logger.info(
            "Login succeeded for %s",
            account_number,
            extra=ledger_fields(
                account_number=account_number, operation="LOGIN", outcome="ok"
            ),
        )
        return account

    def get_account(self, account_number: str) -> Account:
        """Get an account by number without authenticating."""
        try:
            return self.accounts[account_number]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_number} not found") from None

    def list_accounts(self) -> Iterator[AccountSummary]:
        """Iterate over a snapshot of every account taken at call time."""
        return iter([AccountSummary.from_account(account) for account in self.accounts.values()])

    def summary(self) -> dict[str, int]:
        """Return summary counts of accounts and transactions."""
        accounts = self.accounts.values()
        return {
            "accounts": len(self.accounts),
            "savings": sum(1 for a in accounts if a.kind == AccountKind.SAVINGS),
            "current": sum(1 for a in accounts if a.kind == AccountKind.CURRENT),
            "transactions": sum(len(a.transactions) for a in accounts),
        }

    def _resolve_kind(self, kind: AccountKind | str) -> AccountKind:
        account_kind = AccountKind.from_token(kind)
        if account_kind is not None:
            return account_kind
        if self.directory_config.strict_account_kind:
            raise InvalidAccountKindError(f"Unknown account kind: {kind!r}")
        logger.warning("Unknown account kind %r, opening a current account", kind)
        return AccountKind.CURRENT
