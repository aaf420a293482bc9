"""Account model and its balance-affecting operations."""

from dataclasses import dataclass, field
from decimal import Decimal

from bank_ledger.credentials import hash_secret, verify_secret
from bank_ledger.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    OverdraftExceededError,
    UnsupportedOperationError,
)
from bank_ledger.logging import get_logger, ledger_fields
from bank_ledger.models.base import Clock, system_clock, to_amount
from bank_ledger.models.enums import AccountKind, TransactionKind
from bank_ledger.models.transaction import TransactionRecord

logger = get_logger(__name__)

DEFAULT_INTEREST_RATE = Decimal("3.5")
DEFAULT_OVERDRAFT_LIMIT = Decimal("1000")
DEFAULT_MINI_STATEMENT_SIZE = 5


@dataclass
class Account:
    """Bank account with an append-only transaction log.

    Account kinds:
    - SAVINGS: ``interest_rate`` percent applied on demand; no overdraft
    - CURRENT: may go negative down to ``-overdraft_limit``

    The balance is only ever changed through :meth:`deposit`,
    :meth:`withdraw` and :meth:`apply_interest`, each of which appends
    exactly one :class:`TransactionRecord` on success and leaves the
    account untouched on failure.
    """

    account_number: str
    holder: str
    kind: AccountKind
    credential_hash: str = field(repr=False)
    interest_rate: Decimal | None = None  # SAVINGS only, percent
    overdraft_limit: Decimal | None = None  # CURRENT only
    mini_statement_size: int = field(default=DEFAULT_MINI_STATEMENT_SIZE, repr=False)
    clock: Clock = field(default=system_clock, repr=False, compare=False)
    _balance: Decimal = field(default=Decimal("0"), init=False)
    _transactions: list[TransactionRecord] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.kind == AccountKind.SAVINGS:
            if self.overdraft_limit is not None:
                raise ValueError("Savings accounts do not support an overdraft limit")
            if self.interest_rate is None:
                self.interest_rate = DEFAULT_INTEREST_RATE
            self.interest_rate = self._non_negative(self.interest_rate, "Interest rate")
        else:
            if self.interest_rate is not None:
                raise ValueError("Current accounts do not earn interest")
            if self.overdraft_limit is None:
                self.overdraft_limit = DEFAULT_OVERDRAFT_LIMIT
            self.overdraft_limit = self._non_negative(self.overdraft_limit, "Overdraft limit")

    @staticmethod
    def _non_negative(value: Decimal | int | float | str, name: str) -> Decimal:
        # A negative rate or limit would let the balance cross its floor
        amount = to_amount(value)
        if amount < 0:
            raise ValueError(f"{name} must not be negative, got {amount}")
        return amount

    @classmethod
    def open(
        cls,
        account_number: str,
        holder: str,
        secret: str,
        kind: AccountKind,
        interest_rate: Decimal | int | float | str | None = None,
        overdraft_limit: Decimal | int | float | str | None = None,
        mini_statement_size: int = DEFAULT_MINI_STATEMENT_SIZE,
        clock: Clock = system_clock,
    ) -> "Account":
        """Create a zero-balance account, hashing ``secret`` for storage."""
        return cls(
            account_number=account_number,
            holder=holder,
            kind=kind,
            credential_hash=hash_secret(secret),
            interest_rate=interest_rate,
            overdraft_limit=overdraft_limit,
            mini_statement_size=mini_statement_size,
            clock=clock,
        )

    @property
    def balance(self) -> Decimal:
        """Current balance."""
        return self._balance

    @property
    def transactions(self) -> tuple[TransactionRecord, ...]:
        """All records in chronological order."""
        return tuple(self._transactions)

    @property
    def supports_interest(self) -> bool:
        """Whether :meth:`apply_interest` is available for this kind."""
        return self.kind == AccountKind.SAVINGS

    def verify_credential(self, secret: str) -> bool:
        """Return True iff ``secret`` hashes to the stored credential."""
        return verify_secret(secret, self.credential_hash)

    def deposit(self, amount: Decimal | int | float | str) -> TransactionRecord:
        """Add a positive amount to the balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not positive.
        """
        value = self._positive_amount(amount, "Deposit")
        return self._post(TransactionKind.DEPOSIT, value, self._balance + value)

    def withdraw(self, amount: Decimal | int | float | str) -> TransactionRecord:
        """Take a positive amount from the balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not positive.
        InsufficientFundsError
            If a SAVINGS withdrawal exceeds the balance.
        OverdraftExceededError
            If a CURRENT withdrawal exceeds balance plus overdraft limit.
        """
        value = self._positive_amount(amount, "Withdrawal")

        if self.kind == AccountKind.CURRENT:
            if value > self._balance + self.overdraft_limit:
                logger.info(
                    "Withdrawal rejected on %s: overdraft limit exceeded",
                    self.account_number,
                    extra=self._fields(TransactionKind.WITHDRAW, value),
                )
                raise OverdraftExceededError(
                    f"Withdrawal of {value} exceeds balance {self._balance} "
                    f"plus overdraft limit {self.overdraft_limit}"
                )
        elif value > self._balance:
            logger.info(
                "Withdrawal rejected on %s: insufficient funds",
                self.account_number,
                extra=self._fields(TransactionKind.WITHDRAW, value),
            )
            raise InsufficientFundsError(
                f"Withdrawal of {value} exceeds balance {self._balance}"
            )

        return self._post(TransactionKind.WITHDRAW, value, self._balance - value)

    def apply_interest(self) -> TransactionRecord:
        """Credit ``balance * interest_rate / 100`` to a SAVINGS account.

        Callers should check :attr:`supports_interest` first.
        """
        if not self.supports_interest:
            raise UnsupportedOperationError(
                f"Account {self.account_number} is not a savings account"
            )
        interest = self._balance * self.interest_rate / 100
        return self._post(TransactionKind.INTEREST, interest, self._balance + interest)

    def mini_statement(self) -> list[TransactionRecord]:
        """Return the most recent records (up to ``mini_statement_size``), newest first."""
        return self._transactions[::-1][: self.mini_statement_size]

    def full_history(self) -> list[TransactionRecord]:
        """Return every record, newest first."""
        return self._transactions[::-1]

    def _positive_amount(self, amount: Decimal | int | float | str, operation: str) -> Decimal:
        value = to_amount(amount)
        if value <= 0:
            logger.info(
                "%s rejected on %s: non-positive amount",
                operation,
                self.account_number,
                extra=ledger_fields(
                    account_number=self.account_number, operation=operation, amount=value
                ),
            )
            raise InvalidAmountError(f"{operation} amount must be positive, got {value}")
        return value

    def _post(self, kind: TransactionKind, amount: Decimal, balance_after: Decimal) -> TransactionRecord:
        record = TransactionRecord.create(kind, amount, balance_after, clock=self.clock)
        self._balance = balance_after
        self._transactions.append(record)
        logger.debug(
            "%s %s on %s, balance now %s",
            kind.value,
            amount,
            self.account_number,
            balance_after,
            extra=self._fields(kind, amount, balance_after=balance_after),
        )
        return record

    def _fields(self, kind: TransactionKind, amount: Decimal, **more: Decimal) -> dict:
        return ledger_fields(
            account_number=self.account_number, operation=kind, amount=amount, **more
        )


@dataclass(frozen=True)
class AccountSummary:
    """Point-in-time listing row for an account."""

    account_number: str
    holder: str
    kind: AccountKind
    balance: Decimal

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            account_number=account.account_number,
            holder=account.holder,
            kind=account.kind,
            balance=account.balance,
        )
