"""Account generator: seeds a directory with demo accounts and activity."""

from __future__ import annotations

import random
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.logging import get_logger
from bank_ledger.models import Account, AccountKind
from bank_ledger.store import AccountDirectory

logger = get_logger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class SeededAccount:
    """Login details for a generated account."""

    account_number: str
    holder: str
    secret: str
    kind: AccountKind


class AccountGenerator(BaseGenerator):
    """Generate demo accounts with a plausible transaction history.

    Kind mix: CURRENT ~60%, SAVINGS ~40%. Every generated operation is
    valid for the account it runs against, so seeding never trips a
    rejection.
    """

    KINDS = [AccountKind.CURRENT, AccountKind.SAVINGS]
    KIND_WEIGHTS = [0.60, 0.40]

    OPENING_DEPOSIT_RANGE = (100, 5000)
    MAX_OPERATION_AMOUNT = Decimal("2000")

    def generate(self, directory: AccountDirectory, transactions: int = 10) -> SeededAccount:
        """Open one account in ``directory`` and give it ``transactions`` operations.

        Parameters
        ----------
        directory : AccountDirectory
            Directory that mints the account number.
        transactions : int
            Number of balance-affecting operations to apply.

        Returns
        -------
        SeededAccount
            Credentials of the new account.
        """
        kind = random.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]
        holder = self.fake.name()
        secret = self.fake.password(length=12)

        account_number = directory.create_account(holder, secret, kind)
        self._generate_activity(directory.get_account(account_number), transactions)

        return SeededAccount(account_number=account_number, holder=holder, secret=secret, kind=kind)

    def populate(
        self,
        directory: AccountDirectory,
        count: int,
        transactions_per_account: int = 10,
    ) -> list[SeededAccount]:
        """Generate ``count`` accounts in ``directory``."""
        seeded = [self.generate(directory, transactions_per_account) for _ in range(count)]
        logger.info("Seeded %d accounts with %d operations each", count, transactions_per_account)
        return seeded

    def _generate_activity(self, account: Account, transactions: int) -> None:
        """Apply a random sequence of valid operations."""
        for i in range(transactions):
            if i == 0:
                low, high = self.OPENING_DEPOSIT_RANGE
                account.deposit(self._random_amount(Decimal(high), floor=low))
                continue

            operation = random.choices(
                ["deposit", "withdraw", "interest"], weights=[0.5, 0.4, 0.1], k=1
            )[0]

            if operation == "interest" and account.supports_interest:
                account.apply_interest()
                continue

            ceiling = account.balance
            if account.kind == AccountKind.CURRENT:
                ceiling += account.overdraft_limit

            if operation == "withdraw" and ceiling >= 1:
                account.withdraw(self._random_amount(min(ceiling, self.MAX_OPERATION_AMOUNT)))
            else:
                account.deposit(self._random_amount(self.MAX_OPERATION_AMOUNT))

    @staticmethod
    def _random_amount(ceiling: Decimal, floor: int = 1) -> Decimal:
        """Random amount in ``[floor, ceiling]`` rounded down to cents."""
        value = Decimal(str(random.uniform(floor, float(ceiling))))
        return min(value.quantize(CENTS, rounding=ROUND_DOWN), ceiling)
