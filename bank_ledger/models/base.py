"""Value helpers shared across ledger models."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from bank_ledger.exceptions import InvalidAmountError

# Source of "now" for transaction timestamps; swap in a fixed clock for tests.
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current local time."""
    return datetime.now()


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Normalise a numeric input to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidAmountError(f"Amount must be a number, got {value!r}") from e
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return amount
