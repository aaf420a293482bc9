"""Shared serialization utilities for sinks."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_ledger.models import Account


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def account_to_dict(account: Account) -> dict:
    """Serialize an account with its full chronological transaction log.

    The credential hash is never included.
    """
    result: dict[str, Any] = {
        "account_number": account.account_number,
        "holder": account.holder,
        "kind": account.kind.value,
        "balance": serialize_value(account.balance),
    }
    if account.interest_rate is not None:
        result["interest_rate"] = serialize_value(account.interest_rate)
    if account.overdraft_limit is not None:
        result["overdraft_limit"] = serialize_value(account.overdraft_limit)
    result["transactions"] = [dataclass_to_dict(record) for record in account.transactions]
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
