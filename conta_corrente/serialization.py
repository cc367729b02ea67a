"""Outward serialization of accounts."""

from dataclasses import fields
from datetime import date, datetime
from typing import Any

from conta_corrente.models.account import Account, balance_to_text

# Never leave the process: credential material, raw persisted balance and
# bookkeeping timestamps.
PRIVATE_FIELDS = frozenset({"secret", "secret_hash", "secret_salt", "balance_db", "updated_at"})

# Dropped from the output when zero/empty.
OMIT_EMPTY_FIELDS = frozenset({"id", "balance", "created_at"})


def account_to_dict(account: Account) -> dict[str, Any]:
    """Convert an account to a JSON-ready dict.

    The balance is rendered as a string so arbitrary-precision values
    survive JSON consumers that parse numbers as floats.

    Parameters
    ----------
    account : Account
        Account to serialize.

    Returns
    -------
    dict[str, Any]
        Public view of the account.
    """
    result: dict[str, Any] = {}
    for f in fields(account):
        if f.name in PRIVATE_FIELDS:
            continue
        value = getattr(account, f.name)
        if f.name in OMIT_EMPTY_FIELDS and not value:
            continue
        result[f.name] = serialize_value(value)
    if "balance" in result:
        result["balance"] = balance_to_text(account.balance)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
