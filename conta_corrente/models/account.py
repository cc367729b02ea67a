"""Account model."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from conta_corrente.exceptions import (
    IdentifierRequiredError,
    InvalidBalanceError,
    NameRequiredError,
    SecretRequiredError,
)
from conta_corrente.validators.cpf import normalize_cpf, validate_cpf

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class Account:
    """Bank account entity.

    ``balance_db`` is the persisted text form of the balance (smallest
    currency unit); ``balance`` is the in-memory integer. They are not kept
    in sync automatically: call :meth:`convert_balance` after loading and
    :meth:`sync_balance_db` before writing.

    ``secret`` is the plaintext credential, only set on creation requests.
    Stores persist ``secret_hash``/``secret_salt`` instead.
    """

    name: str = ""
    cpf: str = ""
    secret: str = field(default="", repr=False)
    id: int = 0
    secret_hash: str = field(default="", repr=False)
    secret_salt: str = field(default="", repr=False)
    balance_db: str = "0"
    balance: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        """Check creation invariants; the first failing check wins.

        Raises
        ------
        NameRequiredError, SecretRequiredError, IdentifierRequiredError
            If a required field is empty.
        IdentifierSizeInvalidError, IdentifierInvalidError
            If the CPF is malformed.
        """
        if not self.name:
            raise NameRequiredError()
        if not self.secret:
            raise SecretRequiredError()
        if not self.cpf:
            raise IdentifierRequiredError()

        self.cpf_is_valid()

    def cpf_is_valid(self) -> None:
        """Normalize ``cpf`` in place, then validate it."""
        self.cpf = normalize_cpf(self.cpf)
        validate_cpf(self.cpf)

    def convert_balance(self) -> None:
        """Parse ``balance_db`` into ``balance``.

        Raises
        ------
        InvalidBalanceError
            If ``balance_db`` is not a base-10 integer literal.
        """
        if not isinstance(self.balance_db, str) or not _INTEGER.fullmatch(self.balance_db):
            raise InvalidBalanceError()
        self.balance = balance_from_text(self.balance_db)

    def sync_balance_db(self) -> None:
        """Render ``balance`` into ``balance_db``."""
        self.balance_db = balance_to_text(self.balance)


def balance_from_text(text: str) -> int:
    """Parse a base-10 integer literal of any length.

    Goes through ``Decimal`` so the interpreter's int/str digit limit does
    not apply.
    """
    return int(Decimal(text))


def balance_to_text(value: int) -> str:
    """Render an integer of any size in base 10."""
    return str(Decimal(value))
