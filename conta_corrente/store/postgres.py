"""PostgreSQL account store (psycopg 3)."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg import errors as pg_errors
from psycopg.rows import dict_row

from conta_corrente.context import Context
from conta_corrente.exceptions import AccountNotFoundError, DuplicateIdentifierError, StoreError
from conta_corrente.models.account import Account

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id          BIGSERIAL PRIMARY KEY,
    name        TEXT        NOT NULL,
    cpf         VARCHAR(11) NOT NULL UNIQUE,
    secret_hash TEXT        NOT NULL,
    secret_salt TEXT        NOT NULL,
    balance     NUMERIC     NOT NULL DEFAULT 0,
    created_at  TIMESTAMPTZ NOT NULL DEFAULT now(),
    updated_at  TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""

_COLUMNS = "id, name, cpf, secret_hash, secret_salt, balance::text AS balance, created_at, updated_at"


class PostgresAccountStore:
    """Account store backed by a PostgreSQL ``accounts`` table.

    Each call opens its own connection. The context's remaining deadline,
    when present, becomes ``connect_timeout`` and a transaction-local
    ``statement_timeout``.

    Parameters
    ----------
    connection_string : str
        PostgreSQL connection string.
    """

    def __init__(self, connection_string: str) -> None:
        self.connection_string = connection_string

    @contextmanager
    def _cursor(self, ctx: Context) -> Iterator[psycopg.Cursor[dict[str, Any]]]:
        ctx.raise_if_done()
        remaining = ctx.remaining()

        kwargs: dict[str, Any] = {"row_factory": dict_row}
        if remaining is not None:
            kwargs["connect_timeout"] = max(1, math.ceil(remaining))

        try:
            with psycopg.connect(self.connection_string, **kwargs) as conn:
                with conn.cursor() as cur:
                    if remaining is not None:
                        timeout_ms = max(1, int(remaining * 1000))
                        cur.execute(f"SET LOCAL statement_timeout = {timeout_ms}")
                    yield cur
        except pg_errors.UniqueViolation as e:
            raise DuplicateIdentifierError(str(e)) from e
        except psycopg.Error as e:
            raise StoreError(f"{type(e).__name__}: {e}") from e

    def create_schema(self, ctx: Context | None = None) -> None:
        """Create the accounts table if it does not exist."""
        with self._cursor(ctx or Context.background()) as cur:
            cur.execute(SCHEMA_SQL)
        logger.info("Accounts schema ready")

    def list(self, ctx: Context) -> list[Account]:
        with self._cursor(ctx) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM accounts ORDER BY id")  # noqa: S608
            rows = cur.fetchall()
        return [_row_to_account(row) for row in rows]

    def get_by_id(self, ctx: Context, account_id: int) -> Account:
        with self._cursor(ctx) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM accounts WHERE id = %s", (account_id,))  # noqa: S608
            row = cur.fetchone()
        if row is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return _row_to_account(row)

    def get_balance_by_id(self, ctx: Context, account_id: int) -> Account:
        with self._cursor(ctx) as cur:
            cur.execute("SELECT id, balance::text AS balance FROM accounts WHERE id = %s", (account_id,))
            row = cur.fetchone()
        if row is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return _row_to_account(row)

    def get_by_cpf(self, ctx: Context, cpf: str) -> Account:
        with self._cursor(ctx) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM accounts WHERE cpf = %s", (cpf,))  # noqa: S608
            row = cur.fetchone()
        if row is None:
            raise AccountNotFoundError("Account with the given cpf not found")
        return _row_to_account(row)

    def cpf_exists(self, ctx: Context, cpf: str) -> bool:
        with self._cursor(ctx) as cur:
            cur.execute("SELECT EXISTS (SELECT 1 FROM accounts WHERE cpf = %s) AS found", (cpf,))
            row = cur.fetchone()
        return bool(row and row["found"])

    def create(self, ctx: Context, account: Account) -> None:
        """Insert an account; the balance column takes its default of zero."""
        with self._cursor(ctx) as cur:
            cur.execute(
                """
                INSERT INTO accounts (name, cpf, secret_hash, secret_salt)
                VALUES (%s, %s, %s, %s)
                RETURNING id, created_at, updated_at
                """,
                (account.name, account.cpf, account.secret_hash, account.secret_salt),
            )
            row = cur.fetchone()
        if row is None:
            raise StoreError("INSERT returned no row")
        account.balance = 0
        account.balance_db = "0"
        account.id = row["id"]
        account.created_at = row["created_at"]
        account.updated_at = row["updated_at"]

    def update_balance(self, ctx: Context, account: Account) -> None:
        account.sync_balance_db()
        with self._cursor(ctx) as cur:
            cur.execute(
                """
                UPDATE accounts SET balance = %s::numeric, updated_at = now()
                WHERE id = %s
                RETURNING updated_at
                """,
                (account.balance_db, account.id),
            )
            row = cur.fetchone()
        if row is None:
            raise AccountNotFoundError(f"Account {account.id} not found")
        account.updated_at = row["updated_at"]


def _row_to_account(row: dict[str, Any]) -> Account:
    """Build an Account from a row; the balance is converted from its text form."""
    account = Account(
        id=row["id"],
        name=row.get("name", ""),
        cpf=row.get("cpf", ""),
        secret_hash=row.get("secret_hash", ""),
        secret_salt=row.get("secret_salt", ""),
        balance_db=row["balance"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )
    account.convert_balance()
    return account
