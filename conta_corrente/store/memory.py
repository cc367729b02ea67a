"""In-memory account store."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from conta_corrente.context import Context
from conta_corrente.exceptions import AccountNotFoundError, DuplicateIdentifierError
from conta_corrente.models.account import Account


@dataclass
class InMemoryAccountStore:
    """Dict-backed store with a unique CPF index.

    Records are stored as copies without the plaintext secret, and every
    read returns a fresh copy so callers cannot mutate stored state.
    """

    accounts: dict[int, Account] = field(default_factory=dict)

    # Relationship indexes
    _cpf_index: dict[str, int] = field(default_factory=dict)
    _next_id: int = 1

    def list(self, ctx: Context) -> list[Account]:
        """Get all accounts ordered by id."""
        ctx.raise_if_done()
        return [self._load(self.accounts[aid]) for aid in sorted(self.accounts)]

    def get_by_id(self, ctx: Context, account_id: int) -> Account:
        """Get an account by id."""
        ctx.raise_if_done()
        return self._load(self._get(account_id))

    def get_balance_by_id(self, ctx: Context, account_id: int) -> Account:
        """Get the id and balance of an account."""
        ctx.raise_if_done()
        stored = self._get(account_id)
        account = Account(id=stored.id, balance_db=stored.balance_db)
        account.convert_balance()
        return account

    def get_by_cpf(self, ctx: Context, cpf: str) -> Account:
        """Get an account by its stored CPF (exact match)."""
        ctx.raise_if_done()
        if cpf not in self._cpf_index:
            raise AccountNotFoundError("Account with the given cpf not found")
        return self._load(self.accounts[self._cpf_index[cpf]])

    def cpf_exists(self, ctx: Context, cpf: str) -> bool:
        ctx.raise_if_done()
        return cpf in self._cpf_index

    def create(self, ctx: Context, account: Account) -> None:
        """Add an account, assigning id and timestamps in place."""
        ctx.raise_if_done()
        if account.cpf in self._cpf_index:
            raise DuplicateIdentifierError("Account with the given cpf already exists")

        account.balance = 0
        account.balance_db = "0"
        now = datetime.now(timezone.utc)
        account.id = self._next_id
        account.created_at = now
        account.updated_at = now
        self._next_id += 1

        self.accounts[account.id] = replace(account, secret="")
        self._cpf_index[account.cpf] = account.id

    def update_balance(self, ctx: Context, account: Account) -> None:
        """Store the new balance of an existing account."""
        ctx.raise_if_done()
        stored = self._get(account.id)

        account.sync_balance_db()
        account.updated_at = datetime.now(timezone.utc)
        stored.balance_db = account.balance_db
        stored.updated_at = account.updated_at

    def _get(self, account_id: int) -> Account:
        if account_id not in self.accounts:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return self.accounts[account_id]

    @staticmethod
    def _load(stored: Account) -> Account:
        account = replace(stored)
        account.convert_balance()
        return account

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {"accounts": len(self.accounts)}
