"""Persistence contract consumed by the account service."""

from __future__ import annotations

from typing import Protocol

from conta_corrente.context import Context
from conta_corrente.models.account import Account


class AccountStore(Protocol):
    """Durable account storage.

    Implementations raise :class:`~conta_corrente.exceptions.StoreError`
    subclasses on failure, including
    :class:`~conta_corrente.exceptions.AccountNotFoundError` for missing
    rows and :class:`~conta_corrente.exceptions.DuplicateIdentifierError`
    when a CPF is already registered.
    """

    def list(self, ctx: Context) -> list[Account]:
        ...

    def get_by_id(self, ctx: Context, account_id: int) -> Account:
        ...

    def get_balance_by_id(self, ctx: Context, account_id: int) -> Account:
        """Return an account with only ``id`` and balance fields populated."""
        ...

    def get_by_cpf(self, ctx: Context, cpf: str) -> Account:
        ...

    def cpf_exists(self, ctx: Context, cpf: str) -> bool:
        ...

    def create(self, ctx: Context, account: Account) -> None:
        """Persist ``account`` with a zero opening balance.

        Sets ``id``, ``created_at`` and ``updated_at`` in place and resets
        ``balance``/``balance_db`` to zero.
        """
        ...

    def update_balance(self, ctx: Context, account: Account) -> None:
        """Persist ``account.balance`` and refresh ``balance_db``/``updated_at`` in place."""
        ...
