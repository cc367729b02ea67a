"""Account lifecycle operations.

Every operation checks its own preconditions before touching the store.
Validation failures are raised as-is. Any store failure is logged with full
detail and replaced by a generic domain error, so storage specifics never
reach the caller.
"""

from __future__ import annotations

import logging

from conta_corrente.context import Context
from conta_corrente.exceptions import (
    AccountBalanceFetchFailedError,
    AccountCreateFailedError,
    AccountFetchFailedError,
    AccountListFailedError,
    AccountUpdateBalanceFailedError,
    DuplicateIdentifierError,
    IdentifierAlreadyExistsError,
    IdentifierRequiredError,
    InvalidBalanceError,
    InvalidIDError,
)
from conta_corrente.logging import log_error
from conta_corrente.models.account import Account
from conta_corrente.security.password import PasswordEncoder
from conta_corrente.store.base import AccountStore

logger = logging.getLogger(__name__)


class AccountService:
    """Validates account requests and delegates persistence.

    Parameters
    ----------
    store : AccountStore
        Persistence collaborator.
    password : PasswordEncoder
        Derives ``secret_salt``/``secret_hash`` from the plaintext secret.
    log : logging.Logger | None
        Sink for store failures (default: this module's logger).
    """

    def __init__(
        self,
        store: AccountStore,
        password: PasswordEncoder,
        log: logging.Logger | None = None,
    ) -> None:
        self._store = store
        self._password = password
        self._log = log or logger

    def list(self, ctx: Context) -> list[Account]:
        """Return all accounts."""
        try:
            return self._store.list(ctx)
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountListFailedError() from None

    def get_by_id(self, ctx: Context, account_id: int) -> Account:
        """Return the account with ``account_id``.

        Raises
        ------
        InvalidIDError
            If ``account_id`` is not positive.
        AccountFetchFailedError
            If the store fails, including when the account does not exist.
        """
        _check_id(account_id)

        try:
            return self._store.get_by_id(ctx, account_id)
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountFetchFailedError() from None

    def get_balance_by_id(self, ctx: Context, account_id: int) -> Account:
        """Return an account carrying only its id and balance."""
        _check_id(account_id)

        try:
            return self._store.get_balance_by_id(ctx, account_id)
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountBalanceFetchFailedError() from None

    def get_by_cpf(self, ctx: Context, cpf: str) -> Account:
        """Return the account registered under ``cpf``.

        The CPF is passed to the store as given; it is neither normalized
        nor validated here.
        """
        if not cpf:
            raise IdentifierRequiredError()

        try:
            return self._store.get_by_cpf(ctx, cpf)
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountFetchFailedError() from None

    def create(self, ctx: Context, account: Account) -> None:
        """Validate and persist a new account.

        On success the store has set ``account.id``, ``created_at`` and
        ``updated_at``. ``account.secret`` is left as given.

        Raises
        ------
        NameRequiredError, SecretRequiredError, IdentifierRequiredError
            If a required field is empty.
        IdentifierSizeInvalidError, IdentifierInvalidError
            If the CPF is malformed.
        IdentifierAlreadyExistsError
            If the CPF is already registered.
        AccountCreateFailedError
            If the store fails.
        """
        account.validate()

        try:
            exists = self._store.cpf_exists(ctx, account.cpf)
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountCreateFailedError() from None

        if exists:
            raise IdentifierAlreadyExistsError()

        account.secret_salt = self._password.salt()
        account.secret_hash = self._password.encode(account.secret, account.secret_salt)

        try:
            self._store.create(ctx, account)
        except DuplicateIdentifierError:
            # Lost the race against a concurrent create for the same CPF.
            raise IdentifierAlreadyExistsError() from None
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountCreateFailedError() from None

        self._log.info("Created account %d", account.id)

    def update_balance(self, ctx: Context, account: Account) -> None:
        """Persist ``account.balance``.

        Raises
        ------
        InvalidIDError
            If ``account.id`` is not positive.
        InvalidBalanceError
            If the balance is not an integer or is negative.
        AccountUpdateBalanceFailedError
            If the store fails.
        """
        _check_id(account.id)

        balance = account.balance
        if isinstance(balance, bool) or not isinstance(balance, int) or balance < 0:
            raise InvalidBalanceError()

        try:
            self._store.update_balance(ctx, account)
        except Exception as e:
            log_error(self._log, ctx, e)
            raise AccountUpdateBalanceFailedError() from None


def _check_id(account_id: int) -> None:
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
        raise InvalidIDError()
