"""Custom exception hierarchy for conta-corrente."""

from enum import Enum
from http import HTTPStatus


class ContaCorrenteError(Exception):
    """Base exception for all conta-corrente errors."""


class ConfigurationError(ContaCorrenteError):
    """Raised when configuration is invalid or missing."""


class ContextDoneError(ContaCorrenteError):
    """Raised when a request context was cancelled or its deadline passed."""


class StoreError(ContaCorrenteError):
    """Raised when a persistence operation fails."""


class AccountNotFoundError(StoreError):
    """Raised when a referenced account does not exist."""


class DuplicateIdentifierError(StoreError):
    """Raised when the store rejects a CPF that is already registered."""


class ErrorKind(Enum):
    """Classification of domain errors."""

    CLIENT_INPUT = "client_input"
    INTERNAL = "internal"


class DomainError(ContaCorrenteError):
    """Outward-facing error with a stable message and a classification.

    Subclasses set ``message`` and ``kind``; the HTTP status follows from
    the kind. Messages never carry the underlying technical cause.
    """

    message: str = "Unexpected error"
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message

    @property
    def status(self) -> HTTPStatus:
        """HTTP status associated with the error kind."""
        if self.kind is ErrorKind.CLIENT_INPUT:
            return HTTPStatus.BAD_REQUEST
        return HTTPStatus.INTERNAL_SERVER_ERROR

    @property
    def is_client_error(self) -> bool:
        return self.kind is ErrorKind.CLIENT_INPUT


class ClientInputError(DomainError):
    """Domain error caused by invalid caller input."""

    kind = ErrorKind.CLIENT_INPUT


class InternalError(DomainError):
    """Domain error caused by a failing collaborator."""

    kind = ErrorKind.INTERNAL


# Client input

class IdentifierRequiredError(ClientInputError):
    message = "CPF is required"


class IdentifierSizeInvalidError(ClientInputError):
    message = "CPF must have 11 characters"


class IdentifierInvalidError(ClientInputError):
    message = "CPF is invalid"


class IdentifierAlreadyExistsError(ClientInputError):
    message = "CPF is already registered"


class NameRequiredError(ClientInputError):
    message = "Name is required"


class SecretRequiredError(ClientInputError):
    message = "Secret is required"


class InvalidIDError(ClientInputError):
    message = "Account id is invalid"


class InvalidBalanceError(ClientInputError):
    message = "Balance is invalid"


# Internal

class AccountListFailedError(InternalError):
    message = "Could not list accounts"


class AccountFetchFailedError(InternalError):
    message = "Could not fetch account"


class AccountBalanceFetchFailedError(InternalError):
    message = "Could not fetch account balance"


class AccountCreateFailedError(InternalError):
    message = "Could not create account"


class AccountUpdateBalanceFailedError(InternalError):
    message = "Could not update account balance"
