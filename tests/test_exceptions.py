"""Tests for custom exception hierarchy."""

from http import HTTPStatus

from conta_corrente.exceptions import (
    AccountBalanceFetchFailedError,
    AccountCreateFailedError,
    AccountFetchFailedError,
    AccountListFailedError,
    AccountNotFoundError,
    AccountUpdateBalanceFailedError,
    ConfigurationError,
    ContaCorrenteError,
    ContextDoneError,
    DomainError,
    DuplicateIdentifierError,
    ErrorKind,
    IdentifierAlreadyExistsError,
    IdentifierInvalidError,
    IdentifierRequiredError,
    IdentifierSizeInvalidError,
    InvalidBalanceError,
    InvalidIDError,
    NameRequiredError,
    SecretRequiredError,
    StoreError,
)

CLIENT_INPUT_ERRORS = [
    IdentifierRequiredError,
    IdentifierSizeInvalidError,
    IdentifierInvalidError,
    IdentifierAlreadyExistsError,
    NameRequiredError,
    SecretRequiredError,
    InvalidIDError,
    InvalidBalanceError,
]

INTERNAL_ERRORS = [
    AccountListFailedError,
    AccountFetchFailedError,
    AccountBalanceFetchFailedError,
    AccountCreateFailedError,
    AccountUpdateBalanceFailedError,
]


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(ContaCorrenteError("test"), Exception)

    def test_store_errors(self) -> None:
        assert isinstance(AccountNotFoundError("test"), StoreError)
        assert isinstance(DuplicateIdentifierError("test"), StoreError)
        assert isinstance(StoreError("test"), ContaCorrenteError)

    def test_store_errors_are_not_domain_errors(self) -> None:
        assert not isinstance(StoreError("test"), DomainError)
        assert not isinstance(ContextDoneError("test"), DomainError)

    def test_configuration_error(self) -> None:
        assert isinstance(ConfigurationError("test"), ContaCorrenteError)

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account 7 not found")
        assert str(err) == "Account 7 not found"


class TestDomainErrors:
    """Closed set of outward-facing errors."""

    def test_client_input_errors(self) -> None:
        for cls in CLIENT_INPUT_ERRORS:
            err = cls()
            assert isinstance(err, DomainError)
            assert err.kind is ErrorKind.CLIENT_INPUT
            assert err.status is HTTPStatus.BAD_REQUEST
            assert err.is_client_error

    def test_internal_errors(self) -> None:
        for cls in INTERNAL_ERRORS:
            err = cls()
            assert err.kind is ErrorKind.INTERNAL
            assert err.status is HTTPStatus.INTERNAL_SERVER_ERROR
            assert not err.is_client_error

    def test_stable_distinct_messages(self) -> None:
        messages = [cls().message for cls in CLIENT_INPUT_ERRORS + INTERNAL_ERRORS]
        assert len(set(messages)) == len(messages)
        for cls in CLIENT_INPUT_ERRORS + INTERNAL_ERRORS:
            assert str(cls()) == cls.message

    def test_message_override(self) -> None:
        err = InvalidIDError("custom")
        assert err.message == "custom"
        assert str(err) == "custom"
        assert InvalidIDError.message == "Account id is invalid"
