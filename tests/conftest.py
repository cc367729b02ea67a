"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from conta_corrente.config import SecurityConfig
from conta_corrente.context import Context
from conta_corrente.models.account import Account
from conta_corrente.security.password import ScryptPasswordEncoder
from conta_corrente.services.account import AccountService
from conta_corrente.store.memory import InMemoryAccountStore

VALID_CPF = "52998224725"
VALID_CPF_FORMATTED = "529.982.247-25"


class RecordingStore(InMemoryAccountStore):
    """In-memory store that counts calls per method and can be told to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: dict[str, int] = {}
        self.fail_on: dict[str, Exception] = {}
        self.received: list[Account] = []

    def _record(self, method: str) -> None:
        self.calls[method] = self.calls.get(method, 0) + 1
        if method in self.fail_on:
            raise self.fail_on[method]

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    def list(self, ctx: Context) -> list[Account]:
        self._record("list")
        return super().list(ctx)

    def get_by_id(self, ctx: Context, account_id: int) -> Account:
        self._record("get_by_id")
        return super().get_by_id(ctx, account_id)

    def get_balance_by_id(self, ctx: Context, account_id: int) -> Account:
        self._record("get_balance_by_id")
        return super().get_balance_by_id(ctx, account_id)

    def get_by_cpf(self, ctx: Context, cpf: str) -> Account:
        self._record("get_by_cpf")
        return super().get_by_cpf(ctx, cpf)

    def cpf_exists(self, ctx: Context, cpf: str) -> bool:
        self._record("cpf_exists")
        return super().cpf_exists(ctx, cpf)

    def create(self, ctx: Context, account: Account) -> None:
        self._record("create")
        self.received.append(account)
        super().create(ctx, account)

    def update_balance(self, ctx: Context, account: Account) -> None:
        self._record("update_balance")
        super().update_balance(ctx, account)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ctx() -> Context:
    return Context(request_id="req-test-001")


@pytest.fixture
def store() -> RecordingStore:
    """Create a fresh store for each test."""
    return RecordingStore()


@pytest.fixture
def password() -> ScryptPasswordEncoder:
    """Cheap scrypt parameters so tests stay fast."""
    return ScryptPasswordEncoder(SecurityConfig(scrypt_n=16, scrypt_r=1, scrypt_p=1))


@pytest.fixture
def service(store: RecordingStore, password: ScryptPasswordEncoder) -> AccountService:
    return AccountService(store, password)


@pytest.fixture
def account_request() -> Account:
    """Valid, unsaved creation request."""
    return Account(name="Maria Silva", cpf=VALID_CPF_FORMATTED, secret="s3nh@forte")


@pytest.fixture
def valid_cpf() -> str:
    """Checksum-valid, normalized CPF."""
    return VALID_CPF
