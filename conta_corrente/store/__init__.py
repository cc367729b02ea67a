"""Account persistence."""

from conta_corrente.store.base import AccountStore
from conta_corrente.store.memory import InMemoryAccountStore
from conta_corrente.store.postgres import PostgresAccountStore

__all__ = ["AccountStore", "InMemoryAccountStore", "PostgresAccountStore"]
