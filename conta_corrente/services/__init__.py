"""Application services."""

from conta_corrente.services.account import AccountService

__all__ = ["AccountService"]
