"""Domain models."""

from conta_corrente.models.account import Account

__all__ = ["Account"]
