"""Synthetic data generators."""

from conta_corrente.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
