"""Identifier validators."""

from conta_corrente.validators.cpf import (
    check_digits,
    format_cpf,
    is_known_invalid,
    normalize_cpf,
    validate_cpf,
)

__all__ = [
    "check_digits",
    "format_cpf",
    "is_known_invalid",
    "normalize_cpf",
    "validate_cpf",
]
