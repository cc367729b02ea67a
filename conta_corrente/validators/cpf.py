"""CPF (Brazilian taxpayer identifier) normalization and checksum validation.

A CPF has nine base digits followed by two check digits. Each check digit
is derived from a weighted sum of the preceding digits modulo 11::

    r = sum(weight[i] * digit[i]) % 11
    d = 0 if r < 2 else 11 - r

The first digit uses weights 10..2 over the nine base digits, the second
uses weights 11..2 over the base digits plus the first check digit.
"""

from __future__ import annotations

import re

from conta_corrente.exceptions import IdentifierInvalidError, IdentifierSizeInvalidError

CPF_SIZE = 11

FIRST_DIGIT_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_DIGIT_WEIGHTS = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)

# Repeated-digit sequences pass the checksum but are never issued.
KNOWN_INVALID_CPFS = frozenset(str(d) * CPF_SIZE for d in range(10))

_SPECIAL_CHARACTERS = re.compile(r"[^a-zA-Z0-9]+")


def normalize_cpf(cpf: str) -> str:
    """Strip every character that is not an ASCII letter or digit.

    Letters survive on purpose: they are rejected later by the checksum,
    not by a separate character check.

    Examples
    --------
    >>> normalize_cpf("123.456.789-09")
    '12345678909'
    """
    return _SPECIAL_CHARACTERS.sub("", cpf)


def is_known_invalid(cpf: str) -> bool:
    """Return True for the blocklisted repeated-digit sequences."""
    return cpf in KNOWN_INVALID_CPFS


def _weighted_sum(value: str, weights: tuple[int, ...]) -> int:
    """Sum ``weight * digit`` position by position; non-digits count as 0."""
    if len(value) != len(weights):
        return 0

    total = 0
    for char, weight in zip(value, weights):
        if "0" <= char <= "9":
            total += weight * int(char)
    return total


def _check_digit(value: str, weights: tuple[int, ...]) -> int:
    remainder = _weighted_sum(value, weights) % CPF_SIZE
    return 0 if remainder < 2 else CPF_SIZE - remainder


def check_digits(prefix: str) -> str:
    """Compute the two check digits for a nine-character prefix.

    Parameters
    ----------
    prefix : str
        The first nine characters of a CPF.

    Returns
    -------
    str
        Two-character string with the first and second check digits.
    """
    d1 = _check_digit(prefix, FIRST_DIGIT_WEIGHTS)
    d2 = _check_digit(f"{prefix}{d1}", SECOND_DIGIT_WEIGHTS)
    return f"{d1}{d2}"


def checksum_is_valid(cpf: str) -> bool:
    """Rebuild the CPF from its prefix and compare it with the input."""
    prefix = cpf[:9]
    return f"{prefix}{check_digits(prefix)}" == cpf


def validate_cpf(cpf: str) -> str:
    """Normalize and validate a CPF.

    Parameters
    ----------
    cpf : str
        CPF in any punctuation format (e.g. ``"123.456.789-09"``).

    Returns
    -------
    str
        The normalized 11-character CPF.

    Raises
    ------
    IdentifierSizeInvalidError
        If the normalized value does not have exactly 11 characters.
    IdentifierInvalidError
        If the value is a blocklisted sequence or fails the checksum.
    """
    normalized = normalize_cpf(cpf)

    if len(normalized) != CPF_SIZE:
        raise IdentifierSizeInvalidError()
    if is_known_invalid(normalized):
        raise IdentifierInvalidError()
    if not checksum_is_valid(normalized):
        raise IdentifierInvalidError()

    return normalized


def format_cpf(cpf: str) -> str:
    """Format a normalized CPF as ``XXX.XXX.XXX-XX``.

    Values that are not 11 characters long are returned unchanged.
    """
    if len(cpf) != CPF_SIZE:
        return cpf
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
