"""Synthetic account creation requests."""

from __future__ import annotations

import random
from typing import Iterator

from faker import Faker

from conta_corrente.models.account import Account
from conta_corrente.validators.cpf import check_digits, format_cpf, is_known_invalid


class AccountGenerator:
    """Generate account creation requests with valid CPFs.

    Used to seed development databases and as a fixture source in tests.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``pt_BR``).
    """

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def generate(self, formatted: bool = True) -> Account:
        """Generate a single creation request.

        Parameters
        ----------
        formatted : bool
            Emit the CPF as ``XXX.XXX.XXX-XX`` instead of bare digits.

        Returns
        -------
        Account
            Unsaved account with ``name``, ``cpf`` and ``secret`` set.
        """
        cpf = self.generate_cpf()
        return Account(
            name=self.fake.name(),
            cpf=format_cpf(cpf) if formatted else cpf,
            secret=self.fake.password(length=12),
        )

    def generate_batch(self, count: int, formatted: bool = True) -> Iterator[Account]:
        """Generate ``count`` creation requests with distinct CPFs."""
        seen: set[str] = set()
        while len(seen) < count:
            account = self.generate(formatted=formatted)
            key = account.cpf
            if key in seen:
                continue
            seen.add(key)
            yield account

    def generate_cpf(self) -> str:
        """Generate a valid, unformatted CPF."""
        while True:
            prefix = "".join(str(random.randint(0, 9)) for _ in range(9))
            cpf = f"{prefix}{check_digits(prefix)}"
            if not is_known_invalid(cpf):
                return cpf

    @staticmethod
    def corrupt_cpf(cpf: str) -> str:
        """Return ``cpf`` with its last check digit changed."""
        last = int(cpf[-1])
        return f"{cpf[:-1]}{(last + 1) % 10}"
