"""Secret salting and hashing."""

from __future__ import annotations

import hashlib
import secrets
from typing import Protocol

from conta_corrente.config import SecurityConfig


class PasswordEncoder(Protocol):
    """Derives stored credential material from a plaintext secret."""

    def salt(self) -> str:
        """Return a fresh random salt."""
        ...

    def encode(self, secret: str, salt: str) -> str:
        """Return the hash of ``secret`` with ``salt``; deterministic."""
        ...


class ScryptPasswordEncoder:
    """scrypt-based encoder with hex-encoded salt and hash."""

    def __init__(self, config: SecurityConfig | None = None) -> None:
        self.config = config or SecurityConfig()

    def salt(self) -> str:
        return secrets.token_hex(self.config.salt_bytes)

    def encode(self, secret: str, salt: str) -> str:
        return hashlib.scrypt(
            secret.encode(),
            salt=salt.encode(),
            n=self.config.scrypt_n,
            r=self.config.scrypt_r,
            p=self.config.scrypt_p,
        ).hex()

    def verify(self, secret: str, salt: str, expected_hash: str) -> bool:
        """Constant-time comparison of ``encode(secret, salt)`` with a stored hash."""
        return secrets.compare_digest(self.encode(secret, salt), expected_hash)
