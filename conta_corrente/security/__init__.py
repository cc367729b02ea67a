"""Credential derivation."""

from conta_corrente.security.password import PasswordEncoder, ScryptPasswordEncoder

__all__ = ["PasswordEncoder", "ScryptPasswordEncoder"]
