"""Configuration management for conta-corrente."""

import os
from dataclasses import dataclass, field

from conta_corrente.exceptions import ConfigurationError


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "contacorrente"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class SecurityConfig:
    """Secret hashing parameters (scrypt)."""

    scrypt_n: int = 16384
    scrypt_r: int = 8
    scrypt_p: int = 1
    salt_bytes: int = 16

    def __post_init__(self) -> None:
        if self.scrypt_n < 2 or self.scrypt_n & (self.scrypt_n - 1):
            raise ConfigurationError(f"scrypt_n must be a power of two > 1, got {self.scrypt_n}")
        if self.scrypt_r < 1 or self.scrypt_p < 1:
            raise ConfigurationError("scrypt_r and scrypt_p must be positive")
        if self.salt_bytes < 8:
            raise ConfigurationError(f"salt_bytes must be at least 8, got {self.salt_bytes}")


@dataclass
class AppConfig:
    """Main configuration for conta-corrente."""

    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_env_int("POSTGRES_PORT", 5432),
            database=os.getenv("POSTGRES_DB", "contacorrente"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        )

        security = SecurityConfig(
            scrypt_n=_env_int("SCRYPT_N", 16384),
            scrypt_r=_env_int("SCRYPT_R", 8),
            scrypt_p=_env_int("SCRYPT_P", 1),
            salt_bytes=_env_int("SALT_BYTES", 16),
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            postgres=postgres,
            security=security,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
