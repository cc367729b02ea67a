#!/usr/bin/env python3
"""Seed the accounts table with generated accounts.

Accounts go through AccountService, so every seeded record passes the
same CPF and secret checks as a real creation request.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from conta_corrente.config import AppConfig
from conta_corrente.context import Context
from conta_corrente.exceptions import DomainError
from conta_corrente.generators import AccountGenerator
from conta_corrente.logging import setup_logging
from conta_corrente.security import ScryptPasswordEncoder
from conta_corrente.services import AccountService
from conta_corrente.store import InMemoryAccountStore, PostgresAccountStore

logger = logging.getLogger(__name__)


def seed_accounts(
    service: AccountService,
    count: int,
    seed: int,
    timeout: float | None = None,
) -> tuple[int, int]:
    """Create ``count`` generated accounts.

    Returns
    -------
    tuple[int, int]
        Number of accounts created and number rejected.
    """
    generator = AccountGenerator(seed=seed)
    created = rejected = 0

    for account in generator.generate_batch(count):
        ctx = Context.with_timeout(timeout) if timeout else Context.background()
        try:
            service.create(ctx, account)
            created += 1
        except DomainError as e:
            logger.warning("Rejected generated account: %s", e.message)
            rejected += 1

    return created, rejected


def main() -> None:
    """Main entry point."""
    config = AppConfig.from_env()

    parser = argparse.ArgumentParser(description="Seed accounts through the account service")
    parser.add_argument(
        "--accounts",
        type=int,
        default=100,
        help="Number of accounts to generate (default: 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--postgres-url",
        type=str,
        default=config.postgres.connection_string,
        help="PostgreSQL connection string (default: from POSTGRES_* env vars)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-account deadline in seconds",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Use an in-memory store instead of PostgreSQL",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    if args.dry_run:
        store = InMemoryAccountStore()
    else:
        store = PostgresAccountStore(args.postgres_url)
        store.create_schema()

    service = AccountService(store, ScryptPasswordEncoder(config.security))

    logger.info("=" * 60)
    logger.info("Seeding %d accounts (seed=%d, store=%s)", args.accounts, args.seed,
                "memory" if args.dry_run else "postgres")
    logger.info("=" * 60)

    start = time.perf_counter()
    created, rejected = seed_accounts(service, args.accounts, args.seed, args.timeout)
    elapsed = time.perf_counter() - start

    logger.info("Created: %d", created)
    logger.info("Rejected: %d", rejected)
    logger.info("Elapsed: %.1fs", elapsed)

    if rejected:
        sys.exit(1)


if __name__ == "__main__":
    main()
