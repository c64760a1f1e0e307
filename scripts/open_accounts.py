#!/usr/bin/env python3
"""Open a batch of demo accounts.

Generates unique account numbers against an in-memory repository, builds
checking and savings accounts through the factory, and logs how each
composition strategy reports a few deliberately invalid requests.
"""

import argparse
import random
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from faker import Faker

from account_domain.config import AccountDomainConfig
from account_domain.factory import AccountFactory
from account_domain.generators.account_number import AccountNumberGenerator
from account_domain.logging import get_logger, setup_logging
from account_domain.models.account import SavingsAccount
from account_domain.models.base import Balance, Money
from account_domain.models.enums import Currency, Strategy
from account_domain.store.accounts import InMemoryAccountRepository
from account_domain.validation.result import Invalid

logger = get_logger("open_accounts")


def open_accounts(
    factory: AccountFactory,
    generator: AccountNumberGenerator,
    repository: InMemoryAccountRepository,
    count: int,
    fake: Faker,
) -> None:
    """Open ``count`` valid accounts, roughly a third of them savings."""
    for _ in range(count):
        no = generator.generate()
        opened = date.today() - timedelta(days=random.randint(0, 3650))
        balance = Balance(Money.of({Currency.USD: Decimal(random.randint(0, 50000))}))

        if random.random() < 0.3:
            rate = Decimal(random.randint(1, 500)) / Decimal(100)
            result = factory.savings_account(no, fake.name(), rate, opened, balance=balance)
        else:
            result = factory.checking_account(no, fake.name(), opened, balance=balance)

        if isinstance(result, Invalid):
            logger.error("Unexpected rejection for %s: %s", no, result.messages)
            continue
        repository.store(result.value)


def compare_strategies() -> None:
    """Show each strategy's report for the same doubly invalid request."""
    for strategy in Strategy:
        factory = AccountFactory(strategy)
        result = factory.savings_account("AC", "Jane", Decimal(-1))
        if isinstance(result, Invalid):
            logger.info("%-16s -> %s", strategy.value, result.messages)


def main() -> None:
    parser = argparse.ArgumentParser(description="Open demo accounts")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of accounts to open (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: from SEED)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format",
    )
    args = parser.parse_args()

    config = AccountDomainConfig.from_env()
    seed = args.seed if args.seed is not None else config.seed
    setup_logging(config.log_level, args.log_format)

    if seed is not None:
        random.seed(seed)
    fake = Faker(config.generator.locale)
    if seed is not None:
        fake.seed_instance(seed)

    repository = InMemoryAccountRepository()
    generator = AccountNumberGenerator.from_config(repository, config.generator, seed=seed)
    factory = AccountFactory.from_config(config)

    open_accounts(factory, generator, repository, args.count, fake)

    savings = sum(isinstance(a, SavingsAccount) for a in repository)
    logger.info(
        "Opened %d accounts (%d savings) using %s validation",
        len(repository),
        savings,
        factory.strategy.value,
    )
    compare_strategies()


if __name__ == "__main__":
    main()
