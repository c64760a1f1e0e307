"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from account_domain.factory import AccountFactory
from account_domain.models.enums import Strategy
from account_domain.store.accounts import InMemoryAccountRepository


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed "today" so date defaults are deterministic."""
    return date(2024, 3, 15)


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Create a fresh repository for each test."""
    return InMemoryAccountRepository()


@pytest.fixture(params=list(Strategy), ids=lambda s: s.value)
def factory(request: pytest.FixtureRequest, today: date) -> AccountFactory:
    """Factory under each composition strategy."""
    return AccountFactory(request.param, clock=lambda: today)
