"""Account repositories."""

from account_domain.store.accounts import AccountRepository, InMemoryAccountRepository

__all__ = ["AccountRepository", "InMemoryAccountRepository"]
