"""Account repository interface and an in-memory implementation."""

from dataclasses import dataclass, field
from typing import Iterator, Protocol

from account_domain.exceptions import DuplicateAccountError
from account_domain.models.account import Account


class AccountRepository(Protocol):
    """Lookup by account number; implementations may raise on failure."""

    def query(self, no: str) -> Account | None:
        ...


@dataclass
class InMemoryAccountRepository:
    """In-memory store of accounts keyed by account number."""

    accounts: dict[str, Account] = field(default_factory=dict)

    def store(self, account: Account) -> None:
        """Add an account to the store."""
        if account.no in self.accounts:
            raise DuplicateAccountError(f"Account {account.no} already exists")
        self.accounts[account.no] = account

    def query(self, no: str) -> Account | None:
        """Return the account with number ``no``, if any."""
        return self.accounts.get(no)

    def all(self) -> list[Account]:
        return list(self.accounts.values())

    def __contains__(self, no: object) -> bool:
        return no in self.accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts.values())

    def __len__(self) -> int:
        return len(self.accounts)
