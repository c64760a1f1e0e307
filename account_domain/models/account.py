"""Account variants for the account domain.

Two variants share the common fields:

- CheckingAccount: no extra fields
- SavingsAccount: adds ``rate_of_interest`` (must be > 0)

``Account`` is the union of both; callers ``match`` on the variant to get
at variant-specific data. Instances are immutable: "updates" return new
values with the unchanged fields copied over.

Field invariants (account number length, date ordering, positive rate)
are enforced by ``AccountFactory``, not by these types.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Union

from account_domain.models.base import Balance
from account_domain.models.enums import AccountKind


@dataclass(frozen=True)
class CheckingAccount:
    """Checking account."""

    no: str
    name: str
    date_of_open: date | None
    date_of_close: date | None = None
    balance: Balance = field(default_factory=Balance)
    kind: AccountKind = field(default=AccountKind.CHECKING, init=False)

    @property
    def is_closed(self) -> bool:
        return self.date_of_close is not None

    def with_balance(self, balance: Balance) -> CheckingAccount:
        return replace(self, balance=balance)

    def close(self, on: date) -> CheckingAccount:
        return replace(self, date_of_close=on)


@dataclass(frozen=True)
class SavingsAccount:
    """Savings account with an interest rate."""

    no: str
    name: str
    rate_of_interest: Decimal
    date_of_open: date | None
    date_of_close: date | None = None
    balance: Balance = field(default_factory=Balance)
    kind: AccountKind = field(default=AccountKind.SAVINGS, init=False)

    @property
    def is_closed(self) -> bool:
        return self.date_of_close is not None

    def with_balance(self, balance: Balance) -> SavingsAccount:
        return replace(self, balance=balance)

    def close(self, on: date) -> SavingsAccount:
        return replace(self, date_of_close=on)


Account = Union[CheckingAccount, SavingsAccount]
