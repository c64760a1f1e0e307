"""Domain models for accounts."""

from account_domain.models.account import Account, CheckingAccount, SavingsAccount
from account_domain.models.base import Balance, Money
from account_domain.models.enums import AccountKind, Currency, ErrorKind, Strategy

__all__ = [
    "Account",
    "AccountKind",
    "Balance",
    "CheckingAccount",
    "Currency",
    "ErrorKind",
    "Money",
    "SavingsAccount",
    "Strategy",
]
