"""Account domain modeling with composable validation strategies."""

from account_domain.factory import AccountFactory
from account_domain.generators import AccountNumberGenerator
from account_domain.models import (
    Account,
    Balance,
    CheckingAccount,
    Currency,
    Money,
    SavingsAccount,
    Strategy,
)
from account_domain.validation import Invalid, Valid, ValidationError

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountFactory",
    "AccountNumberGenerator",
    "Balance",
    "CheckingAccount",
    "Currency",
    "Invalid",
    "Money",
    "SavingsAccount",
    "Strategy",
    "Valid",
    "ValidationError",
    "__version__",
]
