"""Account factory: the single way accounts are constructed."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal

from account_domain.config import AccountDomainConfig
from account_domain.models.account import Account, CheckingAccount, SavingsAccount
from account_domain.models.base import Balance
from account_domain.models.enums import Strategy
from account_domain.validation.result import Invalid, ValidationResult
from account_domain.validation.strategies import AccountValidator, get_validator

logger = logging.getLogger(__name__)


class AccountFactory:
    """Build validated accounts under a chosen composition strategy.

    Invalid input never raises; it comes back as ``Invalid`` with the
    errors the strategy chooses to surface.

    Parameters
    ----------
    strategy : Strategy | str | AccountValidator
        Composition strategy, or a ready validator instance.
    clock : Callable[[], date]
        Source of "today", used when no open date is given.
    """

    def __init__(
        self,
        strategy: Strategy | str | AccountValidator = Strategy.ACCUMULATING,
        clock: Callable[[], date] = date.today,
    ) -> None:
        if isinstance(strategy, AccountValidator):
            self.validator = strategy
        else:
            self.validator = get_validator(strategy)
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        config: AccountDomainConfig,
        clock: Callable[[], date] = date.today,
    ) -> AccountFactory:
        return cls(strategy=config.strategy, clock=clock)

    @property
    def strategy(self) -> Strategy:
        return self.validator.strategy

    def checking_account(
        self,
        no: str,
        name: str,
        open_date: date | None = None,
        close_date: date | None = None,
        balance: Balance | None = None,
    ) -> ValidationResult[Account]:
        """Create a checking account.

        Parameters
        ----------
        no : str
            Account number.
        name : str
            Display name.
        open_date : date | None
            Defaults to ``clock()``.
        close_date : date | None
            Left absent when not given.
        balance : Balance | None
            Opening balance, or the balance of an account being restored.

        Returns
        -------
        ValidationResult[Account]
            ``Valid(CheckingAccount)`` or ``Invalid``.
        """
        result = self.validator.checking_account(
            no,
            name,
            open_date if open_date is not None else self.clock(),
            close_date,
            balance if balance is not None else Balance(),
        )
        return self._log_outcome("checking", no, result)

    def savings_account(
        self,
        no: str,
        name: str,
        rate: Decimal,
        open_date: date | None = None,
        close_date: date | None = None,
        balance: Balance | None = None,
    ) -> ValidationResult[Account]:
        """Create a savings account; same defaults as ``checking_account``."""
        result = self.validator.savings_account(
            no,
            name,
            rate,
            open_date if open_date is not None else self.clock(),
            close_date,
            balance if balance is not None else Balance(),
        )
        return self._log_outcome("savings", no, result)

    def revalidate(self, account: Account) -> ValidationResult[Account]:
        """Run the strategy again over an existing account's fields."""
        match account:
            case SavingsAccount():
                return self.savings_account(
                    account.no,
                    account.name,
                    account.rate_of_interest,
                    account.date_of_open,
                    account.date_of_close,
                    account.balance,
                )
            case CheckingAccount():
                return self.checking_account(
                    account.no,
                    account.name,
                    account.date_of_open,
                    account.date_of_close,
                    account.balance,
                )
        raise TypeError(f"Not an account: {type(account).__name__}")

    def _log_outcome(
        self,
        kind: str,
        no: str,
        result: ValidationResult[Account],
    ) -> ValidationResult[Account]:
        context = {"account_no": no, "account_kind": kind, "strategy": self.strategy.value}
        if isinstance(result, Invalid):
            logger.warning(
                "Rejected %s account %r (%s): %s",
                kind,
                no,
                self.strategy.value,
                "; ".join(result.messages),
                extra={**context, "error_kinds": [k.value for k in result.kinds]},
            )
        else:
            logger.info("Created %s account %s", kind, no, extra=context)
        return result
