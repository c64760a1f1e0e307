"""Composition strategies for account construction.

All three strategies run the same field validators in the same order
(account number, dates, then rate for savings) and build the same account
on success. They differ only in how failures surface:

- FailSlowAccumulating: runs every check, reports every error
- FailSlowNonAccumulating: runs every check, reports the first error only
- FailFast: stops at the first failing check; later checks never run
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from datetime import date
from decimal import Decimal
from functools import partial
from typing import Any

from account_domain.models.account import Account, CheckingAccount, SavingsAccount
from account_domain.models.base import Balance
from account_domain.models.enums import Strategy
from account_domain.validation.fields import (
    validate_account_no,
    validate_open_close_date,
    validate_rate,
)
from account_domain.validation.result import (
    Invalid,
    Valid,
    ValidationResult,
    accumulate,
    first_failure,
)

Check = Callable[[], ValidationResult[Any]]


class AccountValidator(ABC):
    """Base class for the composition strategies.

    Subclasses only decide how the ordered checks are run and folded;
    the checks and the account construction are shared.
    """

    strategy: Strategy

    def checking_account(
        self,
        no: str,
        name: str,
        open_date: date,
        close_date: date | None,
        balance: Balance,
    ) -> ValidationResult[Account]:
        """Validate fields and build a ``CheckingAccount``."""

        def build(n: str, dates: tuple[date, date | None]) -> Account:
            return CheckingAccount(n, name, dates[0], dates[1], balance)

        return self._run(
            [
                partial(validate_account_no, no),
                partial(validate_open_close_date, open_date, close_date),
            ],
            build,
        )

    def savings_account(
        self,
        no: str,
        name: str,
        rate: Decimal,
        open_date: date,
        close_date: date | None,
        balance: Balance,
    ) -> ValidationResult[Account]:
        """Validate fields and build a ``SavingsAccount``."""

        def build(n: str, dates: tuple[date, date | None], r: Decimal) -> Account:
            return SavingsAccount(n, name, r, dates[0], dates[1], balance)

        return self._run(
            [
                partial(validate_account_no, no),
                partial(validate_open_close_date, open_date, close_date),
                partial(validate_rate, rate),
            ],
            build,
        )

    @abstractmethod
    def _run(
        self,
        checks: Sequence[Check],
        build: Callable[..., Account],
    ) -> ValidationResult[Account]:
        """Run ``checks`` and fold their results into ``build``."""


class FailSlowAccumulating(AccountValidator):
    """Run every check; report all errors in evaluation order."""

    strategy = Strategy.ACCUMULATING

    def _run(
        self,
        checks: Sequence[Check],
        build: Callable[..., Account],
    ) -> ValidationResult[Account]:
        return accumulate([check() for check in checks], build)


class FailSlowNonAccumulating(AccountValidator):
    """Run every check; report a single error.

    Every validator is invoked even after a failure, but the pairwise
    combination keeps only the first failure.
    """

    strategy = Strategy.NON_ACCUMULATING

    def _run(
        self,
        checks: Sequence[Check],
        build: Callable[..., Account],
    ) -> ValidationResult[Account]:
        return first_failure([check() for check in checks], build)


class FailFast(AccountValidator):
    """Run checks in order and stop at the first failure."""

    strategy = Strategy.FAIL_FAST

    def _run(
        self,
        checks: Sequence[Check],
        build: Callable[..., Account],
    ) -> ValidationResult[Account]:
        values: list[Any] = []
        for check in checks:
            result = check()
            if isinstance(result, Invalid):
                return result
            values.append(result.value)
        return Valid(build(*values))


_VALIDATORS: dict[Strategy, type[AccountValidator]] = {
    Strategy.ACCUMULATING: FailSlowAccumulating,
    Strategy.NON_ACCUMULATING: FailSlowNonAccumulating,
    Strategy.FAIL_FAST: FailFast,
}


def get_validator(strategy: Strategy | str) -> AccountValidator:
    """Return a validator for ``strategy`` (enum member or its value)."""
    return _VALIDATORS[Strategy(strategy)]()
