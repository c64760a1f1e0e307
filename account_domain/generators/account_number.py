"""Unique account-number generation.

Draws random candidates and checks each against an account repository
until one is free:

    candidate = draw()
    while collides(candidate):
        candidate = draw()
    return candidate

A failed repository lookup counts as "not found" unless ``strict`` is
set, in which case it aborts generation. Without ``max_attempts`` or
``timeout_seconds`` the loop has no upper bound; that is only safe
because collisions are rare in a 10-digit space.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from account_domain.config import GeneratorConfig
from account_domain.exceptions import AccountNumberGenerationError, ConfigurationError
from account_domain.generators.base import BaseGenerator
from account_domain.store.accounts import AccountRepository
from account_domain.validation.fields import MIN_ACCOUNT_NO_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """One state of the retry loop: a drawn number and whether it is taken."""

    number: str
    collides: bool


class AccountNumberGenerator(BaseGenerator):
    """Generate account numbers not present in ``repository``.

    Parameters
    ----------
    repository : AccountRepository
        Queried once per candidate.
    seed : int | None
        Random seed for reproducibility.
    length : int
        Digits per account number.
    max_attempts : int | None
        Give up after this many draws.
    timeout_seconds : float | None
        Give up once this much wall time has passed. Checked between
        draws, so it bounds the retry loop, not a single lookup.
    strict : bool
        Raise instead of accepting a candidate whose lookup failed.
    locale : str
        Faker locale.
    """

    def __init__(
        self,
        repository: AccountRepository,
        seed: int | None = None,
        length: int = 10,
        max_attempts: int | None = None,
        timeout_seconds: float | None = None,
        strict: bool = False,
        locale: str = "en_US",
    ) -> None:
        if length < MIN_ACCOUNT_NO_LENGTH:
            raise ConfigurationError(
                f"Generated account numbers must be at least {MIN_ACCOUNT_NO_LENGTH} "
                f"characters, got {length}"
            )
        super().__init__(seed, locale=locale)
        self.repository = repository
        self.length = length
        self.max_attempts = max_attempts
        self.timeout_seconds = timeout_seconds
        self.strict = strict

    @classmethod
    def from_config(
        cls,
        repository: AccountRepository,
        config: GeneratorConfig,
        seed: int | None = None,
    ) -> AccountNumberGenerator:
        return cls(
            repository,
            seed=seed,
            length=config.length,
            max_attempts=config.max_attempts,
            timeout_seconds=config.timeout_seconds,
            strict=config.strict,
            locale=config.locale,
        )

    def draw(self) -> str:
        """Return a fresh random candidate number."""
        return self.fake.numerify("#" * self.length)

    def check(self, number: str) -> Candidate:
        """Query the repository for ``number``."""
        try:
            found = self.repository.query(number)
        except Exception as exc:
            if self.strict:
                raise AccountNumberGenerationError(
                    f"Lookup of candidate {number} failed"
                ) from exc
            logger.warning(
                "Lookup of candidate %s failed, treating it as unused: %s", number, exc
            )
            return Candidate(number, collides=False)
        return Candidate(number, collides=found is not None)

    def generate(self) -> str:
        """Return an account number confirmed absent from the repository.

        Raises
        ------
        AccountNumberGenerationError
            When ``max_attempts`` or ``timeout_seconds`` is exceeded, or a
            lookup fails in strict mode.
        """
        started = time.monotonic()
        attempts = 1
        state = self.check(self.draw())

        while state.collides:
            logger.debug("Candidate %s already in use", state.number)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise AccountNumberGenerationError(
                    f"No unused account number after {attempts} attempts"
                )
            if (
                self.timeout_seconds is not None
                and time.monotonic() - started >= self.timeout_seconds
            ):
                raise AccountNumberGenerationError(
                    f"No unused account number within {self.timeout_seconds}s"
                )
            attempts += 1
            state = self.check(self.draw())

        logger.debug(
            "Generated account number %s after %d attempt(s)",
            state.number,
            attempts,
            extra={"account_no": state.number, "attempts": attempts},
        )
        return state.number
