"""Validation results and the combinators that fold them.

A validation either succeeds with a value (``Valid``) or fails with a
non-empty, ordered tuple of ``ValidationError`` (``Invalid``). Two folds
combine already-evaluated results into a constructed value:

- ``accumulate``: every error from every failing result, in order
- ``first_failure``: only the first failing result's errors
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from account_domain.models.enums import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationError:
    """A failed invariant: which one, and a human-readable message."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful validation carrying the validated value."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying one or more errors."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Invalid requires at least one error")

    @classmethod
    def of(cls, kind: ErrorKind, message: str) -> Invalid:
        return cls((ValidationError(kind, message),))

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def error(self) -> ValidationError:
        """The first (for single-error strategies, the only) error."""
        return self.errors[0]

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    @property
    def kinds(self) -> list[ErrorKind]:
        return [e.kind for e in self.errors]


ValidationResult = Union[Valid[T], Invalid]


def accumulate(
    results: Sequence[ValidationResult[Any]],
    build: Callable[..., T],
) -> ValidationResult[T]:
    """Combine results, collecting the errors of every failure.

    Parameters
    ----------
    results : Sequence[ValidationResult]
        Results in evaluation order.
    build : Callable
        Called with each ``Valid`` value positionally when all succeed.

    Returns
    -------
    ValidationResult
        ``Valid(build(...))`` or ``Invalid`` with errors concatenated in
        the order of ``results``.
    """
    errors: list[ValidationError] = []
    values: list[Any] = []
    for result in results:
        if isinstance(result, Invalid):
            errors.extend(result.errors)
        else:
            values.append(result.value)
    if errors:
        return Invalid(tuple(errors))
    return Valid(build(*values))


def first_failure(
    results: Sequence[ValidationResult[Any]],
    build: Callable[..., T],
) -> ValidationResult[T]:
    """Combine results pairwise, keeping a single failure.

    Unlike ``accumulate`` the product of two failures is the left one, so
    the first failing result in ``results`` is the one reported.
    """
    combined: ValidationResult[tuple[Any, ...]] = Valid(())
    for result in results:
        combined = _product(combined, result)
    if isinstance(combined, Invalid):
        return combined
    return Valid(build(*combined.value))


def _product(
    left: ValidationResult[tuple[Any, ...]],
    right: ValidationResult[Any],
) -> ValidationResult[tuple[Any, ...]]:
    if isinstance(left, Invalid):
        return left
    if isinstance(right, Invalid):
        return right
    return Valid(left.value + (right.value,))
