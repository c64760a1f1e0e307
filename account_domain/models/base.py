"""Money-like value types shared by account variants."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from account_domain.models.enums import Currency


@dataclass(frozen=True)
class Money:
    """Amounts held per currency.

    Stored as a sorted tuple of ``(currency, amount)`` pairs so the value
    stays hashable; zero amounts are dropped, which makes ``Money.zero()``
    equal to any all-zero mapping.
    """

    amounts: tuple[tuple[Currency, Decimal], ...] = ()

    def __post_init__(self) -> None:
        merged: dict[Currency, Decimal] = {}
        for currency, amount in self.amounts:
            merged[currency] = merged.get(currency, Decimal("0")) + Decimal(amount)
        normalized = tuple(
            sorted(
                ((c, a) for c, a in merged.items() if a != 0),
                key=lambda pair: pair[0].value,
            )
        )
        object.__setattr__(self, "amounts", normalized)

    @classmethod
    def zero(cls) -> Money:
        return cls()

    @classmethod
    def of(cls, amounts: Mapping[Currency, Decimal | int | str]) -> Money:
        """Build from a ``{currency: amount}`` mapping."""
        return cls(tuple((c, Decimal(str(a))) for c, a in amounts.items()))

    def amount_in(self, currency: Currency) -> Decimal:
        return dict(self.amounts).get(currency, Decimal("0"))

    def to_dict(self) -> dict[Currency, Decimal]:
        return dict(self.amounts)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amounts + other.amounts)

    def to_base_currency(self) -> Decimal:
        # Currency conversion is not supported.
        raise NotImplementedError("Conversion to a base currency is not implemented")


@dataclass(frozen=True)
class Balance:
    """Account balance; defaults to zero money."""

    amount: Money = field(default_factory=Money.zero)
