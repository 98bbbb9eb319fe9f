from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Amount of money with its currency.

    Arithmetic keeps full decimal precision; call ``rounded()`` where a
    final price or fee is produced.
    """

    amount: Decimal
    currency: Currency = field(default_factory=Currency.usd)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValueError(f"Amount must be a Decimal, got {type(self.amount).__name__}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """Add two amounts of the same currency"""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        """Subtract an amount of the same currency"""
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    def rounded(self) -> Money:
        """Round half-up to two decimal places"""
        return Money(
            amount=self.amount.quantize(CENTS, rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def is_greater_than(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount > other.amount

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot combine money with different currencies")

    @classmethod
    def zero(cls, currency: Currency | None = None) -> Money:
        return cls(Decimal("0"), currency or Currency.usd())

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> Money:
        """Build a US dollar amount"""
        return cls(amount=Decimal(str(amount)), currency=Currency.usd())
