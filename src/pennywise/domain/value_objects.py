"""Value objects for pennywise.

Value objects are immutable, validate themselves on construction and compare
by value. They have no identity and no dependencies on other domain types.
"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Union

from pennywise.domain.errors import CurrencyMismatchError, ValidationError

CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

AmountLike = Union[Decimal, int, str]


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid amount format: {amount}")
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation as e:
        raise ValidationError(f"Invalid amount format: {amount}") from e
    if not value.is_finite():
        raise ValidationError(f"Invalid amount format: {amount}")
    return value


@dataclass(frozen=True)
class Money:
    """Monetary value in a single currency.

    Attributes:
        amount: Non-negative decimal amount. Equality compares numeric value,
            so ``Decimal("1.0")`` and ``Decimal("1.00")`` are the same money.
        currency: ISO-4217 alphabetic code, stored upper case.

    Raises:
        ValidationError: If amount or currency is missing or invalid.
    """

    amount: Decimal
    currency: str

    def __init__(self, amount: AmountLike, currency: str) -> None:
        if amount is None:
            raise ValidationError("Amount cannot be null")
        if currency is None:
            raise ValidationError("Currency cannot be null")

        decimal_amount = _to_decimal(amount)
        if decimal_amount < 0:
            raise ValidationError("Amount cannot be negative")

        code = str(currency).strip().upper()
        if not CURRENCY_PATTERN.match(code):
            raise ValidationError(f"Invalid currency code: {currency}")

        # Use __setattr__ because of frozen=True
        object.__setattr__(self, "amount", decimal_amount)
        object.__setattr__(self, "currency", code)

    @classmethod
    def zero(cls, currency: str) -> "Money":
        """Return a zero amount in the given currency."""
        return cls(Decimal("0"), currency)

    def add(self, other: "Money") -> "Money":
        """Return the sum of two amounts in the same currency."""
        if self.currency != other.currency:
            raise CurrencyMismatchError("Cannot add money with different currencies")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Return the difference of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ.
            ValidationError: If the result would be negative.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError("Cannot subtract money with different currencies")
        return Money(self.amount - other.amount, self.currency)

    def is_greater_than(self, other: "Money") -> bool:
        """Return True if this amount is strictly greater than ``other``."""
        if self.currency != other.currency:
            raise CurrencyMismatchError("Cannot compare money with different currencies")
        return self.amount > other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"

    def __repr__(self) -> str:
        return f"Money('{self.amount}', '{self.currency}')"


@dataclass(frozen=True)
class Email:
    """Validated, lower-cased email address."""

    value: str

    def __init__(self, value: str) -> None:
        if value is None:
            raise ValidationError("Email cannot be null")
        if not value.strip():
            raise ValidationError("Email cannot be empty")

        normalized = value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValidationError("Invalid email format")

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DateRange:
    """Closed range of calendar dates with ``start <= end``."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start is None:
            raise ValidationError("Start date cannot be null")
        if self.end is None:
            raise ValidationError("End date cannot be null")
        if self.start > self.end:
            raise ValidationError("Start date must be before or equal to end date")

    def duration_in_days(self) -> int:
        """Number of days between start and end, exclusive of end."""
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        """Return True if ``day`` lies in the range, boundaries included."""
        return self.start <= day <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        """Return True if the two ranges share at least one day."""
        return not (self.end < other.start) and not (other.end < self.start)

    def __str__(self) -> str:
        return f"{self.start} to {self.end}"
