"""Domain model entities for pennywise.

Entities have a stable identity (``id``) and controlled mutation. New entities
are built with the ``create`` class methods, which validate every invariant and
assign identity and timestamps. The constructors take every field explicitly;
they are used when rehydrating stored entities and still enforce the
structural invariants, so an invalid instance can never exist.

Entities never hold references to other entities. Relationships are kept as
ids and resolved through repositories.
"""

import re
from datetime import UTC, date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pennywise.domain.errors import CurrencyMismatchError, ValidationError
from pennywise.domain.passwords import hash_password, password_matches
from pennywise.domain.value_objects import DateRange, Email, Money

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

MIN_PASSWORD_LENGTH = 6

HUNDRED = Decimal("100")
TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def _now() -> datetime:
    return datetime.now(UTC)


class TransactionType(Enum):
    """Direction of a transaction's effect on the balance."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Entity:
    """Identity-based equality shared by all entities."""

    _id: UUID

    @property
    def id(self) -> UUID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)


def _require_id(value: Optional[UUID], message: str) -> UUID:
    if value is None:
        raise ValidationError(message)
    return value


def _require_text(value: Optional[str], null_message: str, empty_message: str) -> str:
    if value is None:
        raise ValidationError(null_message)
    if not value.strip():
        raise ValidationError(empty_message)
    return value.strip()


def _coerce_type(value) -> TransactionType:
    if value is None:
        raise ValidationError("Transaction type cannot be null")
    try:
        return TransactionType(value)
    except ValueError as e:
        raise ValidationError(f"Invalid transaction type: {value}") from e


class User(Entity):
    """Registered user owning transactions, categories, budgets and goals."""

    def __init__(
        self,
        id: UUID,
        name: str,
        email: Email,
        password_hash: str,
        created_at: datetime,
    ):
        self._id = _require_id(id, "User ID cannot be null")
        self._name = self._validate_name(name)
        self._email = self._validate_email(email)
        if not password_hash:
            raise ValidationError("Password hash cannot be empty")
        self._password_hash = password_hash
        self._created_at = created_at

    @classmethod
    def create(cls, name: str, email: Email, password: str) -> "User":
        """Create a new user, hashing the plain password.

        Raises:
            ValidationError: If name, email or password is invalid
        """
        cls._validate_name(name)
        cls._validate_email(email)
        cls._validate_password(password)
        return cls(
            id=uuid4(),
            name=name,
            email=email,
            password_hash=hash_password(password),
            created_at=_now(),
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def verify_password(self, plain_password: Optional[str]) -> bool:
        """Return True if ``plain_password`` matches the stored hash."""
        return password_matches(plain_password, self._password_hash)

    def update_name(self, new_name: str) -> None:
        self._name = self._validate_name(new_name)

    def change_password(self, current_password: str, new_password: str) -> None:
        """Replace the password after verifying the current one.

        Raises:
            ValidationError: If the current password is wrong or the new one is invalid
        """
        if not self.verify_password(current_password):
            raise ValidationError("Current password is incorrect")
        self._validate_password(new_password)
        self._password_hash = hash_password(new_password)

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise ValidationError("Name cannot be null or empty")
        return name.strip()

    @staticmethod
    def _validate_email(email: Optional[Email]) -> Email:
        if email is None:
            raise ValidationError("Email cannot be null")
        if not isinstance(email, Email):
            raise ValidationError("Email must be an Email value")
        return email

    @staticmethod
    def _validate_password(password: Optional[str]) -> None:
        if not password:
            raise ValidationError("Password cannot be null or empty")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, email={self._email})"


class Transaction(Entity):
    """A single income or expense.

    Amount, type, transaction date and owner are fixed once the transaction
    exists; only the description and the category can change.
    """

    def __init__(
        self,
        id: UUID,
        user_id: UUID,
        amount: Money,
        type: TransactionType,
        description: str,
        transaction_date: datetime,
        created_at: datetime,
        category_id: Optional[UUID] = None,
    ):
        self._id = _require_id(id, "Transaction ID cannot be null")
        self._user_id = _require_id(user_id, "User ID cannot be null")
        self._amount = self._validate_amount(amount)
        self._type = _coerce_type(type)
        self._description = self._validate_description(description)
        if transaction_date is None:
            raise ValidationError("Transaction date cannot be null")
        self._transaction_date = transaction_date
        self._created_at = created_at
        self._category_id = category_id

    @classmethod
    def create(
        cls,
        user_id: UUID,
        amount: Money,
        type: TransactionType,
        description: str,
        transaction_date: datetime,
    ) -> "Transaction":
        """Create a new, uncategorised transaction.

        Raises:
            ValidationError: If any field is missing or the amount is not positive
        """
        return cls(
            id=uuid4(),
            user_id=user_id,
            amount=amount,
            type=type,
            description=description,
            transaction_date=transaction_date,
            created_at=_now(),
        )

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def type(self) -> TransactionType:
        return self._type

    @property
    def description(self) -> str:
        return self._description

    @property
    def category_id(self) -> Optional[UUID]:
        return self._category_id

    @property
    def transaction_date(self) -> datetime:
        return self._transaction_date

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def balance_impact(self) -> Money:
        """Absolute amount by which this transaction moves the balance.

        The direction comes from ``type``; see ``is_balance_increase``.
        """
        return self._amount

    def is_balance_increase(self) -> bool:
        return self._type is TransactionType.INCOME

    def signed_amount(self) -> Decimal:
        """Amount with the sign of its balance impact."""
        if self.is_balance_increase():
            return self._amount.amount
        return -self._amount.amount

    def assign_category(self, category_id: Optional[UUID]) -> None:
        """Set or clear (``None``) the category."""
        self._category_id = category_id

    def update_description(self, new_description: str) -> None:
        self._description = self._validate_description(new_description)

    @staticmethod
    def _validate_amount(amount: Optional[Money]) -> Money:
        if amount is None:
            raise ValidationError("Amount cannot be null")
        if not amount.is_positive():
            raise ValidationError("Amount must be greater than zero")
        return amount

    @staticmethod
    def _validate_description(description: Optional[str]) -> str:
        return _require_text(
            description, "Description cannot be null", "Description cannot be empty"
        )

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, user_id={self._user_id}, amount={self._amount}, "
            f"type={self._type.value}, description={self._description!r}, "
            f"category_id={self._category_id}, transaction_date={self._transaction_date})"
        )


class Category(Entity):
    """User-defined category; may sit under one parent category."""

    def __init__(
        self,
        id: UUID,
        user_id: UUID,
        name: str,
        type: TransactionType,
        created_at: datetime,
        parent_category_id: Optional[UUID] = None,
        color: Optional[str] = None,
    ):
        self._id = _require_id(id, "Category ID cannot be null")
        self._user_id = _require_id(user_id, "User ID cannot be null")
        self._name = self._validate_name(name)
        self._type = _coerce_type(type)
        self._created_at = created_at
        self._parent_category_id = parent_category_id
        if color is not None:
            self._validate_color(color)
        self._color = color

    @classmethod
    def create(
        cls,
        user_id: UUID,
        name: str,
        type: TransactionType,
        parent_category_id: Optional[UUID] = None,
    ) -> "Category":
        return cls(
            id=uuid4(),
            user_id=user_id,
            name=name,
            type=type,
            created_at=_now(),
            parent_category_id=parent_category_id,
        )

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> TransactionType:
        return self._type

    @property
    def parent_category_id(self) -> Optional[UUID]:
        return self._parent_category_id

    @property
    def color(self) -> Optional[str]:
        return self._color

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def is_subcategory(self) -> bool:
        return self._parent_category_id is not None

    def update_name(self, new_name: str) -> None:
        self._name = self._validate_name(new_name)

    def set_parent(self, parent_category_id: Optional[UUID]) -> None:
        """Move under another category, or to the top level with ``None``.

        Cycles are not detected here.
        """
        self._parent_category_id = parent_category_id

    def set_color(self, color: Optional[str]) -> None:
        """Set a ``#RRGGBB`` color, or clear it with ``None``."""
        if color is not None:
            self._validate_color(color)
        self._color = color

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        return _require_text(
            name, "Category name cannot be null", "Category name cannot be empty"
        )

    @staticmethod
    def _validate_color(color: str) -> None:
        if not color.strip():
            raise ValidationError("Color cannot be empty")
        if not HEX_COLOR_PATTERN.match(color):
            raise ValidationError("Color must be in hex format (e.g., #FF5733)")

    def __repr__(self) -> str:
        return (
            f"Category(id={self._id}, user_id={self._user_id}, name={self._name!r}, "
            f"type={self._type.value}, parent_category_id={self._parent_category_id})"
        )


class Budget(Entity):
    """Spending limit over a date range, optionally scoped to one category.

    Spending figures are supplied by the caller; the budget only compares
    them against its limit.
    """

    def __init__(
        self,
        id: UUID,
        user_id: UUID,
        name: str,
        amount: Money,
        period: DateRange,
        created_at: datetime,
        category_id: Optional[UUID] = None,
    ):
        self._id = _require_id(id, "Budget ID cannot be null")
        self._user_id = _require_id(user_id, "User ID cannot be null")
        self._name = self._validate_name(name)
        self._amount = self._validate_amount(amount)
        if period is None:
            raise ValidationError("Budget period cannot be null")
        self._period = period
        self._created_at = created_at
        self._category_id = category_id

    @classmethod
    def create(
        cls,
        user_id: UUID,
        name: str,
        amount: Money,
        period: DateRange,
        category_id: Optional[UUID] = None,
    ) -> "Budget":
        return cls(
            id=uuid4(),
            user_id=user_id,
            name=name,
            amount=amount,
            period=period,
            created_at=_now(),
            category_id=category_id,
        )

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def period(self) -> DateRange:
        return self._period

    @property
    def category_id(self) -> Optional[UUID]:
        return self._category_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def update_name(self, new_name: str) -> None:
        self._name = self._validate_name(new_name)

    def update_amount(self, new_amount: Money) -> None:
        self._amount = self._validate_amount(new_amount)

    def assign_category(self, category_id: Optional[UUID]) -> None:
        self._category_id = category_id

    def is_active(self, today: Optional[date] = None) -> bool:
        """Return True if ``today`` (default: the current date) is in the period."""
        return self._period.contains(today or date.today())

    def calculate_remaining(self, spent: Money) -> Decimal:
        """Limit minus spending; negative when over budget."""
        self._check_spent(spent)
        return self._amount.amount - spent.amount

    def calculate_percentage_used(self, spent: Money) -> Decimal:
        """Share of the limit already spent, in percent, rounded half-up to 2 places.

        May exceed 100 when over budget.
        """
        self._check_spent(spent)
        if self._amount.is_zero():
            return Decimal("0")
        return (spent.amount * HUNDRED / self._amount.amount).quantize(
            TWO_PLACES, rounding=ROUND_HALF_UP
        )

    def is_exceeded(self, spent: Money) -> bool:
        """Return True only when spending is strictly above the limit."""
        self._check_spent(spent)
        return spent.amount > self._amount.amount

    def _check_spent(self, spent: Optional[Money]) -> None:
        if spent is None:
            raise ValidationError("Spent amount cannot be null")
        if spent.currency != self._amount.currency:
            raise CurrencyMismatchError("Spent currency must match budget currency")

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        return _require_text(name, "Budget name cannot be null", "Budget name cannot be empty")

    @staticmethod
    def _validate_amount(amount: Optional[Money]) -> Money:
        if amount is None:
            raise ValidationError("Budget amount cannot be null")
        if not amount.is_positive():
            raise ValidationError("Budget amount must be greater than zero")
        return amount

    def __repr__(self) -> str:
        return (
            f"Budget(id={self._id}, user_id={self._user_id}, name={self._name!r}, "
            f"amount={self._amount}, period={self._period})"
        )


class FinancialGoal(Entity):
    """Savings target to reach by a deadline."""

    def __init__(
        self,
        id: UUID,
        user_id: UUID,
        name: str,
        target_amount: Money,
        deadline: date,
        created_at: datetime,
        updated_at: datetime,
    ):
        self._id = _require_id(id, "Goal ID cannot be null")
        self._user_id = _require_id(user_id, "User ID cannot be null")
        self._name = self._validate_name(name)
        self._target_amount = self._validate_target_amount(target_amount)
        if deadline is None:
            raise ValidationError("Deadline cannot be null")
        self._deadline = deadline
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls, user_id: UUID, name: str, target_amount: Money, deadline: date
    ) -> "FinancialGoal":
        """Create a goal whose deadline is today or later.

        Raises:
            ValidationError: If any field is invalid or the deadline is in the past
        """
        cls._validate_deadline(deadline)
        now = _now()
        return cls(
            id=uuid4(),
            user_id=user_id,
            name=name,
            target_amount=target_amount,
            deadline=deadline,
            created_at=now,
            updated_at=now,
        )

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def target_amount(self) -> Money:
        return self._target_amount

    @property
    def deadline(self) -> date:
        return self._deadline

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def calculate_progress(self, current_amount: Money) -> Decimal:
        """Percentage of the target already saved; may exceed 100."""
        self._check_current(current_amount)
        if current_amount.is_zero():
            return Decimal("0")
        ratio = (current_amount.amount / self._target_amount.amount).quantize(
            FOUR_PLACES, rounding=ROUND_HALF_UP
        )
        return (ratio * HUNDRED).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    def calculate_remaining(self, current_amount: Money) -> Money:
        """Amount still missing, never below zero."""
        self._check_current(current_amount)
        remaining = self._target_amount.amount - current_amount.amount
        if remaining <= 0:
            return Money.zero(self._target_amount.currency)
        return Money(remaining, self._target_amount.currency)

    def is_reached(self, current_amount: Money) -> bool:
        self._check_current(current_amount)
        return current_amount.amount >= self._target_amount.amount

    def is_deadline_passed(self, today: Optional[date] = None) -> bool:
        """Return True only after the deadline day; the deadline day itself is not passed."""
        return (today or date.today()) > self._deadline

    def update_name(self, name: str) -> None:
        self._name = self._validate_name(name)
        self._touch()

    def update_target_amount(self, target_amount: Money) -> None:
        self._target_amount = self._validate_target_amount(target_amount)
        self._touch()

    def update_deadline(self, deadline: date) -> None:
        self._validate_deadline(deadline)
        self._deadline = deadline
        self._touch()

    def _touch(self) -> None:
        self._updated_at = _now()

    def _check_current(self, current_amount: Optional[Money]) -> None:
        if current_amount is None:
            raise ValidationError("Current amount cannot be null")
        if current_amount.currency != self._target_amount.currency:
            raise CurrencyMismatchError(
                "Current amount must have the same currency as target amount"
            )

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        return _require_text(name, "Name cannot be null", "Name cannot be empty")

    @staticmethod
    def _validate_target_amount(target_amount: Optional[Money]) -> Money:
        if target_amount is None:
            raise ValidationError("Target amount cannot be null")
        if not target_amount.is_positive():
            raise ValidationError("Target amount must be greater than zero")
        return target_amount

    @staticmethod
    def _validate_deadline(deadline: Optional[date]) -> None:
        if deadline is None:
            raise ValidationError("Deadline cannot be null")
        if deadline < date.today():
            raise ValidationError("Deadline cannot be in the past")

    def __repr__(self) -> str:
        return (
            f"FinancialGoal(id={self._id}, user_id={self._user_id}, name={self._name!r}, "
            f"target_amount={self._target_amount}, deadline={self._deadline})"
        )
