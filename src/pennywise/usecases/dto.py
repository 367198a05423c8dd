"""Request and response records exchanged with the use cases.

These are plain data: they carry no behaviour and no validation. Each use case
validates its own request.
"""

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pennywise.domain.entities import Category, Transaction, TransactionType, User


@dataclass(frozen=True)
class CreateUserRequest:
    name: Optional[str]
    email: Optional[str]
    password: Optional[str]


@dataclass(frozen=True)
class UserResponse:
    """Public view of a user; never includes the password or its hash."""

    id: UUID
    name: str
    email: str
    created_at: dt.datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email.value,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class AuthenticationRequest:
    email: Optional[str]
    password: Optional[str] = field(repr=False)


@dataclass(frozen=True)
class AuthenticationResponse:
    user_id: UUID
    name: str
    email: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class CreateTransactionRequest:
    """Input for recording a new transaction.

    ``currency`` falls back to the use case's default currency when omitted.
    """

    user_id: Optional[UUID]
    amount: Optional[Decimal]
    type: Optional[TransactionType]
    description: Optional[str]
    date: Optional[dt.date]
    category_id: Optional[UUID] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class UpdateTransactionRequest:
    """Partial update of a transaction; ``None`` leaves a field unchanged.

    ``amount``, ``type`` and ``date`` are present only so that attempts to
    change them can be rejected explicitly.
    """

    transaction_id: Optional[UUID]
    amount: Optional[Decimal] = None
    type: Optional[TransactionType] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    category_id: Optional[UUID] = None


@dataclass(frozen=True)
class DeleteTransactionRequest:
    transaction_id: Optional[UUID]


@dataclass(frozen=True)
class ListTransactionsRequest:
    user_id: Optional[UUID]
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    type: Optional[TransactionType] = None
    category_id: Optional[UUID] = None
    page: int = 0
    size: int = 20


@dataclass(frozen=True)
class TransactionResponse:
    id: UUID
    user_id: UUID
    amount: Decimal
    currency: str
    type: TransactionType
    description: str
    date: dt.date
    category_id: Optional[UUID]
    created_at: dt.datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            amount=transaction.balance_impact.amount,
            currency=transaction.amount.currency,
            type=transaction.type,
            description=transaction.description,
            date=transaction.transaction_date.date(),
            category_id=transaction.category_id,
            created_at=transaction.created_at,
        )


@dataclass(frozen=True)
class PagedTransactionsResponse:
    transactions: list[TransactionResponse]
    total_elements: int
    total_pages: int
    current_page: int
    page_size: int


@dataclass(frozen=True)
class CreateCategoryRequest:
    user_id: Optional[UUID]
    name: Optional[str]
    type: Optional[TransactionType]
    parent_category_id: Optional[UUID] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class CategoryResponse:
    id: UUID
    user_id: UUID
    name: str
    type: TransactionType
    parent_category_id: Optional[UUID]
    color: Optional[str]
    created_at: dt.datetime

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            user_id=category.user_id,
            name=category.name,
            type=category.type,
            parent_category_id=category.parent_category_id,
            color=category.color,
            created_at=category.created_at,
        )
