"""Mapper functions to convert between domain entities and SQLAlchemy models.

Domain entities are rehydrated through their constructors, so stored rows are
re-validated on the way in.
"""

from pennywise.domain import entities as domain
from pennywise.domain.value_objects import Email, Money
from pennywise.database.models import (
    User as ORMUser,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        name=orm_user.name,
        email=Email(orm_user.email),
        password_hash=orm_user.password_hash,
        created_at=orm_user.created_at,
    )


def user_to_orm(user: domain.User) -> ORMUser:
    """Convert domain User entity to a SQLAlchemy User model."""
    return ORMUser(
        id=user.id,
        name=user.name,
        email=user.email.value,
        password_hash=user.password_hash,
        created_at=user.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        user_id=orm_category.user_id,
        name=orm_category.name,
        type=domain.TransactionType(orm_category.type),
        created_at=orm_category.created_at,
        parent_category_id=orm_category.parent_category_id,
        color=orm_category.color,
    )


def category_to_orm(category: domain.Category) -> ORMCategory:
    """Convert domain Category entity to a SQLAlchemy Category model."""
    return ORMCategory(
        id=category.id,
        user_id=category.user_id,
        name=category.name,
        type=category.type.value,
        parent_category_id=category.parent_category_id,
        color=category.color,
        created_at=category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        user_id=orm_transaction.user_id,
        amount=Money(orm_transaction.amount, orm_transaction.currency),
        type=domain.TransactionType(orm_transaction.type),
        description=orm_transaction.description,
        transaction_date=orm_transaction.transaction_date,
        created_at=orm_transaction.created_at,
        category_id=orm_transaction.category_id,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a SQLAlchemy Transaction model."""
    return ORMTransaction(
        id=transaction.id,
        user_id=transaction.user_id,
        amount=transaction.amount.amount,
        currency=transaction.amount.currency,
        type=transaction.type.value,
        description=transaction.description,
        category_id=transaction.category_id,
        transaction_date=transaction.transaction_date,
        created_at=transaction.created_at,
    )
