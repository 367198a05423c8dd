"""Shared domain error messages and error types."""

from typing import Any


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class OwnershipError(DomainError):
    """Referenced entity belongs to a different user."""


class ImmutableFieldError(ValidationError):
    """Attempt to change a field that is fixed after creation."""

    def __init__(self, field: str):
        super().__init__(immutable_field(field))
        self.field = field


class CurrencyMismatchError(ValidationError):
    """Operation mixes money values of different currencies."""


class AuthenticationError(DomainError):
    """Credentials were rejected.

    The message is deliberately the same whether the account is missing or the
    password is wrong.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


def user_not_found(user_id: Any) -> str:
    """Return message for missing user."""
    return f"User not found with id: {user_id}"


def transaction_not_found(transaction_id: Any) -> str:
    """Return message for missing transaction."""
    return f"Transaction not found with id: {transaction_id}"


def category_not_found(category_id: Any) -> str:
    """Return message for missing category."""
    return f"Category not found with id: {category_id}"


def category_not_owned() -> str:
    """Return message when a category belongs to another user."""
    return "Category does not belong to the user"


def duplicate_email(email: str) -> str:
    """Return message for an email that is already registered."""
    return f"User with email {email} already exists"


def immutable_field(field: str) -> str:
    """Return message for an update that touches an immutable field."""
    return f"Cannot update {field} - field is immutable. Create a new transaction instead."
