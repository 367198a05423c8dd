"""Utility for resolving a user id or email address to a user."""

from uuid import UUID

from pennywise.database.base import UserRepository
from pennywise.domain.entities import User
from pennywise.domain.errors import DomainError, NotFoundError, user_not_found
from pennywise.domain.value_objects import Email


def resolve_user(user_repository: UserRepository, user: str) -> User:
    """Resolve a user id or email address to a stored user.

    Args:
        user_repository: Repository to look the user up in
        user: User id (UUID string) or email address

    Returns:
        The matching user

    Raises:
        NotFoundError: If no user matches
    """
    value = user.strip()

    try:
        user_id = UUID(value)
    except ValueError:
        user_id = None

    if user_id is not None:
        found = user_repository.find_by_id(user_id)
        if found is None:
            raise NotFoundError(user_not_found(user_id))
        return found

    try:
        email = Email(value)
    except DomainError:
        raise NotFoundError(f"User '{value}' not found") from None

    found = user_repository.find_by_email(email)
    if found is None:
        raise NotFoundError(f"User '{value}' not found")
    return found
