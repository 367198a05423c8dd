"""Abstract repository interfaces.

The use-case layer depends only on these ports; storage adapters implement
them.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from uuid import UUID

from pennywise.domain.entities import Category, Transaction, TransactionType, User
from pennywise.domain.value_objects import Email


class UserRepository(ABC):
    """Persistence port for users."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert or update a user. Returns the stored user."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def find_by_email(self, email: Email) -> Optional[User]:
        """Get user by normalized email."""
        pass

    @abstractmethod
    def exists_by_email(self, email: Email) -> bool:
        """Check if a user with the given email exists."""
        pass

    @abstractmethod
    def delete_by_id(self, user_id: UUID) -> None:
        """Delete user by ID."""
        pass


class CategoryRepository(ABC):
    """Persistence port for categories."""

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Insert or update a category. Returns the stored category."""
        pass

    @abstractmethod
    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def delete_by_id(self, category_id: UUID) -> None:
        """Delete category by ID."""
        pass


class TransactionRepository(ABC):
    """Persistence port for transactions."""

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        """Insert or update a transaction. Returns the stored transaction."""
        pass

    @abstractmethod
    def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def delete_by_id(self, transaction_id: UUID) -> None:
        """Delete transaction by ID."""
        pass

    @abstractmethod
    def find_by_user_id_with_filters(
        self,
        user_id: UUID,
        start_date: Optional[date],
        end_date: Optional[date],
        type: Optional[TransactionType],
        category_id: Optional[UUID],
        page: int,
        size: int,
    ) -> list[Transaction]:
        """List one page of a user's transactions.

        Args:
            user_id: Owner of the transactions
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            type: Optional transaction type filter
            category_id: Optional category ID filter
            page: Zero-based page number
            size: Number of items per page
        """
        pass

    @abstractmethod
    def count_by_user_id_with_filters(
        self,
        user_id: UUID,
        start_date: Optional[date],
        end_date: Optional[date],
        type: Optional[TransactionType],
        category_id: Optional[UUID],
    ) -> int:
        """Count a user's transactions matching the same filters as
        ``find_by_user_id_with_filters``."""
        pass
