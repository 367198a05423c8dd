"""Database layer for pennywise: repository ports and the SQLAlchemy adapter."""

from pennywise.database.base import (
    CategoryRepository,
    TransactionRepository,
    UserRepository,
)
from pennywise.database.factories import create_sqlite_database

__all__ = [
    "CategoryRepository",
    "TransactionRepository",
    "UserRepository",
    "create_sqlite_database",
]
