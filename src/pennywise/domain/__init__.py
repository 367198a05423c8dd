"""Domain layer for pennywise: value objects, entities and errors."""

from pennywise.domain.entities import (
    Budget,
    Category,
    FinancialGoal,
    Transaction,
    TransactionType,
    User,
)
from pennywise.domain.value_objects import DateRange, Email, Money

__all__ = [
    "Budget",
    "Category",
    "FinancialGoal",
    "Transaction",
    "TransactionType",
    "User",
    "DateRange",
    "Email",
    "Money",
]
