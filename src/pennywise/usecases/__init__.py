"""Application use cases for pennywise."""

from pennywise.usecases.authenticate_user import AuthenticateUserUseCase
from pennywise.usecases.create_category import CreateCategoryUseCase
from pennywise.usecases.create_transaction import CreateTransactionUseCase
from pennywise.usecases.create_user import CreateUserUseCase
from pennywise.usecases.delete_transaction import DeleteTransactionUseCase
from pennywise.usecases.list_transactions import ListTransactionsUseCase
from pennywise.usecases.update_transaction import UpdateTransactionUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "CreateCategoryUseCase",
    "CreateTransactionUseCase",
    "CreateUserUseCase",
    "DeleteTransactionUseCase",
    "ListTransactionsUseCase",
    "UpdateTransactionUseCase",
]
