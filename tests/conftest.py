"""Shared pytest fixtures for pennywise tests."""

import logging
import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest
import structlog

from pennywise.database.factories import create_sqlite_database
from pennywise.domain.entities import TransactionType
from pennywise.usecases.create_category import CreateCategoryUseCase
from pennywise.usecases.create_transaction import CreateTransactionUseCase
from pennywise.usecases.create_user import CreateUserUseCase
from pennywise.usecases.dto import (
    CreateCategoryRequest,
    CreateTransactionRequest,
    CreateUserRequest,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore root logging handlers and structlog config after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_repository(temp_db):
    return temp_db.users


@pytest.fixture
def category_repository(temp_db):
    return temp_db.categories


@pytest.fixture
def transaction_repository(temp_db):
    return temp_db.transactions


@pytest.fixture
def create_user(user_repository):
    """Create a CreateUserUseCase with a temporary database."""
    return CreateUserUseCase(user_repository)


@pytest.fixture
def create_transaction(transaction_repository, user_repository, category_repository):
    """Create a CreateTransactionUseCase with a temporary database."""
    return CreateTransactionUseCase(transaction_repository, user_repository, category_repository)


@pytest.fixture
def sample_user(create_user, user_repository):
    """Create a sample user for testing."""
    response = create_user.execute(
        CreateUserRequest(name="Jane Doe", email="jane@example.com", password="secret123")
    )
    return user_repository.find_by_id(response.id)


@pytest.fixture
def other_user(create_user, user_repository):
    """Create a second user for ownership tests."""
    response = create_user.execute(
        CreateUserRequest(name="John Roe", email="john@example.com", password="hunter22")
    )
    return user_repository.find_by_id(response.id)


@pytest.fixture
def sample_category(category_repository, user_repository, sample_user):
    """Create an expense category owned by the sample user."""
    response = CreateCategoryUseCase(category_repository, user_repository).execute(
        CreateCategoryRequest(user_id=sample_user.id, name="Groceries", type=TransactionType.EXPENSE)
    )
    return category_repository.find_by_id(response.id)


@pytest.fixture
def sample_transaction(create_transaction, transaction_repository, sample_user):
    """Create an expense transaction for the sample user."""
    response = create_transaction.execute(
        CreateTransactionRequest(
            user_id=sample_user.id,
            amount=Decimal("50.00"),
            type=TransactionType.EXPENSE,
            description="Lunch",
            date=date(2024, 1, 15),
        )
    )
    return transaction_repository.find_by_id(response.id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
