"""Record a new transaction."""

from datetime import datetime, time
from decimal import Decimal

import structlog

from pennywise.config import DEFAULT_CURRENCY
from pennywise.database.base import (
    CategoryRepository,
    TransactionRepository,
    UserRepository,
)
from pennywise.domain.entities import Transaction
from pennywise.domain.errors import (
    NotFoundError,
    OwnershipError,
    ValidationError,
    category_not_found,
    category_not_owned,
    user_not_found,
)
from pennywise.domain.value_objects import Money
from pennywise.usecases.dto import CreateTransactionRequest, TransactionResponse

logger = structlog.get_logger(__name__)

# Amounts are stored with two decimal places
CENT = Decimal("0.01")


class CreateTransactionUseCase:
    """Create a transaction for an existing user, optionally categorised."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
        default_currency: str = DEFAULT_CURRENCY,
    ):
        """Initialize the use case.

        Args:
            transaction_repository: Repository the new transaction is saved to
            user_repository: Repository used to check the owner exists
            category_repository: Repository used to check the category
            default_currency: Currency used when the request does not name one
        """
        self.transaction_repository = transaction_repository
        self.user_repository = user_repository
        self.category_repository = category_repository
        self.default_currency = default_currency

    def execute(self, request: CreateTransactionRequest) -> TransactionResponse:
        """Create and store a transaction.

        Request shape, amount and currency are checked before any repository lookup.

        Raises:
            ValidationError: If a required field is missing, the amount is not positive
                or has sub-cent precision, or the currency code is invalid
            NotFoundError: If the user or the category does not exist
            OwnershipError: If the category belongs to another user
        """
        self._validate_request(request)
        amount = Money(request.amount, request.currency or self.default_currency)

        if self.user_repository.find_by_id(request.user_id) is None:
            raise NotFoundError(user_not_found(request.user_id))

        if request.category_id is not None:
            category = self.category_repository.find_by_id(request.category_id)
            if category is None:
                raise NotFoundError(category_not_found(request.category_id))
            if category.user_id != request.user_id:
                raise OwnershipError(category_not_owned())

        transaction = Transaction.create(
            user_id=request.user_id,
            amount=amount,
            type=request.type,
            description=request.description,
            transaction_date=datetime.combine(request.date, time.min),
        )
        if request.category_id is not None:
            transaction.assign_category(request.category_id)

        saved = self.transaction_repository.save(transaction)

        logger.info(
            "transaction_created",
            transaction_id=str(saved.id),
            user_id=str(saved.user_id),
            type=saved.type.value,
        )
        return TransactionResponse.from_entity(saved)

    @staticmethod
    def _validate_request(request: CreateTransactionRequest) -> None:
        if request is None:
            raise ValidationError("Request cannot be null")
        if request.user_id is None:
            raise ValidationError("User ID is required")
        if request.amount is None:
            raise ValidationError("Amount is required")
        if request.amount <= 0:
            raise ValidationError("Amount must be greater than zero")
        amount = Decimal(request.amount)
        if amount != amount.quantize(CENT):
            raise ValidationError("Amount cannot have more than 2 decimal places")
        if request.type is None:
            raise ValidationError("Transaction type is required")
        if request.description is None or not request.description.strip():
            raise ValidationError("Description is required")
        if request.date is None:
            raise ValidationError("Date is required")
