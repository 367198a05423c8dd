"""Change the mutable fields of a transaction."""

import structlog

from pennywise.database.base import CategoryRepository, TransactionRepository
from pennywise.domain.errors import (
    ImmutableFieldError,
    NotFoundError,
    OwnershipError,
    ValidationError,
    category_not_found,
    category_not_owned,
    transaction_not_found,
)
from pennywise.usecases.dto import TransactionResponse, UpdateTransactionRequest

logger = structlog.get_logger(__name__)

# Checked in this order; the first one present is reported
IMMUTABLE_FIELDS = ("amount", "type", "date")


class UpdateTransactionUseCase:
    """Update description and/or category of an existing transaction.

    Amount, type and date cannot change after creation. A request that sets
    any of them is rejected before anything is modified; to correct those
    fields, delete the transaction and record a new one.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self.transaction_repository = transaction_repository
        self.category_repository = category_repository

    def execute(self, request: UpdateTransactionRequest) -> TransactionResponse:
        """Apply a partial update.

        Fields left as ``None`` are unchanged. The transaction is saved even
        when no mutable field was supplied.

        Raises:
            ValidationError: If the id is missing or the description is blank
            NotFoundError: If the transaction or the category does not exist
            ImmutableFieldError: If amount, type or date is supplied
            OwnershipError: If the category belongs to another user
        """
        self._validate_request(request)

        transaction = self.transaction_repository.find_by_id(request.transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(request.transaction_id))

        self._reject_immutable_fields(request)

        if request.description is not None:
            if not request.description.strip():
                raise ValidationError("Description cannot be empty")
            transaction.update_description(request.description)

        if request.category_id is not None:
            category = self.category_repository.find_by_id(request.category_id)
            if category is None:
                raise NotFoundError(category_not_found(request.category_id))
            if category.user_id != transaction.user_id:
                raise OwnershipError(category_not_owned())
            transaction.assign_category(request.category_id)

        saved = self.transaction_repository.save(transaction)

        logger.info("transaction_updated", transaction_id=str(saved.id))
        return TransactionResponse.from_entity(saved)

    @staticmethod
    def _validate_request(request: UpdateTransactionRequest) -> None:
        if request is None:
            raise ValidationError("Request cannot be null")
        if request.transaction_id is None:
            raise ValidationError("Transaction ID cannot be null")

    @staticmethod
    def _reject_immutable_fields(request: UpdateTransactionRequest) -> None:
        for field in IMMUTABLE_FIELDS:
            if getattr(request, field) is not None:
                logger.warning(
                    "immutable_field_update_rejected",
                    transaction_id=str(request.transaction_id),
                    field=field,
                )
                raise ImmutableFieldError(field)
