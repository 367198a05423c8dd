"""Delete a transaction."""

import structlog

from pennywise.database.base import TransactionRepository
from pennywise.domain.errors import NotFoundError, ValidationError, transaction_not_found
from pennywise.usecases.dto import DeleteTransactionRequest

logger = structlog.get_logger(__name__)


class DeleteTransactionUseCase:
    """Delete a transaction by id.

    There is no ownership check: any caller that knows the id can delete the
    transaction. Authorization is left to the transport layer.
    """

    def __init__(self, transaction_repository: TransactionRepository):
        self.transaction_repository = transaction_repository

    def execute(self, request: DeleteTransactionRequest) -> None:
        """Delete the transaction.

        Raises:
            ValidationError: If the request or id is missing
            NotFoundError: If the transaction does not exist
        """
        if request is None:
            raise ValidationError("Request cannot be null")
        if request.transaction_id is None:
            raise ValidationError("Transaction ID cannot be null")

        transaction_id = request.transaction_id
        if self.transaction_repository.find_by_id(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.transaction_repository.delete_by_id(transaction_id)
        logger.info("transaction_deleted", transaction_id=str(transaction_id))
