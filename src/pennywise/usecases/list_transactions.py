"""List a user's transactions page by page."""

from datetime import date
from typing import Optional
from uuid import UUID

import structlog

from pennywise.database.base import TransactionRepository, UserRepository
from pennywise.domain.errors import NotFoundError, ValidationError, user_not_found
from pennywise.usecases.dto import (
    ListTransactionsRequest,
    PagedTransactionsResponse,
    TransactionResponse,
)

logger = structlog.get_logger(__name__)


def count_pages(total_elements: int, size: int) -> int:
    """Number of pages needed for ``total_elements`` items, ``size`` per page."""
    return -(-total_elements // size)


class ListTransactionsUseCase:
    """Filtered, paginated listing of one user's transactions.

    Filtering itself (inclusive date bounds, exact type and category match)
    is done by the repository.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        user_repository: UserRepository,
    ):
        self.transaction_repository = transaction_repository
        self.user_repository = user_repository

    def execute(self, request: ListTransactionsRequest) -> PagedTransactionsResponse:
        """Return one page of transactions plus paging totals.

        Raises:
            ValidationError: If paging parameters or the date range are invalid
            NotFoundError: If the user does not exist
        """
        self._validate_request(request)
        self._validate_pagination(request.page, request.size)
        self._validate_date_range(request.start_date, request.end_date)
        self._validate_user(request.user_id)

        transactions = self.transaction_repository.find_by_user_id_with_filters(
            request.user_id,
            request.start_date,
            request.end_date,
            request.type,
            request.category_id,
            request.page,
            request.size,
        )
        total_elements = self.transaction_repository.count_by_user_id_with_filters(
            request.user_id,
            request.start_date,
            request.end_date,
            request.type,
            request.category_id,
        )

        logger.debug(
            "transactions_listed",
            user_id=str(request.user_id),
            page=request.page,
            returned=len(transactions),
            total=total_elements,
        )
        return PagedTransactionsResponse(
            transactions=[TransactionResponse.from_entity(t) for t in transactions],
            total_elements=total_elements,
            total_pages=count_pages(total_elements, request.size),
            current_page=request.page,
            page_size=request.size,
        )

    @staticmethod
    def _validate_request(request: ListTransactionsRequest) -> None:
        if request is None:
            raise ValidationError("Request cannot be null")
        if request.user_id is None:
            raise ValidationError("User ID cannot be null")

    @staticmethod
    def _validate_pagination(page: int, size: int) -> None:
        if page < 0:
            raise ValidationError("Page number cannot be negative")
        if size <= 0:
            raise ValidationError("Page size must be greater than zero")

    @staticmethod
    def _validate_date_range(start_date: Optional[date], end_date: Optional[date]) -> None:
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError("Start date cannot be after end date")

    def _validate_user(self, user_id: UUID) -> None:
        if self.user_repository.find_by_id(user_id) is None:
            raise NotFoundError(user_not_found(user_id))
