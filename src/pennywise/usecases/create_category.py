"""Create a category for a user."""

import structlog

from pennywise.database.base import CategoryRepository, UserRepository
from pennywise.domain.entities import Category
from pennywise.domain.errors import (
    NotFoundError,
    OwnershipError,
    ValidationError,
    category_not_found,
    user_not_found,
)
from pennywise.usecases.dto import CategoryResponse, CreateCategoryRequest

logger = structlog.get_logger(__name__)


class CreateCategoryUseCase:
    """Create a top-level category or a subcategory of one of the user's categories."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        user_repository: UserRepository,
    ):
        self.category_repository = category_repository
        self.user_repository = user_repository

    def execute(self, request: CreateCategoryRequest) -> CategoryResponse:
        """Create and store a category.

        Raises:
            ValidationError: If a required field is missing or the color is malformed
            NotFoundError: If the user or the parent category does not exist
            OwnershipError: If the parent category belongs to another user
        """
        if request is None:
            raise ValidationError("Request cannot be null")
        if request.user_id is None:
            raise ValidationError("User ID is required")
        if request.name is None or not request.name.strip():
            raise ValidationError("Category name is required")
        if request.type is None:
            raise ValidationError("Transaction type is required")

        if self.user_repository.find_by_id(request.user_id) is None:
            raise NotFoundError(user_not_found(request.user_id))

        if request.parent_category_id is not None:
            parent = self.category_repository.find_by_id(request.parent_category_id)
            if parent is None:
                raise NotFoundError(category_not_found(request.parent_category_id))
            if parent.user_id != request.user_id:
                raise OwnershipError("Parent category does not belong to the user")

        category = Category.create(
            user_id=request.user_id,
            name=request.name,
            type=request.type,
            parent_category_id=request.parent_category_id,
        )
        category.set_color(request.color)

        saved = self.category_repository.save(category)

        logger.info("category_created", category_id=str(saved.id), user_id=str(saved.user_id))
        return CategoryResponse.from_entity(saved)
