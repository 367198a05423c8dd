"""Tests for CreateCategoryUseCase."""

from uuid import uuid4

import pytest

from pennywise.domain.entities import TransactionType
from pennywise.domain.errors import NotFoundError, OwnershipError, ValidationError
from pennywise.usecases.create_category import CreateCategoryUseCase
from pennywise.usecases.dto import CreateCategoryRequest


@pytest.fixture
def create_category(category_repository, user_repository):
    return CreateCategoryUseCase(category_repository, user_repository)


class TestCreateCategory:
    """Tests for creating categories."""

    def test_create_category(self, create_category, category_repository, sample_user):
        response = create_category.execute(
            CreateCategoryRequest(
                user_id=sample_user.id, name="Salary", type=TransactionType.INCOME, color="#00AA00"
            )
        )

        assert response.name == "Salary"
        assert response.type is TransactionType.INCOME
        assert response.color == "#00AA00"
        assert response.parent_category_id is None

        stored = category_repository.find_by_id(response.id)
        assert stored.user_id == sample_user.id
        assert stored.color == "#00AA00"

    def test_create_subcategory(self, create_category, category_repository, sample_user, sample_category):
        response = create_category.execute(
            CreateCategoryRequest(
                user_id=sample_user.id,
                name="Fruit",
                type=TransactionType.EXPENSE,
                parent_category_id=sample_category.id,
            )
        )
        assert response.parent_category_id == sample_category.id
        assert category_repository.find_by_id(response.id).is_subcategory()

    def test_parent_of_another_user_rejected(self, create_category, sample_category, other_user):
        with pytest.raises(OwnershipError, match="Parent category does not belong to the user"):
            create_category.execute(
                CreateCategoryRequest(
                    user_id=other_user.id,
                    name="Fruit",
                    type=TransactionType.EXPENSE,
                    parent_category_id=sample_category.id,
                )
            )

    def test_unknown_parent_rejected(self, create_category, sample_user):
        parent_id = uuid4()
        with pytest.raises(NotFoundError, match=f"Category not found with id: {parent_id}"):
            create_category.execute(
                CreateCategoryRequest(
                    user_id=sample_user.id,
                    name="Fruit",
                    type=TransactionType.EXPENSE,
                    parent_category_id=parent_id,
                )
            )

    def test_unknown_user_rejected(self, create_category):
        with pytest.raises(NotFoundError, match="User not found with id"):
            create_category.execute(
                CreateCategoryRequest(user_id=uuid4(), name="Food", type=TransactionType.EXPENSE)
            )

    def test_invalid_color_rejected(self, create_category, sample_user):
        with pytest.raises(ValidationError, match="hex format"):
            create_category.execute(
                CreateCategoryRequest(
                    user_id=sample_user.id, name="Food", type=TransactionType.EXPENSE, color="blue"
                )
            )

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"user_id": None}, "User ID is required"),
            ({"name": "  "}, "Category name is required"),
            ({"type": None}, "Transaction type is required"),
        ],
    )
    def test_missing_fields_rejected(self, create_category, sample_user, overrides, message):
        fields = {"user_id": sample_user.id, "name": "Food", "type": TransactionType.EXPENSE}
        fields.update(overrides)
        with pytest.raises(ValidationError, match=message):
            create_category.execute(CreateCategoryRequest(**fields))
