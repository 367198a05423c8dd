"""Register a new user."""

import structlog

from pennywise.database.base import UserRepository
from pennywise.domain.entities import User
from pennywise.domain.errors import ConflictError, ValidationError, duplicate_email
from pennywise.domain.value_objects import Email
from pennywise.usecases.dto import CreateUserRequest, UserResponse

logger = structlog.get_logger(__name__)


class CreateUserUseCase:
    """Create a user with a unique email address."""

    def __init__(self, user_repository: UserRepository):
        """Initialize the use case.

        Args:
            user_repository: Repository used for the uniqueness check and for saving
        """
        self.user_repository = user_repository

    def execute(self, request: CreateUserRequest) -> UserResponse:
        """Create and store a user.

        Args:
            request: Name, raw email address and plain password

        Returns:
            The stored user, without password data

        Raises:
            ValidationError: If name, password or email is missing or malformed
            ConflictError: If a user with the same (normalized) email exists
        """
        self._validate_request(request)

        email = Email(request.email)

        # Not atomic with the save below; a unique index in storage is the backstop
        if self.user_repository.find_by_email(email) is not None:
            raise ConflictError(duplicate_email(request.email))

        user = User.create(request.name, email, request.password)
        saved = self.user_repository.save(user)

        logger.info("user_created", user_id=str(saved.id))
        return UserResponse.from_entity(saved)

    @staticmethod
    def _validate_request(request: CreateUserRequest) -> None:
        if request is None:
            raise ValidationError("Request cannot be null")
        if request.name is None or not request.name.strip():
            raise ValidationError("Name cannot be null or empty")
        if request.password is None or not request.password.strip():
            raise ValidationError("Password cannot be null or empty")
