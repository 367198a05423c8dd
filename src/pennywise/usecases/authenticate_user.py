"""Verify user credentials and issue a token."""

from typing import Optional

import structlog

from pennywise.database.base import UserRepository
from pennywise.domain.errors import AuthenticationError, ValidationError
from pennywise.domain.value_objects import Email
from pennywise.usecases.dto import AuthenticationRequest, AuthenticationResponse
from pennywise.usecases.tokens import PlaceholderTokenGenerator, TokenGenerator

logger = structlog.get_logger(__name__)


class AuthenticateUserUseCase:
    """Authenticate by email and password.

    Unknown accounts and wrong passwords fail with the same error so callers
    cannot probe which email addresses are registered.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        token_generator: Optional[TokenGenerator] = None,
    ):
        self.user_repository = user_repository
        self.token_generator = token_generator or PlaceholderTokenGenerator()

    def execute(self, request: AuthenticationRequest) -> AuthenticationResponse:
        """Check credentials and return the user's identity with a token.

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If the credentials do not match a user
        """
        self._validate_request(request)

        try:
            email = Email(request.email)
        except ValidationError:
            logger.warning("authentication_failed", reason="malformed_email")
            raise AuthenticationError() from None

        user = self.user_repository.find_by_email(email)
        if user is None or not user.verify_password(request.password):
            logger.warning("authentication_failed")
            raise AuthenticationError()

        token = self.token_generator.generate(user)
        logger.info("user_authenticated", user_id=str(user.id))
        return AuthenticationResponse(
            user_id=user.id,
            name=user.name,
            email=user.email.value,
            token=token,
        )

    @staticmethod
    def _validate_request(request: AuthenticationRequest) -> None:
        if (
            request is None
            or request.email is None
            or not request.email.strip()
            or request.password is None
            or not request.password.strip()
        ):
            raise ValidationError("Email and password are required")
