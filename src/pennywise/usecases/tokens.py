"""Authentication token generation.

Real token issuance (JWT or similar) lives outside the core; the use case only
needs something that turns an authenticated user into an opaque string.
"""

from abc import ABC, abstractmethod

from pennywise.domain.entities import User


class TokenGenerator(ABC):
    """Issues an access token for an authenticated user."""

    @abstractmethod
    def generate(self, user: User) -> str:
        """Return a token for ``user``."""
        pass


class PlaceholderTokenGenerator(TokenGenerator):
    """Non-secret token derived from the user id. Not for production use."""

    def generate(self, user: User) -> str:
        return f"temporary-token-{user.id}"
