"""CLI helper for resolving the --user option."""

import click

from pennywise.database.base import UserRepository
from pennywise.domain.entities import User
from pennywise.domain.errors import DomainError
from pennywise.utils.user_resolver import resolve_user


def resolve_user_or_exit(ctx: click.Context, user_repository: UserRepository, user: str) -> User:
    """Resolve a user id or email, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_user(user_repository, user)
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
