"""User management commands."""

import click

from pennywise.cli.error_handling import handle_domain_error
from pennywise.domain.errors import DomainError
from pennywise.usecases.create_user import CreateUserUseCase
from pennywise.usecases.dto import CreateUserRequest


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("create")
@click.argument("name")
@click.option("--email", required=True, help="Email address used to log in")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password (at least 6 characters); prompted for when omitted",
)
@click.pass_context
def create_user(ctx, name: str, email: str, password: str):
    """Register a new user.

    Examples:
        pennywise user create "Jane Doe" --email jane@example.com
        pennywise user create "Jane Doe" --email jane@example.com --password secret123
    """
    db = ctx.obj["db"]
    use_case = CreateUserUseCase(db.users)

    try:
        response = use_case.execute(CreateUserRequest(name=name, email=email, password=password))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created user '{response.name}' <{response.email}> (ID: {response.id})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
