"""Authentication command."""

import click

from pennywise.cli.error_handling import handle_domain_error
from pennywise.domain.errors import DomainError
from pennywise.usecases.authenticate_user import AuthenticateUserUseCase
from pennywise.usecases.dto import AuthenticationRequest


@click.command("login")
@click.option("--email", required=True, help="Email address")
@click.option("--password", prompt=True, hide_input=True, help="Password; prompted for when omitted")
@click.pass_context
def login(ctx, email: str, password: str):
    """Check credentials and print an access token."""
    db = ctx.obj["db"]
    use_case = AuthenticateUserUseCase(db.users)

    try:
        response = use_case.execute(AuthenticationRequest(email=email, password=password))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Logged in as {response.name} <{response.email}>")
    click.echo(f"Token: {response.token}")


def register_commands(cli):
    """Register authentication commands with main CLI."""
    cli.add_command(login)
