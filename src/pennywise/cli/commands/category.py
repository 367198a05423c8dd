"""Category management commands."""

from uuid import UUID

import click

from pennywise.cli.error_handling import handle_domain_error
from pennywise.cli.user_resolution import resolve_user_or_exit
from pennywise.domain.entities import TransactionType
from pennywise.domain.errors import DomainError
from pennywise.usecases.create_category import CreateCategoryUseCase
from pennywise.usecases.dto import CreateCategoryRequest


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("create")
@click.argument("name")
@click.option("--user", "user_ref", required=True, help="Owner: user ID or email")
@click.option(
    "--type",
    "category_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    required=True,
    help="Kind of transactions the category groups",
)
@click.option("--parent", type=click.UUID, help="Parent category ID")
@click.option("--color", help="Display color in hex format (e.g., #FF5733)")
@click.pass_context
def create_category(
    ctx,
    name: str,
    user_ref: str,
    category_type: str,
    parent: UUID | None,
    color: str | None,
):
    """Create a new category.

    Examples:
        pennywise category create Groceries --user jane@example.com --type expense
        pennywise category create Salary --user jane@example.com --type income --color "#00AA00"
    """
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db.users, user_ref)
    use_case = CreateCategoryUseCase(db.categories, db.users)

    request = CreateCategoryRequest(
        user_id=owner.id,
        name=name,
        type=TransactionType(category_type.upper()),
        parent_category_id=parent,
        color=color,
    )
    try:
        response = use_case.execute(request)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    parent_str = f" under {parent}" if parent else ""
    click.echo(f"Created category '{response.name}'{parent_str} (ID: {response.id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
