"""Transaction management commands."""

from datetime import date
from uuid import UUID

import click

from pennywise.cli.error_handling import handle_domain_error
from pennywise.cli.user_resolution import resolve_user_or_exit
from pennywise.domain.entities import TransactionType
from pennywise.domain.errors import DomainError
from pennywise.usecases.create_transaction import CreateTransactionUseCase
from pennywise.usecases.delete_transaction import DeleteTransactionUseCase
from pennywise.usecases.dto import (
    CreateTransactionRequest,
    DeleteTransactionRequest,
    ListTransactionsRequest,
    UpdateTransactionRequest,
)
from pennywise.usecases.list_transactions import ListTransactionsUseCase
from pennywise.usecases.update_transaction import UpdateTransactionUseCase
from pennywise.utils.amount_parser import parse_amount
from pennywise.utils.date_parser import parse_date

TYPE_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


def _parse_type(value: str | None) -> TransactionType | None:
    return TransactionType(value.upper()) if value else None


def _parse_date_or_exit(ctx: click.Context, value: str | None, label: str) -> date | None:
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("add")
@click.option("--user", "user_ref", required=True, help="Owner: user ID or email")
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45 or R$1,234.56)")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, required=True, help="income or expense")
@click.option("--description", required=True, help="Transaction description")
@click.option("--date", "date_str", default="today", show_default=True, help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--category", type=click.UUID, help="Category ID")
@click.option("--currency", help="ISO currency code (defaults to PENNYWISE_DEFAULT_CURRENCY)")
@click.pass_context
def add_transaction(
    ctx,
    user_ref: str,
    amount: str,
    transaction_type: str,
    description: str,
    date_str: str,
    category: UUID | None,
    currency: str | None,
) -> None:
    """Record a new transaction.

    Examples:
        pennywise transaction add --user jane@example.com --amount 50 --type expense --description "Lunch"
        pennywise transaction add --user jane@example.com --amount 3000 --type income --description Salary --date 2024-01-05
    """
    db = ctx.obj["db"]
    settings = ctx.obj["settings"]
    owner = resolve_user_or_exit(ctx, db.users, user_ref)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    txn_date = _parse_date_or_exit(ctx, date_str, "date")

    use_case = CreateTransactionUseCase(
        db.transactions,
        db.users,
        db.categories,
        default_currency=settings.default_currency,
    )
    request = CreateTransactionRequest(
        user_id=owner.id,
        amount=txn_amount,
        type=_parse_type(transaction_type),
        description=description,
        date=txn_date,
        category_id=category,
        currency=currency,
    )
    try:
        response = use_case.execute(request)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Created {response.type.value.lower()} of {response.currency} {response.amount:,.2f} "
        f"on {response.date} (ID: {response.id})"
    )


@transaction_group.command("update")
@click.argument("transaction_id", type=click.UUID)
@click.option("--description", help="New description")
@click.option("--category", type=click.UUID, help="New category ID")
@click.option("--amount", help="Rejected: amounts cannot be changed")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="Rejected: types cannot be changed")
@click.option("--date", "date_str", help="Rejected: dates cannot be changed")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: UUID,
    description: str | None,
    category: UUID | None,
    amount: str | None,
    transaction_type: str | None,
    date_str: str | None,
) -> None:
    """Update the description or category of a transaction.

    Amount, type and date are fixed once a transaction is recorded. Delete it
    and add a new one to correct them.

    Examples:
        pennywise transaction update <ID> --description "Team lunch"
        pennywise transaction update <ID> --category <CATEGORY_ID>
    """
    db = ctx.obj["db"]

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    use_case = UpdateTransactionUseCase(db.transactions, db.categories)
    request = UpdateTransactionRequest(
        transaction_id=transaction_id,
        amount=txn_amount,
        type=_parse_type(transaction_type),
        description=description,
        date=_parse_date_or_exit(ctx, date_str, "date"),
        category_id=category,
    )
    try:
        use_case.execute(request)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=click.UUID)
@click.pass_context
def delete_transaction(ctx, transaction_id: UUID) -> None:
    """Delete a transaction.

    Examples:
        pennywise transaction delete <ID>
    """
    db = ctx.obj["db"]
    use_case = DeleteTransactionUseCase(db.transactions)

    try:
        use_case.execute(DeleteTransactionRequest(transaction_id=transaction_id))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("list")
@click.option("--user", "user_ref", required=True, help="Owner: user ID or email")
@click.option("--start-date", help="Start date, inclusive (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date, inclusive (YYYY-MM-DD or relative like 'today')")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="Only income or only expenses")
@click.option("--category", type=click.UUID, help="Category ID")
@click.option("--page", type=int, default=0, show_default=True, help="Zero-based page number")
@click.option("--size", type=int, default=20, show_default=True, help="Transactions per page")
@click.pass_context
def list_transactions(
    ctx,
    user_ref: str,
    start_date: str | None,
    end_date: str | None,
    transaction_type: str | None,
    category: UUID | None,
    page: int,
    size: int,
) -> None:
    """View a user's transactions, newest first."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db.users, user_ref)

    start = _parse_date_or_exit(ctx, start_date, "start date")
    end = _parse_date_or_exit(ctx, end_date, "end date")

    use_case = ListTransactionsUseCase(db.transactions, db.users)
    request = ListTransactionsRequest(
        user_id=owner.id,
        start_date=start,
        end_date=end,
        type=_parse_type(transaction_type),
        category_id=category,
        page=page,
        size=size,
    )
    try:
        result = use_case.execute(request)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not result.transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {result.total_elements} transaction(s):")
    click.echo("-" * 110)
    click.echo(f"{'ID':<36}  {'Date':<10}  {'Type':<7}  {'Amount':>16}  {'Description':<30}")
    click.echo("-" * 110)

    for txn in result.transactions:
        amount_str = f"{txn.currency} {txn.amount:,.2f}"
        click.echo(
            f"{str(txn.id):<36}  {str(txn.date):<10}  {txn.type.value:<7}  "
            f"{amount_str:>16}  {txn.description[:30]:<30}"
        )

    click.echo("-" * 110)
    click.echo(f"Page {result.current_page + 1} of {result.total_pages} ({result.page_size} per page)")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
