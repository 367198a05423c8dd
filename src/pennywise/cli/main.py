"""Main CLI entry point."""

import dataclasses

import click

from pennywise.cli.commands import auth, category, transaction, user
from pennywise.config import Settings
from pennywise.database.factories import create_sqlite_database
from pennywise.logging_config import bind_context, setup_logging


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PENNYWISE_DB_PATH environment variable)",
    envvar="PENNYWISE_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides PENNYWISE_LOG_LEVEL environment variable)",
    envvar="PENNYWISE_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Pennywise - Personal finance tracking.

    Record income and expenses per user, organise them in categories and
    browse them page by page.
    """
    ctx.ensure_object(dict)

    settings = Settings.from_env()
    overrides = {}
    if db_path:
        overrides["database_path"] = db_path
    if log_level:
        overrides["log_level"] = log_level.upper()
    settings = dataclasses.replace(settings, **overrides)

    setup_logging(settings.log_level, json_output=settings.log_json)
    ctx.obj["settings"] = settings

    # Open the database only when a command actually runs (not for --help)
    if ctx.invoked_subcommand is not None:
        bind_context(command=ctx.invoked_subcommand)
        db = create_sqlite_database(database_path=settings.database_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


user.register_commands(cli)
auth.register_commands(cli)
category.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
