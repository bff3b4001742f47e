"""Main CLI entry point."""

import logging

import click
from bankrec.database.factories import create_sqlite_database

# Import and register all commands at module level
from bankrec.cli.commands import (
    account,
    category,
    banks,
    preview,
    import_cmd,
    add,
    transaction,
    reconcile,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BANKREC_DB_PATH environment variable)",
    envvar="BANKREC_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress at INFO level")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """bankrec - Bank statement import and reconciliation.

    Import CSV statement exports from South African banks into per-account
    ledgers and reconcile ledger transactions against statement balances.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
banks.register_commands(cli)
preview.register_commands(cli)
import_cmd.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
reconcile.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
