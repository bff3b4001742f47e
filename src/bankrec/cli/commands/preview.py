"""Statement preview command."""

from pathlib import Path

import click
from bankrec.cli.error_handling import handle_domain_error
from bankrec.domain.statement_import import StatementImportService


@click.command("preview")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--bank", help="Bank identifier (see 'bankrec banks'); detected if omitted")
@click.option("--limit", default=20, show_default=True, help="Maximum rows to display")
@click.pass_context
def preview_statement(ctx, csv_file: str, bank: str | None, limit: int):
    """Parse a statement CSV and show what would be imported.

    Nothing is written to the database.

    Examples:
        bankrec preview statement.csv
        bankrec preview export.csv --bank capitec
    """
    db = ctx.obj["db"]
    service = StatementImportService(db)

    try:
        content = Path(csv_file).read_text(encoding="utf-8-sig")
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    result = service.preview_statement(content, bank_name=bank)

    click.echo(f"\nBank: {result.bank_name}")
    if result.account_number:
        click.echo(f"Account number: {result.account_number}")
    click.echo(f"Transactions: {len(result.transactions)}")

    for txn in result.transactions[:limit]:
        click.echo(
            f"  {txn.date} | {txn.description[:40]:40s} | "
            f"{txn.direction.value:7s} | {txn.amount:>12,.2f}"
        )
    if len(result.transactions) > limit:
        click.echo(f"  ... {len(result.transactions) - limit} more")

    if result.errors:
        click.echo(f"Errors: {len(result.errors)}")
        for error in result.errors:
            click.echo(f"    {error}", err=True)

    if not result.success:
        ctx.exit(1)


def register_commands(cli):
    """Register preview command with main CLI."""
    cli.add_command(preview_statement)
