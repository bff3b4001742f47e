"""Statement import command."""

from pathlib import Path

import click
from bankrec.cli.account_resolution import resolve_account_or_exit
from bankrec.cli.error_handling import handle_domain_error
from bankrec.domain.account import AccountService
from bankrec.domain.category import CategoryService
from bankrec.domain.statement_import import StatementImportService


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--account", required=True, help="Account name or ID")
@click.option("--bank", help="Bank identifier (see 'bankrec banks'); detected if omitted")
@click.option("--category", help="Category name applied to every imported transaction")
@click.option(
    "--allow-duplicates",
    is_flag=True,
    help="Import rows even if they match transactions already in the account",
)
@click.option(
    "--match-description",
    is_flag=True,
    help="Only treat rows as duplicates when descriptions also match",
)
@click.pass_context
def import_statement(
    ctx,
    csv_file: str,
    account: str,
    bank: str | None,
    category: str | None,
    allow_duplicates: bool,
    match_description: bool,
):
    """Import transactions from a bank statement CSV file.

    Examples:
        bankrec import statement.csv --account Cheque
        bankrec import export.csv --account 2 --bank fnb --category Groceries
    """
    db = ctx.obj["db"]
    service = StatementImportService(db)
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        category_id = None
        if category:
            category_id = CategoryService(db).require_category_by_name(category).id

        content = Path(csv_file).read_text(encoding="utf-8-sig")
        result = service.import_statement(
            csv_content=content,
            account_id=account_id,
            bank_name=bank,
            category_id=category_id,
            skip_duplicates=not allow_duplicates,
            match_description=match_description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nImport complete ({result.bank_name}):")
    click.echo(f"  {result.message}")
    click.echo(f"  Imported: {result.imported} transactions")
    click.echo(f"  Skipped: {result.duplicates} duplicates")
    if result.parse_errors:
        click.echo(f"  Errors: {len(result.parse_errors)}")
        for error in result.parse_errors:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)
