"""Transaction listing commands."""

import click
from bankrec.cli.account_resolution import resolve_account_or_exit
from bankrec.domain.account import AccountService
from bankrec.domain.transaction import TransactionService
from bankrec.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Inspect ledger transactions."""
    pass


@transaction_group.command("list")
@click.option("--account", help="Account name or ID")
@click.option("--unreconciled", is_flag=True, help="Only show transactions not yet reconciled")
@click.option("--start-date", help="Earliest transaction date")
@click.option("--end-date", help="Latest transaction date")
@click.pass_context
def list_transactions(
    ctx,
    account: str | None,
    unreconciled: bool,
    start_date: str | None,
    end_date: str | None,
):
    """List ledger transactions, newest first.

    Examples:
        bankrec transaction list --account Cheque --unreconciled
        bankrec transaction list --start-date "last month"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    transactions = service.list_transactions(
        account_id=account_id,
        reconciled=False if unreconciled else None,
        start_date=start,
        end_date=end,
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'ID':>5s} | {'Date':10s} | {'Description':40s} | {'Amount':>12s} | R")
    click.echo("-" * 80)
    for txn in transactions:
        flag = "*" if txn.is_reconciled else " "
        click.echo(
            f"{txn.id:5d} | {txn.date} | {txn.description[:40]:40s} | "
            f"{txn.signed_amount:>12,.2f} | {flag}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
