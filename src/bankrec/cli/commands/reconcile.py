"""Reconciliation commands."""

import click
from bankrec.cli.account_resolution import resolve_account_or_exit
from bankrec.cli.error_handling import handle_domain_error
from bankrec.domain.account import AccountService
from bankrec.domain.reconciliation import ReconciliationService
from bankrec.utils.amount_parser import parse_amount
from bankrec.utils.date_parser import parse_date


@click.command("reconcile")
@click.argument("transaction_ids", nargs=-1, type=int, required=True)
@click.option("--account", required=True, help="Account name or ID")
@click.option("--statement-balance", help="Closing balance shown on the bank statement")
@click.option("--statement-date", help="Date of the bank statement")
@click.option("--dry-run", is_flag=True, help="Show the totals without reconciling")
@click.pass_context
def reconcile_transactions(
    ctx,
    transaction_ids: tuple[int, ...],
    account: str,
    statement_balance: str | None,
    statement_date: str | None,
    dry_run: bool,
):
    """Mark transactions as reconciled against a bank statement.

    The transactions are reconciled even when the statement balance does not
    agree; the difference is reported.

    Examples:
        bankrec reconcile 1 2 3 --account Cheque --statement-balance 10000.00
        bankrec reconcile 4 --account 1 --dry-run
    """
    db = ctx.obj["db"]
    service = ReconciliationService(db)
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        balance = parse_amount(statement_balance) if statement_balance is not None else None
        stmt_date = parse_date(statement_date) if statement_date else None

        operation = service.preview if dry_run else service.reconcile
        result = operation(
            list(transaction_ids),
            account_id,
            statement_balance=balance,
            statement_date=stmt_date,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if dry_run:
        click.echo(f"Dry run: {len(set(transaction_ids))} transactions selected")
    else:
        click.echo(f"Reconciled {result.reconciled} transactions")
    click.echo(f"  Selected total: {result.selected_total:,.2f}")
    if result.difference is not None:
        click.echo(f"  Statement balance: {result.statement_balance:,.2f}")
        click.echo(f"  Difference: {result.difference:,.2f}")
        if result.is_balanced:
            click.echo("  Balanced")
        else:
            click.echo("  Not balanced", err=True)


@click.command("unreconcile")
@click.argument("transaction_ids", nargs=-1, type=int, required=True)
@click.option("--account", required=True, help="Account name or ID")
@click.pass_context
def unreconcile_transactions(ctx, transaction_ids: tuple[int, ...], account: str):
    """Clear the reconciled flag on transactions."""
    db = ctx.obj["db"]
    service = ReconciliationService(db)
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        count = service.unreconcile(list(transaction_ids), account_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Unreconciled {count} transactions")


def register_commands(cli):
    """Register reconciliation commands with main CLI."""
    cli.add_command(reconcile_transactions)
    cli.add_command(unreconcile_transactions)
