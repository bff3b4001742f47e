"""Add transaction command."""

import click
from bankrec.cli.account_resolution import resolve_account_or_exit
from bankrec.cli.error_handling import handle_domain_error
from bankrec.domain.account import AccountService
from bankrec.domain.category import CategoryService
from bankrec.domain.entities import TransactionDirection
from bankrec.domain.transaction import TransactionService
from bankrec.utils.amount_parser import parse_amount
from bankrec.utils.date_parser import parse_date


@click.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--amount",
    required=True,
    help="Transaction amount (e.g., 123.45, or -123.45 for an expense)",
)
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--direction",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="Direction of money flow (taken from the amount's sign if omitted)",
)
@click.option("--reference", help="Reference number")
@click.option("--category", help="Category name")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    date: str,
    amount: str,
    description: str,
    direction: str | None,
    reference: str | None,
    category: str | None,
):
    """Add a ledger transaction manually.

    Examples:
        bankrec add --account Cheque --date 2024-01-15 --amount -50.00 --description "Grocery store"
        bankrec add --account 1 --date today --amount 1000 --direction income --description Salary
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    account_service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    account_obj = account_service.get_account(account_id)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if direction is not None:
        txn_direction = TransactionDirection(direction.upper())
    elif txn_amount < 0:
        txn_direction = TransactionDirection.EXPENSE
    else:
        txn_direction = TransactionDirection.INCOME

    try:
        category_id = None
        if category:
            category_id = CategoryService(db).require_category_by_name(category).id

        transaction_id = transaction_service.create_transaction(
            account_id=account_id,
            date=txn_date,
            description=description,
            amount=abs(txn_amount),
            direction=txn_direction,
            reference=reference,
            category_id=category_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Account: {account_obj.name}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {account_obj.currency} {abs(txn_amount):,.2f} ({txn_direction.value})")
    click.echo(f"  Description: {description}")
    if category:
        click.echo(f"  Category: {category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
