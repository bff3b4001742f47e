"""Account management commands."""

import click
from bankrec.cli.error_handling import handle_domain_error
from bankrec.domain.account import AccountService
from bankrec.utils.amount_parser import parse_amount


@click.group()
def account_group():
    """Manage bank accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--bank", help="Bank name (defaults to account name if not provided)")
@click.option("--number", "account_number", help="Bank account number")
@click.option("--currency", default="ZAR", show_default=True, help="ISO currency code")
@click.option("--opening-balance", default="0", help="Balance before any imported transactions")
@click.pass_context
def create_account(
    ctx,
    name: str,
    bank: str | None,
    account_number: str | None,
    currency: str,
    opening_balance: str,
):
    """Create a new bank account.

    If --bank is not provided, the bank name will be set to the account name.

    Examples:
        bankrec account create "Cheque" --bank FNB --number 62812345678
        bankrec account create "Savings" --bank Capitec --opening-balance 1500.00
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    bank_name = bank if bank is not None else name

    try:
        balance = parse_amount(opening_balance)
        account_id = service.create_account(
            name=name,
            bank_name=bank_name,
            account_number=account_number,
            currency=currency,
            opening_balance=balance,
        )
        click.echo(f"Created account '{name}' (ID: {account_id})")
        if bank is None:
            click.echo(f"Bank name set to '{bank_name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their current balances."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | Bank: {acc.bank_name:12s} | "
            f"Balance: {acc.currency} {acc.current_balance:,.2f}"
        )


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
