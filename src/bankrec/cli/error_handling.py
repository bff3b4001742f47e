"""CLI error handling helpers."""

import click

from bankrec.domain.errors import DomainError, StatementParseError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, StatementParseError):
        click.echo(f"Error: Failed to parse CSV (detected bank: {error.bank_name})", err=True)
        for message in error.errors:
            click.echo(f"  {message}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
