"""Supported banks command."""

import click
from bankrec.parsers import supported_banks


@click.command("banks")
def list_banks():
    """List bank formats that statements can be parsed from."""
    click.echo("\nSupported banks:")
    for bank_id, name in supported_banks():
        click.echo(f"  {bank_id:15s} {name}")


def register_commands(cli):
    """Register banks command with main CLI."""
    cli.add_command(list_banks)
