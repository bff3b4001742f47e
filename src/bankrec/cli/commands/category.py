"""Category management commands."""

import click
from bankrec.cli.error_handling import handle_domain_error
from bankrec.domain.category import CategoryService


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.name} (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name)
        click.echo(f"Created category '{name}' (ID: {category_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
