import click

from printshop.infrastructure.bootstrap import setup_logging
from printshop.infrastructure.cli.catalog_commands import catalog_list, catalog_quote
from printshop.infrastructure.cli.order_commands import order_submit


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Business Marts — business card ordering"""
    if verbose:
        setup_logging()


@cli.group()
def catalog() -> None:
    """Browse and price products."""


@cli.group()
def order() -> None:
    """Submit orders."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_quote)
order.add_command(order_submit)
