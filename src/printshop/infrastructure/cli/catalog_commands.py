"""CLI commands for browsing and pricing the catalog."""

from __future__ import annotations

import click

from printshop.application.dto import QuoteDTO
from printshop.application.select_products import SelectProductsHandler
from printshop.application.show_catalog import ShowCatalogHandler
from printshop.domain.exceptions import DomainException
from printshop.domain.model.catalog import Catalog
from printshop.infrastructure.cli.selection import parse_selections, selection_options


@click.command("list")
def catalog_list() -> None:
    """List the business cards on offer."""
    quote = ShowCatalogHandler().handle(Catalog.business_cards())

    click.echo(f"{'ID':<4} {'Product':<34} {'Per 1000':>9} {'Double side':>12}")
    click.echo("-" * 62)
    for row in quote.rows:
        click.echo(
            f"{row.item_id:<4} {row.title:<34} {row.base_rate:>9} {'+' + str(row.additional_rate):>12}"
        )
    click.echo()
    click.echo("Minimum quantity: 1000 (or 0 if not needed)")


def display_quote(quote: QuoteDTO) -> None:
    """Shared formatting for a priced selection."""
    click.echo(f"  {'Product':<34} {'Qty':>6} {'Double':>7} {'Price':>10}")
    click.echo(f"  {'-'*60}")
    for row in quote.rows:
        if row.quantity <= 0:
            continue
        click.echo(
            f"  {row.title:<34} {row.quantity:>6} "
            f"{'Yes' if row.double_side else 'No':>7} {row.total_price:>10}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Total Order Value':<49} {quote.total:>10}")


@click.command("quote")
@selection_options
def catalog_quote(item_specs: tuple[str, ...], double_side_ids: tuple[str, ...]) -> None:
    """Price a selection without submitting it."""
    selections = parse_selections(item_specs, double_side_ids)

    try:
        catalog = SelectProductsHandler().handle(Catalog.business_cards(), selections)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_quote(ShowCatalogHandler().handle(catalog))
