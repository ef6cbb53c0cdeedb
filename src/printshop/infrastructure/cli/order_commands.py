"""CLI commands for submitting an order."""

from __future__ import annotations

import click

from printshop.application.select_products import SelectProductsHandler
from printshop.application.show_catalog import ShowCatalogHandler
from printshop.domain.exceptions import DomainException, EmptyOrder
from printshop.domain.model.catalog import Catalog
from printshop.domain.model.channel import Channel
from printshop.domain.model.customer import CustomerIdentity
from printshop.infrastructure.bootstrap import submit_order_handler
from printshop.infrastructure.cli.catalog_commands import display_quote
from printshop.infrastructure.cli.selection import parse_selections, selection_options


def _channels(choice: str) -> list[Channel]:
    if choice == "all":
        return list(Channel)
    return [Channel.parse(choice)]


@click.command("submit")
@selection_options
@click.option("--name", required=True, envvar="PRINTSHOP_CUSTOMER_NAME", help="Customer full name.")
@click.option("--email", required=True, envvar="PRINTSHOP_CUSTOMER_EMAIL", help="Customer email.")
@click.option("--mobile", required=True, envvar="PRINTSHOP_CUSTOMER_MOBILE", help="Customer mobile number.")
@click.option(
    "--channel",
    type=click.Choice(["email", "messaging", "whatsapp", "all"], case_sensitive=False),
    default="all",
    show_default=True,
    help="Delivery link(s) to produce.",
)
@click.option("--open", "open_links", is_flag=True, default=False, help="Open the link(s) after submitting.")
@click.option("--show-transcript", is_flag=True, default=False, help="Print the order transcript.")
def order_submit(
    item_specs: tuple[str, ...],
    double_side_ids: tuple[str, ...],
    name: str,
    email: str,
    mobile: str,
    channel: str,
    open_links: bool,
    show_transcript: bool,
) -> None:
    """Submit the selection and print the delivery link(s)."""
    selections = parse_selections(item_specs, double_side_ids)
    customer = CustomerIdentity(full_name=name, email=email, mobile=mobile)

    try:
        catalog = SelectProductsHandler().handle(Catalog.business_cards(), selections)
        if catalog.has_selection():
            display_quote(ShowCatalogHandler().handle(catalog))
            click.echo()
        dto = submit_order_handler().handle(catalog, customer)
        channels = _channels(channel.lower())
    except EmptyOrder:
        # The notifier has already shown the rejection.
        raise SystemExit(1)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if show_transcript:
        click.echo()
        click.echo(dto.transcript, nl=False)

    for selected in channels:
        uri = dto.uri(selected)
        click.echo()
        click.echo(f"{selected.value.capitalize()} link:")
        click.echo(uri)
        if open_links:
            click.launch(uri)
