"""Domain service: render an order as text and wrap it for a channel.

The transcript layout is fixed. People on the receiving end read and
match on it, so sections and fields must stay in this order:

    === ORDER DETAILS ===      one block per line item
    === ORDER SUMMARY ===      order id and total
    === CUSTOMER INFORMATION === name, email, mobile

The storefront page put the customer block first. Customer information
is last here on purpose; keep it that way.

Everything here is a pure function; opening the resulting link is the
caller's job.
"""

from __future__ import annotations

from urllib.parse import quote

from printshop.domain.model.catalog import Catalog
from printshop.domain.model.channel import Channel, ChannelPayload, ChannelSettings
from printshop.domain.model.customer import CustomerIdentity
from printshop.domain.model.order import Order

# Same unreserved set as JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def render_transcript(order: Order) -> str:
    lines = ["=== ORDER DETAILS ===", ""]
    for item in order.items:
        lines.append(f"PRODUCT: {item.title}")
        lines.append(f"QUANTITY: {item.quantity}")
        lines.append(f"DOUBLE SIDE: {'Yes' if item.double_side else 'No'}")
        lines.append(f"PRICE: {item.price}")
        lines.append("")

    lines.append("=== ORDER SUMMARY ===")
    lines.append(f"ORDER ID: {order.order_id}")
    lines.append(f"TOTAL ORDER VALUE: {order.total}")
    lines.append("")

    customer = order.customer
    lines.append("=== CUSTOMER INFORMATION ===")
    lines.append("")
    lines.append(f"NAME: {customer.full_name}")
    lines.append(f"EMAIL: {customer.email}")
    lines.append(f"MOBILE: {customer.mobile}")
    lines.append("")
    return "\n".join(lines) + "\n"


def build_order_transcript(
    catalog: Catalog,
    customer: CustomerIdentity,
    order_id: str,
) -> str:
    """Render the current catalog selection.

    Raises EmptyOrder if nothing is selected.
    """
    return render_transcript(Order.from_catalog(order_id, catalog, customer))


def build_channel_payload(
    channel: Channel,
    transcript: str,
    customer: CustomerIdentity,
    order_id: str,
    settings: ChannelSettings | None = None,
) -> ChannelPayload:
    settings = settings or ChannelSettings()

    if channel is Channel.EMAIL:
        subject = encode_uri_component(
            f"New Order from {customer.full_name} (ID: {order_id})"
        )
        body = encode_uri_component(transcript)
        return ChannelPayload(
            channel=channel,
            recipient=settings.email_recipient,
            subject=subject,
            body=body,
            uri=f"mailto:{settings.email_recipient}?subject={subject}&body={body}",
        )

    if channel is Channel.MESSAGING:
        body = encode_uri_component(f"{settings.messaging_preamble}\n\n{transcript}")
        base_url = settings.messaging_url.rstrip("/")
        return ChannelPayload(
            channel=channel,
            recipient=settings.messaging_number,
            subject=None,
            body=body,
            uri=f"{base_url}/{settings.messaging_number}?text={body}",
        )

    raise ValueError(f"Unsupported channel: {channel!r}")
