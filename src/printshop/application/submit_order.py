"""Application service: Submit Order use case.

Takes a snapshot of the catalog, renders it once, and wraps that one
transcript for every delivery channel. The notifier hears about the
outcome either way.
"""

from __future__ import annotations

import logging
import random

from printshop.application.dto import SubmissionDTO
from printshop.domain.exceptions import EmptyOrder
from printshop.domain.model.catalog import Catalog
from printshop.domain.model.channel import Channel, ChannelSettings
from printshop.domain.model.customer import CustomerIdentity
from printshop.domain.model.order import (
    EMPTY_ORDER_MESSAGE,
    ORDER_ID_PREFIX,
    Clock,
    Order,
    RandomSource,
    generate_order_id,
    system_clock,
)
from printshop.domain.notification import Notification, Notifier
from printshop.domain.service.order_formatter import (
    build_channel_payload,
    render_transcript,
)

LOGGER = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        notifier: Notifier,
        settings: ChannelSettings | None = None,
        clock: Clock = system_clock,
        random_source: RandomSource = random.randrange,
        order_id_prefix: str = ORDER_ID_PREFIX,
    ) -> None:
        self._notifier = notifier
        self._settings = settings or ChannelSettings()
        self._clock = clock
        self._random_source = random_source
        self._order_id_prefix = order_id_prefix

    def handle(self, catalog: Catalog, customer: CustomerIdentity) -> SubmissionDTO:
        """Submit the current selection.

        Steps:
        1. Reject (and notify) if nothing is selected.
        2. Generate an order id and snapshot the line items.
        3. Render the transcript and build a payload per channel.
        4. Notify acceptance and return the payloads for dispatch.
        """
        if not catalog.has_selection():
            LOGGER.warning("Rejected order from %s: no products selected", customer.email)
            self._notifier.notify(Notification.empty_order())
            raise EmptyOrder(EMPTY_ORDER_MESSAGE)

        order_id = generate_order_id(
            self._clock, self._random_source, self._order_id_prefix
        )
        order = Order.from_catalog(order_id, catalog, customer)
        transcript = render_transcript(order)

        payloads = {
            channel: build_channel_payload(
                channel, transcript, customer, order_id, self._settings
            )
            for channel in Channel
        }

        LOGGER.info(
            "Accepted order %s from %s: %d line item(s), total %s",
            order_id, customer.email, len(order.items), order.total,
        )
        self._notifier.notify(Notification.order_accepted(order))

        return SubmissionDTO(
            order_id=order_id,
            total=str(order.total),
            transcript=transcript,
            payloads=payloads,
        )
