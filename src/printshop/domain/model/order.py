"""Order — a transient snapshot of the catalog taken at submission time.

Orders are never stored. They exist only long enough to be rendered
into a transcript and handed to a delivery channel.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable

from printshop.domain.exceptions import EmptyOrder
from printshop.domain.model.catalog import Catalog
from printshop.domain.model.customer import CustomerIdentity
from printshop.domain.model.value_objects import Money

ORDER_ID_PREFIX = "BM"
ORDER_ID_SUFFIX_BOUND = 1000

EMPTY_ORDER_MESSAGE = (
    "Please add at least one product to your order before submitting."
)

Clock = Callable[[], int]
RandomSource = Callable[[int], int]


def system_clock() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def generate_order_id(
    clock: Clock = system_clock,
    random_source: RandomSource = random.randrange,
    prefix: str = ORDER_ID_PREFIX,
) -> str:
    """Build ``<prefix><epoch ms><suffix>`` with a suffix in [0, 1000).

    The suffix is not zero-padded. Two submissions in the same
    millisecond can collide; the id is a reference for humans, not a key.
    """
    return f"{prefix}{clock()}{random_source(ORDER_ID_SUFFIX_BOUND)}"


@dataclass(frozen=True)
class OrderLineItem:
    """Copy of a selected catalog item at the moment of submission."""

    item_id: str
    title: str
    quantity: int
    double_side: bool
    price: Money


@dataclass(frozen=True)
class Order:
    """Aggregate for a submitted order.

    Use ``Order.from_catalog()``, which refuses to build an order with no
    line items.
    """

    order_id: str
    customer: CustomerIdentity
    items: tuple[OrderLineItem, ...]

    @staticmethod
    def from_catalog(
        order_id: str,
        catalog: Catalog,
        customer: CustomerIdentity,
    ) -> Order:
        line_items = catalog.line_items()
        if not line_items:
            raise EmptyOrder(EMPTY_ORDER_MESSAGE)
        return Order(
            order_id=order_id,
            customer=customer,
            items=tuple(
                OrderLineItem(
                    item_id=item.id,
                    title=item.title,
                    quantity=item.quantity,
                    double_side=item.double_side,
                    price=item.price,
                )
                for item in line_items
            ),
        )

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.price
        return result
