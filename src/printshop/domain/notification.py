"""Notifications raised by order submission.

Defined in the domain layer so the use case never depends on how the
host renders them (toast, terminal line, log entry).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from printshop.domain.model.order import EMPTY_ORDER_MESSAGE, Order


class NotificationKind(Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    title: str
    description: str

    @staticmethod
    def empty_order() -> Notification:
        return Notification(
            kind=NotificationKind.REJECTED,
            title="No products selected",
            description=EMPTY_ORDER_MESSAGE,
        )

    @staticmethod
    def order_accepted(order: Order) -> Notification:
        return Notification(
            kind=NotificationKind.ACCEPTED,
            title="Order placed successfully!",
            description=(
                f"Your order ID is {order.order_id}. Total amount: {order.total}"
            ),
        )


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show *notification* to the customer."""
