"""CatalogItem entity and the linear pricing rule.

A catalog item is priced per 1000 cards. Double-side printing adds a
fixed surcharge per 1000 on top of the base rate.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from printshop.domain.exceptions import InvalidInput
from printshop.domain.model.value_objects import Money, Quantity

RATE_UNIT = 1000


def compute_total_price(
    base_rate: int,
    additional_rate: int,
    quantity: int,
    double_side: bool,
) -> int:
    """Return the price for *quantity* cards, rounded half-up to a whole rupee.

    Quantity 0 always costs 0, whatever the double-side flag says.
    Integer arithmetic only, so any quantity size is exact.
    """
    if quantity <= 0:
        return 0
    rate = base_rate + (additional_rate if double_side else 0)
    return (rate * quantity * 2 + RATE_UNIT) // (2 * RATE_UNIT)


@dataclass
class CatalogItem:
    """A purchasable product variant plus the customer's current selection.

    ``id``, ``title`` and the two rates are fixed at catalog definition.
    ``quantity`` and ``double_side`` change with selection events.
    ``total_price`` is derived and always matches the current selection:
    each setter computes the new price before writing any field.
    """

    id: str
    title: str
    base_rate: int
    additional_rate: int
    quantity: int = 0
    double_side: bool = False
    total_price: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        Quantity(self.quantity)
        self.recompute()

    def set_quantity(self, quantity: int | str) -> None:
        value = Quantity.of(quantity).value
        price = compute_total_price(
            self.base_rate, self.additional_rate, value, self.double_side
        )
        self.quantity, self.total_price = value, price

    def set_double_side(self, enabled: bool) -> None:
        """Raises InvalidInput unless *enabled* is a bool (``"false"`` included)."""
        if not isinstance(enabled, bool):
            raise InvalidInput(
                f"Double side must be a bool, got {type(enabled).__name__}"
            )
        price = compute_total_price(
            self.base_rate, self.additional_rate, self.quantity, enabled
        )
        self.double_side, self.total_price = enabled, price

    def recompute(self) -> CatalogItem:
        """Derive ``total_price`` from the current inputs. Idempotent."""
        self.total_price = compute_total_price(
            self.base_rate, self.additional_rate, self.quantity, self.double_side
        )
        return self

    @property
    def is_selected(self) -> bool:
        return self.quantity > 0

    @property
    def price(self) -> Money:
        return Money(self.total_price)
