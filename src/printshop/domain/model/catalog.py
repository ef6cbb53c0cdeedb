"""Catalog aggregate — the ordered list of products on the order page.

The catalog has a fixed set of items for the life of a session. Only the
selection fields of each item change. It is owned by whoever hosts the
page and is passed explicitly to the use cases; there is no module-level
instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from printshop.domain.exceptions import EntityNotFoundError, InvalidInput
from printshop.domain.model.catalog_item import CatalogItem

LOGGER = logging.getLogger(__name__)

QUANTITY_CHOICES = tuple(range(0, 10001, 1000))

DOUBLE_SIDE_SURCHARGE = 100

# (id, title, base rate per 1000 cards)
BUSINESS_CARDS = (
    ("1", "Without lamination Cards", 270),
    ("2", "Gloss Coated Small Cards", 300),
    ("3", "Without Lamination Small Cards", 250),
    ("4", "Gloss Coated Cards", 330),
    ("5", "Gloss Laminated Cards", 350),
    ("6", "Matt Lamination Cards", 650),
    ("7", "Matt lamination UV coated Cards", 1100),
)


@dataclass
class Catalog:
    """Aggregate root for the product selection.

    Invariants:
    - item ids are unique and never change
    - every item's ``total_price`` matches its current selection
    """

    items: list[CatalogItem]

    def __post_init__(self) -> None:
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise InvalidInput("Catalog item ids must be unique")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def business_cards() -> Catalog:
        """Build the shop's business-card catalog with nothing selected."""
        return Catalog(
            items=[
                CatalogItem(
                    id=item_id,
                    title=title,
                    base_rate=base_rate,
                    additional_rate=DOUBLE_SIDE_SURCHARGE,
                )
                for item_id, title, base_rate in BUSINESS_CARDS
            ]
        )

    # --- Selection events -----------------------------------------------------

    def set_quantity(self, item_id: str, quantity: int | str) -> CatalogItem:
        item = self.get(item_id)
        item.set_quantity(quantity)
        LOGGER.debug(
            "Item %s quantity set to %s (price %s)",
            item.id, item.quantity, item.total_price,
        )
        return item

    def set_double_side(self, item_id: str, enabled: bool) -> CatalogItem:
        item = self.get(item_id)
        item.set_double_side(enabled)
        LOGGER.debug(
            "Item %s double side set to %s (price %s)",
            item.id, item.double_side, item.total_price,
        )
        return item

    # --- Queries --------------------------------------------------------------

    def get(self, item_id: str) -> CatalogItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError(f"Catalog item '{item_id}' not found")

    def line_items(self) -> list[CatalogItem]:
        """Items with a quantity above zero, in catalog order."""
        return [item for item in self.items if item.is_selected]

    def has_selection(self) -> bool:
        return any(item.is_selected for item in self.items)

    def total_order_value(self) -> int:
        return sum(item.total_price for item in self.items)
