"""Application service: apply the customer's selection to a catalog."""

from __future__ import annotations

from printshop.application.dto import ItemSelection
from printshop.domain.model.catalog import Catalog


class SelectProductsHandler:

    def handle(self, catalog: Catalog, selections: list[ItemSelection]) -> Catalog:
        """Replay selection events in order.

        Every call goes through the catalog so prices are recomputed on
        write. A later selection for the same item overrides an earlier one.
        """
        for selection in selections:
            catalog.set_quantity(selection.item_id, selection.quantity)
            catalog.set_double_side(selection.item_id, selection.double_side)
        return catalog
