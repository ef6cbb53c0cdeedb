"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from printshop.application.dto import CatalogRowDTO, QuoteDTO
from printshop.domain.model.catalog import Catalog
from printshop.domain.model.value_objects import Money


class ShowCatalogHandler:

    def handle(self, catalog: Catalog) -> QuoteDTO:
        return QuoteDTO(
            rows=[
                CatalogRowDTO(
                    item_id=item.id,
                    title=item.title,
                    base_rate=item.base_rate,
                    additional_rate=item.additional_rate,
                    quantity=item.quantity,
                    double_side=item.double_side,
                    total_price=str(item.price),
                )
                for item in catalog.items
            ],
            total=str(Money(catalog.total_order_value())),
        )
