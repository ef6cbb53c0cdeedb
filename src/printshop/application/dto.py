"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from printshop.domain.model.channel import Channel, ChannelPayload


@dataclass(frozen=True)
class ItemSelection:
    """Input: what the customer picked for one catalog item."""

    item_id: str
    quantity: int | str
    double_side: bool = False


@dataclass(frozen=True)
class CatalogRowDTO:
    """Output: one catalog row as displayed to the user."""

    item_id: str
    title: str
    base_rate: int
    additional_rate: int
    quantity: int
    double_side: bool
    total_price: str  # formatted, e.g. "540 Rs"


@dataclass(frozen=True)
class QuoteDTO:
    """Output: the whole catalog with the running total."""

    rows: list[CatalogRowDTO]
    total: str


@dataclass(frozen=True)
class SubmissionDTO:
    """Output: an accepted order ready for dispatch."""

    order_id: str
    total: str
    transcript: str
    payloads: dict[Channel, ChannelPayload] = field(default_factory=dict)

    def uri(self, channel: Channel) -> str:
        return self.payloads[channel].uri
