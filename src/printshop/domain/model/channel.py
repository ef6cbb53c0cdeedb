"""Delivery channels for an order transcript."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from printshop.domain.exceptions import InvalidInput


class Channel(Enum):
    EMAIL = "email"
    MESSAGING = "messaging"

    @staticmethod
    def parse(value: str) -> Channel:
        """Accept a channel name; ``whatsapp`` is kept as an alias."""
        normalized = value.strip().lower()
        if normalized == "whatsapp":
            return Channel.MESSAGING
        try:
            return Channel(normalized)
        except ValueError as exc:
            raise InvalidInput(f"Unknown channel: {value!r}") from exc


@dataclass(frozen=True)
class ChannelSettings:
    """Where orders are delivered."""

    email_recipient: str = "info@businessmarts.site"
    messaging_url: str = "https://wa.me"
    messaging_number: str = "9599270456"
    messaging_preamble: str = "NEW ORDER FROM BUSINESS MARTS"


@dataclass(frozen=True)
class ChannelPayload:
    """A ready-to-open link.

    ``subject`` and ``body`` are already percent-encoded. ``subject`` is
    None for channels that have no subject line.
    """

    channel: Channel
    recipient: str
    subject: str | None
    body: str
    uri: str
