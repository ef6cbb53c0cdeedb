"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that reads the environment.
Every other module receives its settings explicitly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from printshop.application.submit_order import SubmitOrderHandler
from printshop.domain.model.channel import ChannelSettings
from printshop.domain.model.order import ORDER_ID_PREFIX
from printshop.infrastructure.notifier import ConsoleNotifier

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def load_settings(environ: Mapping[str, str] | None = None) -> ChannelSettings:
    """Read delivery settings, falling back to the shop defaults."""
    env = os.environ if environ is None else environ
    defaults = ChannelSettings()
    return ChannelSettings(
        email_recipient=env.get("PRINTSHOP_ORDER_EMAIL", defaults.email_recipient),
        messaging_url=env.get("PRINTSHOP_MESSAGING_URL", defaults.messaging_url),
        messaging_number=env.get(
            "PRINTSHOP_MESSAGING_NUMBER", defaults.messaging_number
        ),
        messaging_preamble=env.get(
            "PRINTSHOP_MESSAGING_PREAMBLE", defaults.messaging_preamble
        ),
    )


def order_id_prefix(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    return env.get("PRINTSHOP_ORDER_ID_PREFIX", ORDER_ID_PREFIX)


def setup_logging(level: int = logging.DEBUG) -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
    )


def submit_order_handler() -> SubmitOrderHandler:
    return SubmitOrderHandler(
        notifier=ConsoleNotifier(),
        settings=load_settings(),
        order_id_prefix=order_id_prefix(),
    )
