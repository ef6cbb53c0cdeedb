"""Customer identity as handed over by the signed-in session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerIdentity:
    """Read-only contact details. The ordering core never changes them."""

    full_name: str
    email: str
    mobile: str
