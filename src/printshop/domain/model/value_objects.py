"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from printshop.domain.exceptions import InvalidInput

CURRENCY_LABEL = "Rs"


@dataclass(frozen=True)
class Money:
    """Whole-rupee amount with its display label.

    The shop prices in whole units only, so the amount is a plain int
    rather than a Decimal.
    """

    amount: int
    currency: str = CURRENCY_LABEL

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidInput(
                f"Money amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise InvalidInput(f"Money amount cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise InvalidInput(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    @staticmethod
    def zero(currency: str = CURRENCY_LABEL) -> Money:
        return Money(0, currency)


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity.

    Zero is allowed and means "not ordered". Any other non-negative
    integer is accepted; the storefront only offers multiples of 1000
    but the engine does not enforce that.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidInput(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidInput(f"Quantity cannot be negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(raw: str | int) -> Quantity:
        """Coerce a select-box value (usually a string) into a Quantity."""
        if isinstance(raw, str):
            try:
                return Quantity(int(raw.strip()))
            except ValueError as exc:
                raise InvalidInput(f"Invalid quantity: {raw!r}") from exc
        return Quantity(raw)
