"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from expiry_tracker.domain.exceptions import ValidationError

_EAN13 = re.compile(r"[0-9]{13}")


@dataclass(frozen=True)
class Barcode:
    """EAN-13 product barcode: exactly 13 numeric digits."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Barcode must be a string, got {type(self.value).__name__}"
            )
        if not _EAN13.fullmatch(self.value):
            raise ValidationError(
                f"Barcode must have exactly 13 numeric digits, got {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StockQuantity:
    """A non-negative number of units in stock.

    Unlike an order quantity, zero is allowed: a lot can be tracked
    after its last unit left the shelf.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)
