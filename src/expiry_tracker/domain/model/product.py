"""Product aggregate.

A product is one lot of a barcoded item with an expiry date. Its
lifecycle is a small state machine: every product starts ACTIVE and may
leave that state exactly once, either sold or discarded. Records are
never physically removed; discarding is a status change.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from uuid import UUID

from expiry_tracker.domain.exceptions import (
    InvalidStateTransitionError,
    ValidationError,
)
from expiry_tracker.domain.model.identity import new_id
from expiry_tracker.domain.model.value_objects import Barcode, StockQuantity


class ProductStatus(Enum):
    ACTIVE = "ACTIVE"
    SOLD = "SOLD"
    DISCARDED = "DISCARDED"

    def can_transition_to(self, target: ProductStatus) -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[ProductStatus, frozenset[ProductStatus]] = {
    ProductStatus.ACTIVE: frozenset({ProductStatus.SOLD, ProductStatus.DISCARDED}),
    ProductStatus.SOLD: frozenset(),
    ProductStatus.DISCARDED: frozenset(),
}


def _require_text(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    return value


@dataclass
class Product:
    """Aggregate root for a tracked lot.

    Use ``Product.create()`` for new products; it assigns identity and
    the initial ACTIVE status.  The ``__init__`` still validates every
    field, so a malformed record can never be built, but it accepts any
    status so repositories can reconstitute stored rows.
    """

    id: UUID
    barcode: Barcode
    name: str
    lot: str
    expiry_date: date
    quantity: StockQuantity
    category: str
    status: ProductStatus = ProductStatus.ACTIVE

    def __post_init__(self) -> None:
        # Raw values are accepted and validated through the value objects.
        if not isinstance(self.barcode, Barcode):
            self.barcode = Barcode(self.barcode)
        if not isinstance(self.quantity, StockQuantity):
            self.quantity = StockQuantity(self.quantity)
        _require_text(self.name, "Product name")
        _require_text(self.lot, "Lot number")
        _require_text(self.category, "Category")
        if not isinstance(self.expiry_date, date):
            raise ValidationError("Expiry date is required")
        if not isinstance(self.status, ProductStatus):
            raise ValidationError(f"Unknown product status: {self.status!r}")

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        barcode: str,
        name: str,
        lot: str,
        expiry_date: date,
        quantity: int,
        category: str,
    ) -> Product:
        """Build a new ACTIVE product with a fresh identity."""
        return Product(
            id=new_id(),
            barcode=Barcode(barcode),
            name=_require_text(name, "Product name").strip(),
            lot=_require_text(lot, "Lot number").strip(),
            expiry_date=expiry_date,
            quantity=StockQuantity(quantity),
            category=_require_text(category, "Category").strip(),
        )

    # --- Mutations ------------------------------------------------------------

    def revise(
        self,
        barcode: str,
        name: str,
        lot: str,
        expiry_date: date,
        quantity: int,
        category: str,
    ) -> None:
        """Replace the descriptive fields of an ACTIVE product.

        Identity and status are not part of a revision.  Every value is
        validated before anything is assigned, so a rejected revision
        leaves the product untouched.
        """
        self._require_active("edit")
        new_barcode = Barcode(barcode)
        new_quantity = StockQuantity(quantity)
        _require_text(name, "Product name")
        _require_text(lot, "Lot number")
        _require_text(category, "Category")
        if not isinstance(expiry_date, date):
            raise ValidationError("Expiry date is required")

        self.barcode = new_barcode
        self.name = name.strip()
        self.lot = lot.strip()
        self.expiry_date = expiry_date
        self.quantity = new_quantity
        self.category = category.strip()

    def discard(self) -> None:
        """Transition ACTIVE -> DISCARDED (withdrawn, expired or damaged)."""
        self._transition(ProductStatus.DISCARDED)

    def mark_sold(self) -> None:
        """Transition ACTIVE -> SOLD."""
        self._transition(ProductStatus.SOLD)

    # --- Expiry rules ---------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def is_expired(self, today: date) -> bool:
        return self.expiry_date < today

    def is_about_to_expire(self, days: int, today: date) -> bool:
        """True if an ACTIVE product expires within ``[today, today + days)``."""
        if not self.is_active:
            return False
        return today <= self.expiry_date < today + timedelta(days=days)

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, target: ProductStatus) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidStateTransitionError(
                f"Cannot move product {self.id} from {self.status.value} "
                f"to {target.value}"
            )
        self.status = target

    def _require_active(self, action: str) -> None:
        if not self.is_active:
            raise InvalidStateTransitionError(
                f"Cannot {action} a product that is not ACTIVE "
                f"(current status is {self.status.value})"
            )
