"""Search criteria for the product search engine.

A criteria value is built once per request and never mutated.  Every
filter is optional; absent filters do not restrict the result set.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from expiry_tracker.domain.model.product import ProductStatus


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class ProductSearchCriteria:
    """Optional filters plus pagination.

    ``status`` left as None means "the default visibility", which is
    ACTIVE; pass DISCARDED or SOLD to look at retired lots on purpose.
    """

    name: str | None = None
    barcode: str | None = None
    lot: str | None = None
    expired_before: date | None = None
    is_expired: bool | None = None
    days_threshold: int | None = None
    status: ProductStatus | None = None
    page: int | None = None
    size: int | None = None

    def is_empty(self) -> bool:
        """True when no usable filter was provided.

        Blank strings count as absent; pagination fields don't count.
        """
        return (
            _is_blank(self.name)
            and _is_blank(self.barcode)
            and _is_blank(self.lot)
            and self.expired_before is None
            and self.is_expired is None
            and self.days_threshold is None
            and self.status is None
        )

    def without_filters(self) -> ProductSearchCriteria:
        """Same pagination, no filters."""
        return ProductSearchCriteria.empty(page=self.page, size=self.size)

    @staticmethod
    def empty(page: int | None = None, size: int | None = None) -> ProductSearchCriteria:
        return ProductSearchCriteria(page=page, size=size)
