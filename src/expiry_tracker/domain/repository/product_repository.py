"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Lookups by identity or barcode only ever return ACTIVE products.
``get_stored`` and the ``exists_*`` checks see every record regardless
of status: the duplicate rule and the "does it exist at all" questions
must not be fooled by a soft delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from expiry_tracker.domain.model.pagination import Page, PageRequest, PaginatedResult
from expiry_tracker.domain.model.product import Product
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from expiry_tracker.domain.service.product_filters import (
    ProductFilter,
    criteria_filters,
)


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product and return it."""

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Product | None:
        """Return an ACTIVE product by its ID, or None."""

    @abstractmethod
    def get_stored(self, product_id: UUID) -> Product | None:
        """Return the stored record whatever its status, or None."""

    @abstractmethod
    def get_by_barcode(self, barcode: str) -> Product | None:
        """Return an ACTIVE product with this barcode, or None."""

    @abstractmethod
    def exists_by_barcode_and_lot(self, barcode: str, lot: str) -> bool:
        """True if any record, in any status, uses this barcode and lot."""

    @abstractmethod
    def exists_by_id(self, product_id: UUID) -> bool:
        """True if any record, in any status, has this ID."""

    @abstractmethod
    def find_paginated(self, page: int, size: int) -> PaginatedResult[Product]:
        """Every record, one page at a time, with no status filter."""

    @abstractmethod
    def find_matching(
        self, filters: list[ProductFilter], request: PageRequest
    ) -> Page[Product]:
        """Run the conjunction of ``filters`` and return the requested page."""

    @abstractmethod
    def soft_delete(self, product_id: UUID) -> None:
        """Mark an ACTIVE product DISCARDED; the record is kept.

        Missing, already discarded and sold records are left untouched.
        """

    def find_by_criteria(
        self,
        criteria: ProductSearchCriteria,
        today: date | None = None,
    ) -> PaginatedResult[Product]:
        """Search with the visibility rule, the criteria filters and pagination."""
        request = PageRequest.of(criteria.page, criteria.size)
        filters = criteria_filters(criteria, today or date.today())
        return PaginatedResult.from_page(self.find_matching(filters, request))
