"""Application service: product queries.

Every search goes through ``ProductRepository.find_by_criteria`` so the
visibility rule is applied on every path; only ``list_records`` is an
explicit, unfiltered view across all statuses.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from uuid import UUID

from expiry_tracker.domain.exceptions import EntityNotFoundError
from expiry_tracker.domain.model.pagination import PageRequest, PaginatedResult
from expiry_tracker.domain.model.product import Product
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from expiry_tracker.domain.repository.product_repository import ProductRepository


class FindProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def find_by_id(self, product_id: UUID) -> Product | None:
        return self._product_repo.get_by_id(product_id)

    def get_by_id(self, product_id: UUID) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def find_by_barcode(self, barcode: str) -> Product | None:
        return self._product_repo.get_by_barcode(barcode)

    def find_all(self, page: int | None = None, size: int | None = None) -> PaginatedResult[Product]:
        """Every ACTIVE product, one page at a time."""
        return self.search(ProductSearchCriteria.empty(page=page, size=size))

    def search(self, criteria: ProductSearchCriteria | None) -> PaginatedResult[Product]:
        """Run a criteria search.

        Missing or empty criteria are not an error: they fall back to the
        global search (ACTIVE products only), keeping the caller's page.
        """
        if criteria is None:
            criteria = ProductSearchCriteria.empty()
        elif criteria.is_empty():
            criteria = criteria.without_filters()
        return self._product_repo.find_by_criteria(criteria, today=self._clock())

    def list_records(self, page: int | None = None, size: int | None = None) -> PaginatedResult[Product]:
        """Every stored record, sold and discarded included."""
        request = PageRequest.of(page, size)
        return self._product_repo.find_paginated(request.page, request.size)
