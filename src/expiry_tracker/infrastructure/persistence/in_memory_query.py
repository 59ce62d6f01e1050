"""ProductQuery that builds plain Python predicates.

Used by the JSON store, which loads its records and filters them in
process, and by the test fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from expiry_tracker.domain.model.pagination import Page, PageRequest
from expiry_tracker.domain.model.product import Product, ProductStatus
from expiry_tracker.domain.service.product_filters import (
    ProductFilter,
    ProductQuery,
    combine,
)

Predicate = Callable[[Product], bool]


class InMemoryProductQuery(ProductQuery[Predicate]):

    def status_is(self, status: ProductStatus) -> Predicate:
        return lambda p: p.status == status

    def name_contains(self, text: str) -> Predicate:
        needle = text.casefold()
        return lambda p: needle in p.name.casefold()

    def barcode_is(self, barcode: str) -> Predicate:
        return lambda p: p.barcode.value == barcode

    def lot_is(self, lot: str) -> Predicate:
        return lambda p: p.lot == lot

    def expires_before(self, day: date) -> Predicate:
        return lambda p: p.expiry_date < day

    def expires_on_or_before(self, day: date) -> Predicate:
        return lambda p: p.expiry_date <= day

    def expires_on_or_after(self, day: date) -> Predicate:
        return lambda p: p.expiry_date >= day

    def both(self, left: Predicate, right: Predicate) -> Predicate:
        return lambda p: left(p) and right(p)

    def match_all(self) -> Predicate:
        return lambda p: True


def page_of(
    products: list[Product],
    filters: list[ProductFilter],
    request: PageRequest,
) -> Page[Product]:
    """Filter ``products`` in process and cut out the requested page."""
    predicate = combine(filters, InMemoryProductQuery())
    matches = [p for p in products if predicate(p)]
    return Page(
        content=matches[request.offset:request.offset + request.size],
        total_elements=len(matches),
        request=request,
    )
