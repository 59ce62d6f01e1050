"""Domain service: composable product filters.

A search is a conjunction of small, independent filters.  Each filter is
a plain function that asks a ``ProductQuery`` for one condition, or
returns None when its criterion is absent (a wildcard, never a false
predicate).  ``combine`` folds whatever conditions remain with logical
AND.

``ProductQuery`` is the only thing a storage adapter has to implement:
the SQL adapter turns conditions into SQLAlchemy expressions, the JSON
adapter into Python predicates.  The filters themselves never know which
engine runs them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import date, timedelta
from functools import reduce
from typing import Any, Generic, TypeVar

from expiry_tracker.domain.model.product import ProductStatus
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from expiry_tracker.domain.service.visibility import effective_status

C = TypeVar("C")


class ProductQuery(ABC, Generic[C]):
    """Builds engine-specific boolean conditions over product fields."""

    @abstractmethod
    def status_is(self, status: ProductStatus) -> C:
        """Status equals ``status``."""

    @abstractmethod
    def name_contains(self, text: str) -> C:
        """Case-insensitive substring match on the display name."""

    @abstractmethod
    def barcode_is(self, barcode: str) -> C:
        """Exact barcode match."""

    @abstractmethod
    def lot_is(self, lot: str) -> C:
        """Exact lot match."""

    @abstractmethod
    def expires_before(self, day: date) -> C:
        """Expiry date strictly before ``day``."""

    @abstractmethod
    def expires_on_or_before(self, day: date) -> C:
        """Expiry date on or before ``day``."""

    @abstractmethod
    def expires_on_or_after(self, day: date) -> C:
        """Expiry date on or after ``day``."""

    @abstractmethod
    def both(self, left: C, right: C) -> C:
        """Logical AND of two conditions."""

    @abstractmethod
    def match_all(self) -> C:
        """A condition every product satisfies."""


# A filter yields one condition, or None when its criterion is absent.
ProductFilter = Callable[[ProductQuery[Any]], Any]


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


# --- Filter factories --------------------------------------------------------


def status_filter(status: ProductStatus | None) -> ProductFilter:
    def apply(query: ProductQuery[C]) -> C | None:
        return None if status is None else query.status_is(status)

    return apply


def name_filter(name: str | None) -> ProductFilter:
    def apply(query: ProductQuery[C]) -> C | None:
        return None if _blank(name) else query.name_contains(name.strip())

    return apply


def barcode_filter(barcode: str | None) -> ProductFilter:
    def apply(query: ProductQuery[C]) -> C | None:
        return None if _blank(barcode) else query.barcode_is(barcode.strip())

    return apply


def lot_filter(lot: str | None) -> ProductFilter:
    def apply(query: ProductQuery[C]) -> C | None:
        return None if _blank(lot) else query.lot_is(lot.strip())

    return apply


def expired_filter(is_expired: bool | None, today: date) -> ProductFilter:
    """True: already expired (expiry < today).  False: still valid (expiry >= today)."""

    def apply(query: ProductQuery[C]) -> C | None:
        if is_expired is None:
            return None
        if is_expired:
            return query.expires_before(today)
        return query.expires_on_or_after(today)

    return apply


def expired_before_filter(day: date | None) -> ProductFilter:
    def apply(query: ProductQuery[C]) -> C | None:
        return None if day is None else query.expires_on_or_before(day)

    return apply


def about_to_expire_filter(days: int | None, today: date) -> ProductFilter:
    """Expiry within ``[today, today + days)``; None or negative disables it."""

    def apply(query: ProductQuery[C]) -> C | None:
        if days is None or days < 0:
            return None
        limit = today + timedelta(days=days)
        return query.both(
            query.expires_on_or_after(today),
            query.expires_before(limit),
        )

    return apply


# --- Composition -------------------------------------------------------------


def criteria_filters(
    criteria: ProductSearchCriteria, today: date
) -> list[ProductFilter]:
    """Translate criteria into filters, starting with the visibility rule."""
    return [
        status_filter(effective_status(criteria)),
        name_filter(criteria.name),
        barcode_filter(criteria.barcode),
        lot_filter(criteria.lot),
        expired_filter(criteria.is_expired, today),
        expired_before_filter(criteria.expired_before),
        about_to_expire_filter(criteria.days_threshold, today),
    ]


def combine(filters: Iterable[ProductFilter], query: ProductQuery[C]) -> C:
    """AND together every enabled filter; no filters at all matches everything."""
    conditions = [c for c in (f(query) for f in filters) if c is not None]
    if not conditions:
        return query.match_all()
    return reduce(query.both, conditions)
