"""Unit tests for the composable product filters.

``DescribingQuery`` renders each condition as text so the shape of the
composed query can be asserted directly; the behavioural tests run the
same filters through the in-memory query builder.
"""

from datetime import date, timedelta

import pytest

from expiry_tracker.domain.model.product import ProductStatus
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from expiry_tracker.domain.service.product_filters import (
    ProductQuery,
    about_to_expire_filter,
    barcode_filter,
    combine,
    criteria_filters,
    expired_before_filter,
    expired_filter,
    lot_filter,
    name_filter,
    status_filter,
)
from expiry_tracker.infrastructure.persistence.in_memory_query import InMemoryProductQuery
from tests.fakes import TODAY, make_product


class DescribingQuery(ProductQuery[str]):

    def status_is(self, status):
        return f"status={status.value}"

    def name_contains(self, text):
        return f"name~{text}"

    def barcode_is(self, barcode):
        return f"barcode={barcode}"

    def lot_is(self, lot):
        return f"lot={lot}"

    def expires_before(self, day):
        return f"expiry<{day}"

    def expires_on_or_before(self, day):
        return f"expiry<={day}"

    def expires_on_or_after(self, day):
        return f"expiry>={day}"

    def both(self, left, right):
        return f"({left} AND {right})"

    def match_all(self):
        return "TRUE"


Q = DescribingQuery()


class TestAbsentFiltersAreWildcards:

    @pytest.mark.parametrize(
        "product_filter",
        [
            status_filter(None),
            name_filter(None),
            name_filter("   "),
            barcode_filter(""),
            lot_filter(None),
            expired_filter(None, TODAY),
            expired_before_filter(None),
            about_to_expire_filter(None, TODAY),
            about_to_expire_filter(-1, TODAY),
        ],
    )
    def test_returns_none(self, product_filter):
        assert product_filter(Q) is None

    def test_combine_without_conditions_matches_all(self):
        assert combine([name_filter(None), lot_filter(None)], Q) == "TRUE"


class TestFilterConditions:

    def test_name_is_trimmed(self):
        assert name_filter("  fideo ")(Q) == "name~fideo"

    def test_expired_true_is_strictly_before_today(self):
        assert expired_filter(True, TODAY)(Q) == "expiry<2026-03-10"

    def test_expired_false_is_on_or_after_today(self):
        assert expired_filter(False, TODAY)(Q) == "expiry>=2026-03-10"

    def test_expired_before_is_inclusive(self):
        assert expired_before_filter(date(2026, 4, 1))(Q) == "expiry<=2026-04-01"

    def test_about_to_expire_is_half_open_window(self):
        assert about_to_expire_filter(7, TODAY)(Q) == (
            "(expiry>=2026-03-10 AND expiry<2026-03-17)"
        )

    def test_conditions_are_folded_with_and(self):
        combined = combine([status_filter(ProductStatus.ACTIVE), name_filter("rice"), lot_filter("L1")], Q)
        assert combined == "((status=ACTIVE AND name~rice) AND lot=L1)"


class TestCriteriaFilters:

    def test_empty_criteria_is_active_only(self):
        assert combine(criteria_filters(ProductSearchCriteria(), TODAY), Q) == "status=ACTIVE"

    def test_explicit_status_replaces_default(self):
        criteria = ProductSearchCriteria(status=ProductStatus.DISCARDED)
        assert combine(criteria_filters(criteria, TODAY), Q) == "status=DISCARDED"

    def test_expired_and_threshold_both_apply(self):
        criteria = ProductSearchCriteria(is_expired=True, days_threshold=3)
        assert combine(criteria_filters(criteria, TODAY), Q) == (
            "((status=ACTIVE AND expiry<2026-03-10) "
            "AND (expiry>=2026-03-10 AND expiry<2026-03-13))"
        )


class TestInMemoryEvaluation:

    def _matching(self, criteria, products):
        predicate = combine(criteria_filters(criteria, TODAY), InMemoryProductQuery())
        return [p for p in products if predicate(p)]

    def _matches(self, criteria, products):
        return {p.lot for p in self._matching(criteria, products)}

    def test_name_is_case_insensitive_substring(self):
        products = [make_product(name="Fideo Cabello", lot="A"), make_product(name="Arroz", lot="B")]
        assert self._matches(ProductSearchCriteria(name="FIDEO"), products) == {"A"}

    def test_exact_barcode_and_lot(self):
        products = [
            make_product(barcode="7701234567890", lot="A"),
            make_product(barcode="7701234567890", lot="B"),
            make_product(barcode="7800000000001", lot="A"),
        ]
        criteria = ProductSearchCriteria(barcode="7701234567890", lot="A")
        assert self._matching(criteria, products) == [products[0]]

    def test_days_threshold_window(self):
        products = [
            make_product(lot="past", expires_in=-1),
            make_product(lot="today", expires_in=0),
            make_product(lot="soon", expires_in=6),
            make_product(lot="edge", expires_in=7),
        ]
        assert self._matches(ProductSearchCriteria(days_threshold=7), products) == {"today", "soon"}

    def test_contradictory_filters_give_empty_set(self):
        products = [make_product(lot=str(d), expires_in=d) for d in (-3, 0, 2)]
        criteria = ProductSearchCriteria(is_expired=True, days_threshold=5)
        assert self._matches(criteria, products) == set()

    def test_expired_before_bound(self):
        products = [make_product(lot=str(d), expires_in=d) for d in (1, 5, 6)]
        criteria = ProductSearchCriteria(expired_before=TODAY + timedelta(days=5))
        assert self._matches(criteria, products) == {"1", "5"}

    def test_retired_products_hidden_by_default(self):
        active, discarded = make_product(lot="A"), make_product(lot="D")
        discarded.discard()
        assert self._matches(ProductSearchCriteria(), [active, discarded]) == {"A"}
        assert self._matches(
            ProductSearchCriteria(status=ProductStatus.DISCARDED), [active, discarded]
        ) == {"D"}
