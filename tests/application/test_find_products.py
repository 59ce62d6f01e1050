"""Integration tests for the product query use cases."""

import pytest

from expiry_tracker.application.find_products import FindProductsHandler
from expiry_tracker.domain.exceptions import EntityNotFoundError
from expiry_tracker.domain.model.product import ProductStatus
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from tests.fakes import TODAY, FakeProductRepository, make_product


def _setup(products) -> FindProductsHandler:
    return FindProductsHandler(FakeProductRepository(products), clock=lambda: TODAY)


def _inventory():
    """Two active lots, one sold and one discarded."""
    active_soon = make_product(name="Spaghetti", lot="A1", expires_in=5)
    active_later = make_product(name="Penne", lot="A2", expires_in=40)
    sold = make_product(name="Spaghetti", lot="S1", expires_in=5)
    sold.mark_sold()
    discarded = make_product(name="Spaghetti", lot="D1", expires_in=-2)
    discarded.discard()
    return [active_soon, active_later, sold, discarded]


def _lots(result):
    return {p.lot for p in result.items}


class TestDefaultVisibility:

    def test_find_all_returns_only_active(self):
        assert _lots(_setup(_inventory()).find_all()) == {"A1", "A2"}

    def test_empty_criteria_equals_active_only_search(self):
        handler = _setup(_inventory())
        empty = handler.search(ProductSearchCriteria())
        active = handler.search(ProductSearchCriteria(status=ProductStatus.ACTIVE))
        assert empty == active

    def test_missing_criteria_is_global_search(self):
        assert _lots(_setup(_inventory()).search(None)) == {"A1", "A2"}

    def test_blank_filters_keep_pagination(self):
        handler = _setup([make_product(lot=f"L{i}") for i in range(5)])
        result = handler.search(ProductSearchCriteria(name="  ", page=1, size=2))
        assert result.current_page == 1
        assert len(result.items) == 2
        assert result.total_elements == 5

    def test_name_search_still_hides_retired_lots(self):
        result = _setup(_inventory()).search(ProductSearchCriteria(name="spaghetti"))
        assert _lots(result) == {"A1"}

    @pytest.mark.parametrize(
        "status, lots",
        [(ProductStatus.SOLD, {"S1"}), (ProductStatus.DISCARDED, {"D1"})],
    )
    def test_explicit_status_reaches_retired_lots(self, status, lots):
        result = _setup(_inventory()).search(ProductSearchCriteria(status=status))
        assert _lots(result) == lots


class TestLookups:

    def test_find_by_id_hides_retired(self):
        products = _inventory()
        handler = _setup(products)
        assert handler.find_by_id(products[0].id) is products[0]
        assert handler.find_by_id(products[3].id) is None

    def test_get_by_id_raises_for_retired(self):
        products = _inventory()
        with pytest.raises(EntityNotFoundError):
            _setup(products).get_by_id(products[2].id)

    def test_find_by_barcode_returns_active_lot(self):
        sold = make_product(lot="S1")
        sold.mark_sold()
        active = make_product(lot="A1")
        handler = _setup([sold, active])
        assert handler.find_by_barcode("7701234567890") is active

    def test_find_by_barcode_none_when_only_retired(self):
        discarded = make_product()
        discarded.discard()
        assert _setup([discarded]).find_by_barcode("7701234567890") is None


class TestExpirySearches:

    def test_product_expiring_in_five_days(self):
        handler = _setup([make_product(barcode="7701234567890", lot="L1", quantity=10, expires_in=5)])
        assert _lots(handler.search(ProductSearchCriteria(days_threshold=7))) == {"L1"}
        assert _lots(handler.search(ProductSearchCriteria(is_expired=True))) == set()

    def test_not_expired_filter(self):
        products = [make_product(lot="old", expires_in=-1), make_product(lot="new", expires_in=0)]
        result = _setup(products).search(ProductSearchCriteria(is_expired=False))
        assert _lots(result) == {"new"}

    def test_negative_threshold_is_ignored(self):
        products = [make_product(lot="a", expires_in=100)]
        assert _lots(_setup(products).search(ProductSearchCriteria(days_threshold=-3))) == {"a"}

    def test_clock_sets_evaluation_date(self):
        product = make_product(lot="L1", expires_in=5)
        handler = FindProductsHandler(FakeProductRepository([product]), clock=lambda: product.expiry_date)
        assert _lots(handler.search(ProductSearchCriteria(days_threshold=1))) == {"L1"}


class TestPagination:

    def test_invalid_page_and_size_are_clamped(self):
        handler = _setup([make_product(lot=f"L{i:02}") for i in range(12)])
        result = handler.search(ProductSearchCriteria(name="spag", page=-4, size=0))
        assert result.current_page == 0
        assert len(result.items) == 10
        assert result.total_pages == 2
        assert result.has_next
        assert not result.has_previous

    def test_last_page(self):
        handler = _setup([make_product(lot=f"L{i:02}") for i in range(7)])
        result = handler.find_all(page=2, size=3)
        assert len(result.items) == 1
        assert result.total_pages == 3
        assert not result.has_next
        assert result.has_previous

    def test_list_records_includes_every_status(self):
        result = _setup(_inventory()).list_records(0, 10)
        assert _lots(result) == {"A1", "A2", "S1", "D1"}
        assert result.total_elements == 4
