"""Unit tests for the status visibility policy."""

import pytest

from expiry_tracker.domain.model.product import ProductStatus
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from expiry_tracker.domain.service.visibility import effective_status


class TestEffectiveStatus:

    def test_defaults_to_active(self):
        assert effective_status(ProductSearchCriteria()) == ProductStatus.ACTIVE

    def test_defaults_to_active_for_missing_criteria(self):
        assert effective_status(None) == ProductStatus.ACTIVE

    def test_other_filters_do_not_change_default(self):
        criteria = ProductSearchCriteria(name="rice", is_expired=True, days_threshold=3)
        assert effective_status(criteria) == ProductStatus.ACTIVE

    @pytest.mark.parametrize("status", list(ProductStatus))
    def test_explicit_status_used_verbatim(self, status):
        assert effective_status(ProductSearchCriteria(status=status)) == status
