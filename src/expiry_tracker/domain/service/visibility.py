"""Status visibility policy.

Default and global searches must never surface sold or discarded lots by
accident.  The rule is a pure function of the criteria so every search
path can apply it explicitly and it can be tested on its own.
"""

from __future__ import annotations

from expiry_tracker.domain.model.product import ProductStatus
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria

DEFAULT_VISIBLE_STATUS = ProductStatus.ACTIVE


def effective_status(criteria: ProductSearchCriteria | None) -> ProductStatus:
    """The status a search filters on: the explicit one, else ACTIVE."""
    if criteria is not None and criteria.status is not None:
        return criteria.status
    return DEFAULT_VISIBLE_STATUS
