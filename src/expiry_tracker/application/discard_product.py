"""Application service: Discard Product use case.

Deleting a product is a soft delete: the record stays in storage with
status DISCARDED so it remains traceable by lot.
"""

from __future__ import annotations

import logging
from uuid import UUID

from expiry_tracker.domain.exceptions import EntityNotFoundError
from expiry_tracker.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DiscardProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: UUID) -> None:
        if not self._product_repo.exists_by_id(product_id):
            raise EntityNotFoundError(
                f"Cannot discard product '{product_id}': it does not exist"
            )

        self._product_repo.soft_delete(product_id)
        logger.info("Discarded product %s", product_id)
