"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from uuid import UUID

from expiry_tracker.application.add_product import ensure_unique_lot
from expiry_tracker.application.dto import ProductDetails
from expiry_tracker.domain.exceptions import EntityNotFoundError
from expiry_tracker.domain.model.product import Product
from expiry_tracker.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: UUID, details: ProductDetails) -> Product:
        """Replace the descriptive fields of an ACTIVE product.

        Sold or discarded products are frozen; the aggregate refuses the
        revision.  The duplicate check only re-runs when the barcode or
        lot actually changes, so saving a product unchanged is allowed.
        """
        product = self._product_repo.get_stored(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        barcode_changed = product.barcode.value != details.barcode
        lot_changed = product.lot != details.lot.strip()
        if product.is_active and (barcode_changed or lot_changed):
            ensure_unique_lot(self._product_repo, details.barcode, details.lot.strip())

        product.revise(
            barcode=details.barcode,
            name=details.name,
            lot=details.lot,
            expiry_date=details.expiry_date,
            quantity=details.quantity,
            category=details.category,
        )
        saved = self._product_repo.save(product)
        logger.info("Updated product %s", saved.id)
        return saved
