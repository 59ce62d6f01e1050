"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from expiry_tracker.application.dto import ProductDetails
from expiry_tracker.domain.exceptions import DuplicateProductError
from expiry_tracker.domain.model.product import Product
from expiry_tracker.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def ensure_unique_lot(repo: ProductRepository, barcode: str, lot: str) -> None:
    """Reject a (barcode, lot) pair that is already registered in any status."""
    if repo.exists_by_barcode_and_lot(barcode, lot):
        logger.warning("Rejected duplicate lot %s for barcode %s", lot, barcode)
        raise DuplicateProductError(
            f"A product with barcode {barcode} and lot {lot} already exists"
        )


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, details: ProductDetails) -> Product:
        """Register a new lot.

        The duplicate check runs first, before any identity is generated.
        """
        ensure_unique_lot(self._product_repo, details.barcode, details.lot)

        product = Product.create(
            barcode=details.barcode,
            name=details.name,
            lot=details.lot,
            expiry_date=details.expiry_date,
            quantity=details.quantity,
            category=details.category,
        )
        saved = self._product_repo.save(product)
        logger.info(
            "Registered product %s (barcode=%s, lot=%s)",
            saved.id,
            saved.barcode,
            saved.lot,
        )
        return saved
