"""JSON-file-backed implementation of ProductRepository.

Searches load every record and evaluate the composed filters in process,
so this store suits a single operator and modest inventories; the SQL
store pushes the same filters down to the database.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from uuid import UUID

from expiry_tracker.domain.exceptions import DuplicateProductError
from expiry_tracker.domain.model.pagination import Page, PageRequest, PaginatedResult
from expiry_tracker.domain.model.product import Product, ProductStatus
from expiry_tracker.domain.model.value_objects import Barcode, StockQuantity
from expiry_tracker.domain.repository.product_repository import ProductRepository
from expiry_tracker.domain.service.product_filters import ProductFilter
from expiry_tracker.infrastructure.persistence.in_memory_query import page_of


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        products = self._load()
        for other in products.values():
            if (
                other.id != product.id
                and other.barcode == product.barcode
                and other.lot == product.lot
            ):
                raise DuplicateProductError(
                    f"A product with barcode {product.barcode} and lot "
                    f"{product.lot} already exists"
                )
        products[product.id] = product
        self._persist(products)
        return product

    def get_by_id(self, product_id: UUID) -> Product | None:
        product = self._load().get(product_id)
        if product is None or not product.is_active:
            return None
        return product

    def get_stored(self, product_id: UUID) -> Product | None:
        return self._load().get(product_id)

    def get_by_barcode(self, barcode: str) -> Product | None:
        for product in self._load().values():
            if product.barcode.value == barcode and product.is_active:
                return product
        return None

    def exists_by_barcode_and_lot(self, barcode: str, lot: str) -> bool:
        return any(
            p.barcode.value == barcode and p.lot == lot
            for p in self._load().values()
        )

    def exists_by_id(self, product_id: UUID) -> bool:
        return product_id in self._load()

    def find_paginated(self, page: int, size: int) -> PaginatedResult[Product]:
        request = PageRequest.of(page, size)
        return PaginatedResult.from_page(page_of(list(self._load().values()), [], request))

    def find_matching(
        self, filters: list[ProductFilter], request: PageRequest
    ) -> Page[Product]:
        return page_of(list(self._load().values()), filters, request)

    def soft_delete(self, product_id: UUID) -> None:
        products = self._load()
        product = products.get(product_id)
        if product is None or not product.is_active:
            return
        product.discard()
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[UUID, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (self._to_domain(item) for item in raw)
        return {p.id: p for p in products}

    def _persist(self, products: dict[UUID, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": str(product.id),
            "barcode": product.barcode.value,
            "name": product.name,
            "lot": product.lot,
            "expiry_date": product.expiry_date.isoformat(),
            "quantity": product.quantity.value,
            "category": product.category,
            "status": product.status.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=UUID(raw["id"]),
            barcode=Barcode(raw["barcode"]),
            name=raw["name"],
            lot=raw["lot"],
            expiry_date=date.fromisoformat(raw["expiry_date"]),
            quantity=StockQuantity(raw["quantity"]),
            category=raw["category"],
            status=ProductStatus(raw.get("status", ProductStatus.ACTIVE.value)),
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
