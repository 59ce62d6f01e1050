"""SQLAlchemy implementation of ProductRepository.

Search filters are folded into a single WHERE clause by
``SqlProductQuery``; counting and paging run against that same clause
so the page metadata always agrees with the rows returned.
"""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import ColumnElement, and_, func, select, true, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from expiry_tracker.domain.exceptions import DuplicateProductError
from expiry_tracker.domain.model.pagination import Page, PageRequest, PaginatedResult
from expiry_tracker.domain.model.product import Product, ProductStatus
from expiry_tracker.domain.model.value_objects import Barcode, StockQuantity
from expiry_tracker.domain.repository.product_repository import ProductRepository
from expiry_tracker.domain.service.product_filters import (
    ProductFilter,
    ProductQuery,
    combine,
)
from expiry_tracker.infrastructure.persistence.sql.models import ProductRecord
from expiry_tracker.infrastructure.persistence.sql.session import session_scope

logger = logging.getLogger(__name__)

Condition = ColumnElement[bool]


class SqlProductQuery(ProductQuery[Condition]):

    def status_is(self, status: ProductStatus) -> Condition:
        return ProductRecord.status == status

    def name_contains(self, text: str) -> Condition:
        return ProductRecord.name_search.contains(text.casefold(), autoescape=True)

    def barcode_is(self, barcode: str) -> Condition:
        return ProductRecord.barcode == barcode

    def lot_is(self, lot: str) -> Condition:
        return ProductRecord.lot == lot

    def expires_before(self, day: date) -> Condition:
        return ProductRecord.expiry_date < day

    def expires_on_or_before(self, day: date) -> Condition:
        return ProductRecord.expiry_date <= day

    def expires_on_or_after(self, day: date) -> Condition:
        return ProductRecord.expiry_date >= day

    def both(self, left: Condition, right: Condition) -> Condition:
        return and_(left, right)

    def match_all(self) -> Condition:
        return true()


class SqlProductRepository(ProductRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        try:
            with session_scope(self._session_factory) as session:
                session.merge(self._to_record(product))
        except IntegrityError as exc:
            logger.warning(
                "Unique constraint rejected barcode %s lot %s",
                product.barcode,
                product.lot,
            )
            raise DuplicateProductError(
                f"A product with barcode {product.barcode} and lot "
                f"{product.lot} already exists"
            ) from exc
        return product

    def get_by_id(self, product_id: UUID) -> Product | None:
        product = self.get_stored(product_id)
        if product is None or not product.is_active:
            return None
        return product

    def get_stored(self, product_id: UUID) -> Product | None:
        with session_scope(self._session_factory) as session:
            record = session.get(ProductRecord, product_id)
            return self._to_domain(record) if record is not None else None

    def get_by_barcode(self, barcode: str) -> Product | None:
        stmt = (
            select(ProductRecord)
            .where(
                ProductRecord.barcode == barcode,
                ProductRecord.status == ProductStatus.ACTIVE,
            )
            .order_by(ProductRecord.id)
            .limit(1)
        )
        with session_scope(self._session_factory) as session:
            record = session.scalars(stmt).first()
            return self._to_domain(record) if record is not None else None

    def exists_by_barcode_and_lot(self, barcode: str, lot: str) -> bool:
        stmt = select(ProductRecord.id).where(
            ProductRecord.barcode == barcode, ProductRecord.lot == lot
        )
        with session_scope(self._session_factory) as session:
            return session.scalars(stmt.limit(1)).first() is not None

    def exists_by_id(self, product_id: UUID) -> bool:
        stmt = select(ProductRecord.id).where(ProductRecord.id == product_id)
        with session_scope(self._session_factory) as session:
            return session.scalars(stmt).first() is not None

    def find_paginated(self, page: int, size: int) -> PaginatedResult[Product]:
        request = PageRequest.of(page, size)
        return PaginatedResult.from_page(self._page(true(), request))

    def find_matching(
        self, filters: list[ProductFilter], request: PageRequest
    ) -> Page[Product]:
        return self._page(combine(filters, SqlProductQuery()), request)

    def soft_delete(self, product_id: UUID) -> None:
        stmt = (
            update(ProductRecord)
            .where(
                ProductRecord.id == product_id,
                ProductRecord.status == ProductStatus.ACTIVE,
            )
            .values(status=ProductStatus.DISCARDED)
        )
        with session_scope(self._session_factory) as session:
            session.execute(stmt)

    # --- Query helpers --------------------------------------------------------

    def _page(self, condition: Condition, request: PageRequest) -> Page[Product]:
        count_stmt = select(func.count()).select_from(ProductRecord).where(condition)
        rows_stmt = (
            select(ProductRecord)
            .where(condition)
            .order_by(ProductRecord.id)
            .offset(request.offset)
            .limit(request.size)
        )
        with session_scope(self._session_factory) as session:
            total = session.scalar(count_stmt) or 0
            records = session.scalars(rows_stmt).all()
            return Page(
                content=[self._to_domain(r) for r in records],
                total_elements=total,
                request=request,
            )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_record(product: Product) -> ProductRecord:
        return ProductRecord(
            id=product.id,
            barcode=product.barcode.value,
            name=product.name,
            name_search=product.name.casefold(),
            lot=product.lot,
            expiry_date=product.expiry_date,
            quantity=product.quantity.value,
            category=product.category,
            status=product.status,
        )

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            barcode=Barcode(record.barcode),
            name=record.name,
            lot=record.lot,
            expiry_date=record.expiry_date,
            quantity=StockQuantity(record.quantity),
            category=record.category,
            status=record.status,
        )
