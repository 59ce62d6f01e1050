"""SQLAlchemy models for the relational store."""

from __future__ import annotations

from sqlalchemy import Column, Date, Enum, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import DeclarativeBase

from expiry_tracker.domain.model.product import ProductStatus


class Base(DeclarativeBase):
    pass


class ProductRecord(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True)
    barcode = Column(String(13), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    # Casefolded copy of name; SQL lower() only folds ASCII on some engines.
    name_search = Column(String(512), nullable=False, index=True)
    lot = Column(String(64), nullable=False)
    expiry_date = Column(Date, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    category = Column(String(128), nullable=False)
    status = Column(
        Enum(ProductStatus, name="product_status", native_enum=False, length=20),
        nullable=False,
        default=ProductStatus.ACTIVE,
        index=True,
    )

    # One record per lot, whatever its status.
    __table_args__ = (UniqueConstraint("barcode", "lot", name="uk_product_batch"),)


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    username = Column(String(150), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
