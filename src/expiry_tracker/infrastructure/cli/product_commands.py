"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

import click

from expiry_tracker.application.add_product import AddProductHandler
from expiry_tracker.application.discard_product import DiscardProductHandler
from expiry_tracker.application.dto import ProductDetails
from expiry_tracker.application.find_products import FindProductsHandler
from expiry_tracker.application.update_product import UpdateProductHandler
from expiry_tracker.domain.exceptions import DomainException
from expiry_tracker.domain.model.pagination import PaginatedResult
from expiry_tracker.domain.model.product import Product, ProductStatus
from expiry_tracker.domain.model.search_criteria import ProductSearchCriteria
from expiry_tracker.infrastructure.bootstrap import product_repository
from expiry_tracker.infrastructure.config import get_settings

_DATE = click.DateTime(formats=["%Y-%m-%d"])
_STATUS = click.Choice([s.value for s in ProductStatus], case_sensitive=False)


def _as_date(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


def _product_fields(func):
    """Shared options for add/update."""
    options = [
        click.option("--barcode", required=True, help="EAN-13 barcode (13 digits)."),
        click.option("--name", required=True, help="Product name."),
        click.option("--lot", required=True, help="Lot / batch number."),
        click.option("--expiry", required=True, type=_DATE, help="Expiry date (YYYY-MM-DD)."),
        click.option("--quantity", required=True, type=int, help="Units in stock."),
        click.option("--category", required=True, help="Category (e.g. Pasta, Sauces)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _display_product(p: Product) -> None:
    click.echo(f"Product {p.id}  (status={p.status.value})")
    click.echo(f"  Barcode:  {p.barcode}")
    click.echo(f"  Name:     {p.name}")
    click.echo(f"  Lot:      {p.lot}")
    click.echo(f"  Expiry:   {p.expiry_date.isoformat()}")
    click.echo(f"  Quantity: {p.quantity}")
    click.echo(f"  Category: {p.category}")


def _display_page(result: PaginatedResult[Product]) -> None:
    if not result.items:
        click.echo("No products found.")
    else:
        click.echo(
            f"{'ID':<36}  {'Barcode':<13}  {'Name':<20} {'Lot':<10} "
            f"{'Expiry':<10} {'Qty':>6}  {'Status':<9}"
        )
        click.echo("-" * 114)
        for p in result.items:
            click.echo(
                f"{str(p.id):<36}  {p.barcode.value:<13}  {p.name[:20]:<20} "
                f"{p.lot[:10]:<10} {p.expiry_date.isoformat():<10} "
                f"{p.quantity.value:>6}  {p.status.value:<9}"
            )
    page_count = max(result.total_pages, 1)
    click.echo(
        f"Page {result.current_page + 1} of {page_count} "
        f"({result.total_elements} products)"
    )


def _page_size(size: int | None) -> int:
    return size if size is not None else get_settings().default_page_size


@click.command("add")
@_product_fields
def product_add(
    barcode: str,
    name: str,
    lot: str,
    expiry: datetime,
    quantity: int,
    category: str,
) -> None:
    """Register a new lot."""
    handler = AddProductHandler(product_repo=product_repository())
    details = ProductDetails(barcode, name, lot, expiry.date(), quantity, category)

    try:
        product = handler.handle(details)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} registered (barcode {product.barcode}, lot {product.lot})")


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@_product_fields
def product_update(
    product_id: UUID,
    barcode: str,
    name: str,
    lot: str,
    expiry: datetime,
    quantity: int,
    category: str,
) -> None:
    """Update an ACTIVE product."""
    handler = UpdateProductHandler(product_repo=product_repository())
    details = ProductDetails(barcode, name, lot, expiry.date(), quantity, category)

    try:
        product = handler.handle(product_id, details)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_delete(product_id: UUID) -> None:
    """Discard a product (the record is kept with status DISCARDED)."""
    handler = DiscardProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} discarded.")


@click.command("show")
@click.option("--id", "product_id", type=click.UUID, default=None, help="Product ID.")
@click.option("--barcode", default=None, help="EAN-13 barcode.")
def product_show(product_id: UUID | None, barcode: str | None) -> None:
    """Show an ACTIVE product by ID or barcode."""
    if (product_id is None) == (barcode is None):
        raise click.UsageError("Pass exactly one of --id or --barcode")

    handler = FindProductsHandler(product_repo=product_repository())
    if product_id is not None:
        product = handler.find_by_id(product_id)
    else:
        product = handler.find_by_barcode(barcode)

    if product is None:
        raise click.ClickException(f"No active product found for {product_id or barcode}")
    _display_product(product)


@click.command("list")
@click.option("--page", type=int, default=0, show_default=True, help="Page index (0-based).")
@click.option("--size", type=int, default=None, help="Page size.")
@click.option("--all-statuses", is_flag=True, default=False, help="Include sold and discarded records.")
def product_list(page: int, size: int | None, all_statuses: bool) -> None:
    """List products, ACTIVE only unless --all-statuses."""
    handler = FindProductsHandler(product_repo=product_repository())
    if all_statuses:
        result = handler.list_records(page, _page_size(size))
    else:
        result = handler.find_all(page, _page_size(size))
    _display_page(result)


@click.command("search")
@click.option("--name", default=None, help="Part of the product name (case-insensitive).")
@click.option("--barcode", default=None, help="Exact EAN-13 barcode.")
@click.option("--lot", default=None, help="Exact lot number.")
@click.option("--expired-before", type=_DATE, default=None, help="Expiry on or before this date.")
@click.option("--expired/--not-expired", "is_expired", default=None, help="Already expired, or still valid.")
@click.option("--days", "days_threshold", type=int, default=None, help="Expires within this many days.")
@click.option("--status", type=_STATUS, default=None, help="Status filter (default ACTIVE).")
@click.option("--page", type=int, default=0, show_default=True, help="Page index (0-based).")
@click.option("--size", type=int, default=None, help="Page size.")
def product_search(
    name: str | None,
    barcode: str | None,
    lot: str | None,
    expired_before: datetime | None,
    is_expired: bool | None,
    days_threshold: int | None,
    status: str | None,
    page: int,
    size: int | None,
) -> None:
    """Search products with optional filters."""
    criteria = ProductSearchCriteria(
        name=name,
        barcode=barcode,
        lot=lot,
        expired_before=_as_date(expired_before),
        is_expired=is_expired,
        days_threshold=days_threshold,
        status=ProductStatus(status.upper()) if status else None,
        page=page,
        size=_page_size(size),
    )
    handler = FindProductsHandler(product_repo=product_repository())
    _display_page(handler.search(criteria))
