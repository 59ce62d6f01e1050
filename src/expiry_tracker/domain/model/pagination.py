"""Pagination primitives.

``PageRequest`` normalises what the caller asked for, ``Page`` is what a
storage adapter hands back (content plus the total count it measured),
and ``PaginatedResult`` is the transport-agnostic envelope returned to
callers.  All page arithmetic lives in ``Page`` so the envelope can never
disagree with the query that produced it.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size

    @staticmethod
    def of(page: int | None, size: int | None) -> PageRequest:
        """Clamp invalid input: negative page -> 0, non-positive size -> default."""
        safe_page = page if page is not None and page >= 0 else 0
        safe_size = size if size is not None and size > 0 else DEFAULT_PAGE_SIZE
        return PageRequest(page=safe_page, size=safe_size)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a query result, as measured by the storage engine."""

    content: list[T]
    total_elements: int
    request: PageRequest

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.request.size)

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        return Page(
            content=[fn(item) for item in self.content],
            total_elements=self.total_elements,
            request=self.request,
        )


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """Items for the current page plus page metadata.

    Build it with ``PaginatedResult.from_page()`` only.
    """

    items: list[T]
    total_elements: int
    total_pages: int
    current_page: int
    has_next: bool
    has_previous: bool

    @staticmethod
    def from_page(page: Page[T]) -> PaginatedResult[T]:
        return PaginatedResult(
            items=list(page.content),
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            current_page=page.number,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )
