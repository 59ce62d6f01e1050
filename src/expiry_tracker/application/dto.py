"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands carry only what an outside caller may provide.  Identity and
status are never part of the input; the domain assigns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ProductDetails:
    """Input: the descriptive fields of a product, for create and update."""

    barcode: str
    name: str
    lot: str
    expiry_date: date
    quantity: int
    category: str


@dataclass(frozen=True)
class UserRegistration:
    """Input: a new user's credentials."""

    username: str
    email: str
    password: str
