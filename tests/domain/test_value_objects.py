"""Unit tests for domain value objects."""

import pytest

from expiry_tracker.domain.exceptions import ValidationError
from expiry_tracker.domain.model.value_objects import Barcode, StockQuantity


# ── Barcode ──────────────────────────────────────────────────────────────────


class TestBarcode:

    def test_thirteen_digits_accepted(self):
        assert Barcode("7701234567890").value == "7701234567890"

    def test_str(self):
        assert str(Barcode("7701234567890")) == "7701234567890"

    @pytest.mark.parametrize(
        "raw",
        ["770123456789", "77012345678901", "77012345678AB", "", " 7701234567890"],
    )
    def test_malformed_rejected(self, raw):
        with pytest.raises(ValidationError, match="13 numeric digits"):
            Barcode(raw)

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            Barcode(7701234567890)

    def test_equality_by_value(self):
        assert Barcode("7701234567890") == Barcode("7701234567890")


# ── StockQuantity ────────────────────────────────────────────────────────────


class TestStockQuantity:

    def test_zero_allowed(self):
        assert StockQuantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockQuantity(-1)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity(True)

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity(2.5)
