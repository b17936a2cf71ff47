"""Unit tests for the Product model.

Covers:
- Valid creation and availability default.
- Auto-assigned integer ids and default ordering.
- Name / price validation (application + DB constraint).
- Hard delete.
- __str__ representation.
- INFO log on product creation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    """Build and full_clean a Product, returning the unsaved instance."""
    defaults = {
        "name": "Test Product",
        "price": Decimal("29.90"),
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.full_clean()
    return product


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestProductCreation:
    """Happy-path creation."""

    def test_create_product_with_valid_data(self):
        p = Product.objects.create(name="Monitor", price=Decimal("300.00"))
        p.refresh_from_db()
        assert p.name == "Monitor"
        assert p.price == Decimal("300.00")

    def test_availability_defaults_to_true(self):
        p = Product.objects.create(name="Monitor", price=Decimal("300.00"))
        assert p.availability is True

    def test_id_is_auto_assigned_integer(self):
        first = Product.objects.create(name="First", price=Decimal("1.00"))
        second = Product.objects.create(name="Second", price=Decimal("2.00"))
        assert isinstance(first.id, int)
        assert second.id > first.id

    def test_timestamps_set_on_create(self):
        p = Product.objects.create(name="Timestamped", price=Decimal("5.00"))
        assert p.created_at is not None
        assert p.updated_at is not None

    def test_default_ordering_is_by_id(self):
        b = Product.objects.create(name="B", price=Decimal("1.00"))
        a = Product.objects.create(name="A", price=Decimal("1.00"))
        assert list(Product.objects.all()) == [b, a]


# ---------------------------------------------------------------------------
# Name Validation
# ---------------------------------------------------------------------------


class TestNameValidation:
    def test_blank_name_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Product name must not be empty"):
            _make_product(name="   ")

    def test_name_is_stripped_by_full_clean(self):
        p = _make_product(name="  Keyboard  ")
        assert p.name == "Keyboard"

    def test_name_longer_than_limit_raises(self):
        with pytest.raises(ValidationError):
            _make_product(name="x" * 101)


# ---------------------------------------------------------------------------
# Price Validation
# ---------------------------------------------------------------------------


class TestPriceValidation:
    def test_zero_price_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Price must be greater than zero"):
            _make_product(price=Decimal("0.00"))

    def test_negative_price_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Price must be greater than zero"):
            _make_product(price=Decimal("-5.00"))

    def test_minimum_valid_price(self):
        p = _make_product(price=Decimal("0.01"))
        assert p.price == Decimal("0.01")

    def test_db_constraint_rejects_non_positive_price(self):
        with pytest.raises(IntegrityError):
            Product.objects.create(name="Free", price=Decimal("0.00"))


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


class TestProductDelete:
    def test_delete_removes_row(self):
        p = Product.objects.create(name="Delete Me", price=Decimal("10.00"))
        pk = p.pk
        p.delete()
        assert not Product.objects.filter(pk=pk).exists()


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


class TestProductDisplay:
    def test_str_representation(self):
        p = Product.objects.create(name="Display Product", price=Decimal("1.00"))
        assert str(p) == f"#{p.id} Display Product"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestProductLogging:
    """Product creation emits an INFO log."""

    def test_creation_logs_info(self, caplog):
        import logging

        with caplog.at_level(logging.INFO, logger="modules.products.models"):
            Product.objects.create(name="Logged Product", price=Decimal("10.00"))
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert any("product_created" in m for m in messages)

    def test_update_does_not_log_creation(self, caplog):
        import logging

        p = Product.objects.create(name="No Re-log", price=Decimal("10.00"))
        caplog.clear()
        with caplog.at_level(logging.INFO, logger="modules.products.models"):
            p.name = "Updated Name"
            p.save(update_fields=["name"])
        creation_logs = [
            r for r in caplog.records if "product_created" in r.getMessage()
        ]
        assert len(creation_logs) == 0
