"""Unit tests for ProductService.

Covers:
- list_products / get_product: delegation, not found.
- create_product: always available.
- update_product: full replacement, not found.
- set_availability: toggle, explicit value, name/price untouched.
- delete_product: happy path, not found.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {
        "id": 1,
        "name": "Monitor",
        "price": Decimal("300.00"),
        "availability": True,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Queries
# ===========================================================================


class TestListProducts:
    def test_delegates_to_repo(self, service, mock_repo):
        products = [_product(id=1), _product(id=2)]
        mock_repo.list.return_value = products

        assert service.list_products() == products
        mock_repo.list.assert_called_once_with(None)

    def test_passes_filters_to_repo(self, service, mock_repo):
        mock_repo.list.return_value = []
        filters = {"availability__exact": True}

        service.list_products(filters)

        mock_repo.list.assert_called_once_with(filters)


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(1) is existing
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound, match="999"):
            service.get_product(999)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_creates_available_product(self, service, mock_repo):
        mock_repo.create.side_effect = lambda **fields: _product(**fields)

        dto = CreateProductDTO(name="Monitor", price=Decimal("300"))
        product = service.create_product(dto)

        mock_repo.create.assert_called_once_with(
            name="Monitor", price=Decimal("300.00"), availability=True
        )
        assert product.availability is True


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_replaces_every_mutable_field(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing
        mock_repo.save.side_effect = lambda p: p

        dto = UpdateProductDTO(name="Keyboard", price=Decimal("49.90"), availability=False)
        product = service.update_product(1, dto)

        assert product.name == "Keyboard"
        assert product.price == Decimal("49.90")
        assert product.availability is False
        mock_repo.save.assert_called_once_with(existing)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        dto = UpdateProductDTO(name="Ghost", price=Decimal("1"), availability=True)
        with pytest.raises(ProductNotFound):
            service.update_product(999, dto)

        mock_repo.save.assert_not_called()


# ===========================================================================
# set_availability
# ===========================================================================


class TestSetAvailability:
    def test_toggles_when_no_value_given(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(availability=True)
        mock_repo.save.side_effect = lambda p: p

        assert service.set_availability(1).availability is False

    def test_toggles_back(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(availability=False)
        mock_repo.save.side_effect = lambda p: p

        assert service.set_availability(1).availability is True

    def test_sets_explicit_value(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product(availability=True)
        mock_repo.save.side_effect = lambda p: p

        assert service.set_availability(1, True).availability is True

    def test_never_touches_name_or_price(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        mock_repo.save.side_effect = lambda p: p

        product = service.set_availability(1)

        assert product.name == "Monitor"
        assert product.price == Decimal("300.00")

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.set_availability(999)

        mock_repo.save.assert_not_called()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        mock_repo.delete.return_value = True

        service.delete_product(1)

        mock_repo.delete.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.delete_product(999)

        mock_repo.delete.assert_not_called()
