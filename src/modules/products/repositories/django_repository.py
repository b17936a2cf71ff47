"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"availability": True}
            {"name__icontains": "monitor"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset.order_by("id"))

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-integer IDs.
        """
        try:
            pk = int(id)
        except (TypeError, ValueError):
            return None
        return Product.objects.filter(pk=pk).first()

    def create(
        self, *, name: str, price: Decimal, availability: bool = True
    ) -> Product:
        product = Product.objects.create(
            name=name, price=price, availability=availability
        )
        logger.info("product.inserted", product_id=product.id)
        return product

    def save(self, entity: Product) -> Product:
        """Persist changes to an existing product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            pk = int(id)
        except (TypeError, ValueError):
            return False
        deleted, _ = Product.objects.filter(pk=pk).delete()
        if not deleted:
            return False
        logger.info("product.removed", product_id=pk)
        return True
