"""Product repository interface.

Narrows ``IRepository[Product]`` to the look-ups the catalog needs.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products ordered by id ascending, with optional filters."""

    @abstractmethod
    def create(  # type: ignore[override]
        self, *, name: str, price: Decimal, availability: bool = True
    ) -> Product:
        """Insert a new product and return it with its assigned id."""
