"""Product model.

Business rules implemented:
- The name must not be empty and fits in 100 characters.
- The price must be greater than zero (model ``clean`` plus a DB CHECK)
  and fit the Decimal(10, 2) column.
- New products are available by default.
- Deletion is physical: no soft-delete column.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)

NAME_MAX_LENGTH = 100
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
# Largest value a Decimal(10, 2) column holds.
PRICE_MAX = Decimal("99999999.99")


class Product(TimestampedModel):
    """A catalog entry: name, price and stock availability."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.name is not None:
            self.name = self.name.strip()
        if not self.name:
            raise ValidationError({"name": "Product name must not be empty."})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                name=self.name,
            )

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
