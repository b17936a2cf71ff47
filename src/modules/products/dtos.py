"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for a full product replacement.

The views run the request rule sets first, so in normal operation
these validators only restate invariants the rules already enforce.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.models import NAME_MAX_LENGTH, PRICE_MAX
from modules.products.validators import fits_price_column

_CENTS = Decimal("0.01")


def _normalise_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Product name must not be empty.")
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(
            f"Product name must be at most {NAME_MAX_LENGTH} characters."
        )
    return v


def _normalise_price(v: Decimal) -> Decimal:
    if not v.is_finite() or v <= 0:
        raise ValueError("Price must be greater than zero.")
    if not fits_price_column(v):
        raise ValueError(f"Price must be at most {PRICE_MAX}.")
    v = v.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if v <= 0:
        raise ValueError("Price must be greater than zero.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string (stripped).
    - ``price`` is greater than zero, fits the price column and is
      rounded to cents.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _normalise_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _normalise_price(v)


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for full-replacement updates: every field is required."""

    availability: bool

