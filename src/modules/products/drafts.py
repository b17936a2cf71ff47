"""Client-side product drafts.

A *draft* is what a user typed into the "new product" form before
anything is sent to the API: string keys, string values.  ``parse_draft``
coerces the entries into a typed ``DraftProduct`` and validates it with
the same rules the API applies, so the form can report problems
without a round trip.

Failures raise ``InvalidProductData`` with one ``FieldError`` per
problem; nothing is swallowed.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

import structlog
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from modules.core.validation import errors_from_pydantic
from modules.products.exceptions import InvalidProductData
from modules.products.models import NAME_MAX_LENGTH
from modules.products.validators import PRICE_TOO_LARGE, fits_price_column

logger = structlog.get_logger(__name__)


class DraftProduct(BaseModel):
    """A validated, not yet submitted, product."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("name_empty", "Product name must not be empty")
        v = v.strip()
        if len(v) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long",
                "Product name must be at most {limit} characters",
                {"limit": NAME_MAX_LENGTH},
            )
        return v

    @field_validator("price", mode="before")
    @classmethod
    def price_is_number(cls, v: Any) -> Decimal:
        if v is None:
            raise PydanticCustomError("price_empty", "Product price must not be empty")
        if isinstance(v, bool):
            raise PydanticCustomError("price_invalid", "Invalid price value")
        try:
            return Decimal(str(v).strip())
        except InvalidOperation:
            raise PydanticCustomError("price_invalid", "Invalid price value") from None

    @field_validator("price")
    @classmethod
    def price_is_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise PydanticCustomError("price_not_positive", "Invalid price")
        if not fits_price_column(v):
            raise PydanticCustomError("price_too_large", PRICE_TOO_LARGE)
        return v


def _coerce_price(raw: Any) -> Any:
    """Blank entries count as missing; everything else is left to the model."""
    if raw is None:
        return None
    if isinstance(raw, str) and not raw.strip():
        return None
    return raw


def parse_draft(form: Mapping[str, Any]) -> DraftProduct:
    """Build a ``DraftProduct`` from raw form entries.

    Raises:
        InvalidProductData: listing every invalid field.
    """
    try:
        return DraftProduct(
            name=form.get("name"),
            price=_coerce_price(form.get("price")),
        )
    except PydanticValidationError as exc:
        raise InvalidProductData(errors_from_pydantic(exc)) from exc


def add_product(form: Mapping[str, Any]) -> DraftProduct:
    """Validate a submitted "new product" form and return the draft.

    Submission to the API is not wired in this build; callers receive
    the validated draft.

    Raises:
        InvalidProductData: when the form does not describe a valid product.
    """
    try:
        draft = parse_draft(form)
    except InvalidProductData as exc:
        logger.warning(
            "product_draft.invalid",
            fields=[error.field for error in exc.errors],
        )
        raise
    logger.info("product_draft.valid", name=draft.name, price=str(draft.price))
    return draft
