"""Product domain exceptions.

Raised by the Service Layer and the draft parser.  The API layer
(views) catches the service exceptions and translates them into
HTTP responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.core.validation import FieldError


class ProductNotFound(Exception):
    """The requested product does not exist."""


class InvalidProductData(Exception):
    """A product draft failed validation.

    ``errors`` lists every failing field, in the same ``{field, message}``
    shape the API returns for rejected requests.
    """

    def __init__(self, errors: List[FieldError]) -> None:
        self.errors = errors
        fields = ", ".join(error.field for error in errors)
        super().__init__(f"Invalid product data: {fields}")
