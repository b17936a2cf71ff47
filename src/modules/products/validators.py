"""Request rule sets for the product endpoints.

Each tuple is evaluated in order by ``run_rules``; every failing rule
is reported, so a blank price yields both the "numeric" and the
"positive" messages.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from modules.core.validation import (
    FieldRule,
    ValidationResult,
    is_boolean,
    is_numeric,
    is_positive,
    is_positive_int,
    max_decimal,
    max_length,
    not_empty,
    run_rules,
)
from modules.products.models import NAME_MAX_LENGTH, PRICE_MAX

INVALID_ID = "Invalid ID"
NAME_EMPTY = "Product name must not be empty"
NAME_TOO_LONG = f"Product name must be at most {NAME_MAX_LENGTH} characters"
PRICE_NOT_NUMERIC = "Invalid value"
PRICE_EMPTY = "Product price must not be empty"
PRICE_NOT_POSITIVE = "Invalid price"
PRICE_TOO_LARGE = f"Product price must be at most {PRICE_MAX}"
AVAILABILITY_INVALID = "Invalid availability value"

fits_price_column = max_decimal(PRICE_MAX)

ID_RULES: Tuple[FieldRule, ...] = (
    FieldRule("id", is_positive_int, INVALID_ID),
)

CREATE_RULES: Tuple[FieldRule, ...] = (
    FieldRule("name", not_empty, NAME_EMPTY),
    FieldRule("name", max_length(NAME_MAX_LENGTH), NAME_TOO_LONG),
    FieldRule("price", is_numeric, PRICE_NOT_NUMERIC),
    FieldRule("price", not_empty, PRICE_EMPTY),
    FieldRule("price", is_positive, PRICE_NOT_POSITIVE),
    FieldRule("price", fits_price_column, PRICE_TOO_LARGE),
)

UPDATE_RULES: Tuple[FieldRule, ...] = CREATE_RULES + (
    FieldRule("availability", is_boolean, AVAILABILITY_INVALID),
)

AVAILABILITY_RULES: Tuple[FieldRule, ...] = (
    FieldRule("availability", is_boolean, AVAILABILITY_INVALID, optional=True),
)


def validate_id(pk: Any) -> ValidationResult:
    return run_rules({"id": pk}, ID_RULES)


def validate_create(data: Optional[Mapping[str, Any]]) -> ValidationResult:
    return run_rules(data, CREATE_RULES)


def validate_update(pk: Any, data: Optional[Mapping[str, Any]]) -> ValidationResult:
    """Id first, then the body, so errors keep route-declaration order."""
    id_result = validate_id(pk)
    body_result = run_rules(data, UPDATE_RULES)
    return ValidationResult(errors=id_result.errors + body_result.errors)


def validate_availability(
    pk: Any, data: Optional[Mapping[str, Any]]
) -> ValidationResult:
    id_result = validate_id(pk)
    body_result = run_rules(data, AVAILABILITY_RULES)
    return ValidationResult(errors=id_result.errors + body_result.errors)


def parse_boolean(value: Any) -> bool:
    """Convert a value already accepted by ``is_boolean`` into a bool."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return bool(value)
