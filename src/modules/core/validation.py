"""Declarative field rules evaluated as an explicit validation step.

A rule set is an ordered sequence of ``FieldRule`` objects.  ``run_rules``
evaluates every rule against a payload mapping and collects *all*
failures, in declaration order, into a ``ValidationResult``.  Views
short-circuit with HTTP 400 when the result is not ``ok``.

The checks mirror the semantics clients already rely on:

- ``is_int`` accepts ints and signed digit strings, never booleans.
- ``is_numeric`` accepts finite numbers and plain decimal strings.
- ``is_boolean`` accepts booleans, 0/1 and "true"/"false"/"1"/"0".
- ``not_empty`` rejects missing values and blank strings.
- ``max_decimal`` rejects numbers too large for a fixed-point column.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

_MISSING = object()
_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "

_INT_RE = re.compile(r"^[+-]?\d+$")
_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


@dataclass(frozen=True)
class FieldError:
    """A single failed rule: the offending field and a readable message."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class FieldRule:
    """Check ``check(value)`` for ``field``; report ``message`` on failure.

    ``optional`` rules are skipped entirely when the field is absent.
    """

    field: str
    check: Callable[[Any], bool]
    message: str
    optional: bool = False


@dataclass(frozen=True)
class ValidationResult:
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_response_data(self) -> List[Dict[str, str]]:
        return [error.to_dict() for error in self.errors]


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(_INT_RE.match(value.strip()))


def is_positive_int(value: Any) -> bool:
    return is_int(value) and int(value) > 0


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, str) and bool(_NUMERIC_RE.match(value.strip()))


def is_positive(value: Any) -> bool:
    """Numeric and strictly greater than zero.  Non-numeric values fail."""
    if not is_numeric(value):
        return False
    try:
        return Decimal(str(value).strip()) > 0
    except InvalidOperation:
        return False


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value.strip().lower() in _BOOLEAN_STRINGS


def max_length(limit: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return not isinstance(value, str) or len(value.strip()) <= limit

    return check


def max_decimal(limit: Decimal) -> Callable[[Any], bool]:
    """Numeric values must not exceed ``limit`` once rounded to its places.

    Non-numeric values pass; ``is_numeric`` reports those.
    """
    step = Decimal(1).scaleb(limit.as_tuple().exponent)

    def check(value: Any) -> bool:
        if not is_numeric(value):
            return True
        try:
            rounded = Decimal(str(value).strip()).quantize(
                step, rounding=ROUND_HALF_UP
            )
        except InvalidOperation:
            return False
        return abs(rounded) <= limit

    return check


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def errors_from_pydantic(exc: PydanticValidationError) -> List[FieldError]:
    """Flatten a Pydantic ``ValidationError`` into ``FieldError`` items."""
    errors: List[FieldError] = []
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        message = err.get("msg", "Invalid value")
        if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
            message = message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
        errors.append(FieldError(field=str(loc[0]), message=message))
    return errors


def run_rules(
    data: Optional[Mapping[str, Any]], rules: Sequence[FieldRule]
) -> ValidationResult:
    """Evaluate ``rules`` against ``data`` and collect every failure."""
    payload: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
    errors: List[FieldError] = []
    for rule in rules:
        value = payload.get(rule.field, _MISSING)
        if value is _MISSING:
            if rule.optional:
                continue
            value = None
        if not rule.check(value):
            errors.append(FieldError(field=rule.field, message=rule.message))
    return ValidationResult(errors=errors)
