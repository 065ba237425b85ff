"""Helpers shared by the API record models."""

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from akahu_types.exceptions import PayloadError, ValidationError


def require(payload: Mapping[str, Any], key: str, model: str) -> Any:
    """Return ``payload[key]`` or raise :class:`PayloadError` naming the model."""
    try:
        return payload[key]
    except KeyError:
        raise PayloadError(f"{model} payload is missing required field {key!r}") from None


_FRACTION = re.compile(r"\.(\d+)")


def _microseconds(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing ``Z`` for UTC.

    Fractional seconds of any precision are padded or truncated to
    microseconds, which is all ``datetime.fromisoformat`` accepts before 3.11.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(_FRACTION.sub(_microseconds, value, count=1))


def parse_amount(value: Any) -> Decimal:
    """Convert a JSON number or string to ``Decimal`` without float rounding."""
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    return amount
