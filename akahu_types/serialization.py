"""Conversion of models and value objects to JSON-ready structures.

Account numbers and identifiers serialize to their canonical string, so a
value written out and parsed back yields an equal value.
"""

from dataclasses import asdict, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from akahu_types.account_number import BankAccountNumber
from akahu_types.identifiers import ValidatedIdentifier


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": serialize_value(obj) if _is_value_object(obj) else str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def to_dict_fast(obj: Any) -> dict:
    """Convert a flat dataclass without the deep copy ``asdict()`` makes.

    Nested dataclass fields are left as-is, so only use this for records
    whose fields are scalars, enums and value objects.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def _is_value_object(value: Any) -> bool:
    return isinstance(value, (BankAccountNumber, ValidatedIdentifier))


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if _is_value_object(value):
        return value.as_str()
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
